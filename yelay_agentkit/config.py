from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    yelay_chain_id: int = Field(
        default=8453,
        validation_alias=AliasChoices("YELAY_CHAIN_ID", "CHAIN_ID", "yelay_chain_id"),
    )
    yelay_test_mode: bool = False
    rpc_url: str = ""
    wallet_private_key: str = Field(
        default="",
        validation_alias=AliasChoices("WALLET_PRIVATE_KEY", "PRIVATE_KEY", "wallet_private_key"),
    )
    backend_timeout_seconds: float = 30.0
    receipt_timeout_seconds: int = 120
    receipt_poll_seconds: float = 2.0
    log_level: str = "INFO"

    @field_validator("yelay_chain_id", mode="before")
    @classmethod
    def parse_chain_id(cls, value):
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return 8453
            # Accept hex chain ids as reported by eth_chainId: 0x2105
            if stripped.lower().startswith("0x"):
                return int(stripped, 16)
            return stripped
        return value

    @field_validator("yelay_test_mode", mode="before")
    @classmethod
    def parse_test_mode(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return False
        return value

    @field_validator(
        "backend_timeout_seconds",
        "receipt_timeout_seconds",
        "receipt_poll_seconds",
        mode="before",
    )
    @classmethod
    def parse_empty_number(cls, value, info):
        if isinstance(value, str) and value.strip() == "":
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value


settings = Settings()
