"""Exceptions raised by the Yelay action provider."""
from __future__ import annotations


class YelayError(Exception):
    """Base class for Yelay provider errors."""


class UnsupportedChainError(YelayError, ValueError):
    def __init__(self, chain_id: int) -> None:
        super().__init__(f"Chain {chain_id} is not supported")
        self.chain_id = chain_id


class InvalidConfigurationError(YelayError, ValueError):
    pass


class BackendUnavailableError(YelayError, RuntimeError):
    """The Yelay backend returned a non-success status or could not be reached."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
