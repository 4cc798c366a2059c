from typing import Sequence


class MintError(Exception):
    """Base class for errors that abort a mint run."""

    code = "MINT_ERROR"
    hints: Sequence[str] = ()

    @property
    def reason(self) -> str:
        return self.code


class ConfigurationError(MintError):
    code = "CONFIGURATION"


class ValidationError(MintError):
    code = "VALIDATION"


class QuoteError(MintError):
    code = "NO_MINT_STEPS"


class InsufficientFundsError(MintError):
    code = "INSUFFICIENT_FUNDS"

    def __init__(self, message: str, currency: str = "tokens") -> None:
        super().__init__(message)
        self.hints = (
            f"Add more {currency} to your wallet",
            "Check if you have enough for mint cost + gas fees",
        )


class ConfirmationTimeoutError(MintError):
    code = "CONFIRMATION_TIMEOUT"
