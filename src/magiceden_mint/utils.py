import sys
from decimal import Decimal
from typing import List, Optional

from loguru import logger
from web3 import Web3

from magiceden_mint.errors import MintError


def init_logger():
    logger.remove()

    logger.add(
        "logs/{time:MM_D}/{time:HH_mm}.log",
        format="{time:HH:mm:ss} | {function}:{line} | {level} - {message}",
    )
    logger.add(
        sys.stdout,
        format="<level>{time:HH:mm:ss}</level> | <lk>{function}</lk>:<lk>{line}</lk> | <level>{level}</level> - 🪄 <magenta>{message}</magenta>",
        colorize=True,
    )


def to_ether(wei: int) -> Decimal:
    return Web3.from_wei(wei, "ether")


def to_gwei(wei: int) -> Decimal:
    return Web3.from_wei(wei, "gwei")


def error_reason(error: BaseException) -> Optional[str]:
    """Machine-readable reason carried by the error, if any."""
    if isinstance(error, MintError):
        return error.reason

    reason = getattr(error, "reason", None) or getattr(error, "data", None)

    return str(reason) if reason else None


def error_hints(error: BaseException, currency: str = "tokens") -> List[str]:
    if isinstance(error, MintError):
        return list(error.hints)

    message = str(error).lower()

    if "insufficient funds" in message:
        return [
            f"Add more {currency} to your wallet",
            "Check if you have enough for mint cost + gas fees",
        ]

    if "nonce too low" in message or "replacement transaction underpriced" in message:
        return ["Try again, transaction might have been replaced"]

    return []
