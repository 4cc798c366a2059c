import asyncio
import sys
from pathlib import Path

from loguru import logger

from magiceden_mint.config import ENV_FILE
from magiceden_mint.console import Console
from magiceden_mint.http import HttpClient
from magiceden_mint.magiceden import MagicEden
from magiceden_mint.models import MintOutcome
from magiceden_mint.settings import Settings
from magiceden_mint.utils import init_logger
from magiceden_mint.workflow import run_mint


async def main() -> MintOutcome:
    init_logger()

    settings = Settings.from_env(Path(ENV_FILE))

    async with HttpClient() as http:
        with Console() as console:
            return await run_mint(settings, console, MagicEden(http))


def run() -> None:
    try:
        outcome = asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logger.info("Exiting...")
        sys.exit(1)

    sys.exit(0 if outcome.ok else 1)
