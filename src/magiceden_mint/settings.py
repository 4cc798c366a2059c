"""Secrets and RPC endpoints, loaded from the environment (.env file)."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from magiceden_mint.const import CHAINS
from magiceden_mint.models import Chain


@dataclass
class Settings:
    private_key: str = ""
    rpc_urls: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Settings":
        """Load from environment variables, reading .env first when present."""
        load_dotenv(env_path)

        return cls(
            private_key=os.getenv("PRIVATE_KEY", "").strip(),
            rpc_urls={
                chain.name: os.getenv(chain.rpc_env, "").strip()
                for chain in CHAINS
            },
        )

    def rpc_url(self, chain: Chain) -> str:
        return self.rpc_urls.get(chain.name, "")
