from typing import Any, Awaitable, Callable, Iterable, Optional

import httpx

from magiceden_mint.const import API_BASE_URL, DEFAULT_TOKEN_ID
from magiceden_mint.http import HttpClient


async def first_match(
    suppliers: Iterable[Callable[[], Awaitable[Any]]],
    accept: Callable[[Any], bool],
) -> Optional[Any]:
    """Return the first supplied result accepted by ``accept``.

    Failing suppliers are skipped; ``None`` means nothing matched.
    """
    for supplier in suppliers:
        try:
            result = await supplier()
        except (httpx.HTTPError, ValueError):
            continue

        if accept(result):
            return result

    return None


def _collection_field(result: dict, name: str) -> Any:
    collection = result.get("collection")
    nested = collection.get(name) if isinstance(collection, dict) else None

    return result.get(name) or nested


def _has_name(result: Any) -> bool:
    return isinstance(result, dict) and bool(_collection_field(result, "name"))


class MagicEden:
    def __init__(self, http: HttpClient, base_url: str = API_BASE_URL) -> None:
        self.http = http
        self.base_url = base_url

    async def quote_mint_data(
        self,
        nft_contract: str,
        wallet: str,
        chain: str = "",
        nft_amount: int = 1,
        token_id: int = DEFAULT_TOKEN_ID,
    ) -> dict:
        payload = {
            "chain": chain,
            "collectionId": nft_contract,
            "kind": "public",
            "nftAmount": nft_amount,
            "protocol": "ERC1155",
            "tokenId": token_id,
            "wallet": {"address": wallet, "chain": chain},
            "address": wallet,
        }

        return await self.http.post(f"{self.base_url}/v4/self_serve/nft/mint_token", payload)

    async def get_available_mints(
        self,
        chain: str = "",
        period: str = "1h",
        limit: int = 200,
    ) -> dict:
        return await self.http.get(
            f"{self.base_url}/v3/rtp/{chain}/collections/trending-mints/v1",
            params={
                "period": period,
                "type": "any",
                "limit": limit,
                "useNonFlaggedFloorAsk": "true",
            },
        )

    async def get_collection_info(self, contract_address: str, chain: str = "") -> Optional[dict]:
        """Best-effort collection lookup across the known endpoint versions."""
        endpoints = [
            f"{self.base_url}/v2/collections/{contract_address}",
            f"{self.base_url}/v3/rtp/{chain}/collections/{contract_address}/v1",
            f"{self.base_url}/v4/collections/{contract_address}",
        ]

        result = await first_match(
            [lambda url=url: self.http.get(url) for url in endpoints],
            _has_name,
        )

        if result is None:
            return None

        return {
            "name": _collection_field(result, "name"),
            "description": _collection_field(result, "description"),
            "image": _collection_field(result, "image"),
            **result,
        }
