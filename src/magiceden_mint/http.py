from typing import Any, Dict, Optional

import httpx
from loguru import logger

from magiceden_mint.const import DEFAULT_HEADERS


class HttpClient:
    """Thin JSON wrapper over httpx.AsyncClient with default headers."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> Any:
        if data is not None:
            kwargs["json"] = data

        try:
            response = await self.client.request(
                method.upper(),
                url,
                headers={**DEFAULT_HEADERS, **(headers or {})},
                **kwargs,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"[{method.upper()}] Request error: {e}")

            if isinstance(e, httpx.HTTPStatusError):
                logger.error(f"Response data: {e.response.text}")

            raise

        return response.json()

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("get", url, **kwargs)

    async def post(self, url: str, data: Any, **kwargs: Any) -> Any:
        return await self.request("post", url, data, **kwargs)
