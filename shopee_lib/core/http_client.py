"""
Cliente HTTP base para comunicacao com a Shopee.
"""

import httpx
from typing import Any, Dict, Optional

from ..config import BASE_URL, DEFAULT_HEADERS, DEFAULT_TIMEOUT


class ShopeeHttpClient:
    """Cliente HTTP assincrono configurado para a API de moedas."""

    def __init__(
        self,
        cookie: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._cookie = cookie
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport
        )

    @property
    def cookie(self) -> str:
        return self._cookie

    def get_api_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Headers para a API com o cookie da sessao."""
        headers = dict(DEFAULT_HEADERS)
        if extra:
            headers.update(extra)
        headers["cookie"] = self._cookie
        return headers

    async def api_get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """GET na API; devolve o JSON decodificado."""
        response = await self.client.get(
            endpoint, params=params, headers=self.get_api_headers()
        )
        response.raise_for_status()
        return response.json()

    async def api_post(self, endpoint: str, json_data: Optional[Dict] = None,
                       headers: Optional[Dict[str, str]] = None) -> Any:
        """POST JSON na API; devolve o JSON decodificado."""
        response = await self.client.post(
            endpoint, json=json_data, headers=self.get_api_headers(headers)
        )
        response.raise_for_status()
        return response.json()

    async def close(self):
        await self.client.aclose()
