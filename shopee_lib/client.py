"""
Cliente principal da Shopee - Interface unificada.
"""

from pathlib import Path
from typing import Optional, Union

import httpx

from .config import BASE_URL, DEFAULT_TIMEOUT
from .core import ShopeeHttpClient
from .models import CheckinHistory, CheckinResult, CoinsInfo
from .services import CheckinService, CoinsService
from .utils import get_logger


class ShopeeClient:
    """Cliente para moedas e check-in da Shopee a partir de um cookie de navegador."""

    def __init__(
        self,
        cookie: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        log_dir: Optional[Union[str, Path]] = None,
        debug: bool = False
    ):
        self.logger = get_logger("shopee", Path(log_dir) if log_dir else None, debug)

        self._http = ShopeeHttpClient(cookie, base_url, timeout, transport)
        self._coins = CoinsService(self._http)
        self._checkin = CheckinService(self._http)

        self.logger.debug(f"ShopeeClient inicializado. Base: {base_url}")

    @property
    def cookie(self) -> str:
        return self._http.cookie

    async def checkin(self) -> CheckinResult:
        return await self._checkin.fazer_checkin()

    async def get_balance(self) -> int:
        return await self._coins.obter_saldo()

    async def get_checkin_history(self) -> CheckinHistory:
        return await self._checkin.obter_historico()

    async def get_login_user(self) -> str:
        return await self._coins.obter_usuario()

    async def get_coins_info(self) -> CoinsInfo:
        return await self._coins.obter_coins_info()

    async def close(self):
        await self._http.close()

    async def __aenter__(self) -> "ShopeeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
