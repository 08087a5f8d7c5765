"""
Servico de saldo de moedas e usuario logado.
"""

from typing import Any

from ..config import COINS_ENDPOINT
from ..core import ShopeeHttpClient, check_response, ensure_logged_in
from ..errors import ShopeeError, StructuralError
from ..models import CoinsInfo
from ..utils import get_logger


class CoinsService:
    """Servico para o endpoint /coins (saldo, userid, username)."""

    def __init__(self, http_client: ShopeeHttpClient):
        self.client = http_client
        self.logger = get_logger()

    async def _consultar(self) -> Any:
        """GET /coins ja classificado."""
        self.logger.debug(f"GET {COINS_ENDPOINT}")
        data = await self.client.api_get(COINS_ENDPOINT)
        try:
            return check_response(data)
        except ShopeeError as e:
            self.logger.warning(f"Erro ao consultar moedas: {e}")
            raise

    async def obter_coins_info(self) -> CoinsInfo:
        return CoinsInfo.from_dict(await self._consultar())

    async def obter_saldo(self) -> int:
        info = await self.obter_coins_info()
        self.logger.debug(f"Saldo: {info.coins}")
        return info.coins

    async def obter_usuario(self) -> str:
        """Nome do usuario logado; userid '-1' indica sessao sem login."""
        data = await self._consultar()
        if not isinstance(data, dict):
            raise StructuralError("Unexpected coins response")
        ensure_logged_in(data.get("userid"))
        if "username" not in data:
            raise StructuralError("Missing 'username' in coins response")
        self.logger.debug(f"Usuario logado: {data['username']}")
        return data["username"]
