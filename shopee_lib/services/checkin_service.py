"""
Servico de check-in diario.
"""

from urllib.parse import unquote

from ..config import CHECKIN_ENDPOINT, CHECKIN_HEADERS, DFP_COOKIE_NAME, SETTINGS_ENDPOINT
from ..core import ShopeeHttpClient, check_response, ensure_logged_in, parse_cookie, require_data
from ..errors import InvalidCookie, ShopeeError, StructuralError
from ..models import NO_REWARD, CheckinHistory, CheckinResult
from ..utils import get_logger


class CheckinService:
    """Servico para check-in e historico dos ultimos 7 dias."""

    def __init__(self, http_client: ShopeeHttpClient):
        self.client = http_client
        self.logger = get_logger()

    def obter_dfp(self) -> str:
        """Fingerprint do dispositivo, decodificado, a partir do cookie."""
        cookies = parse_cookie(self.client.cookie)
        valor = cookies.get(DFP_COOKIE_NAME)
        if not valor:
            raise InvalidCookie(f"Missing required cookie: {DFP_COOKIE_NAME}")
        return unquote(valor)

    async def fazer_checkin(self) -> CheckinResult:
        """
        Faz o check-in do dia.
        Retorna as moedas ganhas ou NO_REWARD se o servidor nao deu recompensa.
        """
        dfp = self.obter_dfp()

        self.logger.debug(f"POST {CHECKIN_ENDPOINT}")
        resp = await self.client.api_post(
            CHECKIN_ENDPOINT, {"dfp": dfp}, headers=CHECKIN_HEADERS
        )
        try:
            resp = check_response(resp)
            data = require_data(resp, "checkin")
        except ShopeeError as e:
            self.logger.warning(f"Erro no check-in: {e}")
            raise

        if data.get("success"):
            if "increase_coins" not in data:
                raise StructuralError("Missing 'increase_coins' in checkin response")
            moedas = data["increase_coins"]
            self.logger.debug(f"Check-in feito: +{moedas} moedas")
            return moedas

        self.logger.debug("Check-in sem recompensa")
        return NO_REWARD

    async def obter_historico(self) -> CheckinHistory:
        """Historico de check-in (today_index ja convertido para 0-based)."""
        self.logger.debug(f"GET {SETTINGS_ENDPOINT}")
        resp = await self.client.api_get(SETTINGS_ENDPOINT)
        try:
            resp = check_response(resp)
            data = require_data(resp, "settings")
            ensure_logged_in(data.get("userid"))
            historico = CheckinHistory.from_dict(data)
        except ShopeeError as e:
            self.logger.warning(f"Erro ao obter historico: {e}")
            raise

        self.logger.debug(f"Historico: {historico.amounts}, hoje={historico.today_index}")
        return historico
