"""
Shopee Lib - Cliente de moedas e check-in diario da Shopee.

Uso básico:
    from shopee_lib import ShopeeClient

    async with ShopeeClient(cookie) as shopee:
        usuario = await shopee.get_login_user()
        moedas = await shopee.checkin()
        saldo = await shopee.get_balance()

Tratamento de erros:
    from shopee_lib import ShopeeError, ErrorKind, NO_REWARD

    try:
        resultado = await shopee.checkin()
    except ShopeeError as e:
        if e.kind is ErrorKind.UNAUTHENTICATED:
            ...  # cookie expirado, gerar outro
"""

from pathlib import Path
from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

from .client import ShopeeClient
from .config import BASE_URL, DEFAULT_TIMEOUT, DFP_COOKIE_NAME
from .core import parse_cookie
from .errors import (
    ErrorKind, ShopeeError, InvalidCookie, UnauthenticatedSession,
    RemoteDomainError, StructuralError,
)
from .models import (
    Envelope, EnvelopeOutcome, CoinsInfo, CheckinHistory,
    NoReward, NO_REWARD,
)

__version__ = "1.0.0"
__all__ = [
    "ShopeeClient", "parse_cookie",
    "BASE_URL", "DEFAULT_TIMEOUT", "DFP_COOKIE_NAME",
    "ErrorKind", "ShopeeError", "InvalidCookie", "UnauthenticatedSession",
    "RemoteDomainError", "StructuralError",
    "Envelope", "EnvelopeOutcome", "CoinsInfo", "CheckinHistory",
    "NoReward", "NO_REWARD",
]
