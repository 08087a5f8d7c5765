"""Módulo core - componentes fundamentais."""

from .cookie import parse_cookie
from .http_client import ShopeeHttpClient
from .response import check_response, ensure_logged_in, require_data

__all__ = [
    "parse_cookie", "ShopeeHttpClient",
    "check_response", "ensure_logged_in", "require_data",
]
