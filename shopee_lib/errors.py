"""
Erros do cliente Shopee.

Taxonomia fechada: todo erro levantado pela biblioteca e uma das quatro
subclasses abaixo, identificada pelo campo ``kind``. Falhas de transporte
(httpx, JSON invalido) nao passam por aqui.
"""

from enum import Enum


class ErrorKind(Enum):
    """Tipo do erro, para tratamento sem isinstance."""
    INVALID_COOKIE = "invalid_cookie"
    UNAUTHENTICATED = "unauthenticated"
    REMOTE_DOMAIN = "remote_domain"
    STRUCTURAL = "structural"


class ShopeeError(Exception):
    """Base dos erros da biblioteca."""

    kind: ErrorKind


class InvalidCookie(ShopeeError):
    """Cookie nao tem um campo exigido pela operacao."""

    kind = ErrorKind.INVALID_COOKIE

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnauthenticatedSession(ShopeeError):
    """Sessao sem login (codigo 401 ou userid sentinela)."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "User is not logged in"):
        super().__init__(message)


class RemoteDomainError(ShopeeError):
    """Servidor entendeu a requisicao mas recusou (ex.: check-in ja feito)."""

    kind = ErrorKind.REMOTE_DOMAIN

    def __init__(self, code, message: str):
        super().__init__(f"Shopee server: {message}")
        self.code = code
        self.message = message


class StructuralError(ShopeeError):
    """Resposta aceita pelo envelope mas com formato inesperado."""

    kind = ErrorKind.STRUCTURAL

    def __init__(self, context: str):
        super().__init__(context)
        self.context = context
