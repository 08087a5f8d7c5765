"""
Classificacao das respostas da API.

Toda resposta passa por ``check_response`` antes de qualquer logica da
operacao: envelopes com erro viram excecao, o resto segue adiante.
"""

from typing import Any

from ..config import LOGGED_OUT_USERID
from ..errors import RemoteDomainError, StructuralError, UnauthenticatedSession
from ..models import Envelope, EnvelopeOutcome


def check_response(payload: Any) -> Any:
    """
    Aplica o protocolo do envelope {code, msg}.

    - payload fora do formato: devolvido sem alteracao
    - code 401: UnauthenticatedSession
    - code != 0: RemoteDomainError(code, msg)
    - code 0: devolvido sem alteracao
    """
    envelope = Envelope.from_payload(payload)
    if envelope is None:
        return payload

    outcome = envelope.outcome
    if outcome is EnvelopeOutcome.UNAUTHENTICATED:
        raise UnauthenticatedSession()
    if outcome is EnvelopeOutcome.DOMAIN_ERROR:
        raise RemoteDomainError(envelope.code, envelope.msg)
    return payload


def require_data(payload: Any, context: str) -> dict:
    """Extrai o campo ``data`` ou levanta StructuralError."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise StructuralError(f"Missing 'data' in {context} response")
    return data


def ensure_logged_in(userid: Any) -> None:
    """userid '-1' e como o servidor indica sessao sem login."""
    if userid == LOGGED_OUT_USERID:
        raise UnauthenticatedSession()
