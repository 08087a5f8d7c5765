"""
Modelos de dados do cliente Shopee.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

from ..config import CHECKIN_WINDOW_DAYS, SUCCESS_CODE, UNAUTHENTICATED_CODE
from ..errors import StructuralError


class EnvelopeOutcome(Enum):
    """Resultado da leitura do envelope."""
    SUCCESS = "success"
    UNAUTHENTICATED = "unauthenticated"
    DOMAIN_ERROR = "domain_error"


@dataclass
class Envelope:
    """Envelope generico {code, msg, data} das respostas da API."""
    code: Union[int, float]
    msg: str
    data: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["Envelope"]:
        """
        Monta o envelope se o payload seguir o formato.
        Retorna None quando o payload nao e um envelope (passthrough).
        """
        if not isinstance(payload, dict):
            return None
        code = payload.get("code")
        msg = payload.get("msg")
        if isinstance(code, bool) or not isinstance(code, (int, float)):
            return None
        if not isinstance(msg, str):
            return None
        return cls(code=code, msg=msg, data=payload.get("data"))

    @property
    def outcome(self) -> EnvelopeOutcome:
        if self.code == UNAUTHENTICATED_CODE:
            return EnvelopeOutcome.UNAUTHENTICATED
        if self.code != SUCCESS_CODE:
            return EnvelopeOutcome.DOMAIN_ERROR
        return EnvelopeOutcome.SUCCESS


@dataclass
class CoinsInfo:
    """Saldo e usuario devolvidos pelo endpoint de moedas."""
    coins: Union[int, float]
    userid: Any = ""
    username: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CoinsInfo":
        if not isinstance(data, dict) or "coins" not in data:
            raise StructuralError("Missing 'coins' in coins response")
        return cls(
            coins=data["coins"],
            userid=data.get("userid", ""),
            username=data.get("username", "")
        )


class NoReward:
    """Check-in aceito sem moedas (ex.: recompensa ja resgatada)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_REWARD"


NO_REWARD = NoReward()

CheckinResult = Union[int, NoReward]


@dataclass(frozen=True)
class CheckinHistory:
    """Historico de check-in dos ultimos 7 dias."""
    amounts: Tuple[int, ...]
    checked_in_today: bool
    today_index: int

    def __post_init__(self):
        if len(self.amounts) != CHECKIN_WINDOW_DAYS:
            raise ValueError(
                f"CheckinHistory needs exactly {CHECKIN_WINDOW_DAYS} amounts, got {len(self.amounts)}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "CheckinHistory":
        """Monta a partir do campo ``data`` de /settings (today_index vem 1-based)."""
        checkin_list = data.get("checkin_list")
        if not isinstance(checkin_list, list) or len(checkin_list) < CHECKIN_WINDOW_DAYS:
            raise StructuralError("Unexpected checkin history length")
        today_index = data.get("today_index")
        if isinstance(today_index, bool) or not isinstance(today_index, int):
            raise StructuralError("Missing 'today_index' in settings response")
        if not 1 <= today_index <= CHECKIN_WINDOW_DAYS:
            raise StructuralError(f"Unexpected today_index: {today_index}")
        return cls(
            amounts=tuple(checkin_list[:CHECKIN_WINDOW_DAYS]),
            checked_in_today=bool(data.get("checked_in_today", False)),
            today_index=today_index - 1
        )
