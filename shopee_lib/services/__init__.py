"""Módulo de serviços."""

from .coins_service import CoinsService
from .checkin_service import CheckinService

__all__ = ["CoinsService", "CheckinService"]
