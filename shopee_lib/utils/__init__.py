"""
Utilitários compartilhados do cliente Shopee.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


# LOGGER

_FORMATTER = logging.Formatter(
    '[%(asctime)s] [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


class ShopeeLogger:
    """
    Logger customizado para o cliente Shopee.

    Uma instancia por nome. Chamadas seguintes com debug=True ou log_dir
    ligam o modo debug e acrescentam o arquivo de log na instancia existente.
    """

    _instances = {}

    def __new__(cls, name: str = "shopee", log_dir: Optional[Path] = None, debug: bool = False):
        # Singleton por nome
        if name not in cls._instances:
            instance = super().__new__(cls)
            cls._instances[name] = instance
        return cls._instances[name]

    def __init__(self, name: str = "shopee", log_dir: Optional[Path] = None, debug: bool = False):
        if not hasattr(self, '_initialized'):
            self._initialized = True
            self.name = name
            self.debug_mode = False
            self.log_files = set()

            self.logger = logging.getLogger(name)
            self.logger.setLevel(logging.INFO)
            self.logger.handlers.clear()

            # Console handler
            self.console = logging.StreamHandler(sys.stdout)
            self.console.setLevel(logging.INFO)
            self.console.setFormatter(_FORMATTER)
            self.logger.addHandler(self.console)

        if debug:
            self.enable_debug()
        if log_dir:
            self.add_log_dir(Path(log_dir))

    def enable_debug(self):
        self.debug_mode = True
        self.logger.setLevel(logging.DEBUG)
        self.console.setLevel(logging.DEBUG)

    def add_log_dir(self, log_dir: Path):
        """Arquivo diario shopee_YYYYMMDD.log; o mesmo arquivo nao e adicionado duas vezes."""
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = (log_dir / f"shopee_{datetime.now().strftime('%Y%m%d')}.log").resolve()
        if log_file in self.log_files:
            return
        self.log_files.add(log_file)

        # File handler: sempre em DEBUG, o nivel do logger decide
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_FORMATTER)
        self.logger.addHandler(file_handler)

    def info(self, msg: str):
        self.logger.info(msg)

    def debug(self, msg: str):
        self.logger.debug(msg)

    def warning(self, msg: str):
        self.logger.warning(msg)

    def error(self, msg: str):
        self.logger.error(msg)

    def success(self, msg: str):
        self.logger.info(f"[OK] {msg}")


def get_logger(name: str = "shopee", log_dir: Optional[Path] = None, debug: bool = False) -> ShopeeLogger:
    """Obtém instância do logger."""
    return ShopeeLogger(name, log_dir, debug)
