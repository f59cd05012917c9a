"""
Конфигурация приложения с поддержкой переключения анализатора
"""

import os
from typing import List
from functools import lru_cache
import logging

logger = logging.getLogger(__name__)

ANALYZER_MODES = ("local", "remote")


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        logger.warning(f"Некорректное значение {name}, используем {default}")
        return default


class Settings:
    """Настройки приложения"""

    def __init__(self):
        # Режим анализа: локальное ядро или удаленный сервис
        mode = os.getenv("ANALYZER_MODE", "local").lower()
        if mode not in ANALYZER_MODES:
            logger.warning(f"Неизвестный ANALYZER_MODE={mode}, используем local")
            mode = "local"
        self.analyzer_mode: str = mode

        # Удаленный анализ ({text, k, topN, task} -> {summary, keywords})
        self.remote_analyzer_url: str = os.getenv(
            "REMOTE_ANALYZER_URL", "http://localhost:3000"
        )
        try:
            self.remote_analyzer_timeout: float = float(
                os.getenv("REMOTE_ANALYZER_TIMEOUT", "30.0")
            )
        except Exception:
            self.remote_analyzer_timeout = 30.0

        # Границы и значения по умолчанию для k / topN
        self.default_k: int = _int_env("DEFAULT_K", 3)
        self.default_top_n: int = _int_env("DEFAULT_TOP_N", 8)
        self.max_k: int = max(1, _int_env("MAX_K", 12))
        self.max_top_n: int = max(1, _int_env("MAX_TOP_N", 20))

        # Ограничения на входной текст
        self.min_text_length: int = _int_env("MIN_TEXT_LENGTH", 10)
        self.max_text_length: int = _int_env("MAX_TEXT_LENGTH", 200000)

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: List[str] = os.getenv("CORS_ORIGINS", "*").split(",")

        logger.info(
            f"Настройки загружены: mode={self.analyzer_mode}, "
            f"remote={self.remote_analyzer_url}, k<={self.max_k}, topN<={self.max_top_n}"
        )

    def update_analyzer_mode(self, mode: str) -> None:
        """Переключает режим анализа и сбрасывает кеш зависимостей"""
        mode = (mode or "").lower()
        if mode not in ANALYZER_MODES:
            raise ValueError(f"Неизвестный режим анализа: {mode}")
        old_mode = self.analyzer_mode
        self.analyzer_mode = mode

        from core.deps import get_analyzer

        get_analyzer.cache_clear()

        logger.info(f"Режим анализа изменен: {old_mode} → {mode}")


@lru_cache()
def get_settings() -> Settings:
    """Singleton для настроек приложения"""
    return Settings()
