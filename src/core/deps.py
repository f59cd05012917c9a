import logging
from functools import lru_cache

from core.settings import get_settings
from services.analyzer_service import BaseAnalyzer, LocalAnalyzer, RemoteAnalyzer

logger = logging.getLogger(__name__)


@lru_cache
def get_analyzer() -> BaseAnalyzer:
    """Создает анализатор согласно ANALYZER_MODE"""
    settings = get_settings()
    if settings.analyzer_mode == "remote":
        logger.info(f"Используем удаленный анализ: {settings.remote_analyzer_url}")
        return RemoteAnalyzer(
            base_url=settings.remote_analyzer_url,
            timeout=settings.remote_analyzer_timeout,
            min_text_length=settings.min_text_length,
        )
    logger.info("Используем локальный анализ")
    return get_local_analyzer()


@lru_cache
def get_local_analyzer() -> LocalAnalyzer:
    """Локальный анализатор; им же обслуживается контрактный /api/analyze"""
    settings = get_settings()
    return LocalAnalyzer(min_text_length=settings.min_text_length)
