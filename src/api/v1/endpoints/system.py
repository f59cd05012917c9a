"""
Системные endpoints для проверки состояния API
"""

from fastapi import APIRouter, Depends
from core.settings import get_settings, Settings

router = APIRouter()


@router.get("/health", tags=["system"])
async def health_check():
    """Проверка состояния сервиса"""
    return {"status": "healthy", "service": "text-digest-api", "version": "1.0.0"}


@router.get("/info", tags=["system"])
async def system_info(settings: Settings = Depends(get_settings)):
    """Информация о текущих настройках анализа"""
    return {
        "analyzer_mode": settings.analyzer_mode,
        "remote_analyzer_url": settings.remote_analyzer_url
        if settings.analyzer_mode == "remote"
        else None,
        "default_k": settings.default_k,
        "default_top_n": settings.default_top_n,
        "max_k": settings.max_k,
        "max_top_n": settings.max_top_n,
        "min_text_length": settings.min_text_length,
    }
