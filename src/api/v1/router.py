"""
Главный роутер для API v1
"""

from fastapi import APIRouter

from api.v1.endpoints import system, analyze

# Создаем главный роутер для API v1
router = APIRouter(prefix="/v1")

# Подключаем все endpoints
router.include_router(system.router, tags=["system"])
router.include_router(analyze.router, tags=["analyze"])
