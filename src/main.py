"""
FastAPI приложение для экстрактивного анализа текста
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

from api.contract import router as contract_router
from api.v1.router import router as v1_router
from core.security import sanitize_for_logging
from core.settings import get_settings

settings = get_settings()

# Настройка логирования
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events для приложения"""
    logger.info("🚀 Text Digest API запускается...")
    logger.info(
        f"Режим анализа: {settings.analyzer_mode}"
        + (
            f" ({settings.remote_analyzer_url})"
            if settings.analyzer_mode == "remote"
            else ""
        )
    )

    yield

    logger.info("🛑 Text Digest API завершает работу...")


# Создаем FastAPI приложение
app = FastAPI(
    title="Text Digest API",
    description="API для экстрактивного резюмирования и извлечения ключевых слов",
    version="1.0.0",
    lifespan=lifespan,
)

# 1. GZip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)

# 2. CORS: фронтенд обычно открыт с другого origin (Live Server и т.п.)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(v1_router)
app.include_router(contract_router)


@app.get("/", tags=["root"])
async def root():
    """Главная страница API"""
    return {
        "message": "Text Digest API v1.0.0",
        "status": "running",
        "docs": "/docs",
        "health": "/v1/health",
        "api_v1": "/v1",
        "available_endpoints": {
            "analyze": "/v1/analyze",
            "info": "/v1/info",
            "contract": "/api/analyze",
        },
    }


@app.get("/health", tags=["health"])
async def health_check_legacy():
    """Легаси проверка состояния сервиса (редирект на v1)"""
    return {
        "status": "healthy",
        "service": "text-digest-api",
        "version": "1.0.0",
        "note": "Используйте /v1/health",
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Глобальный обработчик исключений"""
    sanitized_path = sanitize_for_logging(str(request.url.path))
    sanitized_error = sanitize_for_logging(str(exc))
    logger.error(f"Необработанная ошибка на {sanitized_path}: {sanitized_error}")

    debug_mode = os.getenv("DEBUG", "false").lower() == "true"

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Внутренняя ошибка сервера",
            "message": str(exc) if debug_mode else "Что-то пошло не так",
        },
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Запуск сервера на {host}:{port}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.getenv("DEBUG", "false").lower() == "true",
        log_level="info",
    )
