"""
Analyze endpoints: резюме и ключевые слова через выбранный анализатор
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from core.deps import get_analyzer
from core.settings import get_settings, Settings
from schemas.analyze import AnalyzeRequest, AnalyzeResponse
from services.analyzer_service import (
    AnalyzerUnavailableError,
    BaseAnalyzer,
    InvalidAnalysisInput,
    clamp_k,
    clamp_top_n,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse, tags=["analyze"])
def analyze_text(
    request: AnalyzeRequest,
    analyzer: BaseAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings),
) -> AnalyzeResponse:
    """
    Анализирует текст

    - **text**: Исходный текст (обязательно)
    - **k**: Количество предложений резюме, приводится к 1..MAX_K
    - **topN**: Количество ключевых слов, приводится к 1..MAX_TOP_N
    - **task**: summary | keywords | both

    Возвращает предложения в исходном порядке и ключевые слова по убыванию веса.
    """
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=422,
            detail=f"Текст длиннее {settings.max_text_length} символов",
        )

    k = clamp_k(request.k, settings.default_k, settings.max_k)
    top_n = clamp_top_n(request.top_n, settings.default_top_n, settings.max_top_n)

    try:
        result = analyzer.analyze(request.text, k=k, top_n=top_n, task=request.task)
    except InvalidAnalysisInput as e:
        raise HTTPException(status_code=422, detail=str(e))
    except AnalyzerUnavailableError as e:
        logger.error(f"Ошибка удаленного анализа: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Сервис анализа недоступен: {e}",
        )

    return AnalyzeResponse(
        summary=result.summary, keywords=result.keywords, mode=result.mode
    )
