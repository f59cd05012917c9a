"""
Контрактный endpoint удаленного анализа: POST /api/analyze

Сервис может выступать целью RemoteAnalyzer другого экземпляра. Здесь всегда
работает локальное ядро, запросы дальше не проксируются.
Ошибки отдаются как {"error": "..."}.
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from core.deps import get_local_analyzer
from core.settings import get_settings, Settings
from schemas.analyze import AnalyzeRequest, ContractResponse
from services.analyzer_service import (
    InvalidAnalysisInput,
    LocalAnalyzer,
    clamp_k,
    clamp_top_n,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


@router.post("/analyze", response_model=ContractResponse, tags=["contract"])
def analyze_contract(
    request: AnalyzeRequest,
    analyzer: LocalAnalyzer = Depends(get_local_analyzer),
    settings: Settings = Depends(get_settings),
):
    """{text, k, topN, task} -> {summary, keywords}"""
    if len(request.text) > settings.max_text_length:
        return JSONResponse(
            status_code=413,
            content={"error": f"text is longer than {settings.max_text_length} chars"},
        )
    try:
        result = analyzer.analyze(
            request.text,
            k=clamp_k(request.k, settings.default_k, settings.max_k),
            top_n=clamp_top_n(request.top_n, settings.default_top_n, settings.max_top_n),
            task=request.task,
        )
    except InvalidAnalysisInput as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)}
        )
    return ContractResponse(**result.to_dict())
