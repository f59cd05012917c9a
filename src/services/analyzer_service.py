"""
Сервис анализа текста: резюме + ключевые слова.

Две взаимоисключающие стратегии:
- LocalAnalyzer: ядро в процессе (services.tools);
- RemoteAnalyzer: удаленный сервис по JSON-контракту
  {text, k, topN, task} -> {summary, keywords}.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from core.security import sanitize_for_logging
from services.tools.keywords import extract_keywords
from services.tools.summarize import summarize

logger = logging.getLogger(__name__)

TASKS = ("summary", "keywords", "both")
DEFAULT_K = 3
DEFAULT_TOP_N = 8
MAX_K = 12
MAX_TOP_N = 20


class AnalyzerError(Exception):
    """Базовая ошибка анализа"""


class InvalidAnalysisInput(AnalyzerError, ValueError):
    """Некорректный вход: слишком короткий текст, неизвестная задача"""


class AnalyzerUnavailableError(AnalyzerError):
    """Удаленный сервис анализа недоступен или ответил ошибкой"""


@dataclass
class AnalysisResult:
    summary: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    mode: str = "local"

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": list(self.summary), "keywords": list(self.keywords)}


def _clamp_int(value: Any, default: int, upper: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = default
    return max(1, min(upper, number))


def clamp_k(value: Any, default: int = DEFAULT_K, upper: int = MAX_K) -> int:
    """Приводит k к целому в диапазоне 1..upper (по умолчанию 1..12)"""
    return _clamp_int(value, default, upper)


def clamp_top_n(value: Any, default: int = DEFAULT_TOP_N, upper: int = MAX_TOP_N) -> int:
    """Приводит topN к целому в диапазоне 1..upper (по умолчанию 1..20)"""
    return _clamp_int(value, default, upper)


class BaseAnalyzer:
    """Общий контракт анализатора: проверка входа + выполнение задачи."""

    mode = "base"

    def __init__(self, min_text_length: int = 10):
        self.min_text_length = max(0, min_text_length)

    def analyze(
        self, text: str, k: int = DEFAULT_K, top_n: int = DEFAULT_TOP_N, task: str = "both"
    ) -> AnalysisResult:
        text = (text or "").strip()
        if len(text) < self.min_text_length:
            raise InvalidAnalysisInput(
                f"Текст слишком короткий: нужно минимум {self.min_text_length} символов"
            )
        if task not in TASKS:
            raise InvalidAnalysisInput(f"Неизвестная задача: {task}")

        started = time.perf_counter()
        result = self._run(text, max(1, int(k)), max(1, int(top_n)), task)
        took_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            f"analyze[{self.mode}] task={task} k={k} topN={top_n} "
            f"summary={len(result.summary)} keywords={len(result.keywords)} "
            f"took_ms={took_ms} text='{sanitize_for_logging(text, max_length=60)}'"
        )
        return result

    def _run(self, text: str, k: int, top_n: int, task: str) -> AnalysisResult:
        raise NotImplementedError


class LocalAnalyzer(BaseAnalyzer):
    """Локальный анализ без сети и моделей"""

    mode = "local"

    def _run(self, text: str, k: int, top_n: int, task: str) -> AnalysisResult:
        return AnalysisResult(
            summary=summarize(text, k) if task in ("summary", "both") else [],
            keywords=extract_keywords(text, top_n) if task in ("keywords", "both") else [],
            mode=self.mode,
        )


class RemoteAnalyzer(BaseAnalyzer):
    """Клиент удаленного сервиса анализа (POST <base_url>/api/analyze)"""

    mode = "remote"
    path = "/api/analyze"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        min_text_length: int = 10,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            base_url: Адрес сервиса, например http://localhost:3000
            timeout: Таймаут запроса в секундах
            min_text_length: Минимальная длина текста
            transport: Транспорт httpx (в тестах httpx.MockTransport)
        """
        super().__init__(min_text_length=min_text_length)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self.base_url + self.path

    def _run(self, text: str, k: int, top_n: int, task: str) -> AnalysisResult:
        payload = {"text": text, "k": k, "topN": top_n, "task": task}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Удаленный анализ недоступен ({self.url}): {e}")
            raise AnalyzerUnavailableError(f"Сервис анализа недоступен: {e}") from e

        if response.is_error:
            raise AnalyzerUnavailableError(self._error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise AnalyzerUnavailableError("Сервис анализа вернул не JSON") from e
        if not isinstance(data, dict):
            raise AnalyzerUnavailableError("Сервис анализа вернул не JSON-объект")

        return AnalysisResult(
            summary=[str(s) for s in data.get("summary") or []],
            keywords=[str(w) for w in data.get("keywords") or []],
            mode=self.mode,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = None
        if isinstance(body, dict) and body.get("error"):
            message = str(body["error"])
        logger.warning(
            f"Удаленный анализ ответил {response.status_code}: {sanitize_for_logging(message or '')}"
        )
        return message or "API error"
