from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

AnalysisTask = Literal["summary", "keywords", "both"]


class AnalyzeRequest(BaseModel):
    """Запрос на анализ текста. Ключ topN совпадает с контрактом удаленного сервиса."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Исходный текст (верхний предел длины задается MAX_TEXT_LENGTH)")
    k: Optional[int] = Field(
        None, description="Количество предложений резюме (приводится к 1..12)"
    )
    top_n: Optional[int] = Field(
        None, alias="topN", description="Количество ключевых слов (приводится к 1..20)"
    )
    task: AnalysisTask = Field("both", description="summary | keywords | both")

    @field_validator("text")
    @classmethod
    def normalize_newlines(cls, v: str):
        # CRLF от Windows-клиентов: разбиение на предложения ориентируется на \n
        return v.replace("\r\n", "\n").replace("\r", "\n")


class AnalyzeResponse(BaseModel):
    """Ответ анализа"""

    summary: List[str] = Field(default_factory=list, description="Ключевые предложения")
    keywords: List[str] = Field(default_factory=list, description="Ключевые слова и фразы")
    mode: str = Field("local", description="Кто выполнил анализ: local | remote")


class ContractResponse(BaseModel):
    """Ответ по контракту удаленного анализа"""

    summary: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
