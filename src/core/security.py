"""
Редактирование пользовательского текста перед логированием
"""

import re
from typing import Any, List, Tuple

# Порядок важен: карты раньше телефонов, иначе телефонный шаблон съест часть номера
_REDACTIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    (re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b"), "[CARD]"),
    (re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b"), "[IP]"),
    (re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b"), "[PHONE]"),
]

_SECRET_KEYS = {"password", "token", "secret", "api_key", "authorization"}


def redact_sensitive_info(text: str) -> str:
    """Заменяет e-mail, номера карт, IP и телефоны на плейсхолдеры"""
    for pattern, placeholder in _REDACTIONS:
        text = pattern.sub(placeholder, text)
    return text


def sanitize_for_logging(data: Any, max_length: int = 100) -> str:
    """Санитизирует данные для безопасного логирования"""
    if isinstance(data, dict):
        return str(
            {
                key: "[REDACTED]"
                if str(key).lower() in _SECRET_KEYS
                else sanitize_for_logging(value, max_length)
                for key, value in data.items()
            }
        )

    if isinstance(data, (list, tuple)):
        return str([sanitize_for_logging(item, max_length) for item in data[:5]])

    if isinstance(data, str):
        # Переносы строк в логах ломают построчный разбор
        data = redact_sensitive_info(" ".join(data.split()))
        if len(data) > max_length:
            return f"{data[:max_length]}... (truncated, {len(data)} chars)"
        return data

    return str(data)[:max_length]
