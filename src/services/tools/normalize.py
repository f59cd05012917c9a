"""
Normalization tool.
Очистка текста, токенизация и разбиение на предложения для экстрактивного анализа.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

# Служебные слова и "пустые" термины. Неизменяемое множество, собирается один раз при импорте.
STOPWORDS = frozenset(
    {
        "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your", "yours",
        "yourself", "yourselves", "he", "him", "his", "himself", "she", "her", "hers", "herself",
        "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
        "what", "which", "who", "whom", "this", "that", "these", "those",
        "am", "is", "are", "was", "were", "be", "been", "being",
        "and", "or", "but", "so", "if", "then",
        "in", "on", "to", "of", "for", "with", "a", "an", "the",
        "about", "has", "have", "had", "do", "does", "did",
        "can", "could", "should", "would", "may", "might", "will", "just",
        "more", "most", "also", "often", "even", "very", "really", "still", "too",
        "here", "there", "when", "where", "why", "how",
        # филлеры
        "thing", "things", "someone", "something", "anything", "everything",
        "people", "person", "time", "way", "ways", "today", "now",
        # частые глаголы (мешают ключевым словам)
        "make", "makes", "made", "get", "gets", "got", "go", "goes", "went",
        "say", "says", "said", "see", "sees", "saw", "use", "uses", "used",
    }
)

MIN_TOKEN_LENGTH = 4

_APOSTROPHE_RE = re.compile(r"[’']")
# \w в Unicode-режиме = буквы + цифры + "_"; подчёркивание тоже считаем пунктуацией
_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_SPACES_RE = re.compile(r"\s+")
_NEWLINES_RE = re.compile(r"\n+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_DIGITS_RE = re.compile(r"^\d+$")
_REPEATED_CHAR_RE = re.compile(r"^(.)\1{3,}$")

# Порог для "почти идентичных" предложений на этапе разбиения
SPLIT_DEDUP_THRESHOLD = 0.92


def clean_text(text: Optional[str]) -> str:
    """Нижний регистр, без апострофов, только буквы/цифры/пробелы, схлопнутые пробелы."""
    cleaned = (text or "").lower()
    cleaned = _APOSTROPHE_RE.sub("", cleaned)
    cleaned = _NON_WORD_RE.sub(" ", cleaned)
    cleaned = _SPACES_RE.sub(" ", cleaned)
    return cleaned.strip()


def _is_content_token(word: str, keep_stopwords: bool) -> bool:
    if not word:
        return False
    if _DIGITS_RE.match(word):
        return False
    # спам вида "aaaaa"
    if _REPEATED_CHAR_RE.match(word):
        return False
    if len(word) < MIN_TOKEN_LENGTH:
        return False
    if not keep_stopwords and word in STOPWORDS:
        return False
    return True


def tokenize(text: Optional[str], keep_stopwords: bool = False) -> List[str]:
    """
    Токенизирует текст.

    Args:
        text: Исходный текст
        keep_stopwords: Оставлять стоп-слова. Используется только для мешков токенов
            при сравнении предложений, но не для весов и ключевых слов.

    Returns:
        Список токенов в порядке появления (с повторами)
    """
    return [
        w for w in clean_text(text).split(" ") if _is_content_token(w, keep_stopwords)
    ]


def split_sentences(
    text: Optional[str], cache: Optional[Dict[str, List[str]]] = None
) -> List[str]:
    """Разбивает текст по сериям . ! ? и убирает почти идентичные предложения."""
    from services.tools.dedup import dedupe_sentences

    raw = _NEWLINES_RE.sub(" ", text or "")
    pieces = [p.strip() for p in _SENTENCE_END_RE.split(raw)]
    return dedupe_sentences(
        [p for p in pieces if p], SPLIT_DEDUP_THRESHOLD, cache=cache
    )
