"""
Keyword extraction tool.
Ранжирует слова и двухсловные фразы по частоте, фразы поглощают свои слова.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from services.tools.normalize import STOPWORDS, tokenize

UNIGRAM_WEIGHT = 1.0
# Биграммы чуть слабее слов: фраза всплывает только если реально повторяется
BIGRAM_WEIGHT = 0.8


def _candidate_weights(tokens: List[str]) -> Dict[str, float]:
    weights: Dict[str, float] = {}
    for w in tokens:
        weights[w] = weights.get(w, 0.0) + UNIGRAM_WEIGHT
    # Соседство считается по уже отфильтрованному потоку
    for a, b in zip(tokens, tokens[1:]):
        phrase = f"{a} {b}"
        weights[phrase] = weights.get(phrase, 0.0) + BIGRAM_WEIGHT
    return weights


def extract_keywords(text: Optional[str], top_n: int = 8) -> List[str]:
    """
    Извлекает ключевые слова и фразы.

    Args:
        text: Исходный текст
        top_n: Максимальное количество результатов (значения < 1 считаются 1)

    Returns:
        Слова и фразы по убыванию веса. Слово не выводится вместе с фразой,
        в которую оно входит.
    """
    tokens = tokenize(text)
    if not tokens:
        return []
    top_n = max(1, int(top_n))

    weights = _candidate_weights(tokens)
    # sorted стабилен: при равном весе сохраняется порядок появления
    ranked = sorted(weights.items(), key=lambda x: x[1], reverse=True)

    out: List[str] = []
    for candidate, _ in ranked:
        if len(out) >= top_n:
            break

        if " " in candidate:
            # Слово всегда весит больше содержащей его фразы и попадает в out раньше,
            # поэтому фраза вытесняет уже выбранные слова из своего состава
            parts = candidate.split(" ")
            out = [k for k in out if " " in k or k not in parts]
            out.append(candidate)
            continue

        if any(" " in k and candidate in k.split(" ") for k in out):
            continue

        out.append(candidate)

    return [k for k in out if k not in STOPWORDS]
