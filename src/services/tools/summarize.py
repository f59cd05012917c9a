"""
Summarization tool.
Экстрактивное резюме: веса слов, оценка предложений и MMR-отбор без повторов.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional

from services.tools.dedup import dedupe_sentences, jaccard
from services.tools.normalize import split_sentences, tokenize
from utils.ranking import mmr_select

logger = logging.getLogger(__name__)

MMR_LAMBDA = 0.72
FINAL_DEDUP_THRESHOLD = 0.78

SHORT_SENTENCE_TOKENS = 6
SHORT_SENTENCE_PENALTY = 0.55
MEDIUM_SENTENCE_TOKENS = 10
MEDIUM_SENTENCE_PENALTY = 0.85
MIN_LENGTH_NORM = 7
CLAUSE_BONUS = 1.03


@dataclass(frozen=True)
class ScoredSentence:
    """Предложение с исходным индексом, оценкой и мешком токенов для сходства."""

    text: str
    index: int
    score: float
    bag: FrozenSet[str]


def build_word_weights(text: str) -> Dict[str, float]:
    """Сублинейные веса слов по всему тексту: 1 + ln(1 + freq)."""
    freq = Counter(tokenize(text))
    return {word: 1.0 + math.log(1.0 + count) for word, count in freq.items()}


def sentence_score(sentence: str, word_weights: Dict[str, float]) -> float:
    """Оценивает важность предложения."""
    words = tokenize(sentence)
    if not words:
        return 0.0

    # Каждое слово учитываем один раз: ширина темы важнее повторов
    score = sum(word_weights.get(w, 0.0) for w in dict.fromkeys(words))

    # Штрафы за слишком короткие предложения (срабатывает только первый)
    if len(words) < SHORT_SENTENCE_TOKENS:
        score *= SHORT_SENTENCE_PENALTY
    elif len(words) < MEDIUM_SENTENCE_TOKENS:
        score *= MEDIUM_SENTENCE_PENALTY

    # Нормализация по длине, чтобы длинные не выигрывали всегда
    score = score / max(MIN_LENGTH_NORM, len(words))

    if "," in sentence or ";" in sentence:
        score *= CLAUSE_BONUS

    return score


class Summarizer:
    """Выбирает k репрезентативных предложений текста."""

    def __init__(self, lambda_: float = MMR_LAMBDA):
        self.lambda_ = lambda_

    def score_sentences(self, sentences: List[str], text: str) -> List[ScoredSentence]:
        word_weights = build_word_weights(text)
        return [
            ScoredSentence(
                text=s,
                index=idx,
                score=sentence_score(s, word_weights),
                bag=frozenset(tokenize(s, keep_stopwords=True)),
            )
            for idx, s in enumerate(sentences)
        ]

    def summarize(self, text: str, k: int = 3) -> List[str]:
        """
        Резюмирует текст.

        Args:
            text: Исходный текст
            k: Максимальное количество предложений (значения < 1 считаются 1)

        Returns:
            Предложения в исходном порядке, не более k
        """
        k = max(1, int(k))
        cache: Dict[str, List[str]] = {}
        sentences = split_sentences(text, cache=cache)
        if not sentences:
            return []

        # Короткий текст: возвращаем уникальные предложения как есть
        if len(sentences) <= k:
            return sentences

        scored = self.score_sentences(sentences, text)
        picked = mmr_select(
            relevance=[s.score for s in scored],
            similarity=lambda i, j: jaccard(scored[i].bag, scored[j].bag),
            lambda_=self.lambda_,
            out_k=k,
        )

        # Восстанавливаем исходный порядок и убираем оставшиеся повторы
        chosen = [scored[i].text for i in sorted(picked)]
        cleaned = dedupe_sentences(chosen, FINAL_DEDUP_THRESHOLD, cache=cache)
        logger.debug(
            f"summarize: sentences={len(sentences)}, picked={len(picked)}, kept={len(cleaned)}"
        )
        return cleaned[:k]


def summarize(text: Optional[str], k: int = 3) -> List[str]:
    """
    Резюмирует текст, выделяя k ключевых предложений.

    Args:
        text: Текст для резюмирования
        k: Количество предложений

    Returns:
        Список предложений в порядке появления в тексте
    """
    summarizer = Summarizer()
    return summarizer.summarize(text or "", k)
