from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from services.tools.normalize import tokenize


def jaccard(bag_a: Iterable[str], bag_b: Iterable[str]) -> float:
    """Коэффициент Жаккара для двух мешков токенов. Пустой мешок даёт 0.0."""
    a = set(bag_a)
    b = set(bag_b)
    if not a or not b:
        return 0.0
    inter = len(a & b)
    return inter / (len(a) + len(b) - inter)


def _bag(sentence: str, cache: Dict[str, List[str]]) -> List[str]:
    tokens = cache.get(sentence)
    if tokens is None:
        tokens = tokenize(sentence, keep_stopwords=True)
        cache[sentence] = tokens
    return tokens


def dedupe_sentences(
    sentences: Iterable[str],
    threshold: float = 0.65,
    cache: Optional[Dict[str, List[str]]] = None,
) -> List[str]:
    """Жадная дедупликация предложений: побеждает первое принятое.

    Кандидат отбрасывается, если его сходство (с учётом стоп-слов) хотя бы с одним
    уже принятым предложением >= threshold. Порядок входа сохраняется.

    cache: кеш мешков токенов в пределах одного вызова; между вызовами
    на разных текстах его не разделяем.
    """
    bags: Dict[str, List[str]] = {} if cache is None else cache
    accepted: List[str] = []
    for sentence in sentences:
        bag = _bag(sentence, bags)
        if any(jaccard(bag, _bag(kept, bags)) >= threshold for kept in accepted):
            continue
        accepted.append(sentence)
    return accepted
