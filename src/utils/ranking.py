from typing import Callable, List, Optional, Sequence
import math
import numpy as np


def relevance_order(relevance: Sequence[float]) -> List[int]:
    """
    Индексы по убыванию релевантности. Сортировка стабильная: при равенстве
    раньше идёт элемент с меньшим исходным индексом.
    """
    rel = np.asarray(relevance, dtype=float)
    if rel.size == 0:
        return []
    return [int(i) for i in np.argsort(-rel, kind="stable")]


def mmr_select(
    relevance: Sequence[float],
    similarity: Callable[[int, int], float],
    lambda_: float,
    out_k: int,
) -> List[int]:
    """
    Жадный Maximal Marginal Relevance (MMR): отбирает подмножество элементов,
    балансируя релевантность и разнообразие.

    Args:
        relevance: релевантность каждого элемента (N,)
        similarity: попарное сходство similarity(i, j) в [0..1]
        lambda_: вес релевантности (0..1)
        out_k: число элементов на выходе

    Returns:
        Индексы выбранных элементов в порядке выбора, длина <= out_k.
        Первым идет самый релевантный. Далее кандидаты просматриваются по убыванию
        релевантности, побеждает строго больший MMR-скор.
    """
    order = relevance_order(relevance)
    k = max(0, min(out_k, len(order)))
    if k == 0:
        return []

    rel = np.asarray(relevance, dtype=float)
    selected: List[int] = [order[0]]
    chosen = {order[0]}

    while len(selected) < k:
        best_score = -math.inf
        best_idx: Optional[int] = None
        for idx in order:
            if idx in chosen:
                continue
            # Максимальное сходство с уже выбранными (diversity penalty)
            max_sim = 0.0
            for s_idx in selected:
                sim = similarity(idx, s_idx)
                if sim > max_sim:
                    max_sim = sim
            score = lambda_ * float(rel[idx]) - (1.0 - lambda_) * max_sim
            if score > best_score:
                best_score = score
                best_idx = idx

        if best_idx is None:
            break
        selected.append(best_idx)
        chosen.add(best_idx)

    return selected
