from utils.ranking import mmr_select, relevance_order


def _no_similarity(i: int, j: int) -> float:
    return 0.0


def test_relevance_order_is_stable():
    assert relevance_order([0.1, 0.5, 0.5, 0.2]) == [1, 2, 3, 0]
    assert relevance_order([]) == []


def test_mmr_without_similarity_follows_relevance():
    assert mmr_select([0.1, 0.5, 0.5, 0.2], _no_similarity, 0.72, 3) == [1, 2, 3]


def test_mmr_penalizes_redundant_candidate():
    # 0 и 1 дублируют друг друга
    def sim(i: int, j: int) -> float:
        return 1.0 if {i, j} == {0, 1} else 0.0

    assert mmr_select([1.0, 0.9, 0.6], sim, 0.72, 2) == [0, 2]
    # без штрафа за сходство выбирается более релевантный
    assert mmr_select([1.0, 0.9, 0.6], sim, 1.0, 2) == [0, 1]


def test_mmr_bounds():
    assert mmr_select([], _no_similarity, 0.72, 3) == []
    assert mmr_select([0.3, 0.2], _no_similarity, 0.72, 0) == []
    assert mmr_select([0.3, 0.2], _no_similarity, 0.72, 10) == [0, 1]
