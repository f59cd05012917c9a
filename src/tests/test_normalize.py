from services.tools.normalize import (
    STOPWORDS,
    clean_text,
    split_sentences,
    tokenize,
)


def test_clean_text_removes_apostrophes_and_punctuation():
    assert clean_text("Don’t STOP, it's 42!") == "dont stop its 42"


def test_clean_text_keeps_unicode_letters_and_digits():
    assert clean_text("Привет, мир! Café déjà-vu ٣٤") == "привет мир café déjà vu ٣٤"


def test_clean_text_underscore_and_whitespace():
    assert clean_text("  snake_case\t\n value  ") == "snake case value"
    assert clean_text(None) == ""
    assert clean_text("") == ""


def test_tokenize_filters_noise():
    tokens = tokenize("The quick brown foxes jumped over 12345 lazy dogs aaaaa")
    assert tokens == ["quick", "brown", "foxes", "jumped", "over", "lazy", "dogs"]


def test_tokenize_keeps_repeats_in_order():
    assert tokenize("Rivers, rivers and more RIVERS") == ["rivers", "rivers", "rivers"]


def test_tokenize_stopwords_only_for_similarity():
    text = "There were things here"
    assert tokenize(text) == []
    assert tokenize(text, keep_stopwords=True) == ["there", "were", "things", "here"]


def test_tokenize_repeated_char_vs_mixed():
    assert tokenize("zzzz abab") == ["abab"]


def test_stopwords_are_immutable():
    assert isinstance(STOPWORDS, frozenset)
    assert "the" in STOPWORDS and "today" in STOPWORDS


def test_split_sentences_on_punctuation_runs():
    text = "First sentence here!!! Second one?\nThird... "
    assert split_sentences(text) == ["First sentence here", "Second one", "Third"]


def test_split_sentences_collapses_identical():
    text = "Cats chase mice daily. Cats chase mice daily! Birds sing loudly."
    assert split_sentences(text) == ["Cats chase mice daily", "Birds sing loudly"]


def test_split_sentences_keeps_weaker_near_duplicates():
    text = "Alpha beta gamma delta. Alpha beta gamma delta epsilon."
    # 4/5 = 0.8 < 0.92
    assert len(split_sentences(text)) == 2


def test_split_sentences_empty():
    assert split_sentences("") == []
    assert split_sentences("   \n  ") == []
    assert split_sentences("...!?") == []
