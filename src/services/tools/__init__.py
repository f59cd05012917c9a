"""
Tools package for extractive text analysis
"""

from .normalize import STOPWORDS, clean_text, tokenize, split_sentences
from .dedup import jaccard, dedupe_sentences
from .summarize import build_word_weights, sentence_score, summarize, Summarizer
from .keywords import extract_keywords

__all__ = [
    "STOPWORDS",
    "clean_text",
    "tokenize",
    "split_sentences",
    "jaccard",
    "dedupe_sentences",
    "build_word_weights",
    "sentence_score",
    "summarize",
    "Summarizer",
    "extract_keywords",
]
