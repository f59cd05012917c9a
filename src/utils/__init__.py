"""
Utils package for text analysis
"""

from .ranking import mmr_select, relevance_order

__all__ = [
    "mmr_select",
    "relevance_order",
]
