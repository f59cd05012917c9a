"""
Schemas package for text analysis API
"""

from .analyze import AnalysisTask, AnalyzeRequest, AnalyzeResponse, ContractResponse

__all__ = [
    "AnalysisTask",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ContractResponse",
]
