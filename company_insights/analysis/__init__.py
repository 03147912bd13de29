"""Batch analytics: classification, scoring, trends and competitive matrices."""

from .classifier import CompanyClassifier, Classification
from .scorer import CompanyScorer
from .trends import TrendDetector
from .matrix import CompetitiveMatrixBuilder
from .batch import BatchAnalyzer, analyze_batch

__all__ = [
    "CompanyClassifier",
    "Classification",
    "CompanyScorer",
    "TrendDetector",
    "CompetitiveMatrixBuilder",
    "BatchAnalyzer",
    "analyze_batch",
]
