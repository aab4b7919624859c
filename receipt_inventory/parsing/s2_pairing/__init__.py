"""
Stage 2: Line-Pair Tokenizer

ЦКП: Товары из пар строк (название + детали).
"""

from .stage import LinePairTokenizer, TokenizeStats
from .line_classifier import LineClassifier

__all__ = [
    "LinePairTokenizer",
    "TokenizeStats",
    "LineClassifier",
]
