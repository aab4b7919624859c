"""
Домен Parsing: текст чека -> список товаров.

Архитектура: 3-этапный пайплайн
- Stage 1: Section Bounder (товарная зона по маркерам)
- Stage 2: Line-Pair Tokenizer (пары строк название + детали)
- Stage 3: Detail Parser & Unit Normalizer (кол-во, единица, цена)

Вход: str (full_text из contracts.RawOCRText)
Выход: List[ParsedItem]
"""

from .pipeline import ReceiptParser, ParseResult, split_lines

from .s1_section import SectionBounder, BoundedRegion
from .s2_pairing import LinePairTokenizer, LineClassifier, TokenizeStats
from .s3_detail import DetailParser, ParsedItem, UnitNormalizer

__all__ = [
    # Pipeline
    "ReceiptParser",
    "ParseResult",
    "split_lines",
    # Stages
    "SectionBounder",
    "BoundedRegion",
    "LinePairTokenizer",
    "LineClassifier",
    "TokenizeStats",
    "DetailParser",
    "ParsedItem",
    "UnitNormalizer",
]
