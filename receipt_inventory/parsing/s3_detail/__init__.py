"""
Stage 3: Detail Parser & Unit Normalizer

ЦКП: Товар (название, количество, единица, цена) из пары строк.
"""

from .detail_parser import DetailParser, ParsedItem, DETAIL_PATTERN
from .unit_normalizer import UnitNormalizer, DEFAULT_UNIT, CANONICAL_UNITS

__all__ = [
    "DetailParser",
    "ParsedItem",
    "DETAIL_PATTERN",
    "UnitNormalizer",
    "DEFAULT_UNIT",
    "CANONICAL_UNITS",
]
