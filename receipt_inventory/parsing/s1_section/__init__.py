"""
Stage 1: Section Bounder

ЦКП: Границы товарной зоны.
"""

from .stage import SectionBounder, BoundedRegion

__all__ = [
    "SectionBounder",
    "BoundedRegion",
]
