"""
Домен Review: ручная правка товаров перед добавлением в инвентарь.
"""

from .draft import ReceiptDraft, EDITABLE_FIELDS, validate_item

__all__ = [
    "ReceiptDraft",
    "EDITABLE_FIELDS",
    "validate_item",
]
