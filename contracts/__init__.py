"""
Контракты DTO между доменами проекта Receipt Inventory.

Контракты:
- D1 -> D2: RawOCRText (d1_extraction_dto.py)
- D2 -> Review/Inventory: ReceiptItemDTO, InventoryRecordDTO (d2_parsing_dto.py)
"""

# D1 -> D2 (Extraction -> Parsing)
from .d1_extraction_dto import RawOCRText, OCRMetadata

# D2 -> Review / Inventory
from .d2_parsing_dto import ReceiptItemDTO, InventoryRecordDTO

__all__ = [
    # D1 -> D2
    "RawOCRText",
    "OCRMetadata",
    # D2 -> Review / Inventory
    "ReceiptItemDTO",
    "InventoryRecordDTO",
]
