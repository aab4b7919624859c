"""
Application слой: сценарии сканирования и фабрика компонентов.
"""

from .scan_service import ReceiptScanService, ScanResult, OCR_FAILURE_MESSAGE
from .factory import ReceiptInventoryFactory

__all__ = [
    "ReceiptScanService",
    "ScanResult",
    "OCR_FAILURE_MESSAGE",
    "ReceiptInventoryFactory",
]
