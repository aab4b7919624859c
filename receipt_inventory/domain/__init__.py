"""
Domain слой проекта.

Содержит интерфейсы коллабораторов и дерево исключений.
"""

from .interfaces import (
    IOCRProvider,
    IInventoryRepository,
)

from .exceptions import (
    ReceiptInventoryError,
    ParsingError,
    ParsingConfigurationError,
    ExtractionError,
    ImageProcessingError,
    ImageNotFoundError,
    ImageDecodingError,
    OCRProcessingError,
    OCRProviderError,
    OCRResponseError,
    ReviewError,
    ItemValidationError,
    InventoryError,
    InventoryRepositoryError,
    InventoryCommitError,
)

__all__ = [
    # Интерфейсы
    "IOCRProvider",
    "IInventoryRepository",

    # Исключения
    "ReceiptInventoryError",
    "ParsingError",
    "ParsingConfigurationError",
    "ExtractionError",
    "ImageProcessingError",
    "ImageNotFoundError",
    "ImageDecodingError",
    "OCRProcessingError",
    "OCRProviderError",
    "OCRResponseError",
    "ReviewError",
    "ItemValidationError",
    "InventoryError",
    "InventoryRepositoryError",
    "InventoryCommitError",
]
