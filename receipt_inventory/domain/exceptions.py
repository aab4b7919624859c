"""
Исключения проекта Receipt Inventory.

Этапы парсинга (SectionBounder, LinePairTokenizer, DetailParser) не бросают
исключений на данных: плохие строки просто пропускаются.
Исключения возникают только на границах: конфиг, OCR, ручная правка, коммит.
"""

from typing import Any, Dict, List, Optional


class ReceiptInventoryError(Exception):
    """Базовое исключение проекта."""

    prefix = "Receipt Inventory Error"

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"{self.prefix}: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


# =============================================================================
# Parsing
# =============================================================================
class ParsingError(ReceiptInventoryError):
    """Базовое исключение для ошибок домена Parsing."""
    prefix = "Parsing Error"


class ParsingConfigurationError(ParsingError):
    """Ошибка конфигурации локали (нет файла, нет обязательных полей)."""
    pass


# =============================================================================
# Extraction (OCR)
# =============================================================================
class ExtractionError(ReceiptInventoryError):
    """Базовое исключение для ошибок домена Extraction."""
    prefix = "Extraction Error"


class ImageProcessingError(ExtractionError):
    """Ошибка обработки изображения."""
    pass


class ImageNotFoundError(ImageProcessingError):
    """Изображение не найдено."""
    pass


class ImageDecodingError(ImageProcessingError):
    """Ошибка декодирования изображения."""
    pass


class OCRProcessingError(ExtractionError):
    """Ошибка обработки OCR."""
    pass


class OCRProviderError(OCRProcessingError):
    """Ошибка провайдера OCR (инициализация, credentials, бинарник)."""
    pass


class OCRResponseError(OCRProcessingError):
    """Ошибка в ответе OCR."""
    pass


# =============================================================================
# Review (ручная правка)
# =============================================================================
class ReviewError(ReceiptInventoryError):
    """Базовое исключение для ошибок правки списка товаров."""
    prefix = "Review Error"


class ItemValidationError(ReviewError):
    """
    Товар не прошел валидацию после ручной правки.

    errors - список ошибок по полям: {"index": 0, "field": "name", "message": "..."}
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.errors = errors or []
        super().__init__(message, component, original_error)

    @property
    def fields(self) -> List[str]:
        return [error["field"] for error in self.errors]


# =============================================================================
# Inventory (коммит)
# =============================================================================
class InventoryError(ReceiptInventoryError):
    """Базовое исключение для ошибок домена Inventory."""
    prefix = "Inventory Error"


class InventoryRepositoryError(InventoryError):
    """Backend инвентаря отклонил запрос или недоступен."""
    pass


class InventoryCommitError(InventoryError):
    """Массовое добавление товаров в инвентарь не удалось."""
    pass
