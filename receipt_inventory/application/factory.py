"""
Фабрика для создания компонентов Receipt Inventory.

Собирает парсер, OCR провайдер, репозиторий и сервисы из settings
через единый интерфейс.
"""

from typing import Optional

from loguru import logger

from config import settings
from ..domain.interfaces import IInventoryRepository, IOCRProvider
from ..domain.exceptions import OCRProviderError
from ..locales.config_loader import ConfigLoader
from ..parsing.pipeline import ReceiptParser
from ..inventory.committer import BulkCommitter
from ..inventory.supabase_repository import SupabaseInventoryRepository
from .scan_service import ReceiptScanService


class ReceiptInventoryFactory:
    """Фабрика компонентов."""

    @staticmethod
    def create_parser(locale_code: Optional[str] = None, config_loader: Optional[ConfigLoader] = None) -> ReceiptParser:
        locale_code = locale_code or settings.DEFAULT_LOCALE
        logger.debug(f"[Factory] Создание парсера для {locale_code}")
        return ReceiptParser.for_locale(locale_code, config_loader)

    @staticmethod
    def create_ocr_provider(provider: Optional[str] = None) -> IOCRProvider:
        """
        Args:
            provider: "tesseract" или "google" (по умолчанию из settings)

        Raises:
            OCRProviderError: Неизвестный провайдер
        """
        provider = (provider or settings.OCR_PROVIDER).lower()
        logger.debug(f"[Factory] Создание OCR провайдера: {provider}")

        # Импорт по месту: тяжелые клиенты грузятся только когда нужны
        if provider == "tesseract":
            from ..extraction.tesseract_ocr import TesseractOCR
            return TesseractOCR()
        if provider == "google":
            from ..extraction.google_vision_ocr import GoogleVisionOCR
            return GoogleVisionOCR()

        raise OCRProviderError(
            message=f"Неизвестный OCR провайдер: {provider}",
            component="ReceiptInventoryFactory"
        )

    @staticmethod
    def create_repository() -> IInventoryRepository:
        logger.debug("[Factory] Создание репозитория инвентаря")
        return SupabaseInventoryRepository(settings.SUPABASE_URL, settings.SUPABASE_KEY)

    @staticmethod
    def create_committer(
        repository: Optional[IInventoryRepository] = None,
        household_id: Optional[str] = None
    ) -> BulkCommitter:
        return BulkCommitter(
            repository=repository or ReceiptInventoryFactory.create_repository(),
            household_id=household_id or settings.HOUSEHOLD_ID,
        )

    @staticmethod
    def create_scan_service(
        locale_code: Optional[str] = None,
        provider: Optional[str] = None,
        ocr_provider: Optional[IOCRProvider] = None
    ) -> ReceiptScanService:
        return ReceiptScanService(
            ocr_provider=ocr_provider or ReceiptInventoryFactory.create_ocr_provider(provider),
            parser=ReceiptInventoryFactory.create_parser(locale_code),
        )
