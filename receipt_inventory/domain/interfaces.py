"""
Интерфейсы (абстрактные классы) проекта Receipt Inventory.

Внешние коллабораторы движка:
1. OCR провайдер: изображение -> сырой текст
2. Репозиторий инвентаря: массовое создание продуктов
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from contracts.d1_extraction_dto import RawOCRText
from contracts.d2_parsing_dto import InventoryRecordDTO


class IOCRProvider(ABC):
    """Интерфейс для провайдеров OCR (домен Extraction)."""

    @abstractmethod
    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRText:
        """
        Распознаёт текст на изображении.

        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла (для метаданных)

        Returns:
            RawOCRText с сырым текстом чека
        """
        pass

    @abstractmethod
    def recognize_from_file(self, image_path: Path) -> RawOCRText:
        """
        Распознаёт текст из файла изображения.

        Args:
            image_path: Путь к файлу изображения

        Returns:
            RawOCRText с сырым текстом чека
        """
        pass


class IInventoryRepository(ABC):
    """Интерфейс хранилища инвентаря (домен Inventory)."""

    @abstractmethod
    def bulk_create(self, records: List[InventoryRecordDTO]) -> int:
        """
        Создаёт продукты одним запросом.

        Args:
            records: Записи для создания

        Returns:
            Количество реально созданных записей

        Raises:
            InventoryRepositoryError: Если backend отклонил запрос
        """
        pass
