"""
Bulk Committer - массовое добавление товаров из чека в инвентарь.

ЦКП: Количество созданных продуктов.

Каждый товар:
- перепроверяется через ReceiptItemDTO (после ручных правок)
- получает uuid4, категорию "food", minStock = 20% от количества,
  дату покупки = дата коммита, пустой срок годности
Сохранение - одним вызовом репозитория. Ретраев нет: ошибка
репозитория отдается вызывающей стороне как есть.
"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Union

from loguru import logger

from config.settings import DEFAULT_CATEGORY, MIN_STOCK_RATIO
from contracts.d2_parsing_dto import InventoryRecordDTO, ReceiptItemDTO
from ..domain.interfaces import IInventoryRepository
from ..domain.exceptions import InventoryCommitError
from ..parsing.s3_detail.detail_parser import ParsedItem
from ..review.draft import validate_item

CommitItem = Union[ParsedItem, ReceiptItemDTO]


class BulkCommitter:
    """
    Коммит списка товаров в инвентарь домохозяйства.
    """

    def __init__(
        self,
        repository: IInventoryRepository,
        household_id: str,
        category: str = DEFAULT_CATEGORY,
        min_stock_ratio: float = MIN_STOCK_RATIO,
        today: Optional[Callable[[], date]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Args:
            repository: Хранилище инвентаря
            household_id: Домохозяйство, в которое добавляются продукты
            category: Категория по умолчанию
            min_stock_ratio: Доля количества для порога минимального остатка
            today: Источник текущей даты (для тестов)
            id_factory: Генератор идентификаторов (для тестов)
        """
        self.repository = repository
        self.household_id = household_id
        self.category = category
        self.min_stock_ratio = Decimal(str(min_stock_ratio))
        self.today = today or date.today
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def build_records(self, items: Sequence[CommitItem]) -> List[InventoryRecordDTO]:
        """
        Товары -> записи для создания продуктов.

        Raises:
            ItemValidationError: Если товар невалиден после ручной правки
        """
        purchased = self.today().isoformat()
        records = []

        for index, item in enumerate(items):
            validated = self._validate(item, index)
            records.append(InventoryRecordDTO(
                id=self.id_factory(),
                name=validated.name,
                category=self.category,
                quantity=validated.quantity,
                unit=validated.unit,
                min_stock=validated.quantity * self.min_stock_ratio,
                purchased=purchased,
                use_by=None,
                household_id=self.household_id,
            ))

        return records

    def commit(self, items: Sequence[CommitItem]) -> int:
        """
        Добавляет товары в инвентарь.

        Returns:
            Количество реально созданных записей

        Raises:
            ItemValidationError: Невалидный товар (до обращения к репозиторию)
            InventoryCommitError: Репозиторий отклонил запрос
        """
        if not items:
            logger.info("[BulkCommitter] Пустой список, коммит пропущен")
            return 0

        records = self.build_records(items)

        try:
            created = self.repository.bulk_create(records)
        except Exception as e:
            logger.error(f"[BulkCommitter] Ошибка коммита {len(records)} товаров: {e}")
            raise InventoryCommitError(
                message=getattr(e, "message", str(e)),
                component="BulkCommitter",
                original_error=e
            )

        logger.info(f"[BulkCommitter] Создано {created}/{len(records)} продуктов")
        return created

    @staticmethod
    def _validate(item: CommitItem, index: int) -> ReceiptItemDTO:
        if isinstance(item, ReceiptItemDTO):
            return item
        return validate_item(item, index, component="BulkCommitter")
