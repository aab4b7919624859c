"""
Receipt Draft - редактируемый список товаров до коммита.

ЦКП: Проверенный список ReceiptItemDTO для BulkCommitter.

Список принадлежит вызывающей стороне (UI): парсер про правки не знает.
Каждая правка валидируется сразу; невалидное значение отклоняется
с ошибкой по полю и не попадает в товар.
"""

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from contracts.d2_parsing_dto import ReceiptItemDTO
from ..domain.exceptions import ItemValidationError
from ..parsing.s3_detail.detail_parser import ParsedItem

EDITABLE_FIELDS = ("name", "quantity", "unit", "price")


def _field_errors(error: ValidationError, index: int) -> List[Dict[str, Any]]:
    return [
        {
            "index": index,
            "field": str(err["loc"][0]) if err.get("loc") else "",
            "message": err.get("msg", ""),
        }
        for err in error.errors()
    ]


def validate_item(item: ParsedItem, index: int, component: str = "ReceiptDraft") -> ReceiptItemDTO:
    """ParsedItem -> ReceiptItemDTO, ошибки pydantic -> ItemValidationError по полям."""
    try:
        return ReceiptItemDTO(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            price=item.price,
        )
    except ValidationError as e:
        errors = _field_errors(e, index)
        raise ItemValidationError(
            message=f"Товар #{index} невалиден: {', '.join(err['field'] for err in errors)}",
            errors=errors,
            component=component,
            original_error=e
        )


class ReceiptDraft:
    """
    Черновик списка товаров из чека.

    Поддерживает правку полей, удаление и финальную проверку перед коммитом.
    """

    def __init__(self, items: Optional[Sequence[ParsedItem]] = None):
        self._items: List[ParsedItem] = list(items or [])

    @property
    def items(self) -> List[ParsedItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def update(self, index: int, field: str, value: Any) -> ParsedItem:
        """
        Правит одно поле товара.

        Raises:
            IndexError: Нет товара с таким индексом
            ItemValidationError: Неизвестное поле или невалидное значение
        """
        if field not in EDITABLE_FIELDS:
            raise ItemValidationError(
                message=f"Поле '{field}' нельзя редактировать",
                errors=[{"index": index, "field": field, "message": "unknown field"}],
                component="ReceiptDraft"
            )

        item = self._items[index]
        candidate = ParsedItem(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            price=item.price,
            line_number=item.line_number,
            raw_text=item.raw_text,
        )
        setattr(candidate, field, value)

        validated = validate_item(candidate, index)

        # В товар пишется уже нормализованное значение ("2,5" -> Decimal("2.5"))
        setattr(item, field, getattr(validated, field))
        logger.debug(f"[ReceiptDraft] Товар #{index}: {field} = {getattr(item, field)!r}")
        return item

    def remove(self, index: int) -> ParsedItem:
        item = self._items.pop(index)
        logger.debug(f"[ReceiptDraft] Товар #{index} удален: '{item.name}'")
        return item

    def validate(self) -> List[ReceiptItemDTO]:
        """
        Проверяет все товары перед коммитом.

        Raises:
            ItemValidationError: Со списком всех невалидных полей всех товаров
        """
        validated: List[ReceiptItemDTO] = []
        errors: List[Dict[str, Any]] = []

        for index, item in enumerate(self._items):
            try:
                validated.append(validate_item(item, index))
            except ItemValidationError as e:
                errors.extend(e.errors)

        if errors:
            raise ItemValidationError(
                message=f"{len(errors)} ошибок валидации в черновике",
                errors=errors,
                component="ReceiptDraft"
            )

        return validated
