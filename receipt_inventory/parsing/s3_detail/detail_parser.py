"""
Detail Parser - парсинг строки деталей товара.

ЦКП: ParsedItem из пары (строка названия, строка деталей) или None.

Строка деталей: "<количество> [<единица>] <цена>", например
    "2 L 89.00", "2,5 kg 50", "1 kom. 45,50", "3 120"

SRP: Только разбор одной пары строк, без классификации и итерации.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from loguru import logger

from .unit_normalizer import UnitNormalizer

# [^\W\d_] - буква любого алфавита (латиница, кириллица, ...)
DETAIL_PATTERN = re.compile(
    r"(?P<quantity>\d+(?:[.,]\d+)?)"
    r"\s*(?P<unit>[^\W\d_]+\.?)?"
    r"\s+(?P<price>\d+(?:[.,]\d+)?)"
)


@dataclass
class ParsedItem:
    """
    Распарсенный товар.

    Изменяемый: пользователь правит name/quantity/unit/price до коммита.
    """
    name: str
    quantity: Decimal
    unit: str
    price: Optional[Decimal] = None
    line_number: int = 0
    raw_text: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "quantity": float(self.quantity),
            "unit": self.unit,
            "price": float(self.price) if self.price is not None else None,
            "line_number": self.line_number,
            "raw_text": self.raw_text,
        }


def to_decimal(value: str) -> Decimal:
    """'2,5' -> Decimal('2.5')"""
    return Decimal(value.replace(",", "."))


class DetailParser:
    """
    Парсер строки деталей.

    Несовпадение с паттерном - ожидаемый исход (мусор OCR), возвращается None.
    """

    def __init__(self, unit_normalizer: UnitNormalizer):
        self.unit_normalizer = unit_normalizer

    def parse(self, name_line: str, detail_line: str, line_number: int = 0) -> Optional[ParsedItem]:
        """
        Args:
            name_line: Строка с названием товара
            detail_line: Строка с количеством, единицей и ценой
            line_number: Индекс строки названия (для трассировки)

        Returns:
            ParsedItem или None если строка деталей не распознана
        """
        name = (name_line or "").strip()
        if not name:
            return None

        match = DETAIL_PATTERN.search(detail_line or "")
        if not match:
            logger.debug(f"[DetailParser] Нет совпадения: '{detail_line}'")
            return None

        try:
            quantity = to_decimal(match.group("quantity"))
            price = to_decimal(match.group("price"))
        except InvalidOperation:
            logger.debug(f"[DetailParser] Некорректное число: '{detail_line}'")
            return None

        unit = self.unit_normalizer.normalize(match.group("unit"))

        return ParsedItem(
            name=name,
            quantity=quantity,
            unit=unit,
            price=price,
            line_number=line_number,
            raw_text=detail_line.strip(),
        )
