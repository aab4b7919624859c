"""
Unit Normalizer - нормализация единиц измерения.

ЦКП: Каноническая единица (g, kg, L, ml, pieces) для сырого токена из чека.

Таблица - данные из конфига локали, а не код: новая локаль добавляет
свои токены в YAML.
"""

from typing import Mapping, Optional

from loguru import logger

# Плейсхолдер, если в строке чека единицы нет
DEFAULT_UNIT = "unit"

CANONICAL_UNITS = frozenset({"g", "kg", "L", "ml", "pieces"})


class UnitNormalizer:
    """
    Элемент-функция: сырой токен единицы -> каноническая единица.

    Поиск без учета регистра. Неизвестный токен возвращается как есть
    (в lower-case), а не отбрасывается.
    """

    def __init__(self, unit_aliases: Mapping[str, str]):
        self.unit_aliases = {str(k).lower(): v for k, v in unit_aliases.items()}

    def normalize(self, raw_unit: Optional[str]) -> str:
        token = (raw_unit or "").strip().lower()
        if not token:
            return DEFAULT_UNIT

        canonical = self.unit_aliases.get(token)
        if canonical is None:
            logger.debug(f"[UnitNormalizer] Неизвестная единица '{token}', оставляем как есть")
            return token

        return canonical
