"""
DTO контракт: D2 (Parsing) -> Review / Inventory

ReceiptItemDTO - товар из чека после ручной правки пользователем.
InventoryRecordDTO - запись для создания продукта в инвентаре.

ВАЖНО: Имена колонок backend-а в camelCase (minStock, useBy, householdId),
поэтому у InventoryRecordDTO есть to_backend().
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReceiptItemDTO(BaseModel):
    """
    Валидированный товар из чека.

    Невалидные значения (пустое имя, нечисловое количество) не приводятся
    молча, а дают ValidationError с указанием поля.
    """

    name: str = Field(..., description="Название товара")
    quantity: Decimal = Field(..., ge=0, description="Количество")
    unit: str = Field(..., description="Каноническая единица (g, kg, L, ml, pieces)")
    price: Optional[Decimal] = Field(None, ge=0, description="Цена из чека")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("name", "unit")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("quantity", "price", mode="before")
    @classmethod
    def normalize_decimal_separator(cls, v: Any) -> Any:
        # Пользователь может ввести "2,5" - приводим к "2.5"
        if isinstance(v, str):
            v = v.strip().replace(",", ".")
            if v == "":
                return None
        return v


class InventoryRecordDTO(BaseModel):
    """
    Запись для создания продукта в инвентаре домохозяйства.
    """

    id: str = Field(..., description="Сгенерированный идентификатор (uuid4)")
    name: str
    category: str = Field("food", description="Категория (по умолчанию еда)")
    quantity: Decimal = Field(..., ge=0)
    unit: str
    min_stock: Decimal = Field(..., ge=0, description="Порог минимального остатка")
    purchased: str = Field(..., description="Дата покупки YYYY-MM-DD")
    use_by: Optional[str] = Field(None, description="Срок годности (не заполняется)")
    storage: str = ""
    to_buy: bool = False
    frequently_used: bool = False
    household_id: str

    model_config = ConfigDict(frozen=True)

    def to_backend(self) -> Dict[str, Any]:
        """Сериализует запись в формат колонок backend-а."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "quantity": float(self.quantity),
            "unit": self.unit,
            "minStock": float(self.min_stock),
            "purchased": self.purchased,
            "useBy": self.use_by,
            "storage": self.storage,
            "toBuy": self.to_buy,
            "frequentlyUsed": self.frequently_used,
            "householdId": self.household_id,
        }
