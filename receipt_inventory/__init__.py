"""Receipt Inventory - фото чека -> список товаров -> инвентарь домохозяйства."""

__version__ = "0.1.0"
