"""
Система локалей для парсинга чеков.

Содержит:
- LocaleConfig: маркеры товарной зоны, шумовые слова, таблица единиц
- ConfigLoader: загрузчик конфигураций из YAML файлов
"""

from .config_loader import ConfigLoader, LocaleConfig

__all__ = [
    "ConfigLoader",
    "LocaleConfig",
]
