"""
Config Loader для конфигураций локалей парсинга.

ЦКП: Загрузка LocaleConfig для локали из YAML файлов.

Архитектурный принцип:
- Алгоритм парсинга не знает ничего о языке чека
- Маркеры зоны, шумовые слова и таблица единиц - данные в YAML
- Новая локаль = новая директория <locale>/parsing.yaml, без правки кода
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from loguru import logger

from config.settings import FALLBACK_LOCALE
from ..domain.exceptions import ParsingConfigurationError

EXTENDS_KEY = "$extends"


@dataclass(frozen=True)
class LocaleConfig:
    """
    Конфигурация локали для парсинга.

    - start_markers: фразы, после которых начинается товарная зона
    - end_markers: фразы, на которых товарная зона заканчивается
    - boilerplate_keywords: префиксы служебных строк (итоги, налог, оплата)
    - unit_aliases: сырой токен единицы (lower-case) -> каноническая единица
    """
    locale_code: str
    start_markers: List[str] = field(default_factory=list)
    end_markers: List[str] = field(default_factory=list)
    boilerplate_keywords: List[str] = field(default_factory=list)
    unit_aliases: Dict[str, str] = field(default_factory=dict)


class ConfigLoader:
    """
    Загрузчик конфигураций локалей.

    Кеш живет в экземпляре загрузчика: разные загрузчики
    (например, в тестах с tmp_path) не делят состояние.
    """

    def __init__(self, config_dir: Optional[Path] = None, fallback_locale: str = FALLBACK_LOCALE):
        """
        Args:
            config_dir: Директория с base.yaml и <locale>/parsing.yaml
            fallback_locale: Локаль, которая используется если запрошенной нет
        """
        self.config_dir = Path(config_dir) if config_dir else Path(__file__).parent
        self.fallback_locale = fallback_locale
        self._cache: Dict[str, LocaleConfig] = {}

    def load(self, locale_code: str) -> LocaleConfig:
        """
        Загружает конфигурацию локали (с фолбэком).

        Raises:
            ParsingConfigurationError: Если нет ни запрошенной, ни фолбэк-локали
        """
        if locale_code in self._cache:
            return self._cache[locale_code]

        if not self._locale_file(locale_code).exists():
            if locale_code == self.fallback_locale or not self._locale_file(self.fallback_locale).exists():
                raise ParsingConfigurationError(
                    message=f"Конфиг для {locale_code} не найден: {self._locale_file(locale_code)}",
                    component="ConfigLoader"
                )
            logger.warning(
                f"[ConfigLoader] Локаль {locale_code} не найдена, используется {self.fallback_locale}"
            )
            config = self.load(self.fallback_locale)
        else:
            config = self._load_locale_yaml(locale_code)

        self._cache[locale_code] = config

        logger.debug(
            f"[ConfigLoader] Загружен LocaleConfig для {locale_code}: "
            f"{len(config.start_markers)} start_markers, "
            f"{len(config.boilerplate_keywords)} boilerplate_keywords, "
            f"{len(config.unit_aliases)} unit_aliases"
        )

        return config

    def available_locales(self) -> List[str]:
        """Список локалей, для которых есть parsing.yaml."""
        if not self.config_dir.exists():
            return []
        return sorted(
            item.name for item in self.config_dir.iterdir()
            if item.is_dir() and not item.name.startswith("_") and (item / "parsing.yaml").exists()
        )

    def _locale_file(self, locale_code: str) -> Path:
        return self.config_dir / locale_code / "parsing.yaml"

    def _load_base_config(self) -> dict:
        """Загружает базовую конфигурацию из base.yaml."""
        base_file = self.config_dir / "base.yaml"

        if not base_file.exists():
            logger.warning(f"[ConfigLoader] base.yaml не найден: {base_file}")
            return {}

        with open(base_file, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _resolve_extends(value: Any, base_config: dict) -> Any:
        """
        Обрабатывает наследование через $extends.

        Списки:
        - Строка: "$extends: key"
        - Словарь: {"$extends": "key"} (автоматически из YAML без кавычек)
        Словари:
        - Ключ "$extends": сначала берется словарь из base.yaml, локальные ключи перекрывают его
        """
        if isinstance(value, dict):
            result = {}
            extended_key = value.get(EXTENDS_KEY)
            if extended_key:
                extended = base_config.get(extended_key)
                if not isinstance(extended, dict):
                    logger.warning(f"[ConfigLoader] Ключ '{extended_key}' для $extends не найден в base.yaml")
                else:
                    result.update(extended)
            result.update({k: v for k, v in value.items() if k != EXTENDS_KEY})
            return result

        if isinstance(value, list):
            result = []
            for item in value:
                extended_key = None

                if isinstance(item, str) and item.startswith(f"{EXTENDS_KEY}:"):
                    extended_key = item.split(":", 1)[1].strip()
                elif isinstance(item, dict) and EXTENDS_KEY in item:
                    extended_key = item[EXTENDS_KEY]

                if extended_key:
                    extended = base_config.get(extended_key, [])
                    if not extended:
                        logger.warning(f"[ConfigLoader] Ключ '{extended_key}' для $extends не найден в base.yaml")
                    result.extend(extended)
                else:
                    result.append(item)
            return result

        return value

    def _load_locale_yaml(self, locale_code: str) -> LocaleConfig:
        """Загружает конфиг локали из YAML файла."""
        base_config = self._load_base_config()
        config_file = self._locale_file(locale_code)

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ParsingConfigurationError(
                message=f"Некорректный YAML: {config_file}",
                component="ConfigLoader",
                original_error=e
            )

        if "locale_code" not in config_data:
            raise ParsingConfigurationError(
                message=f"Отсутствует locale_code в {config_file}",
                component="ConfigLoader"
            )

        unit_aliases = self._resolve_extends(config_data.get("unit_aliases", {}), base_config)
        if not isinstance(unit_aliases, dict):
            raise ParsingConfigurationError(
                message=f"unit_aliases должен быть словарем в {config_file}",
                component="ConfigLoader"
            )

        return LocaleConfig(
            locale_code=config_data["locale_code"],
            start_markers=self._as_phrases(config_data.get("start_markers"), base_config),
            end_markers=self._as_phrases(config_data.get("end_markers"), base_config),
            boilerplate_keywords=self._as_phrases(config_data.get("boilerplate_keywords"), base_config),
            unit_aliases={str(k).lower(): str(v) for k, v in unit_aliases.items()},
        )

    def _as_phrases(self, value: Any, base_config: dict) -> List[str]:
        """Список фраз в lower-case, пустые значения отбрасываются."""
        resolved = self._resolve_extends(value or [], base_config)
        return [str(item).strip().lower() for item in resolved if str(item).strip()]
