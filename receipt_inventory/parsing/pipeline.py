"""
Receipt Parser - оркестратор 3 этапов парсинга.

Координирует выполнение этапов в строгом порядке:
0. split_lines: текст OCR -> непустые строки (единственное место фильтрации)
1. Section Bounder -> товарная зона
2. Line-Pair Tokenizer -> пары строк (делегирует Stage 3)
3. Detail Parser & Unit Normalizer -> ParsedItem

Чистая функция над строками: никакого I/O и состояния между вызовами.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from config.settings import DEFAULT_LOCALE
from ..locales.config_loader import ConfigLoader, LocaleConfig
from .s1_section import SectionBounder, BoundedRegion
from .s2_pairing import LinePairTokenizer, LineClassifier, TokenizeStats
from .s3_detail import DetailParser, ParsedItem, UnitNormalizer

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: Optional[str]) -> List[str]:
    """
    Режет текст OCR на строки и отбрасывает пустые.

    Фильтрация делается только здесь: индексы пар в Stage 2 считаются
    по уже отфильтрованному списку.
    """
    if not text:
        return []
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


@dataclass
class ParseResult:
    """
    Полный результат парсинга со всеми промежуточными данными.

    Используется для отладки и CLI.
    """
    items: List[ParsedItem] = field(default_factory=list)
    region: Optional[BoundedRegion] = None
    stats: Optional[TokenizeStats] = None
    line_count: int = 0
    locale_code: str = ""

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "items_count": len(self.items),
            "region": self.region.to_dict() if self.region else None,
            "stats": self.stats.to_dict() if self.stats else None,
            "line_count": self.line_count,
            "locale_code": self.locale_code,
        }


class ReceiptParser:
    """
    Парсер текста чека.

    Stateless после создания: этапы собираются из LocaleConfig один раз,
    parse() можно вызывать сколько угодно раз с одинаковым результатом.
    """

    def __init__(
        self,
        locale_config: LocaleConfig,
        section_bounder: Optional[SectionBounder] = None,
        tokenizer: Optional[LinePairTokenizer] = None,
    ):
        """
        Args:
            locale_config: Конфигурация локали
            section_bounder: Stage 1 (по умолчанию из маркеров локали)
            tokenizer: Stage 2 (по умолчанию из шумовых слов и таблицы единиц локали)
        """
        self.locale_config = locale_config
        self.section_bounder = section_bounder or SectionBounder(
            locale_config.start_markers,
            locale_config.end_markers,
        )
        self.tokenizer = tokenizer or LinePairTokenizer(
            LineClassifier(locale_config.boilerplate_keywords),
            DetailParser(UnitNormalizer(locale_config.unit_aliases)),
        )

    @classmethod
    def for_locale(cls, locale_code: str = DEFAULT_LOCALE, config_loader: Optional[ConfigLoader] = None) -> "ReceiptParser":
        loader = config_loader or ConfigLoader()
        return cls(loader.load(locale_code))

    def parse(self, text: Optional[str]) -> List[ParsedItem]:
        """
        Текст OCR -> упорядоченный список товаров.
        """
        return self.parse_with_details(text).items

    def parse_lines(self, lines: Sequence[str]) -> List[ParsedItem]:
        """
        Строки -> товары без повторной фильтрации.

        Пустые строки во входе участвуют в выравнивании пар.
        """
        return self._run(lines).items

    def parse_with_details(self, text: Optional[str]) -> ParseResult:
        return self._run(split_lines(text))

    def _run(self, lines: Sequence[str]) -> ParseResult:
        # Stage 1
        region = self.section_bounder.bound(lines)

        # Stage 2 + 3
        items, stats = self.tokenizer.tokenize_with_stats(lines, region)

        logger.info(
            f"[ReceiptParser] {len(items)} товаров из {len(lines)} строк "
            f"(зона [{region.start}, {region.end}), локаль {self.locale_config.locale_code})"
        )

        return ParseResult(
            items=items,
            region=region,
            stats=stats,
            line_count=len(lines),
            locale_code=self.locale_config.locale_code,
        )
