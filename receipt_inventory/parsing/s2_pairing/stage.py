"""
Stage 2: Line-Pair Tokenizer

ЦКП: Упорядоченный список товаров из товарной зоны.

Input: строки чека + BoundedRegion
Output: список ParsedItem + TokenizeStats

Чек печатает товар в две строки: название, затем "кол-во [ед.] цена".
Алгоритм - явный цикл по индексу с двумя величинами шага:
- пустая строка в паре -> пара пропускается, шаг 2
- служебная строка (итог, налог, оплата) -> шаг 1, следующая строка
  не считается ее парой и начинает новую пару
- иначе пара отдается DetailParser, шаг 2 (нераспознанная пара отбрасывается)
Непарная последняя строка зоны игнорируется.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from loguru import logger

from ..s1_section.stage import BoundedRegion
from ..s3_detail.detail_parser import DetailParser, ParsedItem
from .line_classifier import LineClassifier


@dataclass
class TokenizeStats:
    """Счетчики одного прохода токенизатора."""
    parsed_pairs: int = 0
    rejected_pairs: int = 0
    boilerplate_lines: int = 0
    blank_pairs: int = 0
    rejected_lines: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "parsed_pairs": self.parsed_pairs,
            "rejected_pairs": self.rejected_pairs,
            "boilerplate_lines": self.boilerplate_lines,
            "blank_pairs": self.blank_pairs,
            "rejected_lines": list(self.rejected_lines),
        }


class LinePairTokenizer:
    """
    Stage 2: обход товарной зоны парами строк.

    Использует:
    - LineClassifier: служебные строки
    - DetailParser: разбор строки деталей
    """

    def __init__(self, line_classifier: LineClassifier, detail_parser: DetailParser):
        self.line_classifier = line_classifier
        self.detail_parser = detail_parser

    def tokenize(self, lines: Sequence[str], region: BoundedRegion) -> List[ParsedItem]:
        items, _ = self.tokenize_with_stats(lines, region)
        return items

    def tokenize_with_stats(
        self,
        lines: Sequence[str],
        region: BoundedRegion
    ) -> Tuple[List[ParsedItem], TokenizeStats]:
        """
        Args:
            lines: Все строки чека
            region: Товарная зона

        Returns:
            (items, stats)
        """
        items: List[ParsedItem] = []
        stats = TokenizeStats()

        start = max(0, region.start)
        end = min(len(lines), region.end)

        i = start
        while i < end - 1:
            name_line = (lines[i] or "").strip()
            detail_line = (lines[i + 1] or "").strip()

            if not name_line or not detail_line:
                stats.blank_pairs += 1
                i += 2
                continue

            if self.line_classifier.is_boilerplate(name_line):
                logger.debug(f"[LinePairTokenizer] Служебная строка {i}: '{name_line}'")
                stats.boilerplate_lines += 1
                i += 1
                continue

            item = self.detail_parser.parse(name_line, detail_line, line_number=i)
            if item is not None:
                items.append(item)
                stats.parsed_pairs += 1
            else:
                stats.rejected_pairs += 1
                stats.rejected_lines.append(i)
            i += 2

        logger.debug(
            f"[LinePairTokenizer] {stats.parsed_pairs} товаров, "
            f"{stats.rejected_pairs} нераспознанных пар, "
            f"{stats.boilerplate_lines} служебных строк"
        )
        return items, stats
