"""
Stage 1: Section Bounder

ЦКП: Границы товарной зоны чека (start, end).

Input: список строк чека
Output: BoundedRegion, инвариант 0 <= start <= end <= len(lines)

Алгоритм:
1. Один проход сверху вниз по всем строкам
2. Первая строка со start-маркером -> start = i + 1
3. Строка с end-маркером -> end = i, проход останавливается
4. Нет start-маркера -> start = 0 (лучше лишние строки, чем потеря товаров)
5. Нет end-маркера -> end = len(lines)

Поиск end-маркера не зависит от start: end-маркер выше start-маркера
тоже срабатывает (тогда start-маркер просто не будет найден).
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from loguru import logger


@dataclass(frozen=True)
class BoundedRegion:
    """Полуоткрытый диапазон строк [start, end)."""
    start: int
    end: int
    start_marker_found: bool = False
    end_marker_found: bool = False

    def __len__(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "start_marker_found": self.start_marker_found,
            "end_marker_found": self.end_marker_found,
        }


class SectionBounder:
    """
    Stage 1: определение товарной зоны по маркерным фразам.

    Маркеры сравниваются как подстроки в lower-case.
    """

    def __init__(self, start_markers: Iterable[str], end_markers: Iterable[str]):
        self.start_markers = [m.lower() for m in start_markers if m]
        self.end_markers = [m.lower() for m in end_markers if m]

    def bound(self, lines: Sequence[str]) -> BoundedRegion:
        """
        Находит товарную зону.

        Args:
            lines: Строки чека

        Returns:
            BoundedRegion - всегда валидный диапазон, исключений нет
        """
        start = None
        end = len(lines)
        end_found = False

        for i, line in enumerate(lines):
            text = (line or "").lower()

            if start is None and self._contains_any(text, self.start_markers):
                start = i + 1
                logger.debug(f"[SectionBounder] Start marker в строке {i}: '{line}'")

            if self._contains_any(text, self.end_markers):
                end = i
                end_found = True
                logger.debug(f"[SectionBounder] End marker в строке {i}: '{line}'")
                break

        start_found = start is not None
        if start is None:
            start = 0

        # Маркеры в одной строке: start = i + 1 > end = i
        if start > end:
            start = end

        region = BoundedRegion(
            start=start,
            end=end,
            start_marker_found=start_found,
            end_marker_found=end_found,
        )

        logger.debug(
            f"[SectionBounder] Зона [{region.start}, {region.end}) из {len(lines)} строк "
            f"(start_marker={start_found}, end_marker={end_found})"
        )
        return region

    @staticmethod
    def _contains_any(text: str, phrases: List[str]) -> bool:
        return any(phrase in text for phrase in phrases)
