"""
Line Classifier - классификация строк чека.

ЦКП: Является ли строка служебной (итог, налог, способ оплаты).

SRP: Только классификация строк, без парсинга товаров.
"""

import re
from typing import Iterable, Optional, Pattern


class LineClassifier:
    """
    Классификатор служебных строк.

    Служебная строка начинается с одного из ключевых слов локали
    (без учета регистра, любой алфавит).
    """

    def __init__(self, boilerplate_keywords: Iterable[str]):
        keywords = [kw.strip() for kw in boilerplate_keywords if kw and kw.strip()]
        self.boilerplate_pattern: Optional[Pattern[str]] = None
        if keywords:
            # Длинные ключевые слова первыми: "subtotal" раньше "sub"
            alternatives = "|".join(re.escape(kw) for kw in sorted(keywords, key=len, reverse=True))
            self.boilerplate_pattern = re.compile(rf"^(?:{alternatives})", re.IGNORECASE)

    def is_boilerplate(self, text: str) -> bool:
        if self.boilerplate_pattern is None:
            return False
        return bool(self.boilerplate_pattern.match((text or "").strip()))
