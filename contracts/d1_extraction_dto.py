"""
DTO контракт: D1 (Extraction) -> D2 (Parsing)

Результат OCR обработки фото чека.
Парсеру нужен только текст: строки режутся по переводам строк,
координаты слов не используются.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OCRMetadata:
    """
    Метаданные OCR обработки.
    """
    source_file: str                                  # Имя исходного файла
    provider: str                                     # tesseract / google
    processed_at: str                                 # Timestamp обработки (ISO 8601)
    languages: List[str] = field(default_factory=list)  # Подсказки языков для OCR


@dataclass
class RawOCRText:
    """
    Результат распознавания фото чека.

    full_text - сырой текст как его вернул OCR (с пустыми строками и мусором).
    """
    full_text: str = ""
    metadata: Optional[OCRMetadata] = None

    def has_content(self) -> bool:
        """True если OCR вернул хоть какой-то непустой текст."""
        return bool(self.full_text and self.full_text.strip())

    def to_dict(self) -> dict:
        result = {"full_text": self.full_text, "metadata": None}
        if self.metadata:
            result["metadata"] = {
                "source_file": self.metadata.source_file,
                "provider": self.metadata.provider,
                "processed_at": self.metadata.processed_at,
                "languages": list(self.metadata.languages),
            }
        return result
