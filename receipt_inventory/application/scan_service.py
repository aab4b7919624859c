"""
Receipt Scan Service - фото чека -> черновик товаров.

Координирует:
1. OCR распознавание (один вызов, внешний провайдер)
2. Парсинг текста (ReceiptParser)

Любая ошибка OCR (доменная или нет) прерывает сценарий: парсер не вызывается, пользователь
получает понятное сообщение.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import ExtractionError
from ..parsing.pipeline import ReceiptParser, ParseResult
from ..parsing.s3_detail.detail_parser import ParsedItem
from ..review.draft import ReceiptDraft

OCR_FAILURE_MESSAGE = "Failed to process receipt. Please try again."


@dataclass
class ScanResult:
    """Результат сканирования чека."""
    items: List[ParsedItem] = field(default_factory=list)
    raw_text: str = ""
    source_file: str = ""
    parse: Optional[ParseResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_draft(self) -> ReceiptDraft:
        return ReceiptDraft(self.items)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "error": self.error,
            "source_file": self.source_file,
            "raw_text": self.raw_text,
            "items": [item.to_dict() for item in self.items],
            "parse": self.parse.to_dict() if self.parse else None,
        }


class ReceiptScanService:
    """
    Сценарий "сканировать чек".

    ЦКП: ScanResult с товарами или сообщением об ошибке.
    """

    def __init__(self, ocr_provider: IOCRProvider, parser: ReceiptParser):
        self.ocr_provider = ocr_provider
        self.parser = parser

    def scan(self, image_content: bytes, source_file: str = "unknown") -> ScanResult:
        try:
            ocr_result = self.ocr_provider.recognize(image_content, source_file)
        except Exception as e:
            return self._ocr_failed(source_file, e)

        return self._parse(ocr_result.full_text, source_file)

    def scan_file(self, image_path: Path) -> ScanResult:
        image_path = Path(image_path)
        try:
            ocr_result = self.ocr_provider.recognize_from_file(image_path)
        except Exception as e:
            return self._ocr_failed(image_path.stem, e)

        return self._parse(ocr_result.full_text, image_path.stem)

    def scan_text(self, text: str, source_file: str = "text") -> ScanResult:
        """Парсинг уже распознанного текста (без OCR)."""
        return self._parse(text, source_file)

    def _parse(self, text: str, source_file: str) -> ScanResult:
        parse_result = self.parser.parse_with_details(text)

        logger.info(f"[ReceiptScanService] {source_file}: {len(parse_result.items)} товаров")

        return ScanResult(
            items=parse_result.items,
            raw_text=text or "",
            source_file=source_file,
            parse=parse_result,
        )

    @staticmethod
    def _ocr_failed(source_file: str, error: Exception) -> ScanResult:
        if isinstance(error, ExtractionError):
            logger.error(f"[ReceiptScanService] OCR ошибка ({source_file}): {error}")
        else:
            logger.exception(f"[ReceiptScanService] Непредвиденная ошибка OCR ({source_file}): {error}")
        return ScanResult(source_file=source_file, error=OCR_FAILURE_MESSAGE)
