"""
OCR: Tesseract (локальный движок).

Фото чека -> сырой текст. Языки по умолчанию mkd+eng
(македонская кириллица + латиница на одном чеке).
"""

from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

import pytesseract
from PIL import Image, UnidentifiedImageError
from loguru import logger

from config.settings import TESSERACT_CMD, TESSERACT_LANGUAGES
from contracts.d1_extraction_dto import RawOCRText, OCRMetadata
from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import ImageDecodingError, OCRProviderError, OCRResponseError
from .image_file_reader import ImageFileReader


class TesseractOCR(IOCRProvider):
    """
    Обёртка над pytesseract.

    Реализует интерфейс IOCRProvider.
    """

    def __init__(
        self,
        languages: Optional[str] = None,
        tesseract_cmd: Optional[str] = None,
        image_reader: Optional[ImageFileReader] = None
    ):
        """
        Args:
            languages: Языки Tesseract через "+" (по умолчанию из settings)
            tesseract_cmd: Путь к бинарнику tesseract (если не в PATH)
            image_reader: Читатель файлов изображений
        """
        self.languages = languages or TESSERACT_LANGUAGES
        self.image_reader = image_reader or ImageFileReader()

        cmd = tesseract_cmd or TESSERACT_CMD
        if cmd:
            pytesseract.pytesseract.tesseract_cmd = cmd

        logger.info(f"[TesseractOCR] Инициализирован (lang={self.languages})")

    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRText:
        """
        Распознаёт текст на изображении.

        Raises:
            ImageDecodingError: Если байты не являются изображением
            OCRProviderError: Если tesseract не установлен
            OCRResponseError: Если tesseract завершился с ошибкой
        """
        logger.debug(f"[TesseractOCR] Распознавание: {source_file}")

        try:
            image = Image.open(BytesIO(image_content))
        except (UnidentifiedImageError, OSError) as e:
            raise ImageDecodingError(
                message=f"Не удалось открыть изображение: {source_file}",
                component="TesseractOCR",
                original_error=e
            )

        try:
            text = pytesseract.image_to_string(image, lang=self.languages)
        except pytesseract.TesseractNotFoundError as e:
            raise OCRProviderError(
                message="Tesseract не найден (установите tesseract или укажите TESSERACT_CMD)",
                component="TesseractOCR",
                original_error=e
            )
        except (pytesseract.TesseractError, RuntimeError, OSError, ValueError) as e:
            # OSError: Pillow дочитывает усеченный файл только при распознавании
            raise OCRResponseError(
                message=f"Ошибка при распознавании текста: {source_file}",
                component="TesseractOCR",
                original_error=e
            )
        finally:
            image.close()

        logger.debug(f"[TesseractOCR] Распознано символов: {len(text)}")

        return RawOCRText(
            full_text=text,
            metadata=OCRMetadata(
                source_file=source_file,
                provider="tesseract",
                processed_at=datetime.now().isoformat(),
                languages=self.languages.split("+"),
            )
        )

    def recognize_from_file(self, image_path: Path) -> RawOCRText:
        image_path = Path(image_path)
        return self.recognize(self.image_reader.read(image_path), image_path.stem)
