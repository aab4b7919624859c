"""
OCR: Google Vision API интеграция.

- Отправка изображения в Google Vision (DOCUMENT_TEXT_DETECTION)
- Получение full_text
- Формирование RawOCRText (контракт D1->D2)

Координаты слов парсеру не нужны, берется только полный текст.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from google.cloud import vision
from loguru import logger

from config.settings import GOOGLE_APPLICATION_CREDENTIALS, OCR_LANGUAGE_HINTS
from contracts.d1_extraction_dto import RawOCRText, OCRMetadata
from ..domain.interfaces import IOCRProvider
from ..domain.exceptions import OCRProviderError, OCRResponseError
from .image_file_reader import ImageFileReader


class GoogleVisionOCR(IOCRProvider):
    """
    Обёртка над Google Cloud Vision API.

    Реализует интерфейс IOCRProvider.
    """

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        language_hints: Optional[List[str]] = None,
        client: Optional[vision.ImageAnnotatorClient] = None,
        image_reader: Optional[ImageFileReader] = None
    ):
        """
        Инициализация OCR клиента.

        Args:
            credentials_path: Путь к JSON-файлу credentials.
                            Если не указан, берётся из settings.
            language_hints: Подсказки языков (по умолчанию из settings)
            client: Готовый клиент (для тестов)
            image_reader: Читатель файлов изображений
        """
        self.language_hints = language_hints if language_hints is not None else list(OCR_LANGUAGE_HINTS)
        self.image_reader = image_reader or ImageFileReader()

        if client is None:
            creds_path = credentials_path or GOOGLE_APPLICATION_CREDENTIALS
            if not creds_path or not Path(creds_path).exists():
                raise OCRProviderError(
                    message=f"Credentials файл не найден: {creds_path}",
                    component="GoogleVisionOCR"
                )

            # Устанавливаем credentials через переменную окружения
            os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(creds_path)
            client = vision.ImageAnnotatorClient()

        self.client = client

        logger.info("[GoogleVisionOCR] Клиент инициализирован")

    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRText:
        """
        Распознаёт текст на изображении.

        Raises:
            OCRResponseError: Если API вернул ошибку или запрос не выполнился
        """
        logger.debug(f"[GoogleVisionOCR] Распознавание: {source_file}")

        image = vision.Image(content=image_content)
        image_context = vision.ImageContext(language_hints=self.language_hints)

        try:
            response = self.client.document_text_detection(image=image, image_context=image_context)
        except Exception as e:
            raise OCRResponseError(
                message=f"Ошибка при распознавании текста: {source_file}",
                component="GoogleVisionOCR",
                original_error=e
            )

        if response.error.message:
            raise OCRResponseError(
                message=f"Google Vision API error: {response.error.message}",
                component="GoogleVisionOCR"
            )

        full_text = ""
        if response.full_text_annotation:
            full_text = response.full_text_annotation.text

        logger.debug(f"[GoogleVisionOCR] Распознано символов: {len(full_text)}")

        return RawOCRText(
            full_text=full_text,
            metadata=OCRMetadata(
                source_file=source_file,
                provider="google",
                processed_at=datetime.now().isoformat(),
                languages=list(self.language_hints),
            )
        )

    def recognize_from_file(self, image_path: Path) -> RawOCRText:
        image_path = Path(image_path)
        return self.recognize(self.image_reader.read(image_path), image_path.stem)
