"""
Image File Reader для OCR.

Чтение и проверка файла изображения перед отправкой в OCR.
"""

from io import BytesIO
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, UnidentifiedImageError
from loguru import logger

from config.settings import SUPPORTED_IMAGE_FORMATS
from ..domain.exceptions import ImageNotFoundError, ImageDecodingError


class ImageFileReader:
    """
    Читает изображение из файла и проверяет, что оно декодируется.

    ЦКП: исходные байты файла.
    """

    def __init__(self, supported_formats: Optional[Iterable[str]] = None):
        self.supported_formats = [fmt.lower() for fmt in (supported_formats or SUPPORTED_IMAGE_FORMATS)]

    def read(self, image_path: Path) -> bytes:
        """
        Args:
            image_path: Путь к файлу изображения

        Returns:
            Байты файла

        Raises:
            ImageNotFoundError: Если файл не найден
            ImageDecodingError: Если формат не поддерживается или файл не декодируется
        """
        image_path = Path(image_path)
        if not image_path.exists():
            raise ImageNotFoundError(
                message=f"Image not found: {image_path}",
                component="ImageFileReader"
            )

        if image_path.suffix.lower() not in self.supported_formats:
            raise ImageDecodingError(
                message=f"Неподдерживаемый формат {image_path.suffix}: {image_path.name}",
                component="ImageFileReader"
            )

        try:
            with open(image_path, "rb") as f:
                raw_bytes = f.read()
        except OSError as e:
            raise ImageNotFoundError(
                message=f"Не удалось прочитать файл: {image_path}",
                component="ImageFileReader",
                original_error=e
            )

        try:
            with Image.open(BytesIO(raw_bytes)) as image:
                image.verify()
                size = image.size
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise ImageDecodingError(
                message=f"Failed to decode image: {image_path}",
                component="ImageFileReader",
                original_error=e
            )

        logger.debug(f"[ImageFileReader] Изображение прочитано: {image_path.name}, размер: {size}")

        return raw_bytes
