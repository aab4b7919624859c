"""
Домен Extraction: фото чека -> сырой текст.

OCR - внешний черный ящик: recognize(image) -> text.
Граница домена: contracts.RawOCRText
"""

from .image_file_reader import ImageFileReader
from .tesseract_ocr import TesseractOCR
from .google_vision_ocr import GoogleVisionOCR

__all__ = [
    "ImageFileReader",
    "TesseractOCR",
    "GoogleVisionOCR",
]
