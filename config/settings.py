"""
Настройки проекта Receipt Inventory.

Все значения можно переопределить через переменные окружения.
Для коммита в инвентарь нужны SUPABASE_URL, SUPABASE_KEY и HOUSEHOLD_ID.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# OCR
# =============================================================================
# Поддерживаемые форматы изображений
SUPPORTED_IMAGE_FORMATS = [".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff"]

# Провайдер по умолчанию: "tesseract" или "google"
OCR_PROVIDER = os.getenv("OCR_PROVIDER", "tesseract")

# Языки Tesseract (македонский + английский для чеков)
TESSERACT_LANGUAGES = os.getenv("TESSERACT_LANGUAGES", "mkd+eng")

# Путь к бинарнику tesseract (если не в PATH)
TESSERACT_CMD = os.getenv("TESSERACT_CMD", "")

# Язык распознавания (подсказка для Google Vision)
OCR_LANGUAGE_HINTS = ["mk", "en"]

# Путь к JSON-файлу с ключом сервисного аккаунта Google Cloud
GOOGLE_APPLICATION_CREDENTIALS = os.getenv(
    "GOOGLE_APPLICATION_CREDENTIALS",
    str(PROJECT_ROOT / "config" / "google_credentials.json")
)

# =============================================================================
# НАСТРОЙКИ ЛОКАЛИ
# =============================================================================
# Локаль чеков по умолчанию
DEFAULT_LOCALE = os.getenv("RECEIPT_LOCALE", "mk_MK")

# Фолбэк-локаль: используется если запрошенной локали нет
FALLBACK_LOCALE = "en_US"

# =============================================================================
# НАСТРОЙКИ ИНВЕНТАРЯ
# =============================================================================
# Категория для товаров из чека (пользователь может поменять позже)
DEFAULT_CATEGORY = "food"

# Минимальный остаток = доля от купленного количества
MIN_STOCK_RATIO = 0.2

# =============================================================================
# BACKEND (Supabase / PostgREST)
# =============================================================================
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
SUPABASE_PRODUCTS_TABLE = os.getenv("SUPABASE_PRODUCTS_TABLE", "products")
HOUSEHOLD_ID = os.getenv("HOUSEHOLD_ID", "")

# Таймаут HTTP запросов (секунды)
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(require_ocr: bool = True, require_backend: bool = True):
    """
    Проверяет корректность конфигурации.

    Args:
        require_ocr: Проверять настройки OCR провайдера
        require_backend: Проверять настройки backend-а инвентаря
    """
    errors = []

    if require_ocr:
        if OCR_PROVIDER not in ("tesseract", "google"):
            errors.append(f"Неизвестный OCR_PROVIDER: {OCR_PROVIDER} (ожидается tesseract или google)")

        if OCR_PROVIDER == "google" and not Path(GOOGLE_APPLICATION_CREDENTIALS).exists():
            errors.append(
                f"Файл credentials не найден: {GOOGLE_APPLICATION_CREDENTIALS}"
            )

    if require_backend:
        if not SUPABASE_URL:
            errors.append("SUPABASE_URL не указан!")
        if not SUPABASE_KEY:
            errors.append("SUPABASE_KEY не указан!")
        if not HOUSEHOLD_ID:
            errors.append("HOUSEHOLD_ID не указан!")

    if errors:
        raise ValueError("\n".join(errors))

    return True
