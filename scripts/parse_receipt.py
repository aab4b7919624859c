#!/usr/bin/env python3
"""
Точка входа: чек -> список товаров (-> инвентарь).

Использование:
    # Распарсить уже распознанный текст чека
    python scripts/parse_receipt.py path/to/receipt.txt

    # Распознать фото и распарсить
    python scripts/parse_receipt.py path/to/receipt.jpg --image --provider tesseract

    # Сохранить результат и добавить товары в инвентарь
    python scripts/parse_receipt.py receipt.jpg --image --output items.json --commit
"""

import sys
import argparse
import json
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import settings
from receipt_inventory.application import ReceiptInventoryFactory
from receipt_inventory.domain.exceptions import ReceiptInventoryError
from receipt_inventory.review import ReceiptDraft


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Receipt Inventory: чек -> товары")
    parser.add_argument("path", help="Путь к тексту чека (.txt) или фото (с --image)")
    parser.add_argument("--image", action="store_true", help="Вход - изображение, сначала OCR")
    parser.add_argument("--provider", choices=["tesseract", "google"], default=None,
                        help="OCR провайдер (по умолчанию из settings)")
    parser.add_argument("--locale", default=settings.DEFAULT_LOCALE, help="Локаль чека")
    parser.add_argument("--output", help="Сохранить результат в JSON файл")
    parser.add_argument("--commit", action="store_true", help="Добавить товары в инвентарь")
    return parser


def main(argv=None) -> int:
    """Главная функция запуска."""
    args = build_arg_parser().parse_args(argv)

    print("\n" + "=" * 60)
    print("  RECEIPT INVENTORY - Чек -> товары")
    print("=" * 60)

    input_path = Path(args.path)
    if not input_path.is_file():
        print(f"[ERROR] Файл не найден: {input_path}")
        return 1

    try:
        if args.image:
            service = ReceiptInventoryFactory.create_scan_service(args.locale, args.provider)
            result = service.scan_file(input_path)
            if not result.ok:
                print(f"[ERROR] {result.error}")
                return 1
            items, report = result.items, result.to_dict()
        else:
            parser = ReceiptInventoryFactory.create_parser(args.locale)
            parse_result = parser.parse_with_details(input_path.read_text(encoding="utf-8"))
            items, report = parse_result.items, parse_result.to_dict()
    except ReceiptInventoryError as e:
        print(f"[ERROR] {e}")
        return 1

    print(json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2))
    print(f"  [INFO]  Извлечено: {len(items)} товаров")

    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, ensure_ascii=False, indent=2)
        print(f"  [SAVED] Результат: {output_file}")

    if args.commit:
        try:
            settings.validate_config(require_ocr=False, require_backend=True)
            committer = ReceiptInventoryFactory.create_committer()
            created = committer.commit(ReceiptDraft(items).validate())
        except (ValueError, ReceiptInventoryError) as e:
            print(f"[ERROR] Коммит не выполнен: {e}")
            return 1
        print(f"  [SUCCESS] Добавлено в инвентарь: {created}")

    return 0


if __name__ == "__main__":
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=settings.LOG_LEVEL
    )

    sys.exit(main())
