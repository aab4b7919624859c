"""
Репозиторий инвентаря поверх Supabase (PostgREST).

Массовое создание продуктов одним POST с JSON-массивом.
Атомарность пакета - ответственность backend-а.
"""

from typing import Any, List, Optional

import requests
from loguru import logger

from config.settings import HTTP_TIMEOUT, SUPABASE_PRODUCTS_TABLE
from contracts.d2_parsing_dto import InventoryRecordDTO
from ..domain.interfaces import IInventoryRepository
from ..domain.exceptions import InventoryRepositoryError


class SupabaseInventoryRepository(IInventoryRepository):
    """Thin client для таблицы продуктов: только bulk insert."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = SUPABASE_PRODUCTS_TABLE,
        timeout: int = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url or not api_key:
            raise InventoryRepositoryError(
                message="SUPABASE_URL и SUPABASE_KEY обязательны",
                component="SupabaseInventoryRepository"
            )
        self.base = base_url.rstrip("/")
        self.table = table
        self.timeout = int(timeout)
        self.s = session or requests.Session()
        self.s.headers.update({
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Prefer": "return=representation",
        })

    def _url(self) -> str:
        return f"{self.base}/rest/v1/{self.table}"

    def bulk_create(self, records: List[InventoryRecordDTO]) -> int:
        if not records:
            return 0

        payload = [record.to_backend() for record in records]
        logger.info(f"[SupabaseInventoryRepository] POST {len(payload)} записей в {self.table}")

        try:
            r = self.s.post(self._url(), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise InventoryRepositoryError(
                message=f"Backend недоступен: {e}",
                component="SupabaseInventoryRepository",
                original_error=e
            )

        if not r.ok:
            raise InventoryRepositoryError(
                message=f"Failed to create products: {self._error_message(r)}",
                component="SupabaseInventoryRepository"
            )

        body = self._json(r)
        if isinstance(body, list):
            return len(body)
        # Без return=representation backend отвечает 201 с пустым телом
        return len(payload)

    @staticmethod
    def _json(r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError:
            return None

    @classmethod
    def _error_message(cls, r: requests.Response) -> str:
        body = cls._json(r)
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {r.status_code}: {r.text[:200]}"
