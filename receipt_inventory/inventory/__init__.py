"""
Домен Inventory: массовое добавление товаров из чека.
"""

from .committer import BulkCommitter
from .supabase_repository import SupabaseInventoryRepository

__all__ = [
    "BulkCommitter",
    "SupabaseInventoryRepository",
]
