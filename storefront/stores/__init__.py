"""In-memory stores. Each guards its collection with its own lock."""

from storefront.stores.catalog import CatalogStore
from storefront.stores.idempotency import IdempotencyLedger
from storefront.stores.orders import OrderStore
from storefront.stores.users import DEFAULT_USERS, CredentialStore

__all__ = [
    "DEFAULT_USERS",
    "CatalogStore",
    "CredentialStore",
    "IdempotencyLedger",
    "OrderStore",
]
