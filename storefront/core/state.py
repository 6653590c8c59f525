"""Per-application container for stores and services, reached via dependencies."""

from dataclasses import dataclass

from fastapi import Request

from storefront.core.config import Settings
from storefront.services.orders import OrderService
from storefront.stores.catalog import CatalogStore
from storefront.stores.idempotency import IdempotencyLedger
from storefront.stores.orders import OrderStore
from storefront.stores.users import CredentialStore


@dataclass
class AppState:
    settings: Settings
    users: CredentialStore
    catalog: CatalogStore
    ledger: IdempotencyLedger
    orders: OrderStore
    order_service: OrderService

    @classmethod
    def build(
        cls,
        settings: Settings,
        users: CredentialStore | None = None,
    ) -> "AppState":
        """Create fresh, empty stores wired to each other."""
        ledger = IdempotencyLedger()
        orders = OrderStore()
        return cls(
            settings=settings,
            users=users if users is not None else CredentialStore(),
            catalog=CatalogStore(),
            ledger=ledger,
            orders=orders,
            order_service=OrderService(
                ledger,
                orders,
                consume_key_on_invalid=settings.IDEMPOTENCY_CONSUME_ON_INVALID,
            ),
        )


def get_state(request: Request) -> AppState:
    """Dependency returning the state of the application serving this request."""
    return request.app.state.storefront


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was created with."""
    return get_state(request).settings
