"""Product catalog endpoints: public listing, admin-only creation."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.api.v1.auth import AUTH_ERROR_RESPONSES, require_admin
from storefront.core.state import AppState, get_state
from storefront.models.user import Identity
from storefront.schemas.error import ErrorResponse
from storefront.schemas.product import ProductCreate, ProductOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ProductOut])
def list_products(
    state: Annotated[AppState, Depends(get_state)],
) -> list[ProductOut]:
    """Return every product in creation order."""
    return [ProductOut.from_product(p) for p in state.catalog.list()]


@router.post(
    "",
    response_model=ProductOut,
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Missing name or non-positive price"},
        **AUTH_ERROR_RESPONSES,
    },
)
def create_product(
    body: ProductCreate,
    admin: Annotated[Identity, Depends(require_admin)],
    state: Annotated[AppState, Depends(get_state)],
) -> ProductOut:
    """Add a product to the catalog (admin only). It is listed from this response on."""
    product = state.catalog.create(body.name, body.price)
    logger.info(
        "Product created",
        extra={"product_id": product.id, "user_id": admin.subject_id},
    )
    return ProductOut.from_product(product)
