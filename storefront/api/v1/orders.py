"""Order endpoint: idempotent order placement for customers."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, Request

from storefront.api.v1.auth import AUTH_ERROR_RESPONSES, require_customer
from storefront.core.state import AppState, get_state
from storefront.models.user import Identity
from storefront.schemas.error import ErrorResponse
from storefront.schemas.order import OrderCreate, OrderOut

router = APIRouter()


async def _read_order_fields(request: Request) -> dict[str, Any]:
    """
    Return the JSON object sent as the order body, or {} for anything else.

    The body is read here rather than by a pydantic parameter so that a
    malformed body reaches the order service, which claims the
    Idempotency-Key before it validates the order.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


@router.post(
    "",
    response_model=OrderOut,
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Missing Idempotency-Key or invalid order"},
        409: {"model": ErrorResponse, "description": "Idempotency-Key already used"},
        **AUTH_ERROR_RESPONSES,
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": OrderCreate.model_json_schema()}},
        }
    },
)
async def create_order(
    request: Request,
    customer: Annotated[Identity, Depends(require_customer)],
    state: Annotated[AppState, Depends(get_state)],
    idempotency_key: Annotated[str | None, Header(alias="Idempotency-Key")] = None,
) -> OrderOut:
    """
    Place an order for the authenticated user.

    Send a unique `Idempotency-Key` header per logical order. Any later request
    with the same key is rejected with 409, so clients can retry safely. The
    order owner is taken from the token; the body cannot set it.
    """
    fields = await _read_order_fields(request)
    order = state.order_service.place_order(
        customer,
        idempotency_key,
        fields.get("productId"),
        fields.get("quantity"),
    )
    return OrderOut.from_order(order)
