"""HTTP controller routing product requests to the CRUD handlers."""

from typing import Any, Optional

from fastapi import APIRouter, Request, Response

from product_service.handlers import ProductHandlers

router = APIRouter(prefix="/products", tags=["products"])


async def _build_event(request: Request, product_id: Optional[str] = None) -> dict[str, Any]:
    """Translate an HTTP request into a handler event."""
    raw_body = await request.body()
    return {
        "body": raw_body or None,
        "pathParameters": {"productId": product_id} if product_id is not None else None,
    }


def _to_response(result: dict[str, Any]) -> Response:
    return Response(
        content=result.get("body"),
        status_code=result["statusCode"],
        headers=result.get("headers"),
    )


def _handlers(request: Request) -> ProductHandlers:
    return request.app.state.handlers


@router.post("")
async def create_product(request: Request) -> Response:
    event = await _build_event(request)
    return _to_response(await _handlers(request).create_product(event))


@router.get("/{productId}")
async def get_product(productId: str, request: Request) -> Response:
    event = await _build_event(request, productId)
    return _to_response(await _handlers(request).get_product_by_id(event))


@router.put("/{productId}")
async def update_product(productId: str, request: Request) -> Response:
    event = await _build_event(request, productId)
    return _to_response(await _handlers(request).update_product(event))


@router.delete("/{productId}")
async def delete_product(productId: str, request: Request) -> Response:
    event = await _build_event(request, productId)
    return _to_response(await _handlers(request).delete_product(event))
