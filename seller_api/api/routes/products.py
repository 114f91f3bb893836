import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from seller_api.backend.client import BackendError
from seller_api.backend.create_product import get_backend_product
from seller_api.backend.models import ProductDraft
from seller_api.services.product_service import (
    ProductValidationError,
    build_create_product_payload,
    submit_product,
)
from seller_api.services.variant_service import MissingPropertyValueError

logger = logging.getLogger(__name__)

router = APIRouter()

VARIANTS_OUT_OF_SYNC = "Something went wrong, please re-check your variants"


def _validation_error(e: ProductValidationError) -> JSONResponse:
    return JSONResponse({"ok": False, "errors": e.errors}, status_code=422)


def _variants_out_of_sync(e: MissingPropertyValueError) -> JSONResponse:
    logger.error(f"Variant/classification mismatch: {e}")
    return JSONResponse({"ok": False, "error": VARIANTS_OUT_OF_SYNC}, status_code=409)


def _backend_error(e: BackendError) -> JSONResponse:
    return JSONResponse({"ok": False, "error": e.message, "status": e.status}, status_code=502)


@router.post("/preview")
async def preview_product(draft: ProductDraft):
    """Assemble the create-product payload without sending it."""
    try:
        payload = build_create_product_payload(draft)
    except ProductValidationError as e:
        return _validation_error(e)
    except MissingPropertyValueError as e:
        return _variants_out_of_sync(e)
    return payload.model_dump(mode="json")


@router.post("/")
async def create_product(draft: ProductDraft):
    try:
        result = await submit_product(draft)
    except ProductValidationError as e:
        return _validation_error(e)
    except MissingPropertyValueError as e:
        return _variants_out_of_sync(e)
    except BackendError as e:
        return _backend_error(e)
    return {"ok": True, "result": result}


@router.get("/{product_id}")
async def get_product(product_id: str):
    try:
        return await get_backend_product(product_id)
    except BackendError as e:
        return _backend_error(e)
