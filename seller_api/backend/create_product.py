import json
import logging
import aiohttp
from seller_api.backend.client import BackendClient
from seller_api.backend.models import CreateProductPayload

logger = logging.getLogger(__name__)

CREATE_PRODUCT_ENDPOINT = "shop/product"

# Multipart part name -> payload field, in the order the backend reads them
FORM_PARTS = ("product", "propertyValues", "variants")


def build_form_parts(payload: CreateProductPayload) -> dict[str, str]:
    """
    The product endpoint takes a multipart body where every part is a
    JSON document:
      product        -> product metadata, images, informations
      propertyValues -> interned property values (null for a simple product)
      variants       -> variants referencing propertyValueIds
    """
    data = payload.model_dump(mode="json")
    return {name: json.dumps(data[name], ensure_ascii=False) for name in FORM_PARTS}


def build_form(payload: CreateProductPayload) -> aiohttp.FormData:
    form = aiohttp.FormData()
    for name, body in build_form_parts(payload).items():
        form.add_field(name, body, content_type="application/json")
    return form


async def create_backend_product(payload: CreateProductPayload, backend_client=None) -> dict:
    if backend_client is None:
        backend_client = BackendClient()

    res = await backend_client.post_form(CREATE_PRODUCT_ENDPOINT, build_form(payload))

    data = (res or {}).get("data") if isinstance(res, dict) else None
    product_id = data.get("id") if isinstance(data, dict) else None
    logger.info(f"✔ Created product '{payload.product.name}' -> {product_id}")
    return res


async def get_backend_product(product_id: str, backend_client=None) -> dict:
    if backend_client is None:
        backend_client = BackendClient()
    return await backend_client.get(f"{CREATE_PRODUCT_ENDPOINT}/{product_id}")
