import logging
from typing import Callable, List, Optional

from seller_api.backend.create_product import create_backend_product
from seller_api.backend.models import (
    ACTIVE_STATUS,
    CreateProductPayload,
    ProductDraft,
    ProductImage,
    ProductPayload,
    ProductVariant,
    VariantCreateDto,
)
from seller_api.config import settings
from seller_api.services.variant_service import (
    new_property_value_id,
    transform_variants_for_api,
)

logger = logging.getLogger(__name__)


class ProductValidationError(ValueError):
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def validate_product_draft(draft: ProductDraft, max_levels: Optional[int] = None) -> List[str]:
    """Return the list of problems with a draft, empty if it can be submitted."""
    if max_levels is None:
        max_levels = settings.MAX_CLASSIFICATION_LEVELS

    errors: List[str] = []

    if not draft.name.strip():
        errors.append("Product name is required")

    if not draft.images:
        errors.append("Add at least one product image")
    elif any(not url for url in draft.images):
        errors.append("Wait for all product images to finish uploading")

    if not draft.categoryChildId:
        errors.append("Select a category")

    if len(draft.classifications) > max_levels:
        errors.append(f"At most {max_levels} classification levels are supported")

    if not draft.classifications:
        if draft.price <= 0:
            errors.append("Enter a product price")
        if draft.stock <= 0:
            errors.append("Enter a product stock quantity")
    elif not draft.variants:
        errors.append("Add at least one product variant")
    else:
        if any(v.price <= 0 for v in draft.variants):
            errors.append("Every variant needs a price above 0")
        # one selection per classification, in declaration order
        declared = [c.propertyId for c in draft.classifications]
        if any([s.propertyId for s in v.values] != declared for v in draft.variants):
            errors.append("Every variant must pick one value per classification")

    return errors


def build_create_product_payload(
    draft: ProductDraft,
    id_factory: Callable[[], str] = new_property_value_id,
    max_levels: Optional[int] = None,
) -> CreateProductPayload:
    errors = validate_product_draft(draft, max_levels)
    if errors:
        raise ProductValidationError(errors)

    # 1) Variants: a product without classifications is sold as a single variant
    if not draft.classifications:
        property_values = None
        variants = [ProductVariant(
            variantCreateDto=VariantCreateDto(
                price=draft.price,
                quantity=draft.stock,
                status=ACTIVE_STATUS,
            ),
            propertyValueIds=None,
        )]
    else:
        # images that are still uploading are not sent
        variant_images = {k: url for k, url in draft.variantImages.items() if url}
        property_values, variants = transform_variants_for_api(
            draft.variants,
            draft.classifications,
            variant_images,
            id_factory,
        )

    # 2) Images keep the seller's order, index 0 is the cover
    images = [
        ProductImage(urlImage=url, sortOrder=index)
        for index, url in enumerate(draft.images)
    ]

    # 3) Product metadata
    product = ProductPayload(
        name=draft.name.strip(),
        description=draft.description,
        categoryChildId=draft.categoryChildId,
        weight=draft.weight,
        length=draft.length,
        width=draft.width,
        height=draft.height,
        classify=len(draft.classifications),
        images=images,
        productInformations=[
            info for info in draft.productInformations if info.value.strip()
        ],
    )

    return CreateProductPayload(
        product=product,
        propertyValues=property_values,
        variants=variants,
    )


async def submit_product(draft: ProductDraft, backend_client=None) -> dict:
    payload = build_create_product_payload(draft)
    logger.info(
        f"▶ Creating product '{payload.product.name}' "
        f"({payload.product.classify} levels, {len(payload.variants)} variants)"
    )
    return await create_backend_product(payload, backend_client)
