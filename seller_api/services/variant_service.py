import logging
import uuid
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from seller_api.backend.models import (
    ACTIVE_STATUS,
    Classification,
    ProductVariant,
    PropertyValue,
    UIVariant,
    VariantCreateDto,
)

logger = logging.getLogger(__name__)

# (propertyId, value)
PropertyKey = Tuple[str, str]

# Only the first classification level carries images
IMAGE_LEVEL = 0


class MissingPropertyValueError(LookupError):
    """A variant selects a property/value pair that no classification declares."""

    def __init__(self, property_id: str, value: str):
        self.property_id = property_id
        self.value = value
        super().__init__(f"PropertyValue not found for key: {property_id}:{value}")


def new_property_value_id() -> str:
    return str(uuid.uuid4())


def intern_property_values(
    classifications: Iterable[Classification],
    variant_images: Optional[Mapping[str, Optional[str]]] = None,
    id_factory: Callable[[], str] = new_property_value_id,
) -> Dict[PropertyKey, PropertyValue]:
    """
    Collapse every (propertyId, value) pair declared by the classifications
    into a single PropertyValue with a fresh id.

    Classifications are walked in declaration order, so their position is
    their level. The first occurrence of a pair wins; later duplicates reuse
    it. Only level 0 values look up an image in `variant_images`.

    Returns an insertion-ordered dict keyed by (propertyId, value).
    """
    variant_images = variant_images or {}
    property_values: Dict[PropertyKey, PropertyValue] = {}

    for level, classification in enumerate(classifications):
        for value in classification.values:
            key = (classification.propertyId, value)
            if key in property_values:
                continue

            url_image = variant_images.get(value) if level == IMAGE_LEVEL else None

            property_values[key] = PropertyValue(
                propertyValueId=id_factory(),
                value=value,
                propertyProductId=classification.propertyId,
                level=level,
                urlImage=url_image or None,
            )

    return property_values


def link_variants(
    variants: Iterable[UIVariant],
    property_values: Mapping[PropertyKey, PropertyValue],
) -> List[ProductVariant]:
    """
    Rewrite each variant's raw selections into the ids of the interned
    property values. Raises MissingPropertyValueError on the first
    selection that has no interned value; nothing is returned in that case.
    """
    linked: List[ProductVariant] = []

    for variant in variants:
        ids: List[str] = []
        for selection in variant.values:
            property_value = property_values.get((selection.propertyId, selection.value))
            if property_value is None:
                logger.error(
                    f"Variant {variant.id} selects {selection.propertyId}:{selection.value} "
                    f"which is not declared by any classification"
                )
                raise MissingPropertyValueError(selection.propertyId, selection.value)
            ids.append(property_value.propertyValueId)

        linked.append(ProductVariant(
            variantCreateDto=VariantCreateDto(
                price=variant.price,
                quantity=variant.stock,
                status=ACTIVE_STATUS,
            ),
            propertyValueIds=ids,
        ))

    return linked


def transform_variants_for_api(
    variants: Iterable[UIVariant],
    classifications: Iterable[Classification],
    variant_images: Optional[Mapping[str, Optional[str]]] = None,
    id_factory: Callable[[], str] = new_property_value_id,
) -> Tuple[List[PropertyValue], List[ProductVariant]]:
    property_values = intern_property_values(classifications, variant_images, id_factory)
    linked = link_variants(variants, property_values)

    logger.debug(f"Interned {len(property_values)} property values for {len(linked)} variants")
    return list(property_values.values()), linked
