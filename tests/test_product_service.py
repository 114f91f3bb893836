import asyncio
import pytest

from seller_api.backend.models import Classification, ProductDraft
from seller_api.services import product_service
from seller_api.services.product_service import (
    ProductValidationError,
    build_create_product_payload,
    validate_product_draft,
)
from seller_api.services.variant_service import MissingPropertyValueError
from conftest import make_variant


def simple_draft(**overrides):
    data = dict(
        name="Ceramic mug",
        categoryChildId="cat-9",
        images=["https://cdn.example.com/mug.jpg"],
        price=99,
        stock=4,
    )
    data.update(overrides)
    return ProductDraft(**data)


def test_classified_payload(draft, id_factory):
    payload = build_create_product_payload(draft, id_factory)

    assert payload.product.name == "Basic Tee"
    assert payload.product.classify == 2
    assert [(i.urlImage, i.sortOrder) for i in payload.product.images] == [
        ("https://cdn.example.com/a.jpg", 0),
        ("https://cdn.example.com/b.jpg", 1),
    ]
    assert [i.name for i in payload.product.productInformations] == ["Material"]

    assert [pv.propertyValueId for pv in payload.propertyValues] == ["pv-1", "pv-2", "pv-3", "pv-4"]
    images = {pv.value: pv.urlImage for pv in payload.propertyValues}
    assert images["Red"] == "https://cdn.example.com/red.jpg"
    assert images["Blue"] is None

    assert [v.propertyValueIds for v in payload.variants] == [
        ["pv-1", "pv-3"], ["pv-1", "pv-4"], ["pv-2", "pv-3"],
    ]


def test_simple_product_payload():
    payload = build_create_product_payload(simple_draft())

    assert payload.propertyValues is None
    assert payload.product.classify == 0
    assert len(payload.variants) == 1
    variant = payload.variants[0]
    assert variant.propertyValueIds is None
    assert (variant.variantCreateDto.price, variant.variantCreateDto.quantity, variant.variantCreateDto.status) == (99, 4, 1)


def test_simple_product_serializes_null_property_values():
    data = build_create_product_payload(simple_draft()).model_dump(mode="json")

    assert data["propertyValues"] is None
    assert data["variants"] == [
        {"variantCreateDto": {"price": 99.0, "quantity": 4, "status": 1}, "propertyValueIds": None}
    ]


def test_validation_messages_for_empty_draft():
    errors = validate_product_draft(ProductDraft(), max_levels=2)

    assert errors == [
        "Product name is required",
        "Add at least one product image",
        "Select a category",
        "Enter a product price",
        "Enter a product stock quantity",
    ]


def test_pending_image_upload_is_rejected():
    errors = validate_product_draft(simple_draft(images=["https://cdn.example.com/a.jpg", None]))

    assert errors == ["Wait for all product images to finish uploading"]


def test_too_many_classification_levels(draft):
    draft.classifications.append(Classification(propertyId="style", values=["Slim"]))

    with pytest.raises(ProductValidationError) as exc:
        build_create_product_payload(draft, max_levels=2)

    assert exc.value.errors == ["At most 2 classification levels are supported"]


def test_classified_product_needs_variants(color_size):
    errors = validate_product_draft(simple_draft(classifications=color_size))

    assert errors == ["Add at least one product variant"]


def test_variant_price_must_be_positive(color_size):
    variants = [make_variant("v1", [("color", "Red"), ("size", "S")], 0, 1)]

    errors = validate_product_draft(simple_draft(classifications=color_size, variants=variants))

    assert errors == ["Every variant needs a price above 0"]


def test_variant_selections_out_of_declaration_order_are_rejected(draft):
    draft.variants.append(make_variant("swapped", [("size", "S"), ("color", "Red")], 10, 1))

    with pytest.raises(ProductValidationError) as exc:
        build_create_product_payload(draft)

    assert exc.value.errors == ["Every variant must pick one value per classification"]


def test_variant_missing_a_classification_is_rejected(color_size):
    variants = [make_variant("v1", [("color", "Red")], 10, 1)]

    errors = validate_product_draft(simple_draft(classifications=color_size, variants=variants))

    assert errors == ["Every variant must pick one value per classification"]


def test_variant_with_extra_selection_is_rejected(color_size):
    variants = [make_variant("v1", [("color", "Red"), ("size", "S"), ("size", "M")], 10, 1)]

    errors = validate_product_draft(simple_draft(classifications=color_size, variants=variants))

    assert errors == ["Every variant must pick one value per classification"]


def test_stale_variant_aborts_payload(draft):
    draft.variants.append(make_variant("stale", [("color", "Green"), ("size", "S")], 10, 1))

    with pytest.raises(MissingPropertyValueError):
        build_create_product_payload(draft)


def test_submit_product_sends_assembled_payload(monkeypatch):
    sent = {}

    async def fake_create(payload, backend_client=None):
        sent["payload"] = payload
        sent["client"] = backend_client
        return {"error": None, "data": {"id": "p-1"}}

    monkeypatch.setattr(product_service, "create_backend_product", fake_create)

    result = asyncio.run(product_service.submit_product(simple_draft(), "client"))

    assert result == {"error": None, "data": {"id": "p-1"}}
    assert sent["client"] == "client"
    assert sent["payload"].product.name == "Ceramic mug"


def test_submit_product_validates_before_sending(monkeypatch):
    async def fake_create(payload, backend_client=None):
        raise AssertionError("should not be called")

    monkeypatch.setattr(product_service, "create_backend_product", fake_create)

    with pytest.raises(ProductValidationError):
        asyncio.run(product_service.submit_product(ProductDraft()))
