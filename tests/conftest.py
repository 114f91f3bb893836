import itertools
import pytest

from seller_api.backend.models import Classification, ProductDraft, UIVariant


def make_variant(local_id, selections, price, stock):
    return UIVariant(
        id=local_id,
        values=[{"propertyId": pid, "value": value} for pid, value in selections],
        price=price,
        stock=stock,
    )


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"pv-{next(counter)}"


@pytest.fixture
def color_size():
    return [
        Classification(propertyId="color", propertyName="Color", values=["Red", "Blue"]),
        Classification(propertyId="size", propertyName="Size", values=["S", "M"]),
    ]


@pytest.fixture
def color_size_variants():
    return [
        make_variant("v1", [("color", "Red"), ("size", "S")], 10, 5),
        make_variant("v2", [("color", "Red"), ("size", "M")], 12, 3),
        make_variant("v3", [("color", "Blue"), ("size", "S")], 10, 7),
    ]


@pytest.fixture
def draft(color_size, color_size_variants):
    return ProductDraft(
        name="  Basic Tee  ",
        description="Cotton t-shirt",
        categoryChildId="cat-1",
        images=["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"],
        weight=200,
        length=30,
        width=20,
        height=2,
        productInformations=[
            {"name": "Material", "value": "Cotton"},
            {"name": "Origin", "value": "   "},
        ],
        classifications=color_size,
        variants=color_size_variants,
        variantImages={"Red": "https://cdn.example.com/red.jpg", "Blue": None},
    )
