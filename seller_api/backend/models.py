from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

ACTIVE_STATUS = 1


# ----------------------------------------------------------------------
# Seller input (what the product form submits)
# ----------------------------------------------------------------------

class Classification(BaseModel):
    """One selectable property of a product, e.g. "Color" -> [Red, Blue].

    Its level is its position in the submitted list: the first group is
    level 0 and is the only one allowed to carry images.
    """
    id: Optional[str] = None
    propertyId: str
    propertyName: Optional[str] = None
    values: List[str] = []


class VariantSelection(BaseModel):
    propertyId: str
    value: str


class UIVariant(BaseModel):
    id: str
    values: List[VariantSelection] = []
    price: float = Field(ge=0)
    stock: int = Field(ge=0)


class ProductInformation(BaseModel):
    name: str
    value: str = ""


class ProductDraft(BaseModel):
    name: str = ""
    description: str = ""
    categoryChildId: Optional[str] = None
    # already uploaded urls, cover image first; None while still uploading
    images: List[Optional[str]] = []

    weight: float = 0
    length: float = 0
    width: float = 0
    height: float = 0
    productInformations: List[ProductInformation] = []

    classifications: List[Classification] = []
    variants: List[UIVariant] = []
    variantImages: Dict[str, Optional[str]] = {}

    # only used when there are no classifications
    price: float = 0
    stock: int = 0


# ----------------------------------------------------------------------
# Backend payload (what the product-creation endpoint expects)
# ----------------------------------------------------------------------

class PropertyValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    propertyValueId: str
    value: str
    propertyProductId: str
    level: int
    urlImage: Optional[str] = None


class VariantCreateDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float
    quantity: int
    status: int = ACTIVE_STATUS


class ProductVariant(BaseModel):
    model_config = ConfigDict(frozen=True)

    variantCreateDto: VariantCreateDto
    # None for a product without classifications
    propertyValueIds: Optional[List[str]] = None


class ProductImage(BaseModel):
    urlImage: str
    sortOrder: int


class ProductPayload(BaseModel):
    name: str
    description: str
    categoryChildId: str
    weight: float
    length: float
    width: float
    height: float
    classify: int
    images: List[ProductImage] = []
    productInformations: List[ProductInformation] = []


class CreateProductPayload(BaseModel):
    product: ProductPayload
    propertyValues: Optional[List[PropertyValue]] = None
    variants: List[ProductVariant]
