"""
Storefront data model.

Product mirrors the backend's JSON shape; everything else is derived on our
side (cart lines, the order payload, the UI flags).
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SIZES = ["S", "M", "L"]

class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str]
    title: str
    description: Optional[str] = None
    price: float = Field(..., ge=0, description="Price in dollars")
    image: Optional[str] = None
    sizes: List[str] = Field(default_factory=lambda: list(DEFAULT_SIZES))

    @field_validator("sizes", mode="before")
    @classmethod
    def _default_sizes(cls, v):
        # backend may send null or [] for "no size info"
        return v or list(DEFAULT_SIZES)

class CartLine(BaseModel):
    """Snapshot of a product at the moment it was added. Quantity is always 1."""
    model_config = ConfigDict(frozen=True)

    product_id: Union[int, str]
    title: str
    price: float
    image: Optional[str] = None
    sizes: List[str] = Field(default_factory=list)

    @classmethod
    def from_product(cls, p: Product) -> "CartLine":
        return cls(product_id=p.id, title=p.title, price=p.price,
                   image=p.image, sizes=list(p.sizes))

class OrderItem(BaseModel):
    product_id: Union[int, str]
    title: str
    price: float
    quantity: int = 1
    size: Optional[str] = None
    image: Optional[str] = None

class Customer(BaseModel):
    name: str
    email: str
    address: str

GUEST = Customer(name="Guest", email="guest@example.com", address="N/A")

class OrderRequest(BaseModel):
    items: List[OrderItem]
    customer: Customer
    total: float
    status: Literal["pending"] = "pending"

class UIState(BaseModel):
    loading: bool = False
    error: Optional[str] = None

class Notice(BaseModel):
    kind: Literal["success", "failure"]
    message: str
