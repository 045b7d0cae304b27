"""Product models for request validation and store representation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator

PRICE_DECIMAL_PLACES = 2

# Largest integer a JSON number (IEEE-754 double) holds exactly
MAX_SAFE_INTEGER = 2**53 - 1

# Stored attribute names, in item order
ITEM_ATTRIBUTES = (
    "ProductId",
    "Name",
    "Description",
    "Price",
    "Category",
    "Stock",
    "CreatedAt",
    "UpdatedAt",
)


def whole_number(value: Union[int, float]) -> Union[int, float]:
    """Return integral floats as int so 1.0 round-trips as 1."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ProductInput(BaseModel):
    """Mutable product fields accepted on create and update."""

    name: StrictStr = Field(min_length=3, max_length=100)
    description: Optional[StrictStr] = Field(default=None, min_length=1, max_length=500)
    price: float = Field(strict=True, gt=0, allow_inf_nan=False)
    category: StrictStr = Field(min_length=1)
    stock: StrictInt = Field(ge=0, le=MAX_SAFE_INTEGER)

    @field_validator("price")
    @classmethod
    def check_precision(cls, value: float) -> Union[int, float]:
        exponent = Decimal(str(value)).as_tuple().exponent
        if isinstance(exponent, int) and exponent < -PRICE_DECIMAL_PLACES:
            raise ValueError(f"must have no more than {PRICE_DECIMAL_PLACES} decimal places")
        return whole_number(value)

    @field_validator("stock", mode="before")
    @classmethod
    def integral_float_stock(cls, value: Any) -> Any:
        # JSON 5.0 is the integer 5; 5.5 still fails the strict int check
        if isinstance(value, float):
            return whole_number(value)
        return value

    def to_attributes(self) -> dict[str, Any]:
        """Map the mutable fields to their stored attribute names."""
        return {
            "Name": self.name,
            "Description": self.description,
            "Price": self.price,
            "Category": self.category,
            "Stock": self.stock,
        }


@dataclass(frozen=True)
class Product:
    """A stored product record."""

    product_id: str
    name: str
    description: Optional[str]
    price: float
    category: str
    stock: int
    created_at: str  # ISO-8601 UTC, set once
    updated_at: str  # ISO-8601 UTC, refreshed on every update

    @classmethod
    def create(cls, product_id: str, data: ProductInput, timestamp: str) -> "Product":
        return cls(
            product_id=product_id,
            name=data.name,
            description=data.description,
            price=data.price,
            category=data.category,
            stock=data.stock,
            created_at=timestamp,
            updated_at=timestamp,
        )

    def to_item(self) -> dict[str, Any]:
        """Serialize to the stored item shape."""
        return {
            "ProductId": self.product_id,
            "Name": self.name,
            "Description": self.description,
            "Price": self.price,
            "Category": self.category,
            "Stock": self.stock,
            "CreatedAt": self.created_at,
            "UpdatedAt": self.updated_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Product":
        """Build a Product from a stored item, ignoring store-internal fields."""
        return cls(
            product_id=item["ProductId"],
            name=item["Name"],
            description=item.get("Description"),
            price=whole_number(item["Price"]),
            category=item["Category"],
            stock=item["Stock"],
            created_at=item["CreatedAt"],
            updated_at=item["UpdatedAt"],
        )
