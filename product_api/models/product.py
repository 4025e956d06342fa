"""Product model for API payloads and stored documents."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(BaseModel):
    """Product record as exchanged over HTTP and stored in the document store.

    Field aliases are the wire and document names (``qty``, ``dateAdded``, ...).
    Both aliases and attribute names are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    category: Optional[str] = None
    quantity: int = Field(default=0, alias="qty")
    date_added: datetime = Field(default_factory=_utcnow, alias="dateAdded")
    is_active: bool = Field(default=True, alias="isActive")  # stored, never interpreted
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @field_validator("date_added")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("price", when_used="json")
    def _serialize_price(self, price: Decimal) -> float:
        return float(price)

    def to_document(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible document keyed by the wire names.

        The price is stored as a decimal string so it reads back exactly.
        """
        document = self.model_dump(mode="json", by_alias=True)
        document["price"] = str(self.price)
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Product":
        """Build a Product from a stored document, dropping system fields."""
        return cls.model_validate(document)
