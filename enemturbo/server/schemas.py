from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..core.checkout import Purchase


class PurchaseRequest(BaseModel):
    """Request body for ``POST /create-checkout-session``."""

    productName: str = Field(..., min_length=1, examples=["ENEM Turbo"])
    price: Decimal = Field(..., gt=0, decimal_places=2, examples=["99.90"])
    quantity: int = Field(default=1, ge=1)
    email: EmailStr = Field(..., examples=["student@example.com"])

    @field_validator("productName")
    @classmethod
    def _strip_product_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("productName must not be blank")
        return stripped

    def to_purchase(self) -> Purchase:
        return Purchase(
            product_name=self.productName,
            unit_price=self.price,
            quantity=self.quantity,
            email=self.email,
        )


class CheckoutSessionResponse(BaseModel):
    id: str
    url: str


class ErrorResponse(BaseModel):
    error: str
