"""Order models."""
from enum import Enum
from typing import List
from pydantic import BaseModel


class OrderStatus(str, Enum):
    """Order statuses. No transition order is enforced."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class PaymentStatus(str, Enum):
    """Payment statuses."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class PaymentMethod(str, Enum):
    """Accepted payment methods."""

    CARD = "card"
    UPI = "upi"
    WALLET = "wallet"

    def __str__(self) -> str:
        return self.value


REQUIRED_ADDRESS_FIELDS = ("full_name", "phone", "street", "city", "state", "zip_code")


class DeliveryAddress(BaseModel):
    """Delivery address captured at checkout."""

    full_name: str = ""
    phone: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def missing_fields(self) -> List[str]:
        """Names of required fields left blank."""
        return [field for field in REQUIRED_ADDRESS_FIELDS if not getattr(self, field).strip()]
