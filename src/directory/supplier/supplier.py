"""Supplier aggregate: a restaurant or shop selling through the marketplace."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, String, ValueObject

from directory.domain import directory


class SupplierStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@directory.value_object(part_of="Supplier")
class SupplierOwner:
    """The user account that registered the supplier."""

    email = String(max_length=254)
    first_name = String(max_length=100)
    last_name = String(max_length=100)


@directory.aggregate
class Supplier:
    business_name = String(required=True, max_length=255)
    delivery_fee = Float(min_value=0.0, default=0.0)
    owner = ValueObject(SupplierOwner)
    status = String(choices=SupplierStatus, default=SupplierStatus.PENDING.value)
    registered_at = DateTime()

    @classmethod
    def register(cls, business_name, email=None, first_name=None, last_name=None, delivery_fee=0.0):
        owner = SupplierOwner(email=email, first_name=first_name, last_name=last_name)
        return cls(
            business_name=business_name,
            delivery_fee=delivery_fee,
            owner=owner,
            status=SupplierStatus.PENDING.value,
            registered_at=datetime.now(UTC),
        )
