"""Shared base for domain entities"""

import uuid
from decimal import Decimal, ROUND_HALF_UP
from sqlmodel import SQLModel

MONEY_QUANTUM = Decimal("0.01")


class BaseModel(SQLModel):
    """Base class for all persisted entities"""
    pass


def generate_uuid() -> str:
    """Opaque string identifier for new records"""
    return str(uuid.uuid4())


def to_money(value) -> Decimal:
    """Normalize a numeric value to a two-digit (paise) Decimal"""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
