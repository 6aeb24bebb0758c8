"""Enums for the Admin Service models."""

import enum


class PaymentStatus(str, enum.Enum):
    """Status vocabulary shared by supporter pledges and withdrawals."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class UserType(str, enum.Enum):
    CREATOR = "creator"
    SUPPORTER = "supporter"
