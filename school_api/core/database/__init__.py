"""Core database package: declarative base, projections and request transactions."""

from __future__ import annotations

from .base import NAMING_CONVENTION, Base, IntegerPKMixin
from .exceptions import DatabaseError, TransactionBeginError
from .projection import ColumnProjection
from .transaction import RequestTransaction, request_transaction

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "ColumnProjection",
    "DatabaseError",
    "IntegerPKMixin",
    "RequestTransaction",
    "TransactionBeginError",
    "request_transaction",
]
