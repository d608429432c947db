"""
Data Transfer Objects (DTOs) returned by the core to its callers.

Following SOLID principles:
- Single Responsibility: Each DTO carries one specific data contract
- Open/Closed: DTOs can be extended without modification
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class OperationResult:
    """Outcome of an operation whose refusal is an expected user-input case."""

    success: bool
    message: str
    value: Optional[Any] = None

    @classmethod
    def ok(cls, message: str, value: Optional[Any] = None) -> "OperationResult":
        return cls(success=True, message=message, value=value)

    @classmethod
    def failure(cls, message: str, value: Optional[Any] = None) -> "OperationResult":
        return cls(success=False, message=message, value=value)

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class FinancialSummary:
    """Snapshot of the financial record for reporting."""

    revenue: Decimal
    service_count: int
    payment_method: str
    record_date: date
    expenses: Decimal
    balance: Decimal

    @classmethod
    def from_domain(cls, record) -> "FinancialSummary":
        """Create summary from the FinancialRecord entity."""
        return cls(
            revenue=record.revenue,
            service_count=record.service_count,
            payment_method=record.payment_method,
            record_date=record.record_date,
            expenses=record.expenses,
            balance=record.balance,
        )

    def to_dict(self) -> dict:
        return {
            "revenue": self.revenue,
            "service_count": self.service_count,
            "payment_method": self.payment_method,
            "record_date": self.record_date,
            "expenses": self.expenses,
            "balance": self.balance,
        }
