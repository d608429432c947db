"""Financial ledger service.

Owns the shop's single FinancialRecord. Revenue grows with every booked
service, expenses with every recorded expense; the balance is derived.
"""

import logging
from datetime import date
from typing import Any, Optional

from petshop.core.config import today_local
from petshop.core.validation import BaseValidator, ValidationResult, validate_amount
from petshop.domain.entities import FinancialRecord
from petshop.schemas.dtos import FinancialSummary, OperationResult

logger = logging.getLogger(__name__)


class FinancialService:
    def __init__(self, record: Optional[FinancialRecord] = None):
        self.record = record or FinancialRecord()

    def record_service(self, amount: Any) -> FinancialRecord:
        """Add a performed service: revenue += amount, service count += 1."""
        value = validate_amount(amount)
        self.record.add_service(value)
        logger.info(
            "Service revenue recorded",
            extra={
                "context": {
                    "amount": str(value),
                    "revenue": str(self.record.revenue),
                    "service_count": self.record.service_count,
                }
            },
        )
        return self.record

    def record_expense(self, amount: Any) -> OperationResult:
        """Add an expense. Negative amounts raise ValidationError."""
        value = validate_amount(amount)
        self.record.add_expense(value)
        logger.info(
            "Expense recorded",
            extra={
                "context": {
                    "amount": str(value),
                    "expenses": str(self.record.expenses),
                }
            },
        )
        return OperationResult.ok(
            f"Expense recorded. Total expenses: {self.record.expenses:.2f}",
            value=self.record.expenses,
        )

    def balance(self):
        return self.record.balance

    def set_payment_method(self, method: Any) -> FinancialRecord:
        result = ValidationResult()
        if BaseValidator.validate_required_field(method, "payment_method", result):
            method = BaseValidator.validate_string(method, "payment_method", result)
        result.raise_if_invalid()

        self.record.set_payment_method(method)
        return self.record

    def set_record_date(
        self, record_date: Any, today: Optional[date] = None
    ) -> FinancialRecord:
        today = today or today_local()
        result = ValidationResult()
        if BaseValidator.validate_required_field(record_date, "record_date", result):
            record_date = BaseValidator.validate_date(
                record_date, "record_date", result, not_after=today
            )
        result.raise_if_invalid()

        self.record.set_record_date(record_date, today=today)
        return self.record

    def summary(self) -> FinancialSummary:
        return FinancialSummary.from_domain(self.record)
