"""
Schemas package for the Pet Shop core.

DTOs handed back to the presentation layer.
"""

from .dtos import FinancialSummary, OperationResult

__all__ = ["FinancialSummary", "OperationResult"]
