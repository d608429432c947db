"""
Domain package - Pure business logic layer.

This package contains:
- sizing.py: size tiers derived from pet weight
- catalog.py: grooming services, prices and durations
- schedule.py: business hours and slot validation
- entities.py: domain entities with their invariants
- interfaces.py: repository contracts
"""

from .entities import Appointment, Client, FinancialRecord, Pet, Product, Species
from .interfaces import (
    IAppointmentReader,
    IAppointmentRepository,
    IAppointmentWriter,
    IClientReader,
    IClientRepository,
    IClientWriter,
    IProductReader,
    IProductRepository,
    IProductWriter,
)
from .sizing import SizeTier, classify_size

__all__ = [
    # Domain entities
    "Client",
    "Pet",
    "Appointment",
    "FinancialRecord",
    "Product",
    "Species",
    "SizeTier",
    "classify_size",
    # Repository interfaces
    "IClientRepository",
    "IAppointmentRepository",
    "IProductRepository",
    # Segregated interfaces
    "IClientReader",
    "IClientWriter",
    "IAppointmentReader",
    "IAppointmentWriter",
    "IProductReader",
    "IProductWriter",
]
