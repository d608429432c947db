# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import appointment_service
from . import client_service
from . import financial_service
from . import inventory_service

__all__ = [
    "appointment_service",
    "client_service",
    "financial_service",
    "inventory_service",
]
