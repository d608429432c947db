# Repositories package initialization
# In-memory stores behind the domain interfaces; all state is process-lifetime only.

from .appointment_repo import AppointmentRepository
from .client_repo import ClientRepository
from .inventory_repository import InventoryRepository

__all__ = [
    "AppointmentRepository",
    "ClientRepository",
    "InventoryRepository",
]
