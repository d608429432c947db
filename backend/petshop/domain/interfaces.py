"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Appointment, Client, Product


class IClientReader(ABC):
    """Interface for client read operations."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Client]:
        """Get client by canonical CPF."""
        pass

    @abstractmethod
    def get_all(self) -> List[Client]:
        """Get all clients in registration order."""
        pass


class IClientWriter(ABC):
    """Interface for client write operations."""

    @abstractmethod
    def add(self, client: Client) -> Client:
        """Store a new client."""
        pass

    @abstractmethod
    def delete(self, cpf: str) -> bool:
        """Delete a client and, with it, all of its pets."""
        pass


class IClientRepository(IClientReader, IClientWriter):
    """Complete client repository interface."""

    pass


class IAppointmentReader(ABC):
    """Interface for appointment read operations."""

    @abstractmethod
    def get_all(self) -> List[Appointment]:
        """Get every appointment in booking order."""
        pass

    @abstractmethod
    def get_by_owner(self, cpf: str) -> List[Appointment]:
        """Get the appointments booked for pets of one client."""
        pass


class IAppointmentWriter(ABC):
    """Interface for appointment write operations. History is append-only."""

    @abstractmethod
    def append(self, appointment: Appointment) -> Appointment:
        """Append an appointment to the history."""
        pass


class IAppointmentRepository(IAppointmentReader, IAppointmentWriter):
    """Complete appointment repository interface."""

    pass


class IProductReader(ABC):
    """Interface for product read operations."""

    @abstractmethod
    def get_by_code(self, code: int) -> Optional[Product]:
        """Get product by its code."""
        pass

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Get all products in registration order."""
        pass


class IProductWriter(ABC):
    """Interface for product write operations."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Store a new product."""
        pass


class IProductRepository(IProductReader, IProductWriter):
    """Complete product repository interface."""

    pass
