"""
PetShop context: the one object that owns every registry and ledger.

The presentation layer (menus, prompts, printing) holds a single PetShop and
calls the operations below with already-parsed values. Nothing here reads
input or writes output; failures surface as ValidationError, NotFoundError or
a failed OperationResult.
"""

from datetime import date, datetime, time
from typing import Any, List, Optional, Tuple

from petshop.core.validation import BaseValidator, ValidationResult
from petshop.domain.entities import Appointment, Client, FinancialRecord, Pet, Product
from petshop.repositories import (
    AppointmentRepository,
    ClientRepository,
    InventoryRepository,
)
from petshop.schemas.dtos import FinancialSummary, OperationResult
from petshop.services.appointment_service import AppointmentService
from petshop.services.client_service import ClientService
from petshop.services.financial_service import FinancialService
from petshop.services.inventory_service import InventoryService


class PetShop:
    """Facade over the client, appointment, financial and inventory services."""

    def __init__(
        self,
        clients: Optional[ClientService] = None,
        appointments: Optional[AppointmentService] = None,
        finances: Optional[FinancialService] = None,
        inventory: Optional[InventoryService] = None,
    ):
        self.clients = clients or ClientService(ClientRepository())
        self.appointments = appointments or AppointmentService(AppointmentRepository())
        self.finances = finances or FinancialService(FinancialRecord())
        self.inventory = inventory or InventoryService(InventoryRepository())

    # ===========================
    # Clients and pets
    # ===========================

    def register_or_fetch_client(
        self, cpf: Any, name: Any, phone: Any, address: Any
    ) -> Client:
        return self.clients.register_or_fetch(cpf, name, phone, address)

    def add_pet(
        self,
        client: Client,
        name: Any,
        species: Any,
        weight: Any,
        birth_date: Any,
        today: Optional[date] = None,
    ) -> Pet:
        return self.clients.add_pet(client, name, species, weight, birth_date, today)

    def list_clients(self) -> List[Client]:
        return self.clients.list_clients()

    def find_pet(self, name: str) -> Tuple[Client, Pet]:
        return self.clients.find_pet(name)

    def remove_pet(
        self, client: Client, pet: Pet, remove_empty_client: bool = False
    ) -> OperationResult:
        """Remove a pet; optionally drop its owner too when no pets are left."""
        remaining = self.clients.remove_pet(client, pet)
        if remaining == 0 and remove_empty_client:
            self.clients.remove_client(client.cpf)
            return OperationResult.ok(
                f"Pet {pet.name} removed. Client {client.name} had no pets left and was removed.",
                value=0,
            )
        return OperationResult.ok(f"Pet {pet.name} removed.", value=remaining)

    def remove_client(self, cpf: Any) -> OperationResult:
        client = self.clients.remove_client(cpf)
        return OperationResult.ok(
            f"Client {client.name} and {len(client.pets)} pet(s) removed.",
            value=client.cpf,
        )

    # ===========================
    # Appointments
    # ===========================

    def list_services(self) -> List[str]:
        return self.appointments.list_services()

    def book_appointment(
        self,
        pet: Pet,
        slot_date: date,
        slot_time: time,
        service: str,
        now: Optional[datetime] = None,
        payment_method: Optional[str] = None,
    ) -> Appointment:
        """Book an appointment and record its price as revenue.

        Everything is validated before anything changes: a refused booking
        leaves both the appointment history and the ledger as they were.
        """
        if payment_method is not None:
            result = ValidationResult()
            BaseValidator.validate_required_field(
                payment_method, "payment_method", result
            )
            result.raise_if_invalid()

        appointment = self.appointments.book(pet, slot_date, slot_time, service, now)
        self.finances.record_service(appointment.price)
        if payment_method is not None:
            self.finances.set_payment_method(payment_method)
        return appointment

    def appointment_history(self, cpf: Optional[str] = None) -> List[Appointment]:
        if cpf is None:
            return self.appointments.history()
        return self.appointments.history_for_client(self.clients.get_client(cpf).cpf)

    # ===========================
    # Finances
    # ===========================

    def financial_summary(self) -> FinancialSummary:
        return self.finances.summary()

    def record_expense(self, amount: Any) -> OperationResult:
        return self.finances.record_expense(amount)

    def set_payment_method(self, method: Any) -> FinancialSummary:
        self.finances.set_payment_method(method)
        return self.finances.summary()

    # ===========================
    # Inventory
    # ===========================

    def register_product(
        self, name: Any, price: Any, stock: Any, category: Any, code: Any
    ) -> Product:
        return self.inventory.register_product(name, price, stock, category, code)

    def get_product(self, code: int) -> Product:
        return self.inventory.get_product(code)

    def list_products(self) -> List[Product]:
        return self.inventory.list_products()

    def adjust_stock(self, product: Product, delta: Any, direction: Any) -> OperationResult:
        return self.inventory.adjust_stock(product, delta, direction)

    def apply_discount(self, product: Product, percent: Any) -> OperationResult:
        return self.inventory.apply_discount(product, percent)

    def set_product_price(self, product: Product, new_price: Any) -> OperationResult:
        return self.inventory.set_price(product, new_price)
