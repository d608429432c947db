"""
Domain entities - Pure business logic, no framework dependencies.

Entities check their own invariants in ``__post_init__`` and in their mutators,
so a Client, Pet, Appointment, FinancialRecord or Product never exists in an
invalid state. Input cleaning (trimming, CPF formatting, number parsing) is the
job of ``petshop.core.validation``; what reaches an entity is already typed.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import List, Optional

from petshop.core.config import get_default_payment_method, today_local
from petshop.core.exceptions import ValidationError
from petshop.domain.sizing import SizeTier, classify_size

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class Species(str, Enum):
    DOG = "Dog"
    CAT = "Cat"

    def __str__(self) -> str:
        return self.value


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required", field_name)
    return str(value).strip()


def _to_species(value) -> Species:
    try:
        return Species(value)
    except ValueError:
        raise ValidationError(
            "Invalid species! Only Dog or Cat are allowed.", "species"
        ) from None


def _years_between(start: date, end: date) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)


@dataclass(eq=False)
class Pet:
    """A pet owned by exactly one client. Size tier follows the weight."""

    name: str
    species: Species
    weight: Decimal
    birth_date: date
    owner_cpf: Optional[str] = None

    def __post_init__(self):
        """Validate business rules."""
        self.name = _require_text(self.name, "name")
        self.species = _to_species(self.species)
        self._check_weight(self.weight)
        self._check_birth_date(self.birth_date)

    @staticmethod
    def _check_weight(weight) -> None:
        if weight is None or weight <= 0:
            raise ValidationError("Invalid weight! It must be greater than zero.", "weight")

    @staticmethod
    def _check_birth_date(birth_date: date, today: Optional[date] = None) -> None:
        if birth_date > (today or today_local()):
            raise ValidationError("Future dates are not allowed.", "birth_date")

    @property
    def size_tier(self) -> SizeTier:
        return classify_size(self.weight)

    def age_years(self, today: Optional[date] = None) -> int:
        """Age in whole years."""
        return _years_between(self.birth_date, today or today_local())

    def rename(self, name: str) -> None:
        self.name = _require_text(name, "name")

    def change_species(self, species: Species) -> None:
        self.species = _to_species(species)

    def update_weight(self, weight: Decimal) -> None:
        self._check_weight(weight)
        self.weight = weight

    def update_birth_date(self, birth_date: date, today: Optional[date] = None) -> None:
        self._check_birth_date(birth_date, today)
        self.birth_date = birth_date


@dataclass(eq=False)
class Client:
    """Domain entity representing a Client, identified by CPF."""

    cpf: str
    name: str
    phone: str
    address: str
    pets: List[Pet] = field(default_factory=list)

    def __post_init__(self):
        """Validate business rules."""
        self.cpf = _require_text(self.cpf, "cpf")
        self.name = _require_text(self.name, "name")
        self.phone = _require_text(self.phone, "phone")
        self.address = _require_text(self.address, "address")

    def add_pet(self, pet: Pet) -> Pet:
        if pet is None:
            raise ValidationError("Pet cannot be empty", "pet")
        pet.owner_cpf = self.cpf
        self.pets.append(pet)
        return pet

    def owns(self, pet: Pet) -> bool:
        return any(owned is pet for owned in self.pets)

    def remove_pet(self, pet: Pet) -> bool:
        """Remove ``pet`` (by identity); False when it is not one of ours."""
        for index, owned in enumerate(self.pets):
            if owned is pet:
                del self.pets[index]
                return True
        return False

    @property
    def has_pets(self) -> bool:
        return bool(self.pets)


@dataclass(frozen=True)
class Appointment:
    """
    A booked grooming service. Immutable once built.

    The pet is captured as a snapshot (name, species, size tier, owner) so that
    the history survives the pet or its owner being removed later.
    """

    pet_name: str
    species: Species
    size_tier: SizeTier
    owner_cpf: Optional[str]
    date: date
    time: time
    service: str
    price: Decimal
    duration_minutes: int

    def __post_init__(self):
        """Validate business rules."""
        if not self.pet_name:
            raise ValidationError("Pet is required", "pet")
        if not self.service:
            raise ValidationError("Service is required", "service")
        if self.price < 0:
            raise ValidationError("Price cannot be negative", "price")
        if self.duration_minutes <= 0:
            raise ValidationError("Duration must be positive", "duration_minutes")

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.time)

    @property
    def ends_at(self) -> datetime:
        return self.starts_at + timedelta(minutes=self.duration_minutes)


@dataclass
class FinancialRecord:
    """The shop's running totals. Balance is always derived, never stored."""

    revenue: Decimal = Decimal("0.00")
    service_count: int = 0
    payment_method: str = field(default_factory=get_default_payment_method)
    record_date: date = field(default_factory=today_local)
    expenses: Decimal = Decimal("0.00")

    def __post_init__(self):
        """Validate business rules."""
        if self.revenue < 0:
            raise ValidationError("Revenue cannot be negative.", "revenue")
        if self.service_count < 0:
            raise ValidationError("Service count cannot be negative.", "service_count")
        if self.expenses < 0:
            raise ValidationError("Expenses cannot be negative.", "expenses")
        self.payment_method = _require_text(self.payment_method, "payment_method")
        self.check_record_date(self.record_date)

    @staticmethod
    def check_record_date(record_date: date, today: Optional[date] = None) -> None:
        if record_date > (today or today_local()):
            raise ValidationError("Future dates are not allowed.", "record_date")

    @property
    def balance(self) -> Decimal:
        return self.revenue - self.expenses

    def add_service(self, amount: Decimal) -> None:
        if amount < 0:
            raise ValidationError("Service amount cannot be negative.", "amount")
        self.revenue += amount
        self.service_count += 1

    def add_expense(self, amount: Decimal) -> None:
        if amount < 0:
            raise ValidationError("Expense amount cannot be negative.", "amount")
        self.expenses += amount

    def set_payment_method(self, method: str) -> None:
        self.payment_method = _require_text(method, "payment_method")

    def set_record_date(self, record_date: date, today: Optional[date] = None) -> None:
        self.check_record_date(record_date, today)
        self.record_date = record_date


@dataclass(eq=False)
class Product:
    """A product on the shelf. Price and stock never go negative."""

    name: str
    price: Decimal
    stock: int
    category: str
    code: int

    def __post_init__(self):
        """Validate business rules."""
        self.name = _require_text(self.name, "name")
        self.category = _require_text(self.category, "category")
        if self.price <= 0:
            raise ValidationError("Invalid price! It must be greater than zero.", "price")
        if self.stock < 0:
            raise ValidationError("Stock cannot be negative.", "stock")
        if self.code <= 0:
            raise ValidationError("Product code must be a positive number.", "code")

    def has_sufficient_stock(self, quantity: int) -> bool:
        return quantity > 0 and self.stock >= quantity
