"""
Unit tests for domain entities and their invariants.
"""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from petshop.core.exceptions import ValidationError
from petshop.domain.entities import (
    Appointment,
    FinancialRecord,
    Pet,
    Product,
    Species,
    to_cents,
)
from petshop.domain.sizing import SizeTier


@pytest.mark.unit
@pytest.mark.domain
class TestPet:
    def test_size_tier_follows_weight(self, domain_pet):
        assert domain_pet.size_tier is SizeTier.SMALL

        domain_pet.update_weight(Decimal("30"))

        assert domain_pet.size_tier is SizeTier.LARGE

    def test_invalid_weight_leaves_pet_unchanged(self, domain_pet):
        with pytest.raises(ValidationError):
            domain_pet.update_weight(Decimal("0"))

        assert domain_pet.weight == Decimal("4")

    def test_species_must_be_dog_or_cat(self):
        with pytest.raises(ValidationError) as exc_info:
            Pet(name="Tweety", species="Bird", weight=Decimal("0.2"), birth_date=date(2020, 1, 1))

        assert exc_info.value.field == "species"

    def test_change_species(self, domain_pet):
        domain_pet.change_species("Dog")

        assert domain_pet.species is Species.DOG

    def test_blank_name_is_refused(self, domain_pet):
        with pytest.raises(ValidationError):
            domain_pet.rename("  ")

        assert domain_pet.name == "Mimi"

    def test_age_in_whole_years(self, domain_pet):
        assert domain_pet.age_years(today=date(2024, 6, 14)) == 4
        assert domain_pet.age_years(today=date(2024, 6, 15)) == 5

    def test_future_birth_date_is_refused(self, domain_pet):
        with pytest.raises(ValidationError):
            domain_pet.update_birth_date(date(2024, 1, 2), today=date(2024, 1, 1))

        assert domain_pet.birth_date == date(2019, 6, 15)


@pytest.mark.unit
@pytest.mark.domain
class TestClient:
    def test_add_pet_sets_owner(self, domain_client, domain_pet):
        domain_client.add_pet(domain_pet)

        assert domain_pet.owner_cpf == "123.456.789-01"
        assert domain_client.owns(domain_pet)
        assert domain_client.has_pets

    def test_remove_pet_by_identity(self, domain_client, domain_pet):
        twin = Pet(
            name=domain_pet.name,
            species=domain_pet.species,
            weight=domain_pet.weight,
            birth_date=domain_pet.birth_date,
        )
        domain_client.add_pet(domain_pet)

        assert domain_client.remove_pet(twin) is False
        assert domain_client.remove_pet(domain_pet) is True
        assert not domain_client.has_pets

    def test_add_pet_requires_a_pet(self, domain_client):
        with pytest.raises(ValidationError):
            domain_client.add_pet(None)


@pytest.mark.unit
@pytest.mark.appointment
class TestAppointment:
    def _build(self, **overrides):
        data = {
            "pet_name": "Rex",
            "species": Species.DOG,
            "size_tier": SizeTier.MEDIUM,
            "owner_cpf": "123.456.789-01",
            "date": date(2030, 1, 7),
            "time": time(10, 0),
            "service": "Bath",
            "price": Decimal("80.00"),
            "duration_minutes": 60,
        }
        data.update(overrides)
        return Appointment(**data)

    def test_start_and_end(self):
        appointment = self._build(duration_minutes=180)

        assert appointment.starts_at == datetime(2030, 1, 7, 10, 0)
        assert appointment.ends_at == datetime(2030, 1, 7, 13, 0)

    def test_is_immutable(self):
        appointment = self._build()

        with pytest.raises(AttributeError):
            appointment.price = Decimal("0")

    @pytest.mark.parametrize(
        "overrides",
        [{"pet_name": ""}, {"service": ""}, {"price": Decimal("-1")}, {"duration_minutes": 0}],
    )
    def test_invalid_fields(self, overrides):
        with pytest.raises(ValidationError):
            self._build(**overrides)


@pytest.mark.unit
@pytest.mark.financial
class TestFinancialRecord:
    def test_defaults(self):
        record = FinancialRecord()

        assert record.revenue == Decimal("0.00")
        assert record.service_count == 0
        assert record.payment_method == "Undefined"
        assert record.balance == Decimal("0.00")

    def test_balance_is_revenue_minus_expenses(self):
        record = FinancialRecord()
        record.add_service(Decimal("80.00"))
        record.add_service(Decimal("15.00"))
        record.add_expense(Decimal("30.50"))

        assert record.service_count == 2
        assert record.balance == Decimal("64.50")

    def test_negative_expense_is_refused(self):
        record = FinancialRecord()

        with pytest.raises(ValidationError):
            record.add_expense(Decimal("-1"))

        assert record.expenses == Decimal("0.00")

    def test_negative_totals_are_refused(self):
        with pytest.raises(ValidationError):
            FinancialRecord(revenue=Decimal("-1"))

    def test_future_record_date_is_refused(self):
        record = FinancialRecord(record_date=date(2024, 1, 1))

        with pytest.raises(ValidationError):
            record.set_record_date(date(2024, 1, 2), today=date(2024, 1, 1))

        assert record.record_date == date(2024, 1, 1)


@pytest.mark.unit
@pytest.mark.inventory
class TestProduct:
    @pytest.mark.parametrize(
        "overrides",
        [{"price": Decimal("0")}, {"stock": -1}, {"code": 0}, {"name": " "}, {"category": ""}],
    )
    def test_invariants(self, valid_product_data, overrides):
        with pytest.raises(ValidationError):
            Product(**dict(valid_product_data, **overrides))

    def test_has_sufficient_stock(self, domain_product):
        assert domain_product.has_sufficient_stock(10)
        assert not domain_product.has_sufficient_stock(11)
        assert not domain_product.has_sufficient_stock(0)


@pytest.mark.unit
def test_to_cents_rounds_half_up():
    assert to_cents(Decimal("10.005")) == Decimal("10.01")
    assert to_cents(Decimal("10.004")) == Decimal("10.00")
