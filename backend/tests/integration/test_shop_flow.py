"""
End-to-end tests through the PetShop facade with the in-memory stores.
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal

import pytest

from petshop.core.exceptions import (
    ClosedSlotError,
    NotFoundError,
    PastSlotError,
    ValidationError,
)
from petshop.domain.sizing import SizeTier
from petshop.main import create_shop
from petshop.shop import PetShop


@pytest.mark.integration
@pytest.mark.appointment
class TestBookingFlow:
    def test_medium_dog_bath_on_a_weekday(self, shop, ana, rex, monday, early_monday):
        assert ana.cpf == "123.456.789-01"
        assert rex.size_tier is SizeTier.MEDIUM

        appointment = shop.book_appointment(rex, monday, time(10, 0), "Bath", now=early_monday)

        assert appointment.price == 80.0
        summary = shop.financial_summary()
        assert summary.revenue == Decimal("80.00")
        assert summary.service_count == 1
        assert shop.appointment_history() == [appointment]

    def test_sunday_booking_changes_nothing(self, shop, rex, sunday, early_monday):
        with pytest.raises(ClosedSlotError):
            shop.book_appointment(rex, sunday, time(10, 0), "Bath", now=early_monday)

        assert shop.appointment_history() == []
        assert shop.financial_summary().revenue == Decimal("0.00")
        assert shop.financial_summary().service_count == 0

    def test_past_booking_changes_nothing(self, shop, rex, monday):
        now = datetime.combine(monday, time(15, 0))

        with pytest.raises(PastSlotError):
            shop.book_appointment(rex, monday, time(10, 0), "Bath", now=now)

        assert shop.appointment_history() == []
        assert shop.financial_summary().service_count == 0

    def test_unknown_service_changes_nothing(self, shop, rex, monday, early_monday):
        with pytest.raises(ValidationError):
            shop.book_appointment(rex, monday, time(10, 0), "Massage", now=early_monday)

        assert shop.financial_summary().revenue == Decimal("0.00")

    def test_blank_payment_method_is_checked_first(self, shop, rex, monday, early_monday):
        with pytest.raises(ValidationError):
            shop.book_appointment(
                rex, monday, time(10, 0), "Bath", now=early_monday, payment_method=" "
            )

        assert shop.appointment_history() == []

    def test_payment_method_is_recorded(self, shop, rex, saturday, early_monday):
        shop.book_appointment(
            rex, saturday, time(13, 0), "Nail Trim", now=early_monday, payment_method="Pix"
        )

        summary = shop.financial_summary()
        assert summary.payment_method == "Pix"
        assert summary.revenue == Decimal("15.00")

    def test_revenue_accumulates(self, shop, rex, monday, saturday, early_monday):
        shop.book_appointment(rex, monday, time(8, 0), "Bath", now=early_monday)
        shop.book_appointment(rex, monday, time(18, 0), "Hydration", now=early_monday)
        shop.book_appointment(rex, saturday, time(9, 0), "Ear Cleaning", now=early_monday)
        shop.record_expense("40")

        summary = shop.financial_summary()
        assert summary.service_count == 3
        assert summary.revenue == Decimal("210.00")
        assert summary.balance == Decimal("170.00")

    def test_history_per_client(self, shop, ana, rex, monday, early_monday):
        bob = shop.register_or_fetch_client("98765432100", "Bob", "555-0101", "Av. Central, 9")
        luna = shop.add_pet(bob, "Luna", "cat", "3,2", "2021-05-01")
        shop.book_appointment(rex, monday, time(10, 0), "Bath", now=early_monday)
        mine = shop.book_appointment(luna, monday, time(10, 0), "Bath", now=early_monday)

        assert shop.appointment_history("987.654.321-00") == [mine]
        assert mine.price == Decimal("60.00")
        with pytest.raises(NotFoundError):
            shop.appointment_history("11111111111")


@pytest.mark.integration
@pytest.mark.client
class TestClientsAndPets:
    def test_register_is_idempotent(self, shop, ana):
        again = shop.register_or_fetch_client("123.456.789-01", "Other", "0", "Nowhere")

        assert again is ana
        assert shop.list_clients() == [ana]

    def test_find_pet(self, shop, ana, rex):
        assert shop.find_pet("REX") == (ana, rex)

    def test_remove_last_pet_keeps_client_by_default(self, shop, ana, rex):
        result = shop.remove_pet(ana, rex)

        assert result.success
        assert result.value == 0
        assert shop.list_clients() == [ana]
        with pytest.raises(NotFoundError):
            shop.find_pet("Rex")

    def test_remove_last_pet_can_remove_client(self, shop, ana, rex):
        result = shop.remove_pet(ana, rex, remove_empty_client=True)

        assert result.value == 0
        assert "was removed" in result.message
        assert shop.list_clients() == []

    def test_client_with_other_pets_survives(self, shop, ana, rex):
        shop.add_pet(ana, "Mimi", "Cat", 4, date(2019, 6, 15))

        result = shop.remove_pet(ana, rex, remove_empty_client=True)

        assert result.value == 1
        assert shop.list_clients() == [ana]

    def test_remove_client_keeps_history(self, shop, ana, rex, monday, early_monday):
        appointment = shop.book_appointment(rex, monday, time(10, 0), "Bath", now=early_monday)

        result = shop.remove_client("12345678901")

        assert result.value == "123.456.789-01"
        assert shop.list_clients() == []
        assert shop.appointment_history() == [appointment]
        assert appointment.pet_name == "Rex"

    def test_remove_unknown_client(self, shop):
        with pytest.raises(NotFoundError):
            shop.remove_client("00000000000")

    @pytest.mark.parametrize("remove_empty_client", [False, True])
    def test_remove_pet_of_removed_client(self, shop, ana, rex, remove_empty_client):
        shop.remove_client(ana.cpf)

        with pytest.raises(NotFoundError):
            shop.remove_pet(ana, rex, remove_empty_client=remove_empty_client)

        assert ana.pets == [rex]
        assert shop.list_clients() == []


@pytest.mark.integration
@pytest.mark.inventory
class TestInventoryFlow:
    def test_product_lifecycle(self, shop, valid_product_data):
        product = shop.register_product(**valid_product_data)

        assert shop.get_product(1001) is product
        assert shop.adjust_stock(product, 5, "add").value == 15
        assert not shop.adjust_stock(product, 20, "remove")
        assert shop.apply_discount(product, 20).value == Decimal("40.00")
        assert shop.set_product_price(product, "55.5").value == Decimal("55.5")
        assert shop.list_products() == [product]

    def test_duplicate_code(self, shop, valid_product_data):
        shop.register_product(**valid_product_data)

        with pytest.raises(ValidationError):
            shop.register_product(**dict(valid_product_data, name="Cat Shampoo"))

        assert len(shop.list_products()) == 1


@pytest.mark.integration
@pytest.mark.financial
def test_set_payment_method_returns_summary(shop):
    summary = shop.set_payment_method("Credit Card")

    assert summary.to_dict()["payment_method"] == "Credit Card"


@pytest.mark.integration
def test_create_shop_without_logging_setup():
    shop = create_shop(configure_logging=False)

    assert isinstance(shop, PetShop)
    assert len(shop.list_services()) == 9


@pytest.mark.integration
@pytest.mark.config
def test_create_shop_configures_logging(monkeypatch, restore_root_logging):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_TO_FILE", "false")

    create_shop()

    assert restore_root_logging.level == logging.WARNING
