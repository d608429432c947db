"""
Central pytest configuration for the pet shop core tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import logging
import os
import sys
from datetime import date, datetime, time
from pathlib import Path

import pytest

# Make the backend package importable without an editable install
backend_root = Path(__file__).parent.parent  # backend/
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

# Deterministic configuration for every test run
os.environ.setdefault("TZ", "UTC")
os.environ["DEFAULT_PAYMENT_METHOD"] = "Undefined"
os.environ["LOG_TO_FILE"] = "false"

from config.markers import *  # noqa: E402,F401,F403
from fixtures.domain_fixtures import *  # noqa: E402,F401,F403

from petshop.core.logging_config import ConsoleFormatter, JSONFormatter  # noqa: E402
from petshop.shop import PetShop  # noqa: E402

# =====================================================
# CALENDAR FIXTURES
# =====================================================

# 2030-01-07 is a Monday; the week runs through Sunday 2030-01-13
MONDAY = date(2030, 1, 7)
SATURDAY = date(2030, 1, 12)
SUNDAY = date(2030, 1, 13)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def saturday() -> date:
    return SATURDAY


@pytest.fixture
def sunday() -> date:
    return SUNDAY


@pytest.fixture
def early_monday() -> datetime:
    """'Now' at 07:00 on the Monday, before the shop opens."""
    return datetime.combine(MONDAY, time(7, 0))


# =====================================================
# SHOP FIXTURES
# =====================================================


@pytest.fixture
def shop() -> PetShop:
    """A fresh, empty pet shop."""
    return PetShop()


@pytest.fixture
def ana(shop, valid_client_data):
    """Client Ana registered in ``shop``."""
    return shop.register_or_fetch_client(**valid_client_data)


@pytest.fixture
def rex(shop, ana, valid_pet_data):
    """Ana's 12 kg dog Rex (Medium)."""
    return shop.add_pet(ana, **valid_pet_data)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    app_level = logging.getLogger("petshop").level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (ConsoleFormatter, JSONFormatter)):
            handler.close()
            root.removeHandler(handler)
    # pytest swaps its own capture handlers in and out per test phase
    for handler in handlers:
        if handler not in root.handlers and not type(handler).__module__.startswith("_pytest"):
            root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("petshop").setLevel(app_level)
