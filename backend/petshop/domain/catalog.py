"""
Grooming service catalog.

Static process-wide configuration: each service has a price per size tier and
a fixed duration that does not depend on size. Lookups are permissive on
purpose, an unknown service or tier prices at 0 and lasts 60 minutes.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from petshop.domain.sizing import SizeTier

DEFAULT_DURATION_MINUTES = 60
UNKNOWN_PRICE = Decimal("0.00")


@dataclass(frozen=True)
class ServiceCatalogEntry:
    """One bookable service."""

    name: str
    prices: Mapping[SizeTier, Decimal]
    duration_minutes: int

    def price_for(self, tier: SizeTier) -> Decimal:
        return self.prices.get(tier, UNKNOWN_PRICE)


def _entry(
    name: str, small: str, medium: str, large: str, minutes: int
) -> ServiceCatalogEntry:
    prices = {
        SizeTier.SMALL: Decimal(small),
        SizeTier.MEDIUM: Decimal(medium),
        SizeTier.LARGE: Decimal(large),
    }
    return ServiceCatalogEntry(name, MappingProxyType(prices), minutes)


# Insertion order is the order services are offered in
SERVICE_CATALOG: Mapping[str, ServiceCatalogEntry] = MappingProxyType(
    {
        entry.name: entry
        for entry in (
            _entry("Bath", "60.00", "80.00", "130.00", 60),
            _entry("Scissor Grooming", "100.00", "130.00", "160.00", 180),
            _entry("Machine Grooming", "85.00", "110.00", "120.00", 80),
            _entry("Puppy Grooming", "140.00", "165.00", "180.00", 180),
            _entry("Hygienic Grooming", "55.00", "65.00", "100.00", 70),
            _entry("Nail Trim", "15.00", "15.00", "15.00", 20),
            _entry("Ear Cleaning", "10.00", "10.00", "10.00", 20),
            _entry("Hydration", "90.00", "120.00", "150.00", 60),
            _entry("Undercoat Removal", "30.00", "50.00", "70.00", 120),
        )
    }
)


def _coerce_tier(tier: Union[SizeTier, str, None]) -> Optional[SizeTier]:
    if tier is None:
        return None
    try:
        return SizeTier(tier)
    except ValueError:
        return None


def list_services() -> List[str]:
    """Names of all bookable services, in catalog order."""
    return list(SERVICE_CATALOG)


def is_known_service(service: Optional[str]) -> bool:
    return service in SERVICE_CATALOG


def get_entry(service: Optional[str]) -> Optional[ServiceCatalogEntry]:
    if service is None:
        return None
    return SERVICE_CATALOG.get(service)


def price_of(service: Optional[str], tier: Union[SizeTier, str, None]) -> Decimal:
    """Price of ``service`` for a pet of ``tier``; 0 when either is unknown."""
    entry = get_entry(service)
    size = _coerce_tier(tier)
    if entry is None or size is None:
        return UNKNOWN_PRICE
    return entry.price_for(size)


def duration_of(service: Optional[str]) -> int:
    """Duration in minutes of ``service``; 60 when it is unknown."""
    entry = get_entry(service)
    if entry is None:
        return DEFAULT_DURATION_MINUTES
    return entry.duration_minutes
