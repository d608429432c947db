"""
Client service for business logic following SOLID principles.

This service:
- Keeps client and pet rules separate from the presentation layer
- Depends on the IClientRepository abstraction, not a concrete store
- Validates every field before an entity is built, so failures leave no trace
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from petshop.core.config import today_local
from petshop.core.exceptions import NotFoundError, ValidationError
from petshop.core.validation import (
    BaseValidator,
    ValidationResult,
    normalize_cpf,
    validate_client,
    validate_pet,
)
from petshop.domain.entities import Client, Pet
from petshop.domain.interfaces import IClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Application service for client and pet use-cases."""

    def __init__(self, client_repo: IClientRepository) -> None:
        self.client_repo = client_repo

    def register_or_fetch(
        self, cpf: Any, name: Any, phone: Any, address: Any
    ) -> Client:
        """Return the client with this CPF, registering it first if unknown.

        Business Rules:
        - CPF is normalized to XXX.XXX.XXX-XX before lookup
        - An existing client is returned as is; name/phone/address are ignored
        - A new client needs every field non-blank
        """
        canonical_cpf = normalize_cpf(cpf)

        existing = self.client_repo.get_by_cpf(canonical_cpf)
        if existing is not None:
            logger.info(
                "Client already registered, using existing record",
                extra={"context": {"cpf": canonical_cpf}},
            )
            return existing

        cleaned = validate_client(
            {"cpf": canonical_cpf, "name": name, "phone": phone, "address": address}
        ).raise_if_invalid()
        client = self.client_repo.add(Client(**cleaned))

        logger.info(
            "Client registered",
            extra={"context": {"cpf": client.cpf, "name": client.name}},
        )
        return client

    def get_client(self, cpf: Any) -> Client:
        """Get a client by CPF in any punctuation."""
        try:
            canonical_cpf = normalize_cpf(cpf)
        except ValidationError:
            raise NotFoundError("Client", cpf) from None

        client = self.client_repo.get_by_cpf(canonical_cpf)
        if client is None:
            raise NotFoundError("Client", canonical_cpf)
        return client

    def list_clients(self) -> List[Client]:
        return self.client_repo.get_all()

    def add_pet(
        self,
        client: Client,
        name: Any,
        species: Any,
        weight: Any,
        birth_date: Any,
        today: Optional[date] = None,
    ) -> Pet:
        """Register a pet for ``client``; the size tier is derived from weight."""
        self._ensure_registered(client)

        cleaned = validate_pet(
            {
                "name": name,
                "species": species,
                "weight": weight,
                "birth_date": birth_date,
            },
            today=today or today_local(),
        ).raise_if_invalid()
        pet = client.add_pet(Pet(**cleaned))

        logger.info(
            "Pet registered",
            extra={
                "context": {
                    "cpf": client.cpf,
                    "pet": pet.name,
                    "size_tier": pet.size_tier.value,
                }
            },
        )
        return pet

    def update_pet_weight(self, pet: Pet, weight: Any) -> Pet:
        result = ValidationResult()
        value = BaseValidator.validate_decimal(
            weight, "weight", result, min_value=Decimal("0"), min_exclusive=True
        )
        if value is None and result.is_valid:
            result.add_error("weight is required", "weight")
        result.raise_if_invalid()

        pet.update_weight(value)
        logger.info(
            "Pet weight updated",
            extra={"context": {"pet": pet.name, "size_tier": pet.size_tier.value}},
        )
        return pet

    def update_pet_birth_date(
        self, pet: Pet, birth_date: Any, today: Optional[date] = None
    ) -> Pet:
        today = today or today_local()
        result = ValidationResult()
        value = BaseValidator.validate_date(
            birth_date, "birth_date", result, not_after=today
        )
        if value is None and result.is_valid:
            result.add_error("birth_date is required", "birth_date")
        result.raise_if_invalid()

        pet.update_birth_date(value, today=today)
        return pet

    def find_pet(self, name: str) -> Tuple[Client, Pet]:
        """First pet whose name matches ``name`` ignoring case, with its owner."""
        wanted = (name or "").strip().casefold()
        for client in self.client_repo.get_all():
            for pet in client.pets:
                if pet.name.casefold() == wanted:
                    return client, pet
        raise NotFoundError("Pet", name)

    def remove_pet(self, client: Client, pet: Pet) -> int:
        """Remove ``pet`` from ``client`` and return how many pets remain.

        The client is kept even when this empties its pet list.
        """
        self._ensure_registered(client)
        if not client.owns(pet):
            raise NotFoundError("Pet", getattr(pet, "name", pet))

        client.remove_pet(pet)
        remaining = len(client.pets)
        logger.info(
            "Pet removed",
            extra={
                "context": {"cpf": client.cpf, "pet": pet.name, "remaining": remaining}
            },
        )
        return remaining

    def remove_client(self, cpf: Any) -> Client:
        """Remove a client together with all of its pets."""
        client = self.get_client(cpf)
        self.client_repo.delete(client.cpf)

        logger.info(
            "Client removed",
            extra={"context": {"cpf": client.cpf, "pets_removed": len(client.pets)}},
        )
        return client

    def _ensure_registered(self, client: Client) -> None:
        if client is None or self.client_repo.get_by_cpf(client.cpf) is not client:
            raise NotFoundError("Client", getattr(client, "cpf", client))
