"""
Appointment service following SOLID principles.
"""

import logging
from datetime import date, datetime, time
from typing import List, Optional

from petshop.core.config import now_local
from petshop.core.exceptions import ValidationError
from petshop.domain import catalog
from petshop.domain.entities import Appointment, Pet
from petshop.domain.interfaces import IAppointmentRepository
from petshop.domain.schedule import check_slot

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment-related use-cases.

    Appointments are immutable and the history is append-only. Two bookings
    for the same slot are both accepted; there is no conflict detection.
    """

    def __init__(self, appointment_repo: IAppointmentRepository):
        self.appointment_repo = appointment_repo

    def list_services(self) -> List[str]:
        return catalog.list_services()

    def build(
        self,
        pet: Pet,
        slot_date: date,
        slot_time: time,
        service: str,
        now: Optional[datetime] = None,
    ) -> Appointment:
        """Validate a booking request and construct its appointment.

        Business Rules:
        - The slot must not be in the past and must fall in business hours
        - The service must be one of the catalog services
        - Price comes from the catalog using the pet's current size tier

        Raises:
            PastSlotError, ClosedSlotError: The slot was refused
            ValidationError: Missing pet or unknown service
        """
        if pet is None:
            raise ValidationError("Pet is required", "pet")
        if slot_date is None or slot_time is None:
            raise ValidationError("Date and time are required", "slot")

        check_slot(slot_date, slot_time, now or now_local())

        if not catalog.is_known_service(service):
            raise ValidationError(
                "Invalid service! Choose one of the available services.", "service"
            )

        size_tier = pet.size_tier
        return Appointment(
            pet_name=pet.name,
            species=pet.species,
            size_tier=size_tier,
            owner_cpf=pet.owner_cpf,
            date=slot_date,
            time=slot_time,
            service=service,
            price=catalog.price_of(service, size_tier),
            duration_minutes=catalog.duration_of(service),
        )

    def book(
        self,
        pet: Pet,
        slot_date: date,
        slot_time: time,
        service: str,
        now: Optional[datetime] = None,
    ) -> Appointment:
        """Validate, price and append an appointment to the history."""
        try:
            appointment = self.build(pet, slot_date, slot_time, service, now)
        except ValidationError as e:
            logger.warning(
                f"Appointment refused: {e.message}",
                extra={
                    "context": {
                        "pet": getattr(pet, "name", None),
                        "date": str(slot_date),
                        "time": str(slot_time),
                        "service": service,
                        "reason": getattr(e, "reason", e.field),
                    }
                },
            )
            raise

        self.appointment_repo.append(appointment)
        logger.info(
            "Appointment booked",
            extra={
                "context": {
                    "pet": appointment.pet_name,
                    "service": appointment.service,
                    "starts_at": appointment.starts_at.isoformat(),
                    "price": str(appointment.price),
                }
            },
        )
        return appointment

    def history(self) -> List[Appointment]:
        return self.appointment_repo.get_all()

    def history_for_client(self, cpf: str) -> List[Appointment]:
        return self.appointment_repo.get_by_owner(cpf)
