from typing import List

from petshop.domain.entities import Appointment
from petshop.domain.interfaces import IAppointmentRepository


class AppointmentRepository(IAppointmentRepository):
    """Append-only appointment history."""

    def __init__(self):
        self._history: List[Appointment] = []

    def append(self, appointment: Appointment) -> Appointment:
        self._history.append(appointment)
        return appointment

    def get_all(self) -> List[Appointment]:
        return list(self._history)

    def get_by_owner(self, cpf: str) -> List[Appointment]:
        return [apt for apt in self._history if apt.owner_cpf == cpf]
