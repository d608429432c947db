"""In-memory client repository keyed by canonical CPF."""

from typing import Dict, List, Optional

from petshop.domain.entities import Client
from petshop.domain.interfaces import IClientRepository


def _key(cpf: str) -> str:
    return cpf.strip().casefold()


class ClientRepository(IClientRepository):
    """Keeps clients in registration order; CPF comparison ignores case."""

    def __init__(self):
        self._clients: Dict[str, Client] = {}

    def get_by_cpf(self, cpf: str) -> Optional[Client]:
        return self._clients.get(_key(cpf))

    def get_all(self) -> List[Client]:
        return list(self._clients.values())

    def add(self, client: Client) -> Client:
        key = _key(client.cpf)
        if key in self._clients:
            raise ValueError(f"Client {client.cpf} already stored")
        self._clients[key] = client
        return client

    def delete(self, cpf: str) -> bool:
        return self._clients.pop(_key(cpf), None) is not None
