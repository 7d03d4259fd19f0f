from app.domain.entities.fastest_entry import FastestEntry
from abc import ABC, abstractmethod
from typing import Optional


class FastestRepoInterface(ABC):
    @abstractmethod
    async def get(self, quiz_id: str) -> Optional[FastestEntry]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, entry: FastestEntry) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_all(self) -> int:
        raise NotImplementedError
