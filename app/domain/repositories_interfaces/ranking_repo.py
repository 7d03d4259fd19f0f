from app.domain.entities.ranking import RankingEntry, RankingHistoryRecord
from abc import ABC, abstractmethod
from typing import Optional


class RankingRepoInterface(ABC):
    @abstractmethod
    async def get_cache(self) -> Optional[tuple[list[RankingEntry], int]]:
        """Returns the cached ranking together with its write timestamp in epoch ms."""
        raise NotImplementedError

    @abstractmethod
    async def save_cache(self, ranking: list[RankingEntry], timestamp_ms: int) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_cache(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def add_history(self, record: RankingHistoryRecord, timestamp_ms: int) -> None:
        raise NotImplementedError
