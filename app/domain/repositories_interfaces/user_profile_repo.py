from app.domain.entities.user import UserProfile
from abc import ABC, abstractmethod
from typing import Optional


class UserProfileRepoInterface(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> list[UserProfile]:
        raise NotImplementedError
