from app.domain.entities.session import Session
from abc import ABC, abstractmethod
from typing import Optional


class SessionRepoInterface(ABC):
    @abstractmethod
    async def get(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, session: Session) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_active_session_id(self, user_id: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    async def set_active_session_id(self, user_id: str, session_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def clear_active_session_id(self, user_id: str) -> None:
        raise NotImplementedError
