from abc import ABC, abstractmethod
from typing import Optional
from app.domain.entities.user import User


class AuthServiceInterface(ABC):
    @abstractmethod
    async def get_authenticated_user(self, authorization: Optional[str]) -> Optional[User]:
        """
        Resolves the caller behind an Authorization header.

        :param authorization: The raw header value, expected as "Bearer <token>"
        :return: The authenticated user, or None if the token is missing or rejected
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
