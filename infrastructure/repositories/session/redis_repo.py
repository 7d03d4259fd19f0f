from typing import Optional
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.session_repo import SessionRepoInterface
from app.domain.entities.session import Session


class RedisSessionRepo(SessionRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    @staticmethod
    def _active_key(user_id: str) -> str:
        return f'user:{user_id}:active_session'

    async def get(self, session_id: str) -> Optional[Session]:
        async with await self.redis_pool.get_connection() as conn:
            # The session id is the key of the session record
            data = await conn.get(session_id)
            if data:
                return Session.model_validate_json(data)
            return None

    async def save(self, session: Session) -> None:
        async with await self.redis_pool.get_connection() as conn:
            # Used both for creating and updating a session
            await conn.set(session.session_id, session.to_json())

    async def get_active_session_id(self, user_id: str) -> Optional[str]:
        async with await self.redis_pool.get_connection() as conn:
            return await conn.get(self._active_key(user_id))

    async def set_active_session_id(self, user_id: str, session_id: str) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(self._active_key(user_id), session_id)

    async def clear_active_session_id(self, user_id: str) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.delete(self._active_key(user_id))
