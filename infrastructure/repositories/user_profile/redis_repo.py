from typing import Optional
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.user_profile_repo import UserProfileRepoInterface
from app.domain.entities.user import UserProfile


PROFILE_PREFIX = 'user_profile:'


class RedisUserProfileRepo(UserProfileRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get(self, user_id: str) -> Optional[UserProfile]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'{PROFILE_PREFIX}{user_id}')
            if data:
                return UserProfile.model_validate_json(data)
            return None

    async def save(self, profile: UserProfile) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(f'{PROFILE_PREFIX}{profile.id}', profile.to_json())

    async def get_all(self) -> list[UserProfile]:
        async with await self.redis_pool.get_connection() as conn:
            keys = [key async for key in conn.scan_iter(match=f'{PROFILE_PREFIX}*')]
            if not keys:
                return []
            values = await conn.mget(keys)
            # A profile can disappear between SCAN and MGET
            return [UserProfile.model_validate_json(value) for value in values if value is not None]
