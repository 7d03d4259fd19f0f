import logging
from typing import Optional
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.fastest_repo import FastestRepoInterface
from app.domain.entities.fastest_entry import FastestEntry


logger = logging.getLogger('repositories')

FASTEST_PREFIX = 'fastest:'


class RedisFastestRepo(FastestRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get(self, quiz_id: str) -> Optional[FastestEntry]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(f'{FASTEST_PREFIX}{quiz_id}')
            if data:
                return FastestEntry.model_validate_json(data)
            return None

    async def save(self, entry: FastestEntry) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(f'{FASTEST_PREFIX}{entry.quiz_id}', entry.to_json())

    async def delete_all(self) -> int:
        async with await self.redis_pool.get_connection() as conn:
            keys = [key async for key in conn.scan_iter(match=f'{FASTEST_PREFIX}*')]
            if keys:
                await conn.delete(*keys)
            logger.info(f"Deleted {len(keys)} fastest records")
            return len(keys)
