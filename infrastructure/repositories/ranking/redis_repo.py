import logging
from typing import Optional
from pydantic import TypeAdapter
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.ranking_repo import RankingRepoInterface
from app.domain.entities.ranking import RankingEntry, RankingHistoryRecord


logger = logging.getLogger('repositories')

CACHE_KEY = 'ranking:cache'
CACHE_TIMESTAMP_KEY = 'ranking:cache:timestamp'

_ranking_adapter = TypeAdapter(list[RankingEntry])


class RedisRankingRepo(RankingRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get_cache(self) -> Optional[tuple[list[RankingEntry], int]]:
        async with await self.redis_pool.get_connection() as conn:
            data, timestamp = await conn.mget([CACHE_KEY, CACHE_TIMESTAMP_KEY])
            # Both halves are needed to decide freshness
            if not data or not timestamp:
                if data or timestamp:
                    logger.warning("Ranking cache is missing one of its keys, treating it as a miss")
                return None
            return _ranking_adapter.validate_json(data), int(timestamp)

    async def save_cache(self, ranking: list[RankingEntry], timestamp_ms: int) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(CACHE_KEY, _ranking_adapter.dump_json(ranking, by_alias=True))
            await conn.set(CACHE_TIMESTAMP_KEY, str(timestamp_ms))

    async def delete_cache(self) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.delete(CACHE_KEY, CACHE_TIMESTAMP_KEY)

    async def add_history(self, record: RankingHistoryRecord, timestamp_ms: int) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(f'ranking:{timestamp_ms}:{record.user_id}', record.to_json())
