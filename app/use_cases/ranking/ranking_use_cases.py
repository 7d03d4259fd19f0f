import logging
import time
from typing import Callable, Optional
from app.domain.repositories_interfaces.user_profile_repo import UserProfileRepoInterface
from app.domain.repositories_interfaces.ranking_repo import RankingRepoInterface
from app.domain.entities.ranking import RankingEntry, RankingStats
from app.use_cases.utils import average, format_one_decimal, round_one_decimal


logger = logging.getLogger('use_cases')


class RankingUseCases:
    """
    Global leaderboard derived from all user profiles.

    The computed ranking is cached in the store together with its write time.
    Freshness is checked here on every read: a cache older than cache_ttl_ms
    is ignored and rebuilt. Score changes call invalidate_cache explicitly.
    """
    def __init__(self, profile_repo: UserProfileRepoInterface,
                 ranking_repo: RankingRepoInterface,
                 cache_ttl_ms: int = 30000,
                 clock: Callable[[], float] = time.time):
        self.profile_repo = profile_repo
        self.ranking_repo = ranking_repo
        self.cache_ttl_ms = cache_ttl_ms
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    async def get_global_ranking(self) -> list[RankingEntry]:
        cached = await self._get_from_cache()
        if cached is not None:
            return cached

        ranking = await self.calculate_ranking()
        await self.ranking_repo.save_cache(ranking, self._now_ms())
        return ranking

    async def _get_from_cache(self) -> Optional[list[RankingEntry]]:
        cached = await self.ranking_repo.get_cache()
        if cached is None:
            return None
        ranking, timestamp_ms = cached
        if self._now_ms() - timestamp_ms > self.cache_ttl_ms:
            return None
        return ranking

    async def calculate_ranking(self) -> list[RankingEntry]:
        profiles = [p for p in await self.profile_repo.get_all() if p.games_played > 0]
        # sort is stable, equal scores keep the scan order
        profiles.sort(key=lambda p: p.total_score, reverse=True)
        return [
            RankingEntry(
                position=i + 1,
                user_id=profile.id,
                name=profile.name,
                total_score=profile.total_score,
                games_played=profile.games_played,
                average=format_one_decimal(average(profile.total_score, profile.games_played)),
            )
            for i, profile in enumerate(profiles)
        ]

    async def invalidate_cache(self) -> None:
        await self.ranking_repo.delete_cache()

    async def get_user_position(self, user_id: str) -> Optional[int]:
        ranking = await self.get_global_ranking()
        for entry in ranking:
            if entry.user_id == user_id:
                return entry.position
        return None

    async def get_top_players(self, limit: int = 10) -> list[RankingEntry]:
        ranking = await self.get_global_ranking()
        return ranking[:max(limit, 0)]

    async def get_ranking_stats(self) -> RankingStats:
        ranking = await self.get_global_ranking()
        if not ranking:
            return RankingStats(total_players=0, average_score=0, highest_score=0)
        total = sum(entry.total_score for entry in ranking)
        return RankingStats(
            total_players=len(ranking),
            average_score=round_one_decimal(total / len(ranking)),
            highest_score=ranking[0].total_score,
        )

    async def reset_all_rankings(self) -> int:
        """
        Zeroes score and games played of every profile, then drops the cached ranking.

        Profiles are written one by one. Returns the number of profiles reset.
        """
        profiles = await self.profile_repo.get_all()
        for profile in profiles:
            profile.total_score = 0
            profile.games_played = 0
            await self.profile_repo.save(profile)
        await self.invalidate_cache()
        logger.info(f"Reset ranking of {len(profiles)} profiles")
        return len(profiles)
