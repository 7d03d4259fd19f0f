from aiohttp import web
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.session.redis_repo import RedisSessionRepo
from infrastructure.repositories.quiz.redis_repo import RedisQuizRepo
from infrastructure.repositories.user_profile.redis_repo import RedisUserProfileRepo
from infrastructure.repositories.fastest.redis_repo import RedisFastestRepo
from infrastructure.repositories.ranking.redis_repo import RedisRankingRepo
from infrastructure.services.auth_service import HttpAuthService
from infrastructure.services.repo_service import RepoService
from config.main_config import (REDIS_HOST, REDIS_PORT, REDIS_DB, AUTH_URL, AUTH_API_KEY, HTTP_HOST, HTTP_PORT,
                                RANKING_CACHE_TTL_MS, DEFAULT_TIME_LIMIT, POINTS_PER_CORRECT_ANSWER)
from config import logging_config  # noqa: F401  Importing config to apply it
from presentation.web_app import create_app


async def init_app() -> web.Application:
    # Creating repo instances and passing them to service for middleware utilization
    redis_pool = RedisPool(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)
    await redis_pool.create_pool()

    profile_repo = RedisUserProfileRepo(redis_pool)
    auth_service = HttpAuthService(auth_url=AUTH_URL, api_key=AUTH_API_KEY, profile_repo=profile_repo)
    repo_service = RepoService(
        session_repo=RedisSessionRepo(redis_pool),
        quiz_repo=RedisQuizRepo(redis_pool),
        profile_repo=profile_repo,
        fastest_repo=RedisFastestRepo(redis_pool),
        ranking_repo=RedisRankingRepo(redis_pool),
        auth_service=auth_service,
        ranking_cache_ttl_ms=RANKING_CACHE_TTL_MS,
        default_time_limit=DEFAULT_TIME_LIMIT,
        points_per_correct_answer=POINTS_PER_CORRECT_ANSWER,
    )

    app = create_app(repo_service)

    async def close_resources(app: web.Application):
        await auth_service.close()
        await redis_pool.close_pool()

    app.on_cleanup.append(close_resources)
    return app


def main():
    web.run_app(init_app(), host=HTTP_HOST, port=HTTP_PORT)


if __name__ == '__main__':
    main()
