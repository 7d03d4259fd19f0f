# Shared fixtures: an in-process Redis, the repositories on top of it and the use cases.
from typing import Optional

import fakeredis
import pytest

from app.domain.entities.question import Question
from app.domain.entities.quiz import Quiz
from app.domain.entities.user import User, UserProfile
from app.domain.services_interfaces.auth_service import AuthServiceInterface
from app.use_cases.ranking.ranking_use_cases import RankingUseCases
from app.use_cases.scoring.scoring_use_cases import ScoringUseCases
from app.use_cases.sessions.session_use_cases import SessionUseCases
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.fastest.redis_repo import RedisFastestRepo
from infrastructure.repositories.quiz.redis_repo import RedisQuizRepo
from infrastructure.repositories.ranking.redis_repo import RedisRankingRepo
from infrastructure.repositories.session.redis_repo import RedisSessionRepo
from infrastructure.repositories.user_profile.redis_repo import RedisUserProfileRepo
from infrastructure.services.repo_service import RepoService


START_TIME = 1_700_000_000.0


class FakeClock:
    """Callable clock in epoch seconds that only moves when told to."""

    def __init__(self, now: float = START_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class IdentityRandom:
    """randint(a, b) always returns b, so Fisher-Yates never swaps."""

    def randint(self, a: int, b: int) -> int:
        return b


class FakeAuthService(AuthServiceInterface):
    def __init__(self, users: dict):
        self.users = users

    async def get_authenticated_user(self, authorization: Optional[str]) -> Optional[User]:
        if not authorization or not authorization.startswith('Bearer '):
            return None
        return self.users.get(authorization[len('Bearer '):])

    async def close(self) -> None:
        pass


def make_question(question_id: str, correct: str = 'A', team: str = 'general') -> Question:
    return Question(id=question_id, text=f'Prompt of {question_id}', options=['A', 'B', 'C', 'D'],
                    correct_answer=correct, team=team)


# =============================================================================
# STORE
# =============================================================================


@pytest.fixture
async def redis_pool():
    pool = RedisPool(host='localhost', port=6379, db=0)
    # A dedicated server per test keeps the data isolated
    pool.pool = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield pool
    await pool.close_pool()


@pytest.fixture
def redis(redis_pool):
    """Direct access to the underlying client for asserting on raw keys."""
    return redis_pool.pool


@pytest.fixture
def session_repo(redis_pool):
    return RedisSessionRepo(redis_pool)


@pytest.fixture
def quiz_repo(redis_pool):
    return RedisQuizRepo(redis_pool)


@pytest.fixture
def profile_repo(redis_pool):
    return RedisUserProfileRepo(redis_pool)


@pytest.fixture
def fastest_repo(redis_pool):
    return RedisFastestRepo(redis_pool)


@pytest.fixture
def ranking_repo(redis_pool):
    return RedisRankingRepo(redis_pool)


# =============================================================================
# USE CASES
# =============================================================================


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_use_cases(session_repo, quiz_repo, clock):
    return SessionUseCases(session_repo=session_repo, quiz_repo=quiz_repo, rng=IdentityRandom(), clock=clock)


@pytest.fixture
def ranking_use_cases(profile_repo, ranking_repo, clock):
    return RankingUseCases(profile_repo=profile_repo, ranking_repo=ranking_repo, cache_ttl_ms=30000, clock=clock)


@pytest.fixture
def scoring_use_cases(session_repo, profile_repo, fastest_repo, ranking_repo, ranking_use_cases, clock):
    return ScoringUseCases(session_repo=session_repo, profile_repo=profile_repo, fastest_repo=fastest_repo,
                           ranking_repo=ranking_repo, ranking_use_cases=ranking_use_cases, clock=clock)


# =============================================================================
# DATA
# =============================================================================


@pytest.fixture
def seed_quiz(quiz_repo):
    """Stores a quiz and its questions, returns the quiz."""
    async def _seed(quiz_id: str, questions: list[Question], **fields) -> Quiz:
        for question in questions:
            await quiz_repo.save_question(question)
        quiz = Quiz(id=quiz_id, name=f'Quiz {quiz_id}', question_ids=[q.id for q in questions], **fields)
        await quiz_repo.save(quiz)
        return quiz
    return _seed


@pytest.fixture
def seed_profile(profile_repo):
    async def _seed(user_id: str, name: str = '', total_score: int = 0, games_played: int = 0,
                    role: str = 'player') -> UserProfile:
        profile = UserProfile(id=user_id, email=f'{user_id}@example.com', name=name or user_id.upper(),
                              role=role, total_score=total_score, games_played=games_played)
        await profile_repo.save(profile)
        return profile
    return _seed


@pytest.fixture
async def two_question_quiz(seed_quiz):
    return await seed_quiz('quiz:1', [make_question('question:1', correct='A'),
                                      make_question('question:2', correct='C')])


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture
def auth_service():
    return FakeAuthService({
        'player-token': User(id='u1', email='u1@example.com', name='Player One', role='player'),
        'admin-token': User(id='admin', email='admin@example.com', name='Admin', role='admin'),
    })


@pytest.fixture
def repo_service(session_repo, quiz_repo, profile_repo, fastest_repo, ranking_repo, auth_service):
    return RepoService(session_repo=session_repo, quiz_repo=quiz_repo, profile_repo=profile_repo,
                       fastest_repo=fastest_repo, ranking_repo=ranking_repo, auth_service=auth_service)
