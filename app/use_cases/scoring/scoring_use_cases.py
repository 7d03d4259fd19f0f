import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional
from app.domain.repositories_interfaces.session_repo import SessionRepoInterface
from app.domain.repositories_interfaces.user_profile_repo import UserProfileRepoInterface
from app.domain.repositories_interfaces.fastest_repo import FastestRepoInterface
from app.domain.repositories_interfaces.ranking_repo import RankingRepoInterface
from app.domain.entities.session import Session, SessionStatus
from app.domain.entities.fastest_entry import FastestEntry
from app.domain.entities.ranking import RankingHistoryRecord
from app.domain.entities.results import FinishResult, UserStats
from app.domain.errors import NotFoundError, StateError
from app.use_cases.sessions.session_use_cases import load_active_session
from app.use_cases.ranking.ranking_use_cases import RankingUseCases
from app.use_cases.utils import average, round_one_decimal


logger = logging.getLogger('use_cases')


class ScoringUseCases:
    def __init__(self, session_repo: SessionRepoInterface,
                 profile_repo: UserProfileRepoInterface,
                 fastest_repo: FastestRepoInterface,
                 ranking_repo: RankingRepoInterface,
                 ranking_use_cases: RankingUseCases,
                 clock: Callable[[], float] = time.time):
        self.session_repo = session_repo
        self.profile_repo = profile_repo
        self.fastest_repo = fastest_repo
        self.ranking_repo = ranking_repo
        self.ranking_use_cases = ranking_use_cases
        self.clock = clock

    async def finish_quiz(self, user_id: str) -> FinishResult:
        """
        Closes the user's active session and books its score.

        The steps run one after another without a transaction: the session is marked
        completed, the active-session pointer is cleared, the profile is credited, the
        quiz's fastest record is updated, an audit record is written and finally the
        ranking cache is invalidated. A failure part way leaves the earlier steps applied.

        :param user_id: The player finishing the quiz.
        :return: Final score, number of questions, number of correct answers and duration.
        """
        session = await load_active_session(self.session_repo, user_id)
        if not session.is_active:
            raise StateError('Quiz session is not active')

        now = self.clock()
        session.status = SessionStatus.COMPLETED
        session.completed_at = datetime.fromtimestamp(now, tz=timezone.utc)
        await self.session_repo.save(session)
        await self.session_repo.clear_active_session_id(user_id)

        await self.update_user_score(user_id, session.score)
        await self.track_fastest_player(session)

        record = RankingHistoryRecord(
            user_id=user_id,
            session_id=session.session_id,
            score=session.score,
            completed_at=session.completed_at.isoformat(),
        )
        await self.ranking_repo.add_history(record, int(now * 1000))
        await self.ranking_use_cases.invalidate_cache()

        correct_answers = sum(1 for answer in session.answers if answer.correct)
        logger.info(f"Finished session {session.session_id} with score {session.score}",
                    extra={'user': user_id})
        return FinishResult(
            final_score=session.score,
            total_questions=len(session.questions),
            correct_answers=correct_answers,
            duration_ms=session.duration_ms,
        )

    async def update_user_score(self, user_id: str, score_to_add: int) -> None:
        profile = await self.profile_repo.get(user_id)
        if profile is None:
            # Nothing to credit: the score of this session is dropped
            logger.warning("No profile to credit score to", extra={'user': user_id})
            return
        profile.total_score += score_to_add
        profile.games_played += 1
        await self.profile_repo.save(profile)

    async def get_user_stats(self, user_id: str) -> UserStats:
        profile = await self.profile_repo.get(user_id)
        if profile is None:
            return UserStats(total_score=0, games_played=0, average_score=0)
        return UserStats(
            total_score=profile.total_score,
            games_played=profile.games_played,
            average_score=round_one_decimal(average(profile.total_score, profile.games_played)),
        )

    async def get_session_score(self, session_id: str) -> int:
        session = await self.session_repo.get(session_id)
        if session is None:
            raise NotFoundError('Session not found')
        return session.score

    async def track_fastest_player(self, session: Session) -> None:
        """
        Records the session as the quiz's best run if it beats the stored one.

        A run beats the record when it is faster or when it scored strictly more,
        even if it was slower.
        """
        profile = await self.profile_repo.get(session.user_id)
        if profile is None:
            return

        completed_at = session.completed_at or datetime.now(timezone.utc)
        candidate = FastestEntry(
            user_id=session.user_id,
            name=profile.name,
            quiz_id=session.quiz_id,
            duration_ms=session.duration_ms,
            score=session.score,
            completed_at=completed_at.isoformat(),
        )

        current = await self.fastest_repo.get(session.quiz_id)
        if current is None or current.is_beaten_by(candidate):
            await self.fastest_repo.save(candidate)
            logger.info(f"New best run for {session.quiz_id}: {candidate.duration_ms} ms, {candidate.score} points",
                        extra={'user': session.user_id})

    async def get_fastest_by_quiz(self, quiz_id: str) -> Optional[FastestEntry]:
        return await self.fastest_repo.get(quiz_id)

    async def reset_all_fastest(self) -> int:
        deleted = await self.fastest_repo.delete_all()
        logger.info(f"Reset {deleted} fastest records")
        return deleted
