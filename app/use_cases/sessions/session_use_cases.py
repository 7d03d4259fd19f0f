import logging
import random
import time
from datetime import datetime, timezone
from typing import Callable, Optional
from app.domain.repositories_interfaces.session_repo import SessionRepoInterface
from app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from app.domain.entities.session import Answer, Session
from app.domain.entities.question import Question, QuestionView
from app.domain.entities.results import AnswerResult, CurrentQuestionResult, StartSessionResult
from app.domain.errors import NotFoundError, StateError, ValidationError


logger = logging.getLogger('use_cases')

GENERAL_TEAM = 'general'


async def load_active_session(session_repo: SessionRepoInterface, user_id: str) -> Session:
    """
    Follows the user's active-session pointer to the session record.

    :raises NotFoundError: if there is no pointer or the record it points to is gone.
    """
    session_id = await session_repo.get_active_session_id(user_id)
    if not session_id:
        raise NotFoundError('No active quiz session')
    session = await session_repo.get(session_id)
    if session is None:
        raise NotFoundError('Session not found')
    return session


class SessionUseCases:
    def __init__(self, session_repo: SessionRepoInterface,
                 quiz_repo: QuizRepoInterface,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time,
                 default_time_limit: int = 30,
                 points_per_correct_answer: int = 100):
        self.session_repo = session_repo
        self.quiz_repo = quiz_repo
        self.rng = rng or random.Random()
        self.clock = clock
        self.default_time_limit = default_time_limit
        self.points_per_correct_answer = points_per_correct_answer

    def shuffle(self, items: list) -> list:
        """
        Returns a uniformly shuffled copy of items (Fisher-Yates).

        Uses only rng.randint so that tests can drive the permutation with a stub.
        """
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    async def start_session(self, user_id: str, quiz_id: str, team: Optional[str] = None) -> StartSessionResult:
        """
        Starts a new attempt of a quiz for the user.

        Any session the user was playing before is left as it is: the active-session
        pointer is simply overwritten, so the old session becomes unreachable.

        :param user_id: The player starting the quiz.
        :param quiz_id: Id of the quiz to play.
        :param team: Optional team filter. Questions of the team and "general" ones are kept.
        :return: The new session id, number of questions, quiz id and time limit per question.
        """
        if not quiz_id:
            raise ValidationError('Quiz is required')
        if not isinstance(quiz_id, str):
            raise ValidationError('Quiz id must be a string')
        if team is not None and not isinstance(team, str):
            raise ValidationError('Team must be a string')

        quiz = await self.quiz_repo.get(quiz_id)
        if quiz is None:
            raise NotFoundError('Quiz not found')
        if not quiz.question_ids:
            raise ValidationError('No questions available for this quiz')

        questions = await self.quiz_repo.get_questions(quiz.question_ids)
        questions = [q for q in questions if not team or q.team in (team, GENERAL_TEAM)]
        if not questions:
            raise ValidationError('No questions available for this team')

        now = self.clock()
        session_id = f'session:{user_id}:{quiz_id}:{int(now * 1000)}'
        session = Session(
            session_id=session_id,
            user_id=user_id,
            quiz_id=quiz_id,
            team=team or quiz.team or GENERAL_TEAM,
            questions=self.shuffle(questions),
            started_at=datetime.fromtimestamp(now, tz=timezone.utc),
        )
        await self.session_repo.save(session)
        await self.session_repo.set_active_session_id(user_id, session_id)
        logger.info(f"Started session {session_id} with {len(session.questions)} questions",
                    extra={'user': user_id})

        return StartSessionResult(
            session_id=session_id,
            total_questions=len(session.questions),
            quiz_id=quiz_id,
            time_limit=quiz.time_limit or self.default_time_limit,
        )

    async def _playable_session(self, user_id: str) -> tuple[Session, Question]:
        session = await load_active_session(self.session_repo, user_id)
        if not session.is_active:
            raise StateError('Quiz session is not active')
        question = session.current()
        if question is None:
            raise NotFoundError('No more questions')
        return session, question

    async def get_current_question(self, user_id: str) -> CurrentQuestionResult:
        """
        Returns the question the user has to answer next, without its correct answer.

        Read-only: calling it repeatedly returns the same question and counters.
        """
        session, question = await self._playable_session(user_id)
        return CurrentQuestionResult(
            question=QuestionView.from_question(question),
            current_question=session.current_question + 1,
            total_questions=len(session.questions),
            score=session.score,
        )

    async def submit_answer(self, user_id: str, answer: Optional[str]) -> AnswerResult:
        """
        Records the answer to the current question and moves on to the next one.

        The answer must match the correct option exactly. A missing answer (time-out)
        is recorded as an empty, wrong answer. There is no guard against the same
        caller submitting twice in a row: each call consumes one question.
        """
        if answer is not None and not isinstance(answer, str):
            raise ValidationError('Answer must be a string')
        session, question = await self._playable_session(user_id)
        answer = answer or ''

        correct = answer == question.correct_answer
        points = self.points_per_correct_answer if correct else 0

        session.score += points
        session.answers.append(Answer(question_id=question.id, answer=answer, correct=correct, points=points))
        session.current_question += 1
        await self.session_repo.save(session)

        has_more_questions = session.current_question < len(session.questions)
        logger.info(f"Answer to {question.id} in {session.session_id}: correct={correct}",
                    extra={'user': user_id})
        return AnswerResult(
            correct=correct,
            correct_answer=question.correct_answer,
            points=points,
            total_score=session.score,
            has_more_questions=has_more_questions,
        )

    async def get_session(self, session_id: str) -> Session:
        session = await self.session_repo.get(session_id)
        if session is None:
            raise NotFoundError('Session not found')
        return session

    async def has_active_session(self, user_id: str) -> bool:
        return bool(await self.session_repo.get_active_session_id(user_id))
