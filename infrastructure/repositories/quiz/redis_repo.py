from typing import Optional
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from app.domain.entities.quiz import Quiz
from app.domain.entities.question import Question


class RedisQuizRepo(QuizRepoInterface):
    """
    Read access to the content written by content management. Quiz and question
    ids are issued already prefixed, so they are used as keys verbatim.
    """
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool

    async def get(self, quiz_id: str) -> Optional[Quiz]:
        async with await self.redis_pool.get_connection() as conn:
            data = await conn.get(quiz_id)
            if data:
                return Quiz.model_validate_json(data)
            return None

    async def save(self, quiz: Quiz) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(quiz.id, quiz.to_json())

    async def get_questions(self, question_ids: list[str]) -> list[Question]:
        if not question_ids:
            return []
        async with await self.redis_pool.get_connection() as conn:
            values = await conn.mget(question_ids)
            # Questions deleted after the quiz was composed are skipped, order is kept
            return [Question.model_validate_json(value) for value in values if value is not None]

    async def save_question(self, question: Question) -> None:
        async with await self.redis_pool.get_connection() as conn:
            await conn.set(question.id, question.to_json())
