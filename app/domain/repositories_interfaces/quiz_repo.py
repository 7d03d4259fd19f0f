from app.domain.entities.quiz import Quiz
from app.domain.entities.question import Question
from abc import ABC, abstractmethod
from typing import Optional


class QuizRepoInterface(ABC):
    @abstractmethod
    async def get(self, quiz_id: str) -> Optional[Quiz]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, quiz: Quiz) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_questions(self, question_ids: list[str]) -> list[Question]:
        raise NotImplementedError

    @abstractmethod
    async def save_question(self, question: Question) -> None:
        raise NotImplementedError
