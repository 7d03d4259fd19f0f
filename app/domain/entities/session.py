from datetime import datetime
from enum import Enum
from typing import Optional
from app.domain.entities.base import CamelModel
from app.domain.entities.question import Question


class SessionStatus(str, Enum):
    ACTIVE = 'active'
    COMPLETED = 'completed'


class Answer(CamelModel):
    question_id: str
    answer: str
    correct: bool
    points: int


"""
Session Entity:
1. session_id (str): "session:{user_id}:{quiz_id}:{epoch_ms}". Also the store key of the record.
2. user_id (str): Owner of the attempt.
3. quiz_id (str): Quiz being played.
4. team (str): Team filter applied when the questions were materialized.
5. questions (list[Question]): Filtered and shuffled questions, fixed for the whole attempt.
6. current_question (int): Index of the question to be answered next. Only increases.
7. score (int): Running score.
8. answers (list[Answer]): Recorded answers in submission order.
9. started_at (datetime): Start time.
10. status (SessionStatus): active until finished, completed afterwards.
11. completed_at (datetime, None): Set once when the attempt is finished.
"""
class Session(CamelModel):
    session_id: str
    user_id: str
    quiz_id: str
    team: str = 'general'
    questions: list[Question] = []
    current_question: int = 0
    score: int = 0
    answers: list[Answer] = []
    started_at: datetime
    status: SessionStatus = SessionStatus.ACTIVE
    completed_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def duration_ms(self) -> int:
        if self.completed_at is None:
            return 0
        return max(0, int((self.completed_at - self.started_at).total_seconds() * 1000))

    def current(self) -> Optional[Question]:
        if self.current_question < len(self.questions):
            return self.questions[self.current_question]
        return None
