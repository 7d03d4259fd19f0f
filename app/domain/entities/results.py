from app.domain.entities.base import CamelModel
from app.domain.entities.question import QuestionView


class StartSessionResult(CamelModel):
    session_id: str
    total_questions: int
    quiz_id: str
    time_limit: int


class CurrentQuestionResult(CamelModel):
    question: QuestionView
    current_question: int  # 1-based
    total_questions: int
    score: int


class AnswerResult(CamelModel):
    correct: bool
    correct_answer: str
    points: int
    total_score: int
    has_more_questions: bool


class FinishResult(CamelModel):
    final_score: int
    total_questions: int
    correct_answers: int
    duration_ms: int


class UserStats(CamelModel):
    total_score: int
    games_played: int
    average_score: float
