from pydantic import Field
from typing import Optional
from app.domain.entities.base import CamelModel


"""
Question Entity:
1. id (str): Unique identifier for the question. Also the store key of the record.
2. text (str): The prompt shown to the player. Stored as "question".
3. options (list[str]): The four answer options.
4. correct_answer (str): The correct option, compared by exact string equality.
5. team (str): Category tag. Questions tagged "general" match every team filter.
6. created_by (str, None): Identifier of the author.
7. created_at (str, None): ISO timestamp of creation.
Questions are owned by content management and are read-only here.
"""
class Question(CamelModel):
    id: str
    text: str = Field(alias='question')
    options: list[str] = []
    correct_answer: str
    team: str = 'general'
    created_by: Optional[str] = None
    created_at: Optional[str] = None


class QuestionView(CamelModel):
    """Projection of a question that is safe to send to the player."""
    id: str
    text: str = Field(alias='question')
    options: list[str]

    @classmethod
    def from_question(cls, question: Question) -> 'QuestionView':
        return cls(id=question.id, text=question.text, options=list(question.options))
