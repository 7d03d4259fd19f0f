from typing import Optional
from app.domain.entities.base import CamelModel


"""
Quiz Entity:
1. id (str): Unique identifier for the quiz. Also the store key of the record.
2. name (str): Display name.
3. description (str, None): Optional description.
4. team (str): Team the quiz was created for, "general" when it is open to everybody.
5. question_ids (list[str]): Ordered ids of the questions of the quiz.
6. time_limit (int, None): Seconds per question. Default is applied by the session engine.
Quizzes are owned by content management and are read-only here.
"""
class Quiz(CamelModel):
    id: str
    name: str = ''
    description: Optional[str] = None
    team: str = 'general'
    question_ids: list[str] = []
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    time_limit: Optional[int] = None
