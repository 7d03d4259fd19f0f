from app.domain.entities.base import CamelModel


class RankingEntry(CamelModel):
    position: int
    user_id: str
    name: str = ''
    total_score: int
    games_played: int
    average: str


class RankingStats(CamelModel):
    total_players: int
    average_score: float
    highest_score: int


class RankingHistoryRecord(CamelModel):
    """Audit record written once per finished quiz. Never read back by the engines."""
    user_id: str
    session_id: str
    score: int
    completed_at: str
