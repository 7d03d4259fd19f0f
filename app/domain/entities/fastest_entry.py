from app.domain.entities.base import CamelModel


"""
FastestEntry Entity:
Best recorded run of a quiz. One record per quiz id.
1. user_id (str), name (str): Player that made the run.
2. quiz_id (str): Quiz the record belongs to.
3. duration_ms (int): Time from start to finish of the session.
4. score (int): Final score of the session.
5. completed_at (str): ISO timestamp of completion.
"""
class FastestEntry(CamelModel):
    user_id: str
    name: str = ''
    quiz_id: str
    duration_ms: int = 0
    score: int = 0
    completed_at: str

    def is_beaten_by(self, candidate: 'FastestEntry') -> bool:
        # Higher score wins even when the run was slower
        is_faster = candidate.duration_ms > 0 and (self.duration_ms == 0 or candidate.duration_ms < self.duration_ms)
        is_higher_score = candidate.score > self.score
        return is_faster or is_higher_score
