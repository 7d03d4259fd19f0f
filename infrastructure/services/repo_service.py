# Container for all repositories, services and runtime settings used by the handlers.
class RepoService:
    def __init__(self, session_repo, quiz_repo, profile_repo,
                 fastest_repo, ranking_repo, auth_service,
                 ranking_cache_ttl_ms=30000, default_time_limit=30,
                 points_per_correct_answer=100):
        self.session_repo = session_repo
        self.quiz_repo = quiz_repo
        self.profile_repo = profile_repo
        self.fastest_repo = fastest_repo
        self.ranking_repo = ranking_repo
        self.auth_service = auth_service
        self.ranking_cache_ttl_ms = ranking_cache_ttl_ms
        self.default_time_limit = default_time_limit
        self.points_per_correct_answer = points_per_correct_answer
