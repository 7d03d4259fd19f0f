from aiohttp import web
from infrastructure.services.repo_service import RepoService
from presentation.middlewares.repo_middleware import repo_middleware
from presentation.middlewares.auth_middleware import auth_middleware
from presentation.routers import router_quiz, router_user, router_ranking, router_system
import presentation.handlers.quiz  # noqa: F401  registers routes
import presentation.handlers.user  # noqa: F401
import presentation.handlers.ranking  # noqa: F401
import presentation.handlers.system  # noqa: F401


def create_app(repo_service: RepoService) -> web.Application:
    app = web.Application(middlewares=[repo_middleware(repo_service), auth_middleware])
    for router in (router_quiz, router_user, router_ranking, router_system):
        app.add_routes(router)
    return app
