import functools
import json
import logging
from aiohttp import web
from app.domain.errors import NotFoundError, StateError, ValidationError
from app.use_cases.sessions.session_use_cases import SessionUseCases
from app.use_cases.scoring.scoring_use_cases import ScoringUseCases
from app.use_cases.ranking.ranking_use_cases import RankingUseCases
from infrastructure.services.repo_service import RepoService


logger = logging.getLogger('handlers')


def error_handler(func):
    """
    A decorator that wraps request handlers to translate errors into responses.

    Client errors raised by the use cases are returned with their message:
    ValidationError as 400, NotFoundError as 404 and StateError as 409.
    Any other exception is logged with its traceback and answered with a
    generic 500 response.

    :param func: The asynchronous handler to be wrapped.
    :return: The wrapped handler with error handling.
    """
    @functools.wraps(func)
    async def wrapper(request: web.Request):
        try:
            return await func(request)
        except web.HTTPException:
            raise
        except StateError as e:
            return web.json_response({'error': e.message}, status=409)
        except NotFoundError as e:
            return web.json_response({'error': e.message}, status=404)
        except ValidationError as e:
            return web.json_response({'error': e.message}, status=400)
        except Exception as e:
            user = request.get('user')
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True,
                         extra={'user': user.id if user else 'ANONYMOUS'})
            return web.json_response({'error': 'Internal server error'}, status=500)
    return wrapper


def admin_required(func):
    @functools.wraps(func)
    async def wrapper(request: web.Request):
        if not request['user'].is_admin:
            return web.json_response({'error': 'Admin access required'}, status=403)
        return await func(request)
    return wrapper


async def read_json(request: web.Request) -> dict:
    try:
        body = await request.json()
    except json.JSONDecodeError:
        raise ValidationError('Invalid JSON body')
    if not isinstance(body, dict):
        raise ValidationError('Invalid JSON body')
    return body


def ranking_use_cases(repo_service: RepoService) -> RankingUseCases:
    return RankingUseCases(profile_repo=repo_service.profile_repo,
                           ranking_repo=repo_service.ranking_repo,
                           cache_ttl_ms=repo_service.ranking_cache_ttl_ms)


def session_use_cases(repo_service: RepoService) -> SessionUseCases:
    return SessionUseCases(session_repo=repo_service.session_repo,
                           quiz_repo=repo_service.quiz_repo,
                           default_time_limit=repo_service.default_time_limit,
                           points_per_correct_answer=repo_service.points_per_correct_answer)


def scoring_use_cases(repo_service: RepoService) -> ScoringUseCases:
    return ScoringUseCases(session_repo=repo_service.session_repo,
                           profile_repo=repo_service.profile_repo,
                           fastest_repo=repo_service.fastest_repo,
                           ranking_repo=repo_service.ranking_repo,
                           ranking_use_cases=ranking_use_cases(repo_service))
