from aiohttp import web
import logging
from presentation.routers import router_ranking
from presentation.utils import admin_required, error_handler, ranking_use_cases, scoring_use_cases


logger = logging.getLogger('handlers')

DEFAULT_TOP_LIMIT = 10


@router_ranking.get('/ranking')
@error_handler
async def global_ranking(request: web.Request):
    ranking = await ranking_use_cases(request['repo_service']).get_global_ranking()
    return web.json_response({'ranking': [entry.to_dict() for entry in ranking]})


@router_ranking.get('/ranking/top/{limit}')
@error_handler
async def top_players(request: web.Request):
    try:
        limit = int(request.match_info['limit'])
    except ValueError:
        limit = DEFAULT_TOP_LIMIT
    players = await ranking_use_cases(request['repo_service']).get_top_players(limit)
    return web.json_response({'topPlayers': [entry.to_dict() for entry in players]})


@router_ranking.get('/ranking/position')
@error_handler
async def user_position(request: web.Request):
    position = await ranking_use_cases(request['repo_service']).get_user_position(request['user'].id)
    return web.json_response({'position': position})


@router_ranking.get('/ranking/fastest/{quiz_id}')
@error_handler
async def fastest_by_quiz(request: web.Request):
    entry = await scoring_use_cases(request['repo_service']).get_fastest_by_quiz(request.match_info['quiz_id'])
    return web.json_response({'fastest': entry.to_dict() if entry else None})


@router_ranking.post('/ranking/reset')
@error_handler
@admin_required
async def reset_ranking(request: web.Request):
    repo_service = request['repo_service']
    logger.info("RESETTING RANKING AND FASTEST RECORDS", extra={'user': request['user'].id})
    await ranking_use_cases(repo_service).reset_all_rankings()
    await scoring_use_cases(repo_service).reset_all_fastest()
    return web.json_response({'success': True,
                              'message': 'All rankings and fastest records have been reset'})
