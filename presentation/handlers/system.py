from datetime import datetime, timezone
from aiohttp import web
from presentation.routers import router_system
from presentation.utils import error_handler, ranking_use_cases


@router_system.get('/health')
async def health(request: web.Request):
    return web.json_response({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'modules': {'quizSession': 'ready', 'scoring': 'ready', 'ranking': 'ready'},
    })


@router_system.get('/metrics')
@error_handler
async def metrics(request: web.Request):
    stats = await ranking_use_cases(request['repo_service']).get_ranking_stats()
    return web.json_response({'ranking': stats.to_dict()})
