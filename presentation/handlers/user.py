from aiohttp import web
from presentation.routers import router_user
from presentation.utils import error_handler, scoring_use_cases


@router_user.get('/user/stats')
@error_handler
async def user_stats(request: web.Request):
    stats = await scoring_use_cases(request['repo_service']).get_user_stats(request['user'].id)
    return web.json_response({'stats': stats.to_dict()})
