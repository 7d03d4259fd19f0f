import logging
from aiohttp import web, ClientError


logger = logging.getLogger('handlers')

PUBLIC_PATHS = {'/health', '/metrics'}


@web.middleware
async def auth_middleware(request: web.Request, handler):
    # Token validation is delegated to the external auth provider
    if request.path in PUBLIC_PATHS:
        return await handler(request)
    auth_service = request['repo_service'].auth_service
    try:
        user = await auth_service.get_authenticated_user(request.headers.get('Authorization'))
    except ClientError as e:
        logger.error(f"Auth provider unavailable on {request.path}: {e}", exc_info=True,
                     extra={'user': 'ANONYMOUS'})
        return web.json_response({'error': 'Internal server error'}, status=500)
    if user is None:
        return web.json_response({'error': 'Unauthorized'}, status=401)
    request['user'] = user
    return await handler(request)
