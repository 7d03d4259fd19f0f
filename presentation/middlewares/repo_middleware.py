from aiohttp import web


def repo_middleware(repo_service):
    @web.middleware
    async def middleware(request: web.Request, handler):
        request['repo_service'] = repo_service
        return await handler(request)
    return middleware
