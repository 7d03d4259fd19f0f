import pytest
from aiohttp import web

from infrastructure.services.auth_service import HttpAuthService


async def provider_user(request: web.Request):
    if request.headers.get('Authorization') != 'Bearer good' or request.headers.get('apikey') != 'key':
        return web.json_response({'msg': 'invalid JWT'}, status=401)
    return web.json_response({'id': request.app['user_id'], 'email': 'u1@example.com'})


@pytest.fixture
async def auth_service(aiohttp_server, profile_repo):
    """HttpAuthService pointed at a stand-in identity provider."""
    provider = web.Application()
    provider['user_id'] = 'u1'
    provider.router.add_get('/auth/v1/user', provider_user)
    server = await aiohttp_server(provider)

    service = HttpAuthService(auth_url=str(server.make_url('/auth/v1')), api_key='key', profile_repo=profile_repo)
    yield service
    await service.close()


async def test_valid_token_is_enriched_with_profile(auth_service, seed_profile):
    await seed_profile('u1', name='Player One', role='admin')

    user = await auth_service.get_authenticated_user('Bearer good')

    assert (user.id, user.email, user.name, user.role) == ('u1', 'u1@example.com', 'Player One', 'admin')
    assert user.is_admin


async def test_rejected_token(auth_service, seed_profile):
    await seed_profile('u1')

    assert await auth_service.get_authenticated_user('Bearer bad') is None


@pytest.mark.parametrize('header', [None, '', 'good', 'Basic good', 'Bearer '])
async def test_malformed_header(auth_service, header):
    assert await auth_service.get_authenticated_user(header) is None


async def test_user_without_profile(auth_service):
    assert await auth_service.get_authenticated_user('Bearer good') is None
