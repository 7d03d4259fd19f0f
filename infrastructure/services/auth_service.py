import logging
from typing import Optional
import aiohttp
from app.domain.services_interfaces.auth_service import AuthServiceInterface
from app.domain.repositories_interfaces.user_profile_repo import UserProfileRepoInterface
from app.domain.entities.user import User


logger = logging.getLogger('external_apis')


class HttpAuthService(AuthServiceInterface):
    """
    Validates bearer tokens against the external identity provider and enriches
    the result with the stored profile (display name and role).
    """
    def __init__(self, auth_url: str, api_key: str, profile_repo: UserProfileRepoInterface):
        self.auth_url = auth_url.rstrip('/')
        self.api_key = api_key
        self.profile_repo = profile_repo
        self.aiohttp_client = None

    def _client(self) -> aiohttp.ClientSession:
        # Created lazily so the session is bound to the running event loop
        if self.aiohttp_client is None:
            self.aiohttp_client = aiohttp.ClientSession()
        return self.aiohttp_client

    async def get_authenticated_user(self, authorization: Optional[str]) -> Optional[User]:
        if not authorization:
            return None
        parts = authorization.split(' ')
        if len(parts) != 2 or parts[0].lower() != 'bearer' or not parts[1]:
            return None
        token = parts[1]

        headers = {'Authorization': f'Bearer {token}', 'apikey': self.api_key}
        async with self._client().get(f'{self.auth_url}/user', headers=headers) as response:
            if response.status != 200:
                logger.info(f"Token rejected by auth provider with status {response.status}")
                return None
            data = await response.json()

        user_id = data.get('id')
        if not user_id:
            return None
        profile = await self.profile_repo.get(user_id)
        if profile is None:
            logger.info("Authenticated user has no profile", extra={'user': user_id})
            return None
        return User(id=user_id, email=data.get('email') or '', name=profile.name, role=profile.role)

    async def close(self) -> None:
        if self.aiohttp_client is not None:
            await self.aiohttp_client.close()
            self.aiohttp_client = None
