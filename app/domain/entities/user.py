from typing import Optional
from app.domain.entities.base import CamelModel


"""
User Entity:
1. id (str): Identifier issued by the external auth provider.
2. email (str): E-mail address, may be empty.
3. name (str): Display name taken from the stored profile.
4. role (str): "player" or "admin".
"""
class User(CamelModel):
    id: str
    email: str = ''
    name: str = ''
    role: str = 'player'

    @property
    def is_admin(self) -> bool:
        return self.role == 'admin'


"""
UserProfile Entity:
Identity fields (email, name, role) are written by the auth service.
total_score and games_played are owned by the scoring engine.
"""
class UserProfile(CamelModel):
    id: str
    email: Optional[str] = None
    name: str = ''
    role: str = 'player'
    total_score: int = 0
    games_played: int = 0
