import logging
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.core.exceptions import AuthenticationError
from hrms.models.auth.user import User
from hrms.services.auth.user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Username/password lookup against the stored plaintext password.

    This is a placeholder login, not a security boundary: no hashing, no
    tokens, no sessions.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_service = UserService(session)

    async def authenticate(self, username: str, password: str) -> User:
        user = await self.user_service.find_user_by_username(username)
        if user is None or user.password != password:
            logger.warning(f"Failed login attempt for username '{username}'")
            raise AuthenticationError("Invalid credentials")
        if not user.is_active:
            logger.warning(f"Login attempt for inactive user '{username}'")
            raise AuthenticationError("User account is inactive")

        logger.info(f"User {user.id} logged in")
        return user
