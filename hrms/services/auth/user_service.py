from typing import Optional
from sqlalchemy import select
from hrms.models.auth.user import User
from hrms.services.base_service import EntityService


class UserService(EntityService[User]):
    model = User
    entity_name = "User"

    async def find_user_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.username == username).order_by(User.id).limit(1)
        )
        return result.scalar_one_or_none()
