from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.user import User


class UserRepository:
    """Учётные записи и хранимый refresh-токен (один активный на пользователя)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _first(self, *criteria) -> Optional[User]:
        result = await self.db.execute(select(User).where(*criteria))
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return await self._first(User.id == user_id)

    async def get_by_login(self, login: str) -> Optional[User]:
        return await self._first(User.login == login)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._first(User.email == email)

    async def get_by_refresh_token(self, refresh_token: str) -> Optional[User]:
        # None означает, что токен уже заменён или отозван
        return await self._first(User.refresh_token == refresh_token)

    async def save_refresh_token(self, user: User, refresh_token: str, expires: datetime) -> None:
        user.refresh_token, user.refresh_token_expires = refresh_token, expires
        await self.db.commit()

    async def revoke_refresh_token(self, user: User) -> None:
        user.refresh_token, user.refresh_token_expires = None, None
        await self.db.commit()

    async def create_user(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user
