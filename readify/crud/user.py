# readify/crud/user.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from readify.models.user import User


class CRUDUser:
    async def get_by_id(self, db: AsyncSession, user_id: int) -> Optional[User]:
        q = select(User).where(User.id == user_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def create(self, db: AsyncSession, username: str) -> User:
        user = User(username=username)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user

    async def add_post_karma(self, db: AsyncSession, user: User, amount: int = 1) -> User:
        user.post_karma = (user.post_karma or 0) + amount
        await db.commit()
        return user

user = CRUDUser()
