# readify/crud/subreddit.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from readify.models.subreddit import Subreddit


class CRUDSubreddit:
    async def get_by_id(self, db: AsyncSession, subreddit_id: int) -> Optional[Subreddit]:
        q = select(Subreddit).where(Subreddit.id == subreddit_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def create(self, db: AsyncSession, subreddit_name: str, description: str | None = None) -> Subreddit:
        subreddit = Subreddit(subreddit_name=subreddit_name, description=description)
        db.add(subreddit)
        await db.commit()
        await db.refresh(subreddit)
        return subreddit

subreddit = CRUDSubreddit()
