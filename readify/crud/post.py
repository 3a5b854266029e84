# readify/crud/post.py
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from typing import List, Optional
from readify.models.post import Post, Comment
from readify.models.user import User
from readify.database import utcnow


class CRUDPost:
    async def count(self, db: AsyncSession) -> int:
        res = await db.execute(select(func.count()).select_from(Post))
        return res.scalar_one()

    async def list_newest(self, db: AsyncSession, offset: int, limit: int) -> List[Post]:
        q = (
            select(Post)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
        )
        res = await db.execute(q)
        return list(res.scalars().all())

    async def get_by_id(self, db: AsyncSession, post_id: int) -> Optional[Post]:
        q = select(Post).where(Post.id == post_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def get_with_comments(self, db: AsyncSession, post_id: int) -> Optional[Post]:
        # comment authors and replies load through their selectin relationships
        q = (
            select(Post)
            .options(selectinload(Post.comments).selectinload(Comment.author))
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        res = await db.execute(q)
        return res.scalars().first()

    async def refresh_populated(self, db: AsyncSession, post: Post) -> Post:
        q = select(Post).where(Post.id == post.id).execution_options(populate_existing=True)
        res = await db.execute(q)
        return res.scalars().one()

    async def create(
        self,
        db: AsyncSession,
        *,
        title: str,
        post_type: str,
        author: User,
        subreddit_id: int,
        fields: dict,
    ) -> Post:
        post = Post(
            title=title,
            post_type=post_type,
            author_id=author.id,
            subreddit_id=subreddit_id,
            upvoted_by=[author.id],
            downvoted_by=[],
            points_count=1,
            **fields,
        )
        db.add(post)
        await db.commit()
        await db.refresh(post)
        return post

    async def update_submission(self, db: AsyncSession, post: Post, fields: dict) -> Post:
        for name, value in fields.items():
            setattr(post, name, value)
        # onupdate only fires when a column changed; an identical edit still bumps it
        post.updated_at = utcnow()
        await db.commit()
        return await self.refresh_populated(db, post)

    async def remove(self, db: AsyncSession, post: Post) -> None:
        await db.delete(post)
        await db.commit()

post = CRUDPost()
