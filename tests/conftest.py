"""Shared fixtures: in-memory database, app wired to it, fake media host."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import readify.models  # noqa: F401
from readify.core.config import Settings
from readify.core.deps import get_media_uploader
from readify.core.errors import UpstreamUploadFailure
from readify.core.security import create_access_token
from readify.crud.subreddit import subreddit as subreddit_crud
from readify.crud.user import user as user_crud
from readify.database import Base, get_db
from readify.main import create_app
from readify.models.post import Post
from readify.services.media import UploadedImage


class FakeUploader:
    """Stands in for the Cloudinary client; records what it was asked to upload."""

    def __init__(self):
        self.uploads = []
        self.error = None

    async def upload(self, image_data):
        if self.error:
            raise UpstreamUploadFailure(self.error)
        self.uploads.append(image_data)
        n = len(self.uploads)
        return UploadedImage(
            url=f"http://res.cloudinary.com/demo/image/upload/v1/readify/img{n}.png",
            public_id=f"readify/img{n}",
        )


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def app_factory(session_maker, uploader):
    """Build an app from the given settings, wired to the test database and fake uploader."""

    def build(**overrides):
        settings = Settings(APP_NAME="Readify Test", DEBUG=False, **overrides)
        app = create_app(settings)

        async def override_get_db():
            async with session_maker() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_media_uploader] = lambda: uploader
        return app

    return build


@pytest.fixture
def app(app_factory):
    return app_factory()


@pytest_asyncio.fixture
async def async_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def author(db_session):
    return await user_crud.create(db_session, username="alice")


@pytest_asyncio.fixture
async def other_user(db_session):
    return await user_crud.create(db_session, username="bob")


@pytest_asyncio.fixture
async def subreddit(db_session):
    return await subreddit_crud.create(db_session, subreddit_name="python", description="All things Python")


@pytest.fixture
def auth_headers():
    def make_headers(user) -> dict:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return make_headers


@pytest.fixture
def post_factory(db_session):
    base_time = datetime(2026, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def make_post(author, subreddit, **overrides) -> Post:
        counter["n"] += 1
        fields = dict(
            title=f"Post {counter['n']}",
            post_type="Text",
            text_submission=f"Body {counter['n']}",
            author_id=author.id,
            subreddit_id=subreddit.id,
            upvoted_by=[author.id],
            downvoted_by=[],
            points_count=1,
            created_at=base_time + timedelta(minutes=counter["n"]),
        )
        fields.update(overrides)
        post = Post(**fields)
        db_session.add(post)
        await db_session.commit()
        await db_session.refresh(post)
        return post

    return make_post
