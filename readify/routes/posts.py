# readify/routes/posts.py
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from readify.core.config import Settings
from readify.core.deps import get_app_settings, get_current_user, get_media_uploader
from readify.core.errors import Forbidden, NotFound
from readify.crud.post import post as post_crud
from readify.crud.subreddit import subreddit as subreddit_crud
from readify.crud.user import user as user_crud
from readify.database import get_db
from readify.models.post import Post
from readify.models.user import User
from readify.schemas.post import PaginatedPosts, PostCreate, PostRead, PostSummary, PostUpdate, PostWithComments
from readify.services.media import CloudinaryUploader
from readify.utils.pagination import paginate_results
from readify.utils.post_type_validator import PostType, Submission, validate_submission

router = APIRouter(prefix="/api/posts", tags=["posts"])
logger = logging.getLogger(__name__)


def _post_not_found(post_id: int) -> NotFound:
    return NotFound(f"Post with ID: '{post_id}' does not exist in database.")


def _ensure_author(post: Post, actor: User) -> None:
    if post.author_id != actor.id:
        raise Forbidden("Access is denied.")


async def _submission_columns(submission: Submission, uploader: CloudinaryUploader) -> dict:
    """Turn a validated submission into Post column values, uploading images first."""
    if submission.post_type is PostType.IMAGE:
        uploaded = await uploader.upload(submission.value)
        return {"image_link": uploaded.url, "image_id": uploaded.public_id}
    return submission.as_fields()


@router.get("/new", response_model=PaginatedPosts)
async def list_new_posts(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    # oversized pages are capped, not rejected
    limit = min(limit or settings.DEFAULT_PAGE_LIMIT, settings.MAX_PAGE_LIMIT)
    total = await post_crud.count(db)
    window = paginate_results(page, limit, total)

    posts = await post_crud.list_newest(db, offset=window.start_index, limit=limit)

    return PaginatedPosts(
        previous=window.previous,
        results=[PostSummary.model_validate(p) for p in posts],
        next=window.next,
    )


@router.get("/{post_id}/comments", response_model=PostWithComments)
async def get_post_comments(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await post_crud.get_with_comments(db, post_id)
    if not post:
        raise _post_not_found(post_id)
    return post


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    uploader: CloudinaryUploader = Depends(get_media_uploader),
):
    submission = validate_submission(
        payload.post_type,
        payload.text_submission,
        payload.link_submission,
        payload.image_submission,
    )

    target_subreddit = await subreddit_crud.get_by_id(db, payload.subreddit)
    if not target_subreddit:
        raise NotFound(f"Subreddit with ID: '{payload.subreddit}' does not exist in database.")

    # nothing is persisted until the upload has succeeded
    columns = await _submission_columns(submission, uploader)

    new_post = await post_crud.create(
        db,
        title=payload.title,
        post_type=submission.post_type.value,
        author=current_user,
        subreddit_id=target_subreddit.id,
        fields=columns,
    )
    await user_crud.add_post_karma(db, current_user)

    logger.info(f"{new_post.post_type} post {new_post.id} created by user {current_user.id}")
    return await post_crud.refresh_populated(db, new_post)


@router.patch("/{post_id}", response_model=PostRead, status_code=status.HTTP_202_ACCEPTED)
async def update_post(
    post_id: int,
    payload: PostUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    uploader: CloudinaryUploader = Depends(get_media_uploader),
):
    post = await post_crud.get_by_id(db, post_id)
    if not post:
        raise _post_not_found(post_id)
    _ensure_author(post, current_user)

    submission = validate_submission(
        post.post_type,
        payload.text_submission,
        payload.link_submission,
        payload.image_submission,
    )
    columns = await _submission_columns(submission, uploader)

    updated = await post_crud.update_submission(db, post, columns)
    logger.info(f"Post {post_id} edited by user {current_user.id}")
    return updated


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    post = await post_crud.get_by_id(db, post_id)
    if not post:
        raise _post_not_found(post_id)
    _ensure_author(post, current_user)

    subreddit = await subreddit_crud.get_by_id(db, post.subreddit_id)
    if not subreddit:
        raise NotFound(f"Subreddit with ID: '{post.subreddit_id}' does not exist in database.")

    await post_crud.remove(db, post)
    logger.info(f"Post {post_id} deleted by user {current_user.id}")
    return None
