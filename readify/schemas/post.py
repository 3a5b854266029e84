# readify/schemas/post.py
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from readify.schemas.user import UserBrief
from readify.utils.pagination import PageRef
from readify.utils.post_type_validator import PostType


class SubredditBrief(BaseModel):
    id: int
    subreddit_name: str

    model_config = {"from_attributes": True}


class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    subreddit: int
    # kept as a plain string so unknown types reach the validator
    post_type: str
    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: str | None = None


class PostUpdate(BaseModel):
    text_submission: str | None = None
    link_submission: str | None = None
    image_submission: str | None = None


class PostSummary(BaseModel):
    id: int
    title: str
    post_type: PostType
    link_submission: str | None = None
    image_link: str | None = None
    image_id: str | None = None
    author: UserBrief
    subreddit: SubredditBrief
    upvoted_by: List[int] = []
    downvoted_by: List[int] = []
    points_count: int
    comment_count: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PostRead(PostSummary):
    text_submission: str | None = None


class ReplyRead(BaseModel):
    id: int
    reply_body: str
    author: UserBrief
    upvoted_by: List[int] = []
    downvoted_by: List[int] = []
    points_count: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CommentRead(BaseModel):
    id: int
    comment_body: str
    author: UserBrief
    upvoted_by: List[int] = []
    downvoted_by: List[int] = []
    points_count: int
    replies: List[ReplyRead] = []
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PostWithComments(PostRead):
    comments: List[CommentRead] = []


class PaginatedPosts(BaseModel):
    previous: PageRef | None = None
    results: List[PostSummary]
    next: PageRef | None = None
