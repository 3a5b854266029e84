# readify/models/post.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func, select
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.orm import column_property, relationship
from readify.database import Base, utcnow


def _voter_list():
    return Column(MutableList.as_mutable(JSON), nullable=False, default=list)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(300), nullable=False)
    post_type = Column(String(10), nullable=False)

    # exactly one submission is populated, the one matching post_type
    text_submission = Column(Text, nullable=True)
    link_submission = Column(Text, nullable=True)
    image_link = Column(Text, nullable=True)
    image_id = Column(String(255), nullable=True)

    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    subreddit_id = Column(Integer, ForeignKey("subreddits.id", ondelete="CASCADE"), nullable=False, index=True)

    upvoted_by = _voter_list()
    downvoted_by = _voter_list()
    points_count = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    author = relationship("User", back_populates="posts", lazy="selectin")
    subreddit = relationship("Subreddit", back_populates="posts", lazy="selectin")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    comment_body = Column(Text, nullable=False)

    upvoted_by = _voter_list()
    downvoted_by = _voter_list()
    points_count = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    post = relationship("Post", back_populates="comments")
    author = relationship("User", lazy="selectin")
    replies = relationship(
        "Reply",
        back_populates="comment",
        cascade="all, delete-orphan",
        order_by="Reply.created_at",
        lazy="selectin",
    )


class Reply(Base):
    __tablename__ = "replies"

    id = Column(Integer, primary_key=True, index=True)
    comment_id = Column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    reply_body = Column(Text, nullable=False)

    upvoted_by = _voter_list()
    downvoted_by = _voter_list()
    points_count = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    comment = relationship("Comment", back_populates="replies")
    author = relationship("User", lazy="selectin")


# derived from the comments table so it cannot drift from the comments that exist
Post.comment_count = column_property(
    select(func.count(Comment.id))
    .where(Comment.post_id == Post.id)
    .correlate_except(Comment)
    .scalar_subquery()
)
