# Importing the package registers every table on Base.metadata.
from readify.models.user import User
from readify.models.subreddit import Subreddit
from readify.models.post import Post, Comment, Reply

__all__ = ["User", "Subreddit", "Post", "Comment", "Reply"]
