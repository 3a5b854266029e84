# readify/models/user.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from readify.database import Base, utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(20), unique=True, index=True, nullable=False)
    is_active = Column(Boolean(), default=True)

    # karma is bumped by other records' lifecycles, never set directly
    post_karma = Column(Integer, nullable=False, default=0)
    comment_karma = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    posts = relationship("Post", back_populates="author")
