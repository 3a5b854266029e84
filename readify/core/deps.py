# readify/core/deps.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from jose import JWTError
from readify.database import get_db
from readify.crud.user import user as user_crud
from readify.core.config import Settings
from readify.core.errors import NotFound
from readify.models.user import User
from readify.schemas.user import TokenData
from readify.core.security import decode_access_token
from readify.services.media import CloudinaryUploader

bearer_scheme = HTTPBearer(auto_error=False)

async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to the acting user, or reject the request."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    try:
        payload = decode_access_token(credentials.credentials)
        sub = payload.get("sub")
        if sub is None:
            raise credentials_exception
        token_data = TokenData(sub=str(sub))
        user_id = int(token_data.sub)
    except (JWTError, ValueError):
        raise credentials_exception

    user = await user_crud.get_by_id(db, user_id)
    if not user:
        raise NotFound("User does not exist in database.")
    if not user.is_active:
        raise credentials_exception
    return user


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_media_uploader(request: Request) -> CloudinaryUploader:
    return request.app.state.media_uploader
