from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # --- App Config ---
    APP_NAME: str = "Readify"
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL: str | None = None
    POSTGRES_USER: str = "readify"
    POSTGRES_PASSWORD: str = "readify"
    POSTGRES_DB: str = "readify"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DB_ECHO: bool = False

    # --- JWT / Auth ---
    JWT_SECRET_KEY: str = "change-this-secret-key-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # --- Media host (Cloudinary) ---
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_UPLOAD_PRESET: str = "readify"
    CLOUDINARY_API_URL: str = "https://api.cloudinary.com"
    UPLOAD_TIMEOUT: float = 30.0

    # --- Pagination ---
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
