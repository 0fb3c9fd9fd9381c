from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./app.db"

    # JWT (tokens are issued by the portal's sign-in service; this API only verifies them)
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:5173"

    # New assignments need a deadline at least this far in the future
    assignment_min_deadline_hours: int = 10

    # Leaderboard: completions shown per ranking entry
    recent_completions_limit: int = 3

    # Dashboard list sizes
    activity_limit: int = 10
    deadline_limit: int = 5

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
