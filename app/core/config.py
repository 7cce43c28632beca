from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./coffee_shop.db"
    database_echo: bool = False
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # result caps for the public search endpoints
    search_limit: int = 50
    advanced_search_limit: int = 100
    suggestion_limit: int = 10

    default_page_size: int = 10
    max_page_size: int = 100


settings = Settings()
