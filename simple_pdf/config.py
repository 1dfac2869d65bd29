from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

from .enums import BaseEncoding


class Settings(BaseSettings):
    # Text fonts
    default_encoding: BaseEncoding = BaseEncoding.WIN_ANSI

    # Output
    buffer_size: int = Field(default=65536, gt=0)

    class Config:
        env_prefix = "SIMPLE_PDF_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
