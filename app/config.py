# app/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str = "mongodb://mongo:27017"
    MONGODB_DB_NAME: str = "carsupermarket"
    MONGODB_COLLECTION: str = "cars"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # API settings
    API_PREFIX: str = ""

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
