import pydantic_settings


class EnvConstants(pydantic_settings.BaseSettings):
    """Environment constants.

    Constants may be set in a .env file with keys matching variable names
    at root of project (or set as environment variables).
    """

    LRU_CACHE_CAPACITY: int = 128

    LRU_CACHE_THREAD_SAFE: bool = False

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8"
    )


class Config:
    Constants: EnvConstants = None

    @staticmethod
    def init():
        Config.Constants = EnvConstants()
