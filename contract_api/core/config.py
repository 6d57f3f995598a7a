from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "templates" / "adder.rs"


class Settings(BaseSettings):
    PROJECT_NAME: str = "Smart Contract Generator API"
    API_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    OPENAI_API_KEY: str
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "gpt-4-0314"
    OPENAI_TIMEOUT_SECONDS: float = 60.0

    TEMPLATE_PATH: Path = DEFAULT_TEMPLATE_PATH

    # This configures Pydantic to read variables from the ".env" file
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
