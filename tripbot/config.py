from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_PROMPTS_DIR = Path(__file__).resolve().parent / "prompts"


class Settings(BaseSettings):
    # Prompt sources
    prompts_dir: Path = DEFAULT_PROMPTS_DIR
    prompt_suffix: str = ".md"
    prompt_categories: list[str] | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "TRIPBOT_"


settings = Settings()
