from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Extraction bounds
    summary_max_chars: int = 500  # summary section cap when no boundary header follows
    min_graduation_year: int = 1980

    # Upload ingestion
    max_upload_size_mb: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "NURSE_MATCH_"}


settings = Settings()
