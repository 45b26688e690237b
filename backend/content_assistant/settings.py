from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Server
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=5000, validation_alias="PORT")
	cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Database
	database_url: str = Field(default="sqlite:///./content_assistant.db", validation_alias="DATABASE_URL")

	# OpenAI chat completions
	openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
	openai_model: str = Field(default="gpt-3.5-turbo", validation_alias="OPENAI_MODEL")
	openai_base_url: str = Field(default="https://api.openai.com/v1", validation_alias="OPENAI_BASE_URL")
	openai_timeout_seconds: float = Field(default=30, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# pydantic-settings v2 style config; populate_by_name lets tests pass field names directly
	model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

settings = Settings()
