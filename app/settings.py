## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"
    # OpenAI-compatible endpoint, only used by the tool-calling strategy
    ollama_openai_base_url: str = "http://localhost:11434/v1"
    request_timeout: float = 120.0

    # Name generation wants variety, so sample hot by default
    default_temperature: float = 1.5


settings = Settings()
