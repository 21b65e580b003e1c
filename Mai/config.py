from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Remote H/P/F Generation ---
    remote_enabled: bool = True # If false, always use the local narrative engine
    model_name: str = "gemini-2.5-flash"
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 350
    llm_retries: int = 3
    llm_retry_delay_base_s: float = 2 # Base for exponential backoff (2s, 4s, 8s)
    gemini_api_key: Optional[str] = None # Falls back to the GEMINI_API_KEY env var

    # --- HTTP API ---
    api_host: str = "127.0.0.1"
    api_port: int = 3000

    model_config = SettingsConfigDict(
        env_prefix="MAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra='ignore',
        protected_namespaces=(),
    )
