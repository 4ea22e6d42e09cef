# pdfchat/core/config.py
from typing import Literal, Optional
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    groq_api_key: str = ""
    host: str = "127.0.0.1"
    port: int = 3000
    llm_model: str = "llama-3.3-70b-versatile"
    llm_max_tokens: int = 1000
    llm_timeout: float = 60.0
    # "single" keeps only the latest document, "multi" accumulates by identifier
    document_mode: Literal["single", "multi"] = "multi"
    # None disables truncation of the document text sent with every question
    max_context_chars: Optional[int] = None
    public_dir: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "public")
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
