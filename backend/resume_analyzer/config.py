from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "AI Resume Analyzer"
    debug: bool = False

    # CORS
    frontend_url: str = "http://localhost:5173"

    # LLM (single service credential, provisioned outside the app)
    llm_api_key: Optional[str] = None
    llm_model: str = "gemini/gemini-2.5-flash"
    llm_api_base: Optional[str] = None

    # Where AnalysisClient sends extracted resume text
    analysis_endpoint_url: str = "http://localhost:8000/api/analyze-resume"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Upload Constraints ──────────────────────────────────────────────────────

ACCEPTED_CONTENT_TYPES = {
    "application/pdf": "PDF",
    "application/msword": "DOC",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "DOCX",
    "text/plain": "TXT",
}

MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MiB

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "resume_analysis": {"temperature": 0.7},
}
