import os
from dotenv import load_dotenv

# Resolve absolute path to backend/.env
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Load .env (absolute path ensures it works from any working directory)
load_dotenv(ENV_PATH)


def _split_origins(raw: str):
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


class Config:
    OPENAI_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    # Any OpenAI-compatible endpoint (e.g. Gemini's) can be used instead of api.openai.com
    OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None
    ALLOWED_ORIGINS = _split_origins(os.getenv("ALLOWED_ORIGINS", "*"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
