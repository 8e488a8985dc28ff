import os
from pathlib import Path

from dotenv import load_dotenv
from openai import AsyncOpenAI

from app.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(ENV_FILE)

OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o")
MAX_TOKENS = int(os.environ.get("MAX_TOKENS", "2048"))
PROVIDER_TIMEOUT = float(os.environ.get("PROVIDER_TIMEOUT", "60"))
# 0 forwards the whole history
HISTORY_LIMIT = int(os.environ.get("HISTORY_LIMIT", "0"))

ACCESS_TOKEN = os.environ.get("ACCESS_TOKEN")
CORS_ORIGINS = [origin.strip() for origin in os.environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def create_client(api_key: str | None = None) -> AsyncOpenAI:
    """
    Build the provider client used for the lifetime of the process.
    Retries are disabled: a failed call fails the request.
    """
    api_key = api_key or OPENAI_API_KEY
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set")
    return AsyncOpenAI(api_key=api_key, timeout=PROVIDER_TIMEOUT, max_retries=0)
