import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # DATABASE
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./campaign_studio.db")

    # AUTH
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # FRONTEND (CORS)
    CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:4200")

    # TEXT GENERATION (any OpenAI-compatible endpoint)
    LLM_API_KEY = os.getenv("LLM_API_KEY")
    LLM_BASE_URL = os.getenv("LLM_BASE_URL")  # None -> api.openai.com
    LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o-mini")
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1024"))
    LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))
    # 1 = single attempt; the generation pipeline itself never retries
    LLM_RETRY_ATTEMPTS = int(os.getenv("LLM_RETRY_ATTEMPTS", "1"))

    # GENERATION POLICY
    # When true, bulk generation only flips a campaign to "generated"
    # if at least one asset was persisted.
    GENERATED_REQUIRES_ASSETS = _env_bool("GENERATED_REQUIRES_ASSETS", False)

    # LOGGING
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
