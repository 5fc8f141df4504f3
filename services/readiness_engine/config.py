from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

DEFAULT_QUESTION_BANK_PATH = str(Path(__file__).resolve().parent / "assets" / "readiness_questions.yml")

class ReadinessSettings(BaseSettings):
    log_level: str = "INFO"
    question_bank_path: str = DEFAULT_QUESTION_BANK_PATH

    model_config = SettingsConfigDict(env_prefix='READINESS_')

# Instantiate settings
readiness_settings = ReadinessSettings()
