from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parents[2]

load_dotenv(dotenv_path=BASE_DIR / ".env")

class Settings(BaseSettings):
    APP_NAME: str = "Webhook Challenge Runner"

    WEBHOOK_GENERATE_URL: str = "https://bfhldevapigw.healthrx.co.in/hiring/generateWebhook/JAVA"
    WEBHOOK_SUBMIT_URL: str = "https://bfhldevapigw.healthrx.co.in/hiring/testWebhook/JAVA"

    # Post to the webhook handed back by the generate call instead of WEBHOOK_SUBMIT_URL
    SUBMIT_TO_RETURNED_WEBHOOK: bool = True

    CANDIDATE_NAME: str = "John Doe"
    CANDIDATE_REG_NO: str = "REG12347"
    CANDIDATE_EMAIL: str = "john@example.com"

    REQUEST_TIMEOUT_SECONDS: int = 30

settings = Settings()
