from dotenv import load_dotenv
import os

load_dotenv()  # reads .env from the working directory

DATABASE_URL = os.getenv("DATABASE_URL")
API_TITLE = os.getenv("API_TITLE", "Task Admin API")
DB_BOOTSTRAP_MODE = os.getenv("DB_BOOTSTRAP_MODE", "background")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX", r"^https://.*\.vercel\.app$")

def parse_cors_origins(value: str):
    if not value:
        return []
    if value.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]
