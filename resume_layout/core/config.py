# File: resume_layout/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Resume Layout API")
    PROJECT_VERSION: str = "0.1.0"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # PDF export settings (points, 72 per inch)
    PDF_PAGE_SIZE: str = os.getenv("PDF_PAGE_SIZE", "a4")
    PDF_MARGIN: float = float(os.getenv("PDF_MARGIN", "42"))
    PDF_LINE_HEIGHT: float = float(os.getenv("PDF_LINE_HEIGHT", "1.3"))
    PDF_AUTHOR: str = os.getenv("PDF_AUTHOR", "Resume Layout API")
    PDF_CREATOR: str = os.getenv("PDF_CREATOR", "Resume Layout API")

    # Upload settings
    MAX_UPLOAD_MB: int = int(os.getenv("MAX_UPLOAD_MB", "10"))

    # CORS settings
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")

settings = Settings()
