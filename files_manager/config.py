import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        self.database_url = os.getenv("DATABASE", "sqlite:///./files_manager.db")
        self.redis_url = os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self.folder_path = os.getenv("FOLDER_PATH", "/tmp/files_manager")
        self.port = int(os.getenv("PORT", "5000"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
