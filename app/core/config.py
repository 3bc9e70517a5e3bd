import os
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.environ.get("APP_TITLE", "AI Travel Companion API")
APP_VERSION = "1.0.0"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
# Empty string disables the rotating file handler
LOG_FILE = os.environ.get("LOG_FILE", "server.log")
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# Argon2 work factor, fixed for the lifetime of the process
PASSWORD_HASH_TIME_COST = int(os.environ.get("PASSWORD_HASH_TIME_COST", "3"))
PASSWORD_HASH_MEMORY_COST = int(os.environ.get("PASSWORD_HASH_MEMORY_COST", "65536"))
PASSWORD_HASH_PARALLELISM = int(os.environ.get("PASSWORD_HASH_PARALLELISM", "4"))

BACKEND_URL = os.environ.get("BACKEND_URL", "http://127.0.0.1:8000")
