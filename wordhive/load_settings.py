import os
import pathlib

from dotenv import load_dotenv

load_dotenv()

strategy = os.getenv("WORDHIVE_STRATEGY", "curated")
data_dir = pathlib.Path(os.getenv("WORDHIVE_DATA_DIR", pathlib.Path(__file__).parent / "data"))
database_url = os.getenv("WORDHIVE_DATABASE_URL")
progress_retention_days = int(os.getenv("WORDHIVE_PROGRESS_RETENTION_DAYS", "30"))
cors_origins = [
    origin.strip()
    for origin in os.getenv("WORDHIVE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
log_level = os.getenv("WORDHIVE_LOG_LEVEL", "INFO").upper()

user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT", "5432")
db_name = os.getenv("DB_NAME")

if __name__ == "__main__":
    print(strategy, data_dir, database_url, progress_retention_days, cors_origins, host, port, db_name)
