import os

from sqlalchemy.engine import URL

PORT = int(os.environ.get("PORT", 4000))

DB_HOST = os.environ.get("DB_HOST", "database")
DB_PORT = int(os.environ.get("DB_PORT", 5432))
DB_USER = os.environ.get("DB_USER", "todouser")
DB_PASSWORD = os.environ.get("DB_PASSWORD", "todopass")
DB_NAME = os.environ.get("DB_NAME", "tododb")

# DATABASE_URL wins over the DB_* parts, e.g. sqlite:///./tasks.db for local dev
DATABASE_URL = os.environ.get("DATABASE_URL") or URL.create(
    "postgresql+psycopg2",
    username=DB_USER,
    password=DB_PASSWORD,
    host=DB_HOST,
    port=DB_PORT,
    database=DB_NAME,
).render_as_string(hide_password=False)

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Base URL the client talks to
API_URL = os.environ.get("API_URL", "http://localhost:4000")
