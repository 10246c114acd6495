# db.py
import logging
import os
from dotenv import load_dotenv
from sqlmodel import SQLModel, create_engine, Session

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
if not DATABASE_URL:
  raise RuntimeError("DATABASE_URL is not set in backend .env")

engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)

def init_db() -> None:
  # registers the tables on SQLModel.metadata
  import models  # noqa: F401

  SQLModel.metadata.create_all(engine)
  logger.info("Database tables ready (%s)", engine.url.render_as_string(hide_password=True))

def get_session():
  with Session(engine) as session:
    yield session
