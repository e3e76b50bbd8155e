from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from slugable.events import register_slug_events
import os

# Detect environment: Docker vs bare-metal/IDE
if os.path.exists('/app/data'):
    DATABASE_DIR = "/app/data"
else:
    DATABASE_DIR = "data"

DATABASE_FILE = "database.db"
DATABASE_PATH = os.path.join(DATABASE_DIR, DATABASE_FILE)

SQLALCHEMY_DATABASE_URL = os.getenv("SLUGABLE_DATABASE_URL", f"sqlite:///{DATABASE_PATH}")

# Only the bundled SQLite file needs its directory created
if SQLALCHEMY_DATABASE_URL == f"sqlite:///{DATABASE_PATH}" and not os.path.exists(DATABASE_DIR):
    os.makedirs(DATABASE_DIR)

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
register_slug_events(SessionLocal)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    import slugable.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
