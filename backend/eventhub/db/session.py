from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from eventhub.core.config import settings

# Built on first use so importing the app never needs a configured database.
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None

def get_engine() -> Engine:
    global _engine
    if _engine is None:
        url = settings.sqlalchemy_url
        if url.startswith("sqlite"):
            # Local runs only; in-memory SQLite needs a single shared connection
            _engine = create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
        else:
            _engine = create_engine(url, pool_pre_ping=True)
    return _engine

def get_sessionmaker() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal

def check_connection() -> None:
    """Raise sqlalchemy.exc.OperationalError if the database cannot be reached."""
    with get_engine().connect() as conn:
        conn.exec_driver_sql("SELECT 1")

def get_db():
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()
