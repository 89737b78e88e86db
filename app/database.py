from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from .config import settings

# SQLite needs cross-thread access when served by uvicorn workers
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    connect_args=connect_args,
)


def install_sqlite_functions(bind):
    """Replace SQLite's ASCII-only lower() with Python's Unicode lowercasing."""

    @event.listens_for(bind, "connect")
    def _sqlite_lower(dbapi_conn, _):
        dbapi_conn.create_function(
            "lower", 1, lambda value: value.lower() if isinstance(value, str) else value
        )


if settings.DATABASE_URL.startswith("sqlite"):
    install_sqlite_functions(engine)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency for routes
def get_db():
    """Database session dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
