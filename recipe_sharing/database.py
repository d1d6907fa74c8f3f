from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from recipe_sharing.config import settings
from recipe_sharing.core.exceptions import ConstraintViolationException, StorageException

_is_sqlite = "sqlite" in settings.DATABASE_URL

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    # SQLite-specific settings (SQLite pools reject size/overflow arguments)
    connect_args={"check_same_thread": False} if _is_sqlite else {},
    **(
        {}
        if _is_sqlite
        else {"pool_size": settings.DB_POOL_SIZE, "max_overflow": settings.DB_MAX_OVERFLOW}
    ),
)

def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ships with foreign key enforcement off; junction cascades depend on it."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

if _is_sqlite:
    event.listen(engine, "connect", enable_sqlite_foreign_keys)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db() -> Iterator[Session]:
    """
    FastAPI dependency for database sessions.

    Yields a database session and ensures it's closed after use, which
    returns the pooled connection on every exit path.

    Usage:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a block as one atomic unit of work.

    Commits when the block exits normally. Any exception rolls back the whole
    unit; SQLAlchemy errors are re-raised as ConstraintViolationException or
    StorageException, everything else propagates unchanged.

    Usage:
        with transaction(db):
            repo.create_no_commit(row)
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConstraintViolationException(f"Constraint violation: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageException(f"Storage error: {e}") from e
    except Exception:
        db.rollback()
        raise
