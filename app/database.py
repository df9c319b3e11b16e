# app/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings
from app.core.exceptions import StoreError

settings = get_settings()


def build_engine(db_url: str, echo: bool = False):
    """
    Create an engine for the configured URL.

    - SQLite: allow the connection to be used from FastAPI's threadpool.
    - Anything else: validate pooled connections before using them.
    """
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        db_url,
        echo=echo,  # set to True if you want to debug SQL queries
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


@contextmanager
def store_errors(session: Session, action: str) -> Iterator[None]:
    """
    Roll back and re-raise any SQLAlchemy failure as StoreError.

    The original exception is chained so it still shows up in the logs.
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        raise StoreError(f"Database error while {action}.") from e
