from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError
from fastapi import Request
from typing import Generator
import logging

logger = logging.getLogger(__name__)


_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Database:
    """
    Handle on the persistence layer.

    Created once at startup, closed at shutdown, and handed to the route
    handlers through the get_session dependency.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        kwargs = {}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # An in-memory database only lives as long as its connection
            if url in _MEMORY_URLS:
                kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, echo=echo, **kwargs)

    def check_connection(self):
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection test successful")

    def init_db(self):
        """
        Initialize the database by creating all tables if they don't exist.
        """
        # Registers the tables on SQLModel.metadata
        from . import models  # noqa: F401

        logger.debug("Initializing database tables")
        try:
            SQLModel.metadata.create_all(self.engine)
            logger.debug("Database tables initialized successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error initializing database: {str(e)}")
            raise

    def drop_all_tables(self):
        """
        Drop all tables in the database.
        """
        logger.debug("Dropping all tables")
        try:
            SQLModel.metadata.drop_all(self.engine)
            logger.debug("All tables dropped successfully")
        except SQLAlchemyError as e:
            logger.error(f"Error dropping tables: {str(e)}")
            raise

    def session(self) -> Session:
        return Session(self.engine)

    def close(self):
        self.engine.dispose()
        logger.debug("Database engine disposed")


def get_session(request: Request) -> Generator[Session, None, None]:
    """
    Get a database session.
    """
    db: Database = request.app.state.db
    with db.session() as session:
        yield session
