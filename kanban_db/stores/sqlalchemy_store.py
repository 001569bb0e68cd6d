"""SQLAlchemy-backed persistent key-value store"""
import logging
from pathlib import Path
from typing import List, Optional
from sqlalchemy import create_engine, select, delete
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from ..interfaces.store import IKeyValueStore
from ..models.kv_orm import KeyValueORM, Base

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(IKeyValueStore):
    """
    SQLite key-value store using SQLAlchemy.

    Plays the role browser ``localStorage`` plays for a web client: values
    survive process restarts, so a namespace can be reopened later by
    reconnecting with its instance id.
    """

    def __init__(self, db_path: str = "./data/kanban.db"):
        # Public: Database path (":memory:" for a throwaway database)
        self.db_path = db_path

        # Private: SQLAlchemy engine and session
        self.__engine = None
        self.__session: Optional[Session] = None

        self.connect()

    def connect(self):
        """Connect to the SQLite database and create the table if needed"""
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        database_url = f"sqlite:///{self.db_path}"
        self.__engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False}
        )
        Base.metadata.create_all(self.__engine)

        SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.__engine
        )
        self.__session = SessionLocal()
        logger.info(f"Connected to key-value database: {self.db_path}")

    def close(self) -> None:
        """Disconnect from database"""
        if self.__session:
            self.__session.close()
            self.__session = None
        if self.__engine:
            self.__engine.dispose()
            self.__engine = None
        logger.info("Disconnected from key-value database")

    def _require_session(self) -> Session:
        if not self.__session:
            raise RuntimeError("Database not connected")
        return self.__session

    def _commit(self, session: Session, operation: str) -> None:
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Key-value {operation} failed: {e}")
            raise

    def set(self, key: str, value: str) -> None:
        session = self._require_session()
        session.merge(KeyValueORM(key=key, value=value))
        self._commit(session, "set")

    def get(self, key: str) -> Optional[str]:
        session = self._require_session()
        row = session.get(KeyValueORM, key)
        return row.value if row is not None else None

    def remove(self, key: str) -> None:
        session = self._require_session()
        session.execute(delete(KeyValueORM).where(KeyValueORM.key == key))
        self._commit(session, "remove")

    def clear(self) -> None:
        session = self._require_session()
        session.execute(delete(KeyValueORM))
        self._commit(session, "clear")

    def keys(self) -> List[str]:
        session = self._require_session()
        return list(session.scalars(select(KeyValueORM.key)))
