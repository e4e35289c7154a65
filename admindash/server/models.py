#!/usr/bin/env python3
"""
admindash Database Models (Peewee)

Single collection: Record(category, value).
- Identity: Record.id (TEXT PRIMARY KEY, uuid4 hex assigned on insert)
- List order: insertion order (created_at in ns, then id)

Notes:
- The database handle is a Proxy; DatabaseManager.connect() binds it to the
  store named by the connection string (playhouse.db_url syntax).
- No update operation exists; records are only created and deleted.
"""

import time
import uuid
import logging
from typing import Any, Dict, List

import peewee
from peewee import Model, CharField, FloatField, BigIntegerField, DatabaseProxy
from playhouse.db_url import connect

logger = logging.getLogger("admindash.models")

# Global DB handle (initialized in DatabaseManager.connect)
database = DatabaseProxy()


def _new_record_id() -> str:
    return uuid.uuid4().hex


class BaseModel(Model):
    class Meta:
        database = database
        legacy_table_names = False


class Record(BaseModel):
    """One category/value measurement shown on the dashboard."""
    id = CharField(primary_key=True, default=_new_record_id)
    category = CharField()
    value = FloatField()
    created_at = BigIntegerField(default=time.time_ns)  # insertion order

    class Meta:
        indexes = (
            (("created_at",), False),
        )

    @classmethod
    def list_all(cls) -> List["Record"]:
        return list(cls.select().order_by(cls.created_at, cls.id))

    @classmethod
    def create_record(cls, category: str, value: float) -> "Record":
        # force_insert: the primary key is set client-side
        record = cls(category=category, value=value)
        record.save(force_insert=True)
        return record

    @classmethod
    def delete_by_id(cls, record_id: str) -> bool:
        """Delete one record. Returns False when no record has that id."""
        deleted = cls.delete().where(cls.id == record_id).execute()
        return bool(deleted)

    @classmethod
    def delete_all(cls) -> int:
        """Bulk delete of the whole collection. Returns the number of rows removed."""
        return cls.delete().execute()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "value": self.value,
        }


MODELS = [Record]


class DatabaseManager:
    """DB lifecycle + minimal convenience ops."""

    def __init__(self, database_url: str = "sqlite:///admindash.db") -> None:
        self.database_url = database_url
        self.connected = False

    def connect(self) -> bool:
        try:
            db = connect(self.database_url)
            database.initialize(db)
            database.connect(reuse_if_open=True)

            if isinstance(db, peewee.SqliteDatabase):
                database.execute_sql("PRAGMA journal_mode=WAL;")
                database.execute_sql("PRAGMA synchronous=NORMAL;")

            database.create_tables(MODELS, safe=True)
            self.connected = True
            logger.info(f"database initialized: {self._safe_url()}")
            return True
        except Exception as e:
            logger.error(f"database init failed: {e}")
            return False

    def close(self) -> None:
        if self.connected:
            database.close()
            self.connected = False
            logger.info("database connection closed")

    def ping(self) -> bool:
        try:
            Record.select().limit(1).execute()
            return True
        except peewee.PeeweeException as e:
            logger.warning(f"database ping failed: {e}")
            return False

    def get_stats(self) -> Dict[str, Any]:
        """Record count and value total. Store failures propagate as PeeweeException."""
        return {
            "records_total": Record.select().count(),
            "value_total": Record.select(peewee.fn.SUM(Record.value)).scalar() or 0,
        }

    def _safe_url(self) -> str:
        """Connection string with any password masked, for logs."""
        if "@" not in self.database_url:
            return self.database_url
        scheme, rest = self.database_url.split("://", 1)
        creds, host = rest.rsplit("@", 1)
        user = creds.split(":", 1)[0]
        return f"{scheme}://{user}:***@{host}"


# Global manager accessor
db_manager = DatabaseManager()


def get_db() -> DatabaseManager:
    return db_manager
