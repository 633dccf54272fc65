"""Database connection pool adapters."""

from dbscope.adapters.database.fake import FakeConnectionPool
from dbscope.adapters.database.postgres import SqlAlchemyConnectionPool

__all__ = ["SqlAlchemyConnectionPool", "FakeConnectionPool"]
