from typing import List, Optional

from sqlalchemy.engine import Engine

from ..models.member import Member
from .base import MemberRepository

# DB-API paramstyles we can express with a single positional marker.
PLACEHOLDERS = {"qmark": "?", "format": "%s", "pyformat": "%s"}


class RawSqlMemberRepository(MemberRepository):
    """
    Repository that talks to the driver directly through a DB-API connection.

    Every call checks a connection out of the engine pool, runs hand-written
    SQL on a cursor and commits or rolls back explicitly.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        paramstyle = engine.dialect.paramstyle
        if paramstyle not in PLACEHOLDERS:
            raise ValueError(f"Unsupported DB-API paramstyle: {paramstyle}")
        self.placeholder = PLACEHOLDERS[paramstyle]

    def save(self, member: Member) -> Member:
        returning = self.engine.dialect.insert_returning
        sql = f"INSERT INTO member (name) VALUES ({self.placeholder})"
        if returning:
            sql += " RETURNING id"

        conn = self.engine.raw_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(sql, (member.name,))
                member.id = cursor.fetchone()[0] if returning else cursor.lastrowid
            finally:
                cursor.close()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        rows = self._select(f"SELECT id, name FROM member WHERE id = {self.placeholder}", (member_id,))
        return rows[0] if rows else None

    def find_by_name(self, name: str) -> Optional[Member]:
        rows = self._select(
            f"SELECT id, name FROM member WHERE name = {self.placeholder} ORDER BY id", (name,)
        )
        return rows[0] if rows else None

    def find_all(self) -> List[Member]:
        return self._select("SELECT id, name FROM member ORDER BY id", ())

    def _select(self, sql: str, params: tuple) -> List[Member]:
        conn = self.engine.raw_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(sql, params)
                return [Member(id=row[0], name=row[1]) for row in cursor.fetchall()]
            finally:
                cursor.close()
        finally:
            conn.close()
