from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row

from ..models.member import Member
from .base import MemberRepository


def member_row_mapper(row: Row) -> Member:
    return Member(id=row.id, name=row.name)


class TemplateMemberRepository(MemberRepository):
    """
    Repository built on SQLAlchemy ``text()`` statements with named binds.

    Connection handling and transactions are left to the engine's context
    managers; rows are turned into members by ``member_row_mapper``.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def save(self, member: Member) -> Member:
        returning = self.engine.dialect.insert_returning
        sql = "INSERT INTO member (name) VALUES (:name)"
        if returning:
            sql += " RETURNING id"

        with self.engine.begin() as conn:
            result = conn.execute(text(sql), {"name": member.name})
            member.id = result.scalar_one() if returning else result.lastrowid
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        members = self._query("SELECT id, name FROM member WHERE id = :id", id=member_id)
        return members[0] if members else None

    def find_by_name(self, name: str) -> Optional[Member]:
        members = self._query("SELECT id, name FROM member WHERE name = :name ORDER BY id", name=name)
        return members[0] if members else None

    def find_all(self) -> List[Member]:
        return self._query("SELECT id, name FROM member ORDER BY id")

    def _query(self, sql: str, **params) -> List[Member]:
        with self.engine.connect() as conn:
            return [member_row_mapper(row) for row in conn.execute(text(sql), params)]
