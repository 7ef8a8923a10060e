from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from ..models.member import Member
from .base import MemberRepository


class OrmMemberRepository(MemberRepository):
    """Repository backed by SQLAlchemy ORM sessions, one session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def save(self, member: Member) -> Member:
        member.id = None  # assigned by the database
        with self.session_factory() as db:
            db.add(member)
            db.commit()
            db.refresh(member)
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        with self.session_factory() as db:
            return db.get(Member, member_id)

    def find_by_name(self, name: str) -> Optional[Member]:
        with self.session_factory() as db:
            return db.query(Member).filter(Member.name == name).order_by(Member.id).first()

    def find_all(self) -> List[Member]:
        with self.session_factory() as db:
            return db.query(Member).order_by(Member.id).all()
