from fastapi import Depends
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..config.settings import settings
from ..models.database import SessionLocal, engine
from ..repositories.base import MemberRepository
from ..repositories.memory import MemoryMemberRepository
from ..repositories.orm import OrmMemberRepository
from ..repositories.raw_sql import RawSqlMemberRepository
from ..repositories.template import TemplateMemberRepository
from ..services.member import MemberService


def build_member_repository(kind: str, engine: Engine, session_factory: sessionmaker) -> MemberRepository:
    if kind == "memory":
        return MemoryMemberRepository()
    if kind == "raw":
        return RawSqlMemberRepository(engine)
    if kind == "template":
        return TemplateMemberRepository(engine)
    if kind == "orm":
        return OrmMemberRepository(session_factory)
    raise ValueError(f"Unknown member repository: {kind}")


# Chosen once per process; the in-memory store must outlive single requests.
_repository = build_member_repository(settings.MEMBER_REPOSITORY, engine, SessionLocal)


def get_member_repository() -> MemberRepository:
    return _repository


def get_member_service(repository: MemberRepository = Depends(get_member_repository)) -> MemberService:
    return MemberService(repository)
