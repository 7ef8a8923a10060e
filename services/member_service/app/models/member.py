from sqlalchemy import Column, Integer, String

from ..models.database import Base


class Member(Base):
    """SQLAlchemy ORM model for member records.

    Instances are also used as plain records by the non-ORM repositories:
    a freshly constructed member has ``id`` set to ``None`` until it is saved.
    """

    __tablename__ = 'member'

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Not unique: name uniqueness is a service-level rule.
    name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Member(id={self.id}, name='{self.name}')>"
