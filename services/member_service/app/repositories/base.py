from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.member import Member


class MemberRepository(ABC):
    """Storage contract for members.

    Implementations assign ids on save and never enforce name uniqueness;
    that rule belongs to ``MemberService``.
    """

    @abstractmethod
    def save(self, member: Member) -> Member:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")

    @abstractmethod
    def find_all(self) -> List[Member]:
        raise NotImplementedError("This method should be overridden by subclasses.")
