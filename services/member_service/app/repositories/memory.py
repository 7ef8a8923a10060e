from typing import Dict, List, Optional

from ..models.member import Member
from .base import MemberRepository


class MemoryMemberRepository(MemberRepository):
    """Dict-backed repository used for tests and local demos."""

    def __init__(self):
        self.store: Dict[int, Member] = {}
        self.sequence = 0

    def save(self, member: Member) -> Member:
        # Ids are always storage-assigned; a caller-supplied id is replaced.
        self.sequence += 1
        member.id = self.sequence
        self.store[member.id] = member
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self.store.get(member_id)

    def find_by_name(self, name: str) -> Optional[Member]:
        return next((m for m in self.store.values() if m.name == name), None)

    def find_all(self) -> List[Member]:
        return list(self.store.values())

    def clear_store(self):
        # The sequence keeps counting so ids are never reused.
        self.store.clear()
