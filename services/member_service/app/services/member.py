import logging
from typing import List, Optional

from ..models.member import Member
from ..repositories.base import MemberRepository

logger = logging.getLogger(__name__)


class DuplicateMemberError(Exception):
    """Raised when joining a member whose name is already taken."""

    def __init__(self, message: str = "Member already exists."):
        super().__init__(message)


class MemberService:
    """
    Business rules for member registration on top of a ``MemberRepository``.

    Name uniqueness is checked here, not in storage. The check and the save
    in ``join`` are two separate repository calls, so concurrent joins with
    the same name can both pass the check.
    """

    def __init__(self, repository: MemberRepository):
        self.repository = repository

    def join(self, member: Member) -> int:
        """
        Registers a new member.

        Args:
            member: A transient member; its ``id`` is assigned by the repository.

        Returns:
            The id assigned to the member.

        Raises:
            DuplicateMemberError: If a member with the same name already exists.
        """
        self._validate_duplicate_member(member)
        self.repository.save(member)
        logger.info("Member joined: id=%s name=%s", member.id, member.name)
        return member.id

    def find_members(self) -> List[Member]:
        return self.repository.find_all()

    def find_member(self, member_id: int) -> Optional[Member]:
        return self.repository.find_by_id(member_id)

    def _validate_duplicate_member(self, member: Member):
        if self.repository.find_by_name(member.name) is not None:
            logger.warning("Rejected duplicate member name: %s", member.name)
            raise DuplicateMemberError()
