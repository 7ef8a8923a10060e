from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..models.member import Member
from ..schemas.member import MemberCreate, MemberResponse
from ..services.member import DuplicateMemberError, MemberService
from .dependencies import get_member_service

router = APIRouter()

@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def join_member(
    member_data: MemberCreate,
    service: MemberService = Depends(get_member_service),
):
    """
    Register a new member. Names must be unique.
    """
    member = Member(**member_data.model_dump())
    try:
        service.join(member)
    except DuplicateMemberError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return member

@router.get("", response_model=List[MemberResponse])
def get_all_members(
    service: MemberService = Depends(get_member_service),
):
    """
    Get all registered members.
    """
    return service.find_members()

@router.get("/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
):
    member = service.find_member(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return member
