from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/test", response_class=PlainTextResponse)
def test(name: str = "stranger"):
    """
    Demo endpoint, unrelated to members.
    """
    return "Hello " + name
