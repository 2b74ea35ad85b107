# server/api/sheet.py

from fastapi import APIRouter, Body, Depends

from server.api.auth import get_current_user
from server.core.errors import Forbidden
from server.core.sheets import SheetStore
from server.core.utils import utc_now_iso
from server.storage import get_sheet_store


router = APIRouter()


def require_owner(user_id: str, current_user: str = Depends(get_current_user)) -> str:
    """Sheets are private: the token's user must match the path's user."""
    if current_user != user_id:
        raise Forbidden("forbidden")
    return user_id


@router.get("/api/sheet/{user_id}")
def get_sheet(owner: str = Depends(require_owner), sheets: SheetStore = Depends(get_sheet_store)):
    return {"sheet": sheets.get(owner).model_dump()}


@router.post("/api/sheet/{user_id}")
def save_sheet(
    owner: str = Depends(require_owner),
    data: dict = Body(...),
    sheets: SheetStore = Depends(get_sheet_store),
):
    sheets.put(owner, data.get("sheet"))
    return {"ok": True, "savedAt": utc_now_iso()}
