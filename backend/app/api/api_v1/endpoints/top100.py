import logging
import uuid
from datetime import datetime, timezone
from typing import List

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.top100 import Top100Entry, Top100EntryCreate
from app.schemas.user import User, UserRole
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[Top100Entry])
def get_top100_history(repo: PortalRepository = Depends(get_repository)):
    """Get every recorded Top-100 placement, oldest first."""
    return repo.list_top100_history()


@router.post("/", response_model=Top100Entry)
def add_top100_entry(
    entry_in: Top100EntryCreate,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    """Record a confederation's placement for a season. Entries are never edited."""
    if repo.get_confederation(entry_in.conf_id) is None:
        raise HTTPException(status_code=404, detail="Confederation not found")

    entry = Top100Entry(
        id=str(uuid.uuid4()),
        date_added=datetime.now(timezone.utc),
        **entry_in.model_dump(),
    )
    return repo.add_top100_entry(entry)


@router.delete("/{entry_id}", status_code=204)
def delete_top100_entry(
    entry_id: str,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    if repo.get_top100_entry(entry_id) is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    repo.delete_top100_entry(entry_id)
