import logging
import uuid
from typing import List

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.confederation import (
    Confederation,
    ConfederationCreate,
    ConfederationUpdate,
)
from app.schemas.user import User, UserRole
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[Confederation])
def get_confederations(
    active_only: bool = False,
    repo: PortalRepository = Depends(get_repository),
):
    """Get all confederations, optionally only the active ones."""
    confederations = repo.list_confederations()
    if active_only:
        confederations = [c for c in confederations if c.active]
    return confederations


@router.get("/{conf_id}", response_model=Confederation)
def get_confederation(
    conf_id: str,
    repo: PortalRepository = Depends(get_repository),
):
    conf = repo.get_confederation(conf_id)
    if conf is None:
        raise HTTPException(status_code=404, detail="Confederation not found")
    return conf


@router.post("/", response_model=Confederation)
def create_confederation(
    conf_in: ConfederationCreate,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    """Create a new confederation."""
    conf = Confederation(id=str(uuid.uuid4()), **conf_in.model_dump())
    return repo.save_confederation(conf)


@router.put("/{conf_id}", response_model=Confederation)
def update_confederation(
    conf_id: str,
    conf_in: ConfederationUpdate,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    """Update name, tier, image or the active flag."""
    conf = repo.get_confederation(conf_id)
    if conf is None:
        raise HTTPException(status_code=404, detail="Confederation not found")

    changes = conf_in.model_dump(exclude_unset=True)
    updated = conf.model_copy(update=changes)
    return repo.save_confederation(updated)


@router.delete("/{conf_id}", status_code=204)
def delete_confederation(
    conf_id: str,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    """Delete a confederation. Its members stay and rank under "Unknown"."""
    if repo.get_confederation(conf_id) is None:
        raise HTTPException(status_code=404, detail="Confederation not found")

    orphaned = len(repo.list_members(conf_id=conf_id))
    if orphaned:
        logger.warning(
            f"Deleting confederation {conf_id} leaves {orphaned} members orphaned"
        )
    repo.delete_confederation(conf_id)
