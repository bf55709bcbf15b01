import logging
import uuid
from datetime import datetime, timezone
from typing import List

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.join_request import JoinApplication, JoinApplicationCreate
from app.schemas.user import User, UserRole
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=JoinApplication)
def submit_join_request(
    application_in: JoinApplicationCreate,
    repo: PortalRepository = Depends(get_repository),
):
    """Ask to join the community. No account needed."""
    application = JoinApplication(
        id=str(uuid.uuid4()),
        date=datetime.now(timezone.utc),
        **application_in.model_dump(),
    )
    repo.save_join_application(application)
    logger.info(f"New join request from {application.name}")
    return application


@router.get("/", response_model=List[JoinApplication])
def get_join_requests(
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    return repo.list_join_applications()


@router.patch("/{app_id}/answer", response_model=JoinApplication)
def answer_join_request(
    app_id: str,
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    """Mark a request as answered."""
    application = repo.get_join_application(app_id)
    if application is None:
        raise HTTPException(status_code=404, detail="Join request not found")
    return repo.save_join_application(
        application.model_copy(update={"status": "ANSWERED"})
    )


@router.delete("/{app_id}", status_code=204)
def delete_join_request(
    app_id: str,
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    if repo.get_join_application(app_id) is None:
        raise HTTPException(status_code=404, detail="Join request not found")
    repo.delete_join_application(app_id)
