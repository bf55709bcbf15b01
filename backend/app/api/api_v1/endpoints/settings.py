import logging

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.settings import GlobalSettings
from app.schemas.user import User, UserRole
from fastapi import APIRouter, Depends

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=GlobalSettings)
def get_settings(repo: PortalRepository = Depends(get_repository)):
    return repo.get_settings()


@router.put("/", response_model=GlobalSettings)
def update_settings(
    settings_in: GlobalSettings,
    user: User = Depends(require_role(UserRole.OWNER)),
    repo: PortalRepository = Depends(get_repository),
):
    """Open a different week for score editing."""
    logger.info(f"{user.username} opened week {settings_in.active_week + 1}")
    return repo.save_settings(settings_in)
