import logging
from typing import List

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.user import User, UserRole, UserRoleUpdate
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[User])
def get_users(
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    """List all accounts."""
    return [
        User.model_validate(u.model_dump(exclude={"password_hash"}))
        for u in repo.list_users()
    ]


@router.patch("/{user_id}/role", response_model=User)
def update_user_role(
    user_id: str,
    update: UserRoleUpdate,
    current_user: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    """Change a user's role and, for managers, the confederations they edit."""
    user = repo.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    if user.role == UserRole.OWNER:
        raise HTTPException(status_code=403, detail="The owner's role cannot be changed")
    if update.role == UserRole.OWNER and current_user.role != UserRole.OWNER:
        raise HTTPException(status_code=403, detail="Only the owner can grant OWNER")

    changes = {"role": update.role}
    if update.allowed_conf_ids is not None:
        changes["allowed_conf_ids"] = update.allowed_conf_ids
    user = repo.save_user(user.model_copy(update=changes))
    logger.info(f"{current_user.username} set {user.username} to {user.role.value}")

    return User.model_validate(user.model_dump(exclude={"password_hash"}))


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: str,
    _: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    user = repo.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    if user.role == UserRole.OWNER:
        raise HTTPException(status_code=403, detail="The owner cannot be deleted")
    repo.delete_user(user_id)
