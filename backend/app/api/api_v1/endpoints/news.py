import uuid
from datetime import datetime, timezone
from typing import List, Optional

from app.core.auth import get_optional_user, require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.news import NewsPost, NewsPostCreate, NewsPostUpdate
from app.schemas.user import User, UserRole, role_at_least
from fastapi import APIRouter, Depends, HTTPException

router = APIRouter()


def _can_read_private(user: Optional[User]) -> bool:
    return user is not None and role_at_least(user.role, UserRole.MEMBER)


@router.get("/", response_model=List[NewsPost])
def get_news(
    user: Optional[User] = Depends(get_optional_user),
    repo: PortalRepository = Depends(get_repository),
):
    """Get news, newest first. Private posts are for members only."""
    posts = repo.list_news()
    if not _can_read_private(user):
        posts = [p for p in posts if not p.is_private]
    return posts


@router.get("/{post_id}", response_model=NewsPost)
def get_news_post(
    post_id: str,
    user: Optional[User] = Depends(get_optional_user),
    repo: PortalRepository = Depends(get_repository),
):
    post = repo.get_news(post_id)
    # Hide private posts entirely from anonymous readers
    if post is None or (post.is_private and not _can_read_private(user)):
        raise HTTPException(status_code=404, detail="News post not found")
    return post


@router.post("/", response_model=NewsPost)
def create_news_post(
    post_in: NewsPostCreate,
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    post = NewsPost(
        id=str(uuid.uuid4()),
        date=datetime.now(timezone.utc),
        **post_in.model_dump(),
    )
    return repo.save_news(post)


@router.put("/{post_id}", response_model=NewsPost)
def update_news_post(
    post_id: str,
    post_in: NewsPostUpdate,
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    post = repo.get_news(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="News post not found")
    changes = post_in.model_dump(exclude_unset=True)
    return repo.save_news(post.model_copy(update=changes))


@router.delete("/{post_id}", status_code=204)
def delete_news_post(
    post_id: str,
    _: User = Depends(require_role(UserRole.MOD)),
    repo: PortalRepository = Depends(get_repository),
):
    if repo.get_news(post_id) is None:
        raise HTTPException(status_code=404, detail="News post not found")
    repo.delete_news(post_id)
