import logging
import uuid

from app.core.auth import create_access_token, get_current_user
from app.core.passwords import hash_password, verify_password
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.user import Token, User, UserCreate, UserInDB, UserLogin, UserRole
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


def _public(user: UserInDB) -> User:
    return User.model_validate(user.model_dump(exclude={"password_hash"}))


@router.post("/register", response_model=Token)
def register(
    user_in: UserCreate,
    repo: PortalRepository = Depends(get_repository),
):
    """Create an account with no access yet and log it in."""
    username = user_in.username.strip()
    if repo.get_user_by_username(username):
        raise HTTPException(status_code=409, detail="Username already taken")

    user = UserInDB(
        id=str(uuid.uuid4()),
        username=username,
        name=user_in.name,
        role=UserRole.USER,
        password_hash=hash_password(user_in.password),
    )
    repo.save_user(user)
    logger.info(f"Registered user {user.username}")

    return Token(access_token=create_access_token(user.id), user=_public(user))


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    repo: PortalRepository = Depends(get_repository),
):
    """Exchange username and password for a bearer token."""
    user = repo.get_user_by_username(credentials.username.strip())
    if user is None or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = create_access_token(user.id, remember=credentials.remember)
    return Token(access_token=token, user=_public(user))


@router.get("/me", response_model=User)
def read_me(user: User = Depends(get_current_user)):
    return user
