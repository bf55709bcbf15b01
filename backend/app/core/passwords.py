from passlib.context import CryptContext

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its stored hash; unknown hash formats never match."""
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        return False
