from sqlmodel import Session, select
from ..models import User
import bcrypt


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode(), hashed_password.encode())


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """
    Store a user account. Passwords are only ever persisted hashed.
    """
    existing = db.exec(select(User).where(User.email == email)).first()
    if existing:
        raise ValueError(f"Email already registered: {email}")

    user = User(name=name, email=email, hashed_password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
