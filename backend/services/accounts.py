# backend/services/accounts.py
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.users import User
from utils.exceptions import AuthenticationError, DuplicateEmailError
from utils.hashing import get_password_hash, verify_password

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Register a new account. Raises DuplicateEmailError if the email is taken."""
    normalized_email = normalize_email(email)

    existing = db.query(User).filter(func.lower(User.email) == normalized_email).first()
    if existing:
        raise DuplicateEmailError()

    user = User(email=normalized_email, password_hash=get_password_hash(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration of the same address
        db.rollback()
        raise DuplicateEmailError()
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """Return the user for a valid email/password pair, otherwise raise AuthenticationError."""
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user or not verify_password(password, user.password_hash):
        raise AuthenticationError()
    return user
