
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from docvault.errors import AuthenticationError, ConflictError, ValidationError
from docvault.models.user import User
from docvault.schemas.auth import USERNAME_MIN_LENGTH, PASSWORD_MIN_LENGTH
from docvault.utils.security import hash_password, verify_password, dummy_verify, issue_token

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid credentials"

def find_user(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()

def register_user(db: Session, username: str, password: str) -> User:
    if len(username or "") < USERNAME_MIN_LENGTH:
        raise ValidationError(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(password or "") < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")

    if find_user(db, username):
        logger.info("registration_conflict", username=username)
        raise ConflictError("Username already exists")

    user = User(username=username, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration of the same name
        db.rollback()
        logger.info("registration_conflict", username=username)
        raise ConflictError("Username already exists")
    db.refresh(user)
    logger.info("user_registered", user_id=user.id)
    return user

def authenticate_user(db: Session, username: str, password: str) -> User:
    user = find_user(db, username)
    if user is None:
        dummy_verify()
        logger.info("login_failed")
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.info("login_failed")
        raise AuthenticationError(INVALID_CREDENTIALS)
    logger.info("login_succeeded", user_id=user.id)
    return user

def login_user(db: Session, username: str, password: str) -> tuple[User, str]:
    user = authenticate_user(db, username, password)
    return user, issue_token(user.id)
