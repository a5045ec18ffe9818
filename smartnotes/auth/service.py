import logging
import uuid, bcrypt
from sqlalchemy.orm import Session
from smartnotes.auth.models import User
from smartnotes.shared.config import settings

logger = logging.getLogger(__name__)

# messages mirror the hosted auth provider so clients can map them
USER_EXISTS = "User already registered"
PASSWORD_TOO_SHORT = f"Password should be at least {settings.PASSWORD_MIN_LENGTH} characters"
INVALID_CREDENTIALS = "Invalid login credentials"

def _hash(pw: str) -> str:
    return bcrypt.hashpw(pw.encode(), bcrypt.gensalt()).decode()

def _verify(pw: str, ph: str) -> bool:
    try: return bcrypt.checkpw(pw.encode(), ph.encode())
    except ValueError: return False

def _public(u: User) -> dict:
    return {"id": u.id, "email": u.email}

def register_user(db: Session, email: str, password: str) -> dict:
    email = email.lower().strip()
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ValueError(PASSWORD_TOO_SHORT)
    if db.query(User).filter(User.email == email).first():
        raise ValueError(USER_EXISTS)
    u = User(id=str(uuid.uuid4()), email=email, password_hash=_hash(password))
    db.add(u); db.commit(); db.refresh(u)
    logger.info("registered user %s", u.id)
    return _public(u)

def authenticate_user(db: Session, email: str, password: str) -> dict | None:
    u = db.query(User).filter(User.email == email.lower().strip()).first()
    if not u or not _verify(password, u.password_hash):
        return None
    return {"sub": u.id, "email": u.email}
