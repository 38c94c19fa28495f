import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, EmailStr, Field, ValidationError
from sqlalchemy.orm import Session

# Local imports
from database.db_session import get_db
from database.models import User
from database.queries import get_user
from settings import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger("api.auth")

# Password encryption setup
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Router for authentication endpoints
router = APIRouter(prefix="/auth", tags=["auth"])

# OAuth2 setup for FastAPI dependency injection
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/signin")


# ------------------------------
# Pydantic Schemas
# ------------------------------
class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class SignInIn(BaseModel):
    # shape is checked by authorize() so a malformed sign-in is a 401, not a 422
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


# ------------------------------
# Utility functions
# ------------------------------
def verify_password(plain_password, hashed_password):
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # stored value is not a hash this context knows about
        logger.warning("Stored password is not a recognised hash")
        return False


def get_password_hash(password):
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)
    return encoded_jwt


def authorize(db: Session, credentials: Mapping[str, Any]) -> Optional[User]:
    """
    Check an email/password pair against the users table.

    Returns the user on a match and None otherwise; malformed input is
    rejected before any lookup happens.
    """
    try:
        parsed = Credentials.model_validate(dict(credentials))
    except ValidationError:
        logger.info("Invalid credentials")
        return None

    user = get_user(db, parsed.email)
    if user is not None and verify_password(parsed.password, user.password):
        return user

    logger.info("Invalid credentials")
    return None


# ------------------------------
# Routes
# ------------------------------
@router.post("/signin", response_model=Token)
def signin(payload: SignInIn, db: Session = Depends(get_db)):
    user = authorize(db, payload.model_dump())
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.email, "user_id": user.id})
    return {"access_token": token, "token_type": "bearer"}


# ------------------------------
# Current user dependency
# ------------------------------
def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)):
    credentials_exception = HTTPException(
        status_code=401,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
        email: str = payload.get("sub")
        user_id: str = payload.get("user_id")

        if email is None or user_id is None:
            raise credentials_exception

    except JWTError:
        raise credentials_exception

    user = get_user(db, email)
    if user is None or user.id != user_id:
        raise credentials_exception

    return user
