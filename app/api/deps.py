# app/api/deps.py
import jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import UnauthorizedError
from app.domain.schemas import UserRead
from app.repos.user_repo import UserRepo
from app.utils.security import decode_access_token

# auto_error=False, zeby brak tokena szedl przez nasz handler ({"message": ...})
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> UserRead:
    """
    Tozsamosc usera z tokena Bearer, przekazywana jawnie do handlerow.
    """
    if not token:
        raise UnauthorizedError("Not authorized, no token")

    try:
        user_id = decode_access_token(token)
    except jwt.PyJWTError:
        raise UnauthorizedError("Not authorized, token failed")

    user = UserRepo(db).get_user(user_id)
    if not user:
        raise UnauthorizedError("Not authorized, user not found")

    return UserRead.model_validate(user)
