from fastapi import Depends, Header, HTTPException
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from storefront.config import JWT_SECRET
from storefront.database import get_db
from storefront.models import User


def _decode(authorization: str) -> dict:
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError(scheme)
        return jwt.decode(token, JWT_SECRET, algorithms=["HS256"])
    except (ValueError, JWTError):
        raise HTTPException(status_code=401, detail="Invalid or missing token")


def verify_token(authorization: str = Header(...)):
    _decode(authorization)


def get_current_user(authorization: str = Header(...), db: Session = Depends(get_db)) -> User:
    claims = _decode(authorization)
    try:
        user = db.get(User, int(claims.get("sub")))
    except (TypeError, ValueError):
        user = None
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid or missing token")
    return user
