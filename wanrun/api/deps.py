from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from wanrun.db import SessionLocal
from wanrun.facades.dog import DogFacade
from wanrun.facades.dogrun import DogrunFacade
from wanrun.identity import Identity, resolve_identity
from wanrun.repositories.bookmark import BookmarkRepository
from wanrun.repositories.checkin import CheckinRepository
from wanrun.services.bookmark import BookmarkService
from wanrun.services.checkin import CheckinService

# auto_error=False so a missing header goes through UnauthorizedError like any other auth failure
bearer_scheme = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Identity:
    """Get the verified identity of the caller from the bearer token."""
    token = credentials.credentials if credentials else None
    return resolve_identity(token, db)


def get_bookmark_service(db: Session = Depends(get_db)) -> BookmarkService:
    return BookmarkService(BookmarkRepository(db), DogrunFacade(db))


def get_checkin_service(db: Session = Depends(get_db)) -> CheckinService:
    return CheckinService(CheckinRepository(db), DogrunFacade(db), DogFacade(db))
