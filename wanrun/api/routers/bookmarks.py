from fastapi import APIRouter, Depends, status

from wanrun.api.deps import get_bookmark_service, get_identity
from wanrun.identity import Identity
from wanrun.schemas.interaction import (
    BookmarkAddRequest,
    BookmarkAddResponse,
    BookmarkDeleteRequest,
)
from wanrun.services.bookmark import BookmarkService

router = APIRouter(prefix="/bookmark", tags=["bookmarks"])


@router.post("", response_model=BookmarkAddResponse, status_code=status.HTTP_200_OK)
def add_bookmarks(
    body: BookmarkAddRequest,
    identity: Identity = Depends(get_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    """
    Bookmark one or more dogruns for the caller.

    Every dogrun must exist. Fails with 409 on the first dogrun that is
    already bookmarked; dogruns earlier in the list stay bookmarked.
    """
    bookmark_ids = service.add_bookmarks(identity, body.dogrun_ids)
    return BookmarkAddResponse(bookmark_ids=bookmark_ids)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmarks(
    body: BookmarkDeleteRequest,
    identity: Identity = Depends(get_identity),
    service: BookmarkService = Depends(get_bookmark_service),
):
    """
    Remove the caller's bookmarks for the given dogruns. Dogruns that are not bookmarked are ignored.
    """
    service.delete_bookmarks(identity, body.dogrun_ids)
