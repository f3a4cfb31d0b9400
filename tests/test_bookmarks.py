import pytest
from sqlalchemy.orm import Session

from wanrun.db.models.bookmark import DogrunBookmark as DogrunBookmarkModel
from wanrun.errors import DuplicateResourceError
from wanrun.repositories.bookmark import BookmarkRepository


def _bookmarked_dogrun_ids(db: Session, dog_owner_id: int) -> set[int]:
    rows = (
        db.query(DogrunBookmarkModel)
        .filter(DogrunBookmarkModel.dog_owner_id == dog_owner_id)
        .all()
    )
    return {row.dogrun_id for row in rows}


def _delete(client, json: dict, headers: dict | None = None):
    # TestClient.delete() takes no body
    return client.request("DELETE", "/api/v1/bookmark", json=json, headers=headers)


# ============================================================================
# ADD BOOKMARK TESTS
# ============================================================================


def test_add_bookmarks_success(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test bookmarking several dogruns returns one bookmark ID per dogrun."""
    response = client.post(
        "/api/v1/bookmark",
        json={"dogrunIDs": dogruns},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert list(data) == ["bookmarkIDs"]
    assert len(data["bookmarkIDs"]) == len(dogruns)
    assert all(isinstance(i, int) for i in data["bookmarkIDs"])
    assert _bookmarked_dogrun_ids(db, owner["id"]) == set(dogruns)


def test_add_bookmarks_ids_follow_request_order(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test the returned IDs line up with the requested dogrun order."""
    requested = [dogruns[2], dogruns[0]]
    response = client.post(
        "/api/v1/bookmark",
        json={"dogrunIDs": requested},
        headers=auth_headers,
    )
    assert response.status_code == 200
    bookmark_ids = response.json()["bookmarkIDs"]

    repo = BookmarkRepository(db)
    for dogrun_id, bookmark_id in zip(requested, bookmark_ids):
        assert repo.find_bookmark(owner["id"], dogrun_id).id == bookmark_id


def test_add_bookmarks_missing_dogrun(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test a missing dogrun fails the whole batch before anything is written."""
    response = client.post(
        "/api/v1/bookmark",
        json={"dogrunIDs": [dogruns[0], 9999]},
        headers=auth_headers,
    )
    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "NOT_FOUND"
    assert data["type"] == "dogrun-client"
    assert "9999" in data["detail"]
    assert _bookmarked_dogrun_ids(db, owner["id"]) == set()


def test_add_bookmarks_duplicate_is_not_rolled_back(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test the first dogrun stays bookmarked when the second one is already bookmarked."""
    first, second, _ = dogruns
    BookmarkRepository(db).insert_bookmark(owner["id"], second)

    response = client.post(
        "/api/v1/bookmark",
        json={"dogrunIDs": [first, second]},
        headers=auth_headers,
    )
    assert response.status_code == 409
    data = response.json()
    assert data["code"] == "DUPLICATE_RESOURCE"
    assert data["type"] == "interaction-client"
    assert str(second) in data["detail"]
    assert _bookmarked_dogrun_ids(db, owner["id"]) == {first, second}


def test_add_bookmarks_same_dogrun_other_owner(client, db: Session, other_owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test another owner's bookmark does not count as a duplicate."""
    BookmarkRepository(db).insert_bookmark(other_owner["id"], dogruns[0])

    response = client.post(
        "/api/v1/bookmark",
        json={"dogrunIDs": [dogruns[0]]},
        headers=auth_headers,
    )
    assert response.status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"dogrunIDs": []},
        {"dogrunIDs": [1, 1]},
        {"dogrunIDs": ["abc"]},
        {"dogrunIDs": [0]},
        {"dogrunIDs": list(range(1, 30))},
        {},
    ],
)
def test_add_bookmarks_invalid_body(client, auth_headers: dict, dogruns: list[int], body: dict):
    """Test malformed request bodies are rejected at request parsing level."""
    response = client.post("/api/v1/bookmark", json=body, headers=auth_headers)
    assert response.status_code == 422


def test_add_bookmarks_without_authentication(client, dogruns: list[int]):
    """Test bookmarking without a token fails."""
    response = client.post("/api/v1/bookmark", json={"dogrunIDs": dogruns})
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["type"] == "auth-client"


# ============================================================================
# DELETE BOOKMARK TESTS
# ============================================================================


def test_delete_bookmarks_success(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test deleting bookmarks removes only the given dogruns."""
    repo = BookmarkRepository(db)
    for dogrun_id in dogruns:
        repo.insert_bookmark(owner["id"], dogrun_id)

    response = _delete(client, {"dogrunIDs": dogruns[:2]}, auth_headers)
    assert response.status_code == 204
    assert response.content == b""
    db.expire_all()
    assert _bookmarked_dogrun_ids(db, owner["id"]) == {dogruns[2]}


def test_delete_bookmarks_not_bookmarked_is_idempotent(client, db: Session, owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test deleting dogruns that are not bookmarked still succeeds."""
    response = _delete(client, {"dogrunIDs": [dogruns[0], 9999]}, auth_headers)
    assert response.status_code == 204

    response = _delete(client, {"dogrunIDs": [dogruns[0], 9999]}, auth_headers)
    assert response.status_code == 204


def test_delete_bookmarks_keeps_other_owner_bookmarks(client, db: Session, other_owner: dict, auth_headers: dict, dogruns: list[int]):
    """Test a caller cannot remove another owner's bookmark."""
    BookmarkRepository(db).insert_bookmark(other_owner["id"], dogruns[0])

    response = _delete(client, {"dogrunIDs": [dogruns[0]]}, auth_headers)
    assert response.status_code == 204
    db.expire_all()
    assert _bookmarked_dogrun_ids(db, other_owner["id"]) == {dogruns[0]}


def test_delete_bookmarks_without_authentication(client, dogruns: list[int]):
    response = _delete(client, {"dogrunIDs": dogruns})
    assert response.status_code == 401


# ============================================================================
# REPOSITORY TESTS
# ============================================================================


def test_insert_bookmark_race_reports_duplicate(db: Session, owner: dict, dogruns: list[int]):
    """
    Test an insert that slips past the existence check hits the unique
    constraint and surfaces as the duplicate client error, leaving one row.
    """
    repo = BookmarkRepository(db)
    repo.insert_bookmark(owner["id"], dogruns[0])

    with pytest.raises(DuplicateResourceError):
        repo.insert_bookmark(owner["id"], dogruns[0])

    assert _bookmarked_dogrun_ids(db, owner["id"]) == {dogruns[0]}
    # The session is usable after the failed insert
    assert repo.insert_bookmark(owner["id"], dogruns[1]) > 0


def test_delete_bookmarks_returns_removed_count(db: Session, owner: dict, dogruns: list[int]):
    repo = BookmarkRepository(db)
    repo.insert_bookmark(owner["id"], dogruns[0])

    assert repo.delete_bookmarks(owner["id"], [dogruns[0], dogruns[1]]) == 1
    assert repo.delete_bookmarks(owner["id"], []) == 0
