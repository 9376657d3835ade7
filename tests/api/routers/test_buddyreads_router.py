"""Tests for the buddy reads router."""

from fastapi.testclient import TestClient

from tests.utils.test_helpers import ApiContext


def test_create(client: TestClient, api: ApiContext) -> None:
    u1, _, u3 = api.user_ids

    response = client.post(
        "/buddyreads",
        json={"bookId": "book-9", "createdBy": u1, "buddy": u3},
        headers=api.auth(1),
    )

    assert response.status_code == 201
    buddyread = response.json()["buddyread"]
    assert buddyread["bookId"] == "book-9"
    assert buddyread["createdBy"] == u1
    assert buddyread["buddy"] == u3
    assert buddyread["status"] == "pending"


def test_create_invalid_status(client: TestClient, api: ApiContext) -> None:
    u1, _, u3 = api.user_ids

    response = client.post(
        "/buddyreads",
        json={"bookId": "book-9", "createdBy": u1, "buddy": u3, "status": "maybe"},
        headers=api.auth(1),
    )

    assert response.status_code == 400


def test_create_anon(client: TestClient, api: ApiContext) -> None:
    response = client.post("/buddyreads", json={"bookId": "b", "createdBy": 1, "buddy": 2})

    assert response.status_code == 401


def test_list_admin(client: TestClient, api: ApiContext) -> None:
    response = client.get("/buddyreads", headers=api.auth(2))

    assert response.status_code == 200
    assert [b["id"] for b in response.json()["buddyreads"]] == api.buddyread_ids


def test_list_filters(client: TestClient, api: ApiContext) -> None:
    u1, u2, u3 = api.user_ids

    by_buddy = client.get(f"/buddyreads?buddy={u3}", headers=api.auth(2))
    by_creator = client.get(f"/buddyreads?createdBy={u1}", headers=api.auth(2))
    both = client.get(f"/buddyreads?createdBy={u2}&buddy={u2}", headers=api.auth(2))
    unknown = client.get("/buddyreads?title=x", headers=api.auth(2))

    assert [b["bookId"] for b in by_buddy.json()["buddyreads"]] == ["book-2"]
    assert [b["bookId"] for b in by_creator.json()["buddyreads"]] == ["book-1"]
    assert both.json()["buddyreads"] == []
    assert len(unknown.json()["buddyreads"]) == 2


def test_list_non_numeric_filter(client: TestClient, api: ApiContext) -> None:
    response = client.get("/buddyreads?buddy=abc", headers=api.auth(2))

    assert response.status_code == 400


def test_list_non_admin(client: TestClient, api: ApiContext) -> None:
    response = client.get("/buddyreads", headers=api.auth(1))

    assert response.status_code == 401


def test_get_expands_users(client: TestClient, api: ApiContext) -> None:
    response = client.get(f"/buddyreads/{api.buddyread_ids[0]}", headers=api.auth(3))

    assert response.status_code == 200
    buddyread = response.json()["buddyread"]
    assert buddyread["createdBy"]["email"] == "u1@email.com"
    assert buddyread["buddy"]["email"] == "u2@email.com"
    assert "isAdmin" not in buddyread["buddy"]


def test_get_not_found(client: TestClient, api: ApiContext) -> None:
    response = client.get("/buddyreads/999", headers=api.auth(1))

    assert response.status_code == 404
    assert response.json() == {"detail": "No buddyread: 999"}


def test_update_status(client: TestClient, api: ApiContext) -> None:
    response = client.patch(
        f"/buddyreads/{api.buddyread_ids[0]}",
        json={"status": "accepted"},
        headers=api.auth(1),
    )

    assert response.status_code == 200
    assert response.json()["buddyread"]["status"] == "accepted"


def test_update_bad_request(client: TestClient, api: ApiContext) -> None:
    url = f"/buddyreads/{api.buddyread_ids[0]}"

    bad_status = client.patch(url, json={"status": "maybe"}, headers=api.auth(1))
    bad_field = client.patch(url, json={"bookId": "other"}, headers=api.auth(1))

    assert bad_status.status_code == 400
    assert bad_field.status_code == 400


def test_delete(client: TestClient, api: ApiContext) -> None:
    buddyread_id = api.buddyread_ids[1]

    response = client.delete(f"/buddyreads/{buddyread_id}", headers=api.auth(1))

    assert response.json() == {"deleted": str(buddyread_id)}
    assert client.get(
        f"/buddyreads/{buddyread_id}", headers=api.auth(1)
    ).status_code == 404
