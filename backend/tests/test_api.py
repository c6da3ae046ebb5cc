from __future__ import annotations

import pytest

from app.database import clean_db

from conftest import auth_headers, signup

CREDENTIALS = {"email": "test@test.com", "password": "123456"}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_full_scenario(client):
    assert client.post("/auth/signup", json=CREDENTIALS).status_code == 201

    r = client.post("/auth/signin", json=CREDENTIALS)
    assert r.status_code == 200
    headers = auth_headers(r.json()["access_token"])

    r = client.get("/users/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == "test@test.com"

    r = client.get("/bookmarks", headers=headers)
    assert r.status_code == 200
    assert r.json() == []

    bookmark = {"title": "Test bookmark", "description": "Test description", "link": "https://test.com"}
    r = client.post("/bookmarks", headers=headers, json=bookmark)
    assert r.status_code == 201
    created = r.json()
    bookmark_id = created["id"]
    assert {k: created[k] for k in bookmark} == bookmark

    r = client.get("/bookmarks", headers=headers)
    assert r.status_code == 200
    assert len(r.json()) == 1

    r = client.get(f"/bookmarks/{bookmark_id}", headers=headers)
    assert r.status_code == 200
    assert r.json()["id"] == bookmark_id
    assert {k: r.json()[k] for k in bookmark} == bookmark

    edit = {
        "title": "Updated test bookmark",
        "description": "Updated test description",
        "link": "https://updated-test.com",
    }
    r = client.patch(f"/bookmarks/{bookmark_id}", headers=headers, json=edit)
    assert r.status_code == 200
    assert {k: r.json()[k] for k in edit} == edit

    r = client.get(f"/bookmarks/{bookmark_id}", headers=headers)
    assert {k: r.json()[k] for k in edit} == edit

    r = client.delete(f"/bookmarks/{bookmark_id}", headers=headers)
    assert r.status_code == 204
    assert r.content == b""

    r = client.get(f"/bookmarks/{bookmark_id}", headers=headers)
    assert r.status_code == 404


@pytest.mark.parametrize("path", ["/auth/signup", "/auth/signin"])
@pytest.mark.parametrize("body", [
    {"email": "", "password": "123456"},
    {"email": "test@test.com", "password": ""},
    {"email": "", "password": ""},
    {"password": "123456"},
    {"email": "test@test.com"},
])
def test_empty_credentials_are_bad_request(client, path, body):
    r = client.post(path, json=body)
    assert r.status_code == 400


def test_duplicate_signup_is_forbidden(client):
    signup(client)
    r = client.post("/auth/signup", json=CREDENTIALS)
    assert r.status_code == 403


def test_signin_failures_are_indistinguishable(client):
    signup(client)
    unknown = client.post("/auth/signin", json={"email": "nobody@test.com", "password": "123456"})
    wrong = client.post("/auth/signin", json={"email": "test@test.com", "password": "654321"})
    assert unknown.status_code == wrong.status_code == 403
    assert unknown.json() == wrong.json()


def test_edit_user(client):
    headers = auth_headers(signup(client))
    r = client.patch("/users", headers=headers, json={"email": "test@test.com", "firstName": "Test"})
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "test@test.com"
    assert body["firstName"] == "Test"
    assert body["lastName"] is None
    assert "password" not in r.text
    assert "passwordHash" not in body and "password_hash" not in body


def test_edit_user_rejects_invalid_email(client):
    headers = auth_headers(signup(client))
    r = client.patch("/users", headers=headers, json={"email": "not-an-email"})
    assert r.status_code == 400


def test_edit_user_to_taken_email(client):
    signup(client, email="first@test.com")
    headers = auth_headers(signup(client, email="second@test.com"))
    r = client.patch("/users", headers=headers, json={"email": "first@test.com"})
    assert r.status_code == 403


def test_me_has_no_password_hash(client):
    headers = auth_headers(signup(client))
    r = client.get("/users/me", headers=headers)
    assert r.status_code == 200
    assert set(r.json()) == {"id", "email", "firstName", "lastName", "createdAt", "updatedAt"}


@pytest.mark.parametrize("method,path", [
    ("get", "/users/me"),
    ("patch", "/users"),
    ("get", "/bookmarks"),
    ("post", "/bookmarks"),
    ("get", "/bookmarks/1"),
    ("patch", "/bookmarks/1"),
    ("delete", "/bookmarks/1"),
])
def test_protected_routes_require_token(client, method, path):
    r = client.request(method, path)
    assert r.status_code == 401

    r = client.request(method, path, headers=auth_headers("garbage"))
    assert r.status_code == 401


def test_bookmarks_are_scoped_to_owner(client):
    owner = auth_headers(signup(client, email="owner@test.com"))
    other = auth_headers(signup(client, email="other@test.com"))

    r = client.post("/bookmarks", headers=owner, json={"title": "Private", "link": "https://private.test"})
    bookmark_id = r.json()["id"]

    r = client.get(f"/bookmarks/{bookmark_id}", headers=other)
    assert r.status_code == 404
    assert "Private" not in r.text

    assert client.patch(f"/bookmarks/{bookmark_id}", headers=other, json={"title": "Mine now"}).status_code == 404
    assert client.delete(f"/bookmarks/{bookmark_id}", headers=other).status_code == 404
    assert client.get("/bookmarks", headers=other).json() == []

    r = client.get(f"/bookmarks/{bookmark_id}", headers=owner)
    assert r.status_code == 200
    assert r.json()["title"] == "Private"


def test_partial_bookmark_update(client):
    headers = auth_headers(signup(client))
    r = client.post("/bookmarks", headers=headers, json={
        "title": "Test bookmark", "description": "Test description", "link": "https://test.com",
    })
    bookmark_id = r.json()["id"]

    r = client.patch(f"/bookmarks/{bookmark_id}", headers=headers, json={"title": "Renamed"})
    assert r.status_code == 200
    assert r.json()["title"] == "Renamed"
    assert r.json()["description"] == "Test description"
    assert r.json()["link"] == "https://test.com"


def test_create_bookmark_requires_title_and_link(client):
    headers = auth_headers(signup(client))
    assert client.post("/bookmarks", headers=headers, json={"link": "https://test.com"}).status_code == 400
    assert client.post("/bookmarks", headers=headers, json={"title": "No link"}).status_code == 400
    assert client.post("/bookmarks", headers=headers, json={"title": "", "link": "x"}).status_code == 400


@pytest.mark.parametrize("bookmark_id", ["0", "-1", "abc", "99999999999999999999"])
def test_bookmark_id_must_be_positive_integer(client, bookmark_id):
    headers = auth_headers(signup(client))
    assert client.get(f"/bookmarks/{bookmark_id}", headers=headers).status_code == 400
    assert client.patch(f"/bookmarks/{bookmark_id}", headers=headers, json={"title": "x"}).status_code == 400
    assert client.delete(f"/bookmarks/{bookmark_id}", headers=headers).status_code == 400


def test_token_for_removed_account(client):
    headers = auth_headers(signup(client))
    client.portal.call(clean_db)
    assert client.get("/users/me", headers=headers).status_code == 404
    assert client.get("/bookmarks", headers=headers).json() == []
