def _create(client, headers, title="t1", content="c1"):
    r = client.post("/notes", headers=headers, json={"title": title, "content": content})
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_list_newest_first(client, signup):
    uid, h = signup()
    first = _create(client, h, "first", "one")
    second = _create(client, h, "second", "two")
    assert first["user_id"] == uid
    assert first["summary"] is None

    r = client.get("/notes", headers=h)
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 2
    assert [n["id"] for n in body["items"]] == [second["id"], first["id"]]


def test_blank_title_gets_placeholder(client, signup):
    _, h = signup()
    note = _create(client, h, "   ", "  some content  ")
    assert note["title"] == "Untitled Note"
    assert note["content"] == "some content"


def test_blank_title_and_content_is_never_stored(client, signup):
    _, h = signup()
    r = client.post("/notes", headers=h, json={"title": "  ", "content": "\n\t"})
    assert r.status_code == 422
    assert client.get("/notes", headers=h).json()["count"] == 0


def test_overlong_title_is_rejected(client, signup):
    _, h = signup()
    r = client.post("/notes", headers=h, json={"title": "x" * 101, "content": "c"})
    assert r.status_code == 422


def test_update_keeps_summary_and_moves_note_to_top(client, signup):
    _, h = signup()
    older = _create(client, h, "older", "a")
    newer = _create(client, h, "newer", "b")
    client.put(f"/notes/{older['id']}/summary", headers=h, json={"summary": "S1"})

    r = client.patch(f"/notes/{older['id']}", headers=h, json={"title": "older v2", "content": "a b c"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "older v2"
    assert updated["summary"] == "S1"
    assert updated["updated_at"] >= updated["created_at"]

    ids = [n["id"] for n in client.get("/notes", headers=h).json()["items"]]
    assert ids == [older["id"], newer["id"]]


def test_summary_is_overwritten_not_merged(client, signup):
    _, h = signup()
    note = _create(client, h)
    client.put(f"/notes/{note['id']}/summary", headers=h, json={"summary": "first"})
    r = client.put(f"/notes/{note['id']}/summary", headers=h, json={"summary": "second"})
    assert r.json()["summary"] == "second"
    assert client.get(f"/notes/{note['id']}", headers=h).json()["summary"] == "second"


def test_delete_then_fetch_never_returns_note(client, signup):
    _, h = signup()
    keep = _create(client, h, "keep", "k")
    gone = _create(client, h, "gone", "g")
    r = client.delete(f"/notes/{gone['id']}", headers=h)
    assert r.status_code == 204
    ids = [n["id"] for n in client.get("/notes", headers=h).json()["items"]]
    assert ids == [keep["id"]]
    assert client.get(f"/notes/{gone['id']}", headers=h).status_code == 404


def test_summary_write_after_delete_fails_cleanly(client, signup):
    _, h = signup()
    note = _create(client, h)
    client.delete(f"/notes/{note['id']}", headers=h)
    r = client.put(f"/notes/{note['id']}/summary", headers=h, json={"summary": "late"})
    assert r.status_code == 404


def test_cross_user_access_is_rejected(client, signup):
    _, alice = signup("alice@mail.com")
    _, bob = signup("bob@mail.com")
    note = _create(client, alice, "private", "mine")

    # bob does not see it in his list...
    assert client.get("/notes", headers=bob).json()["items"] == []
    # ...and direct access is refused rather than quietly ignored
    assert client.get(f"/notes/{note['id']}", headers=bob).status_code == 403
    assert client.patch(f"/notes/{note['id']}", headers=bob, json={"title": "x"}).status_code == 403
    assert client.put(f"/notes/{note['id']}/summary", headers=bob, json={"summary": "x"}).status_code == 403
    assert client.delete(f"/notes/{note['id']}", headers=bob).status_code == 403

    still = client.get(f"/notes/{note['id']}", headers=alice).json()
    assert still["title"] == "private"
    assert still["summary"] is None


def test_server_side_search(client, signup):
    _, h = signup()
    _create(client, h, "Budget Q3", "spend")
    _create(client, h, "Groceries", "milk")
    r = client.get("/notes", headers=h, params={"search": "BUDGET"})
    assert [n["title"] for n in r.json()["items"]] == ["Budget Q3"]
    r = client.get("/notes", headers=h, params={"search": "q4"})
    assert r.json()["items"] == []


def test_search_treats_wildcards_literally(client, signup):
    _, h = signup()
    _create(client, h, "Budget", "plan")
    _create(client, h, "50% off", "sale_items")
    r = client.get("/notes", headers=h, params={"search": "%"})
    assert [n["title"] for n in r.json()["items"]] == ["50% off"]
    r = client.get("/notes", headers=h, params={"search": "_"})
    assert [n["title"] for n in r.json()["items"]] == ["50% off"]
    r = client.get("/notes", headers=h, params={"search": "0% OFF"})
    assert [n["title"] for n in r.json()["items"]] == ["50% off"]
