ITEM = {"title": "T", "description": "D", "image": "http://x/y.png", "category": "studio"}


def _create(client, **overrides):
    r = client.post("/api/portfolio", json=dict(ITEM, **overrides))
    assert r.status_code == 201, r.text
    return r.json()


def test_portfolio_crud_flow(client):
    assert client.get("/api/portfolio").json() == []

    item = _create(client)
    assert item == dict(ITEM, id=item["id"])

    r = client.put(f"/api/portfolio/{item['id']}", json={"category": "team"})
    assert r.status_code == 200
    assert r.json() == dict(item, category="team")

    listed = client.get("/api/portfolio").json()
    assert listed == [dict(item, category="team")]


def test_patch_is_partial_too(client):
    item = _create(client)
    r = client.patch(f"/api/portfolio/{item['id']}", json={"title": "X"})
    assert r.status_code == 200
    assert r.json() == dict(item, title="X")


def test_update_missing_item_is_404(client):
    r = client.put("/api/portfolio/999", json={"title": "X"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Portfolio item not found"


def test_blob_image_from_admin_upload_is_stored(client):
    item = _create(client, image="blob:http://localhost:5173/0b1c")
    assert item["image"] == "blob:http://localhost:5173/0b1c"

    r = client.put(f"/api/portfolio/{item['id']}", json={"image": "blob:http://localhost:5173/9f2e"})
    assert r.status_code == 200, r.text
    assert r.json()["image"] == "blob:http://localhost:5173/9f2e"


def test_update_rejects_empty_image(client):
    item = _create(client)
    r = client.put(f"/api/portfolio/{item['id']}", json={"image": ""})
    assert r.status_code == 422


def test_delete_is_idempotent(client):
    keep = _create(client, title="Keep")
    gone = _create(client, title="Gone")

    assert client.delete(f"/api/portfolio/{gone['id']}").status_code == 204
    assert client.delete(f"/api/portfolio/{gone['id']}").status_code == 204
    assert client.delete("/api/portfolio/4242").status_code == 204

    assert client.get("/api/portfolio").json() == [keep]


def test_create_requires_all_fields(client):
    r = client.post("/api/portfolio", json={"title": "T", "description": "D"})
    assert r.status_code == 422


def test_out_of_range_id_is_treated_as_missing(client):
    huge = 2**63
    assert client.put(f"/api/portfolio/{huge}", json={"title": "X"}).status_code == 404
    assert client.delete(f"/api/portfolio/{huge}").status_code == 204
    assert client.get(f"/api/users/{huge}").status_code == 404
