from fastapi.testclient import TestClient


def test_search_excludes_out_of_stock_by_default(client: TestClient) -> None:
    data = client.get("/api/materials").json()

    ids = [m["id"] for m in data["materials"]]
    assert "mat-009" not in ids
    assert data["total"] == 8

    data = client.get("/api/materials", params={"in_stock_only": False}).json()
    assert data["total"] == 9


def test_search_filters(client: TestClient) -> None:
    cement = client.get("/api/materials", params={"category": "cement"}).json()
    assert {m["id"] for m in cement["materials"]} == {"mat-001", "mat-002"}

    dealer = client.get("/api/materials", params={"dealerId": "dealer-01"}).json()
    assert dealer["total"] >= 2
    assert all(m["dealerId"] == "dealer-01" for m in dealer["materials"])

    cheap = client.get("/api/materials", params={"max_price": 100}).json()
    assert all(m["price"] <= 100 for m in cheap["materials"])

    query = client.get("/api/materials", params={"query": "tmt"}).json()
    assert [m["id"] for m in query["materials"]] == ["mat-003"]


def test_search_paginates(client: TestClient) -> None:
    page = client.get("/api/materials", params={"limit": 3, "offset": 3}).json()

    assert len(page["materials"]) == 3
    assert page["total"] == 8
    assert page["offset"] == 3


def test_search_rejects_unknown_category(client: TestClient) -> None:
    assert client.get("/api/materials", params={"category": "glass"}).status_code == 422


def test_categories(client: TestClient) -> None:
    assert "cement" in client.get("/api/materials/categories").json()


def test_get_material(client: TestClient) -> None:
    data = client.get("/api/materials/mat-001").json()
    assert data["name"] == "UltraTech OPC 53 Grade Cement"
    assert data["dealerName"] == "Sharma Building Supplies"

    assert client.get("/api/materials/missing").status_code == 404


def test_search_by_unit(client: TestClient) -> None:
    data = client.get("/api/materials", params={"unit": "rod"}).json()
    assert [m["id"] for m in data["materials"]] == ["mat-003"]
