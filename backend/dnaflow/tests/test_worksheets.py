from .conftest import client


def test_seeded_worksheet_measurements(client):
    ws = client.get("/api/worksheets/1").json()
    assert ws["name"] == "Process 1 Worksheet"
    assert ws["analyst_id"] == 4
    assert ws["extraction"]["prop1"] == 2
    assert ws["extraction"]["prop2"] == 4
    assert ws["amplification"] is None
    assert ws["quantification"] is None

    all_ws = client.get("/api/worksheets").json()
    assert [w["quantification"] is not None for w in all_ws] == [False, False, True]


def test_worksheet_crud(client):
    resp = client.post(
        "/api/worksheets",
        json={"name": "Extra Extraction", "analyst_id": 4, "dna_process_id": 1},
    )
    assert resp.status_code == 201
    ws = resp.json()
    assert resp.headers["location"] == f"/api/worksheets/{ws['id']}"

    update = {"id": ws["id"], "name": "Extra Amplification", "analyst_id": 4, "dna_process_id": 2}
    assert client.put(f"/api/worksheets/{ws['id']}", json=update).status_code == 204
    assert client.get(f"/api/worksheets/{ws['id']}").json()["dna_process_id"] == 2

    bad_ref = dict(update, dna_process_id=404)
    resp = client.put(f"/api/worksheets/{ws['id']}", json=bad_ref)
    assert resp.status_code == 400

    assert client.delete(f"/api/worksheets/{ws['id']}").status_code == 204
    assert client.get(f"/api/worksheets/{ws['id']}").status_code == 404


def test_worksheet_with_measurement_cannot_be_deleted(client):
    assert client.delete("/api/worksheets/1").status_code == 409


def test_measurement_records(client):
    ws = client.post(
        "/api/worksheets",
        json={"name": "Run 4", "analyst_id": 4, "dna_process_id": 2},
    ).json()

    resp = client.post("/api/amplifications", json={"worksheet_id": ws["id"], "prop1": 1.5, "prop2": 3})
    assert resp.status_code == 201
    record = resp.json()
    assert resp.headers["location"] == f"/api/amplifications/{record['id']}"

    dup = client.post("/api/amplifications", json={"worksheet_id": ws["id"], "prop1": 9, "prop2": 9})
    assert dup.status_code == 409

    fetched = client.get(f"/api/worksheets/{ws['id']}").json()
    assert fetched["amplification"]["prop1"] == 1.5

    update = {"id": record["id"], "worksheet_id": ws["id"], "prop1": 2.5, "prop2": 3}
    assert client.put(f"/api/amplifications/{record['id']}", json=update).status_code == 204
    assert client.get(f"/api/amplifications/{record['id']}").json()["prop1"] == 2.5

    assert client.delete(f"/api/amplifications/{record['id']}").status_code == 204
    assert client.delete(f"/api/amplifications/{record['id']}").status_code == 404
    assert client.get(f"/api/worksheets/{ws['id']}").json()["amplification"] is None


def test_measurement_requires_existing_worksheet(client):
    resp = client.post("/api/extractions", json={"worksheet_id": 77, "prop1": 1, "prop2": 2})
    assert resp.status_code == 400


def test_measurement_lists(client):
    for resource, expected in [("extractions", 1), ("amplifications", 2), ("quantifications", 3)]:
        rows = client.get(f"/api/{resource}").json()
        assert [r["worksheet_id"] for r in rows] == [expected]
