from dnaflow import models
from dnaflow.services import reports
from .conftest import TestingSessionLocal, client


def test_seeded_group_report(client):
    resp = client.get("/api/workflowgroups/1/report")
    assert resp.status_code == 200
    rows = resp.json()
    assert [r["step_order"] for r in rows] == [1, 2, 3]
    assert rows[0] == {
        "workflow_name": "Default Workflow",
        "step_order": 1,
        "process_name": "Extraction",
        "worksheet_name": "Process 1 Worksheet",
        "analyst_name": "analyst1",
    }


def test_report_orders_by_step_not_insertion(client):
    group = client.post("/api/workflowgroups", json={"workflow_id": 1}).json()
    for worksheet_id, step in [(1, 3), (2, 1), (3, 2)]:
        resp = client.post(
            f"/api/workflowgroups/{group['id']}/worksheets",
            json={"worksheet_id": worksheet_id, "step_order": step},
        )
        assert resp.status_code == 201

    rows = client.get(f"/api/workflowgroups/{group['id']}/report").json()
    assert [r["step_order"] for r in rows] == [1, 2, 3]
    assert [r["worksheet_name"] for r in rows] == [
        "Process 2 Worksheet",
        "Process 3 Worksheet",
        "Process 1 Worksheet",
    ]


def test_report_ties_keep_insertion_order():
    with TestingSessionLocal() as session:
        group = models.WorkflowGroup(workflow_id=1)
        session.add(group)
        session.flush()
        session.add(models.WorksheetWorkflowGroup(worksheet_id=3, workflow_group_id=group.id, step_order=1))
        session.flush()
        session.add(models.WorksheetWorkflowGroup(worksheet_id=1, workflow_group_id=group.id, step_order=1))
        session.commit()

        rows = reports.build_group_report(session, group.id)

    assert [r.worksheet_name for r in rows] == ["Process 3 Worksheet", "Process 1 Worksheet"]


def test_report_for_empty_or_missing_group(client):
    group = client.post("/api/workflowgroups", json={"workflow_id": 1}).json()
    assert client.get(f"/api/workflowgroups/{group['id']}/report").status_code == 404
    assert client.get("/api/workflowgroups/404/report").status_code == 404


def test_report_reflects_renamed_analyst(client):
    client.put(
        "/api/users/4",
        json={"id": 4, "name": "Dr. Analyst", "email": "analyst1@example.com", "role": "Analyst"},
    )
    rows = client.get("/api/workflowgroups/1/report").json()
    assert {r["analyst_name"] for r in rows} == {"Dr. Analyst"}


def test_worksheet_placements(client):
    listed = client.get("/api/workflowgroups/1/worksheets").json()
    assert [(p["worksheet_id"], p["step_order"]) for p in listed] == [(1, 1), (2, 2), (3, 3)]

    dup = client.post("/api/workflowgroups/1/worksheets", json={"worksheet_id": 2, "step_order": 7})
    assert dup.status_code == 409

    unknown = client.post("/api/workflowgroups/1/worksheets", json={"worksheet_id": 50, "step_order": 4})
    assert unknown.status_code == 400

    assert client.delete("/api/workflowgroups/1/worksheets/2").status_code == 204
    assert client.delete("/api/workflowgroups/1/worksheets/2").status_code == 404
    rows = client.get("/api/workflowgroups/1/report").json()
    assert [r["worksheet_name"] for r in rows] == ["Process 1 Worksheet", "Process 3 Worksheet"]


def test_group_crud(client):
    created = client.post("/api/workflowgroups", json={"workflow_id": 1})
    assert created.status_code == 201
    group_id = created.json()["id"]
    assert created.headers["location"] == f"/api/workflowgroups/{group_id}"

    assert client.post("/api/workflowgroups", json={"workflow_id": 999}).status_code == 400
    assert client.get(f"/api/workflowgroups/{group_id}").json()["workflow_id"] == 1
    assert client.delete(f"/api/workflowgroups/{group_id}").status_code == 204
    assert client.get(f"/api/workflowgroups/{group_id}").status_code == 404
    # seeded group still has placements and cannot be dropped
    assert client.delete("/api/workflowgroups/1").status_code == 409
