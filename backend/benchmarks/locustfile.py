import random

from locust import HttpUser, task, between

SEEDED_PROCESS_IDS = [1, 2, 3]


class LabAdmin(HttpUser):
    wait_time = between(1, 3)

    def on_start(self):
        r = self.client.post("/api/workflows", json={"name": "load workflow", "created_by": 1})
        self.workflow_id = r.json().get("id", 1)

    @task(3)
    def list_workflows(self):
        self.client.get("/api/workflows")

    @task(2)
    def group_report(self):
        self.client.get("/api/workflowgroups/1/report")

    @task(1)
    def reorder_processes(self):
        ids = random.sample(SEEDED_PROCESS_IDS, k=random.randint(1, len(SEEDED_PROCESS_IDS)))
        self.client.put(
            f"/api/workflows/{self.workflow_id}/processes",
            json={"dnaProcessIds": ids},
            name="/api/workflows/[id]/processes",
        )
