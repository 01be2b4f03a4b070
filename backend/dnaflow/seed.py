"""Reference data for a fresh database."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from . import models

logger = logging.getLogger(__name__)

SEED_USERS = [
    ("admin", "admin@example.com", models.UserRole.ADMIN),
    ("tech1", "tech1@example.com", models.UserRole.TECHNICIAN),
    ("tech2", "tech2@example.com", models.UserRole.TECHNICIAN),
    ("analyst1", "analyst1@example.com", models.UserRole.ANALYST),
]
SEED_PROCESSES = ["Extraction", "Amplification", "Quantification"]
SEED_MEASUREMENTS = [
    (models.Extraction, 2, 4),
    (models.Amplification, 5, 10),
    (models.Quantification, 15, 20),
]


def seed_database(db: Session) -> bool:
    """Insert the default lab setup; returns False when data already exists."""

    # outputs: True when rows were inserted, the session is committed
    if db.query(models.User.id).first() is not None:
        logger.info("Database already seeded, skipping")
        return False

    users = [models.User(name=name, email=email, role=role) for name, email, role in SEED_USERS]
    db.add_all(users)
    db.flush()
    admin, analyst = users[0], users[-1]

    processes = [models.DnaProcess(name=name, created_by=admin.id) for name in SEED_PROCESSES]
    db.add_all(processes)
    db.flush()

    workflow = models.Workflow(name="Default Workflow", created_by=admin.id)
    db.add(workflow)
    db.flush()
    db.add_all(
        models.WorkflowProcess(workflow_id=workflow.id, dna_process_id=process.id, process_order=order)
        for order, process in enumerate(processes, start=1)
    )

    group = models.WorkflowGroup(workflow_id=workflow.id)
    db.add(group)
    worksheets = [
        models.Worksheet(name=f"Process {order} Worksheet", analyst_id=analyst.id, dna_process_id=process.id)
        for order, process in enumerate(processes, start=1)
    ]
    db.add_all(worksheets)
    db.flush()

    for order, (worksheet, (model, prop1, prop2)) in enumerate(
        zip(worksheets, SEED_MEASUREMENTS), start=1
    ):
        db.add(
            models.WorksheetWorkflowGroup(
                worksheet_id=worksheet.id, workflow_group_id=group.id, step_order=order
            )
        )
        db.add(model(worksheet_id=worksheet.id, prop1=prop1, prop2=prop2))

    db.commit()
    logger.info("Seeded %d users, %d processes and workflow %s", len(users), len(processes), workflow.id)
    return True
