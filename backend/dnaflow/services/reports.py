"""Read-side projections joining groups, worksheets and analysts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from .. import models, schemas


def build_group_report(db: Session, group_id: int) -> list[schemas.GroupReportRow]:
    """Return one row per worksheet placed in the group, ordered by step."""

    placement = models.WorksheetWorkflowGroup
    rows = (
        db.query(
            models.Workflow.name.label("workflow_name"),
            placement.step_order.label("step_order"),
            models.DnaProcess.name.label("process_name"),
            models.Worksheet.name.label("worksheet_name"),
            models.User.name.label("analyst_name"),
        )
        .select_from(placement)
        .join(models.WorkflowGroup, models.WorkflowGroup.id == placement.workflow_group_id)
        .join(models.Workflow, models.Workflow.id == models.WorkflowGroup.workflow_id)
        .join(models.Worksheet, models.Worksheet.id == placement.worksheet_id)
        .join(models.DnaProcess, models.DnaProcess.id == models.Worksheet.dna_process_id)
        .join(models.User, models.User.id == models.Worksheet.analyst_id)
        .filter(placement.workflow_group_id == group_id)
        # placement id keeps insertion order when step orders tie
        .order_by(placement.step_order.asc(), placement.id.asc())
        .all()
    )
    return [schemas.GroupReportRow(**row._mapping) for row in rows]


def list_group_placements(db: Session, group_id: int) -> list[models.WorksheetWorkflowGroup]:
    return (
        db.query(models.WorksheetWorkflowGroup)
        .filter(models.WorksheetWorkflowGroup.workflow_group_id == group_id)
        .order_by(
            models.WorksheetWorkflowGroup.step_order.asc(),
            models.WorksheetWorkflowGroup.id.asc(),
        )
        .all()
    )
