"""Ordered workflow to DNA process sequencing services."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas

# purpose: maintain the ordered process list of a workflow, including atomic replacement
# status: active
# depends_on: backend.dnaflow.models.WorkflowProcess, backend.dnaflow.models.DnaProcess

logger = logging.getLogger(__name__)

# error details name at most this many offending ids
MAX_REPORTED_IDS = 20


class WorkflowProcessError(RuntimeError):
    """Base error for workflow sequencing."""


class WorkflowNotFound(WorkflowProcessError):
    """Raised when the target workflow does not exist."""


class ProcessValidationError(WorkflowProcessError):
    """Raised when submitted process ids are duplicated or unknown."""

    def __init__(self, message: str, ids: Sequence[int] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.ids = list(ids)

    def __str__(self) -> str:
        if not self.ids:
            return self.message
        shown = ", ".join(str(i) for i in self.ids[:MAX_REPORTED_IDS])
        hidden = len(self.ids) - MAX_REPORTED_IDS
        if hidden > 0:
            return f"{self.message}: {shown} (and {hidden} more)"
        return f"{self.message}: {shown}"


class ProcessConflict(WorkflowProcessError):
    """Raised when a process is already part of the workflow."""


class StorageFailure(WorkflowProcessError):
    """Raised when the database rejects a sequencing mutation after rollback."""


def _lock_workflow(db: Session, workflow_id: int) -> models.Workflow:
    # row lock serializes concurrent replacers of the same workflow
    workflow = (
        db.query(models.Workflow)
        .filter(models.Workflow.id == workflow_id)
        .with_for_update()
        .first()
    )
    if workflow is None:
        raise WorkflowNotFound(f"Workflow {workflow_id} not found")
    return workflow


def _validate_process_ids(db: Session, process_ids: Sequence[int]) -> None:
    duplicates = sorted(pid for pid, count in Counter(process_ids).items() if count > 1)
    if duplicates:
        raise ProcessValidationError("duplicate ids", duplicates)
    if not process_ids:
        return
    known = {
        row.id
        for row in db.query(models.DnaProcess.id)
        .filter(models.DnaProcess.id.in_(set(process_ids)))
        .all()
    }
    missing = sorted(set(process_ids) - known)
    if missing:
        raise ProcessValidationError("invalid id", missing)


def _insert_link(
    db: Session, workflow_id: int, dna_process_id: int, process_order: int
) -> models.WorkflowProcess:
    link = models.WorkflowProcess(
        workflow_id=workflow_id,
        dna_process_id=dna_process_id,
        process_order=process_order,
    )
    db.add(link)
    db.flush()
    return link


def list_workflow_processes(db: Session, workflow_id: int) -> list[schemas.WorkflowProcessOut]:
    """Return the workflow's sequence ordered by position."""

    rows = (
        db.query(
            models.WorkflowProcess.id,
            models.WorkflowProcess.process_order,
            models.WorkflowProcess.dna_process_id,
            models.DnaProcess.name.label("dna_process_name"),
        )
        .join(models.DnaProcess, models.DnaProcess.id == models.WorkflowProcess.dna_process_id)
        .filter(models.WorkflowProcess.workflow_id == workflow_id)
        .order_by(models.WorkflowProcess.process_order.asc(), models.WorkflowProcess.id.asc())
        .all()
    )
    return [schemas.WorkflowProcessOut.model_validate(row) for row in rows]


def replace_workflow_processes(
    db: Session,
    workflow_id: int,
    process_ids: Sequence[int],
) -> None:
    """Replace the whole ordered sequence of a workflow in one transaction."""

    # purpose: delete then reinsert the association rows, numbering them 1..n in input order
    # inputs: request scoped session, workflow id, ordered DNA process ids
    # outputs: None; the session is committed on success and rolled back on any failure
    # status: active
    process_ids = list(process_ids)
    try:
        _lock_workflow(db, workflow_id)
        _validate_process_ids(db, process_ids)
    except WorkflowProcessError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Locking workflow %s for replacement failed", workflow_id)
        raise StorageFailure("Failed to update workflow processes") from exc

    try:
        (
            db.query(models.WorkflowProcess)
            .filter(models.WorkflowProcess.workflow_id == workflow_id)
            .delete(synchronize_session=False)
        )
        for position, dna_process_id in enumerate(process_ids, start=1):
            _insert_link(db, workflow_id, dna_process_id, position)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Replacing processes of workflow %s failed, rolled back", workflow_id)
        raise StorageFailure("Failed to update workflow processes") from exc

    logger.info("Workflow %s sequence replaced with %s", workflow_id, process_ids)


def append_workflow_process(
    db: Session,
    workflow_id: int,
    dna_process_id: int,
    process_order: int,
) -> models.WorkflowProcess:
    """Add a single process at a caller-chosen order without renumbering."""

    try:
        if db.get(models.Workflow, workflow_id) is None:
            raise WorkflowNotFound(f"Workflow {workflow_id} not found")
        if db.get(models.DnaProcess, dna_process_id) is None:
            raise ProcessValidationError("invalid id", [dna_process_id])
        existing = (
            db.query(models.WorkflowProcess.id)
            .filter(
                models.WorkflowProcess.workflow_id == workflow_id,
                models.WorkflowProcess.dna_process_id == dna_process_id,
            )
            .first()
        )
        if existing is not None:
            raise ProcessConflict("Process already in workflow")
    except WorkflowProcessError:
        db.rollback()
        raise

    try:
        link = _insert_link(db, workflow_id, dna_process_id, process_order)
        db.commit()
    except IntegrityError as exc:
        # lost a race against another append of the same pair
        db.rollback()
        raise ProcessConflict("Process already in workflow") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Appending process %s to workflow %s failed", dna_process_id, workflow_id)
        raise StorageFailure("Failed to add process to workflow") from exc

    logger.info(
        "Process %s appended to workflow %s at order %s", dna_process_id, workflow_id, process_order
    )
    return link
