from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas
from ..services import reports

router = APIRouter(prefix="/api/workflowgroups", tags=["workflowgroups"])


@router.get("", response_model=list[schemas.WorkflowGroupOut])
def list_groups(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.WorkflowGroup)


@router.get("/{group_id}", response_model=schemas.WorkflowGroupOut)
def get_group(group_id: int, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.WorkflowGroup, group_id, "Workflow group")


@router.post("", response_model=schemas.WorkflowGroupOut, status_code=status.HTTP_201_CREATED)
def create_group(
    group: schemas.WorkflowGroupCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    crud.ensure_references(db, {models.Workflow: group.workflow_id})
    return crud.create_row(
        db,
        models.WorkflowGroup,
        group.model_dump(),
        label="Workflow group",
        response=response,
        location_prefix=router.prefix,
    )


@router.put("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_group(
    group_id: int,
    group: schemas.WorkflowGroupUpdate,
    db: Session = Depends(get_db),
):
    crud.update_row(
        db,
        models.WorkflowGroup,
        group_id,
        group,
        label="Workflow group",
        references={models.Workflow: group.workflow_id},
    )


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: int, db: Session = Depends(get_db)):
    crud.delete_row(db, models.WorkflowGroup, group_id, label="Workflow group")


@router.get("/{group_id}/report", response_model=list[schemas.GroupReportRow])
def group_report(group_id: int, db: Session = Depends(get_db)):
    report = reports.build_group_report(db, group_id)
    if not report:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No worksheets in workflow group")
    return report


@router.get("/{group_id}/worksheets", response_model=list[schemas.WorksheetPlacementOut])
def list_placements(group_id: int, db: Session = Depends(get_db)):
    crud.get_or_404(db, models.WorkflowGroup, group_id, "Workflow group")
    return reports.list_group_placements(db, group_id)


@router.post(
    "/{group_id}/worksheets",
    response_model=schemas.WorksheetPlacementOut,
    status_code=status.HTTP_201_CREATED,
)
def add_placement(
    group_id: int,
    placement: schemas.WorksheetPlacementCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    crud.get_or_404(db, models.WorkflowGroup, group_id, "Workflow group")
    crud.ensure_references(db, {models.Worksheet: placement.worksheet_id})
    db_placement = models.WorksheetWorkflowGroup(
        workflow_group_id=group_id,
        worksheet_id=placement.worksheet_id,
        step_order=placement.step_order,
    )
    db.add(db_placement)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Worksheet already in workflow group"
        ) from exc
    db.refresh(db_placement)
    response.headers["Location"] = f"{router.prefix}/{group_id}/worksheets/{placement.worksheet_id}"
    return db_placement


@router.delete("/{group_id}/worksheets/{worksheet_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_placement(group_id: int, worksheet_id: int, db: Session = Depends(get_db)):
    removed = (
        db.query(models.WorksheetWorkflowGroup)
        .filter(
            models.WorksheetWorkflowGroup.workflow_group_id == group_id,
            models.WorksheetWorkflowGroup.worksheet_id == worksheet_id,
        )
        .delete(synchronize_session=False)
    )
    if removed == 0:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Worksheet not in workflow group")
    db.commit()
