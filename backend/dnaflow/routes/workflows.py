from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas
from ..services import workflow_processes

# purpose: workflow CRUD plus ordered DNA process sequencing endpoints
# status: active
# depends_on: backend.dnaflow.services.workflow_processes

router = APIRouter(prefix="/api/workflows", tags=["workflows"])


def _workflow_out(db: Session, workflow: models.Workflow) -> schemas.WorkflowOut:
    return schemas.WorkflowOut(
        id=workflow.id,
        name=workflow.name,
        created_by=workflow.created_by,
        processes=workflow_processes.list_workflow_processes(db, workflow.id),
    )


@router.get("", response_model=list[schemas.WorkflowOut])
def list_workflows(db: Session = Depends(get_db)):
    return [_workflow_out(db, wf) for wf in crud.list_rows(db, models.Workflow)]


@router.get("/{workflow_id}", response_model=schemas.WorkflowOut)
def get_workflow(workflow_id: int, db: Session = Depends(get_db)):
    workflow = crud.get_or_404(db, models.Workflow, workflow_id, "Workflow")
    return _workflow_out(db, workflow)


@router.post("", response_model=schemas.WorkflowOut, status_code=status.HTTP_201_CREATED)
def create_workflow(wf: schemas.WorkflowCreate, response: Response, db: Session = Depends(get_db)):
    crud.ensure_references(db, {models.User: wf.created_by})
    db_wf = crud.create_row(
        db,
        models.Workflow,
        wf.model_dump(),
        label="Workflow",
        response=response,
        location_prefix=router.prefix,
    )
    return _workflow_out(db, db_wf)


@router.put("/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_workflow(workflow_id: int, wf: schemas.WorkflowUpdate, db: Session = Depends(get_db)):
    crud.update_row(
        db, models.Workflow, workflow_id, wf, label="Workflow", references={models.User: wf.created_by}
    )


@router.delete("/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workflow(workflow_id: int, db: Session = Depends(get_db)):
    crud.delete_row(db, models.Workflow, workflow_id, label="Workflow")


@router.get("/{workflow_id}/processes", response_model=list[schemas.WorkflowProcessOut])
def list_processes(workflow_id: int, db: Session = Depends(get_db)):
    crud.get_or_404(db, models.Workflow, workflow_id, "Workflow")
    return workflow_processes.list_workflow_processes(db, workflow_id)


@router.post("/{workflow_id}/add-process", status_code=status.HTTP_204_NO_CONTENT)
def add_process(
    workflow_id: int,
    dna_process_id: int = Query(..., alias="dnaProcessId"),
    process_order: int = Query(..., alias="processOrder"),
    db: Session = Depends(get_db),
):
    try:
        workflow_processes.append_workflow_process(db, workflow_id, dna_process_id, process_order)
    except workflow_processes.WorkflowNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except workflow_processes.ProcessValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except workflow_processes.ProcessConflict as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except workflow_processes.StorageFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add process"
        ) from exc


@router.put("/{workflow_id}/processes", status_code=status.HTTP_204_NO_CONTENT)
def replace_processes(
    workflow_id: int,
    payload: schemas.ProcessSequenceUpdate,
    db: Session = Depends(get_db),
):
    try:
        workflow_processes.replace_workflow_processes(db, workflow_id, payload.dna_process_ids)
    except workflow_processes.WorkflowNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except workflow_processes.ProcessValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except workflow_processes.StorageFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update workflow processes",
        ) from exc
