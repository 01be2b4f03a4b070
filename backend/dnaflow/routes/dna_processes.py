from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas

router = APIRouter(prefix="/api/dnaprocesses", tags=["dnaprocesses"])


@router.get("", response_model=list[schemas.DnaProcessOut])
def list_dna_processes(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.DnaProcess)


@router.get("/{process_id}", response_model=schemas.DnaProcessOut)
def get_dna_process(process_id: int, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.DnaProcess, process_id, "DNA process")


@router.post("", response_model=schemas.DnaProcessOut, status_code=status.HTTP_201_CREATED)
def create_dna_process(
    process: schemas.DnaProcessCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    crud.ensure_references(db, {models.User: process.created_by})
    return crud.create_row(
        db,
        models.DnaProcess,
        process.model_dump(),
        label="DNA process",
        response=response,
        location_prefix=router.prefix,
    )


@router.put("/{process_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_dna_process(
    process_id: int,
    process: schemas.DnaProcessUpdate,
    db: Session = Depends(get_db),
):
    crud.update_row(
        db,
        models.DnaProcess,
        process_id,
        process,
        label="DNA process",
        references={models.User: process.created_by},
    )


@router.delete("/{process_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dna_process(process_id: int, db: Session = Depends(get_db)):
    crud.delete_row(db, models.DnaProcess, process_id, label="DNA process")
