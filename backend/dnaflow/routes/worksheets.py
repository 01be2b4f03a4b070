from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas

router = APIRouter(prefix="/api/worksheets", tags=["worksheets"])

_MEASUREMENT_MODELS = {
    "extraction": models.Extraction,
    "amplification": models.Amplification,
    "quantification": models.Quantification,
}


def _worksheet_out(db: Session, worksheet: models.Worksheet) -> schemas.WorksheetOut:
    measurements = {
        key: db.query(model).filter(model.worksheet_id == worksheet.id).first()
        for key, model in _MEASUREMENT_MODELS.items()
    }
    return schemas.WorksheetOut(
        id=worksheet.id,
        name=worksheet.name,
        analyst_id=worksheet.analyst_id,
        dna_process_id=worksheet.dna_process_id,
        **{
            key: schemas.MeasurementOut.model_validate(row) if row else None
            for key, row in measurements.items()
        },
    )


@router.get("", response_model=list[schemas.WorksheetOut])
def list_worksheets(db: Session = Depends(get_db)):
    return [_worksheet_out(db, ws) for ws in crud.list_rows(db, models.Worksheet)]


@router.get("/{worksheet_id}", response_model=schemas.WorksheetOut)
def get_worksheet(worksheet_id: int, db: Session = Depends(get_db)):
    worksheet = crud.get_or_404(db, models.Worksheet, worksheet_id, "Worksheet")
    return _worksheet_out(db, worksheet)


@router.post("", response_model=schemas.WorksheetOut, status_code=status.HTTP_201_CREATED)
def create_worksheet(
    worksheet: schemas.WorksheetCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    crud.ensure_references(
        db,
        {models.User: worksheet.analyst_id, models.DnaProcess: worksheet.dna_process_id},
    )
    db_ws = crud.create_row(
        db,
        models.Worksheet,
        worksheet.model_dump(),
        label="Worksheet",
        response=response,
        location_prefix=router.prefix,
    )
    return _worksheet_out(db, db_ws)


@router.put("/{worksheet_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_worksheet(
    worksheet_id: int,
    worksheet: schemas.WorksheetUpdate,
    db: Session = Depends(get_db),
):
    crud.update_row(
        db,
        models.Worksheet,
        worksheet_id,
        worksheet,
        label="Worksheet",
        references={models.User: worksheet.analyst_id, models.DnaProcess: worksheet.dna_process_id},
    )


@router.delete("/{worksheet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_worksheet(worksheet_id: int, db: Session = Depends(get_db)):
    crud.delete_row(db, models.Worksheet, worksheet_id, label="Worksheet")
