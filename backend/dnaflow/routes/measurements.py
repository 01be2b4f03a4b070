"""Per-step measurement record routes (extraction, amplification, quantification)."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas


def build_router(model: type[models.Base], resource: str, label: str) -> APIRouter:
    router = APIRouter(prefix=f"/api/{resource}", tags=[resource, "measurements"])

    @router.get("", response_model=list[schemas.MeasurementOut], name=f"list_{resource}")
    def list_measurements(db: Session = Depends(get_db)):
        return crud.list_rows(db, model)

    @router.get("/{record_id}", response_model=schemas.MeasurementOut, name=f"get_{resource}")
    def get_measurement(record_id: int, db: Session = Depends(get_db)):
        return crud.get_or_404(db, model, record_id, label)

    @router.post(
        "",
        response_model=schemas.MeasurementOut,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource}",
    )
    def create_measurement(
        record: schemas.MeasurementCreate,
        response: Response,
        db: Session = Depends(get_db),
    ):
        crud.ensure_references(db, {models.Worksheet: record.worksheet_id})
        return crud.create_row(
            db,
            model,
            record.model_dump(),
            label=label,
            response=response,
            location_prefix=router.prefix,
        )

    @router.put("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"update_{resource}")
    def update_measurement(
        record_id: int,
        record: schemas.MeasurementUpdate,
        db: Session = Depends(get_db),
    ):
        crud.update_row(
            db, model, record_id, record, label=label, references={models.Worksheet: record.worksheet_id}
        )

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{resource}")
    def delete_measurement(record_id: int, db: Session = Depends(get_db)):
        crud.delete_row(db, model, record_id, label=label)

    return router


extractions = build_router(models.Extraction, "extractions", "Extraction")
amplifications = build_router(models.Amplification, "amplifications", "Amplification")
quantifications = build_router(models.Quantification, "quantifications", "Quantification")
