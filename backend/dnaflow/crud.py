from __future__ import annotations

import logging
from typing import Any, TypeVar

from fastapi import HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .database import Base

# purpose: shared create/read/update/delete plumbing for the entity routers
# status: active
# depends_on: backend.dnaflow.database

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: type[ModelT], obj_id: int, label: str) -> ModelT:
    obj = db.get(model, obj_id)
    if obj is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return obj


def list_rows(db: Session, model: type[ModelT]) -> list[ModelT]:
    return db.query(model).order_by(model.id.asc()).all()


def ensure_references(db: Session, references: dict[type, int | None]) -> None:
    """Reject ids that point at rows which do not exist."""

    missing = [
        f"{model.__name__}:{ref_id}"
        for model, ref_id in references.items()
        if ref_id is not None and db.get(model, ref_id) is None
    ]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid id: {', '.join(missing)}",
        )


def create_row(
    db: Session,
    model: type[ModelT],
    data: dict[str, Any],
    *,
    label: str,
    response: Response,
    location_prefix: str,
) -> ModelT:
    obj = model(**data)
    db.add(obj)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=f"{label} conflicts with an existing record"
        ) from exc
    db.refresh(obj)
    response.headers["Location"] = f"{location_prefix}/{obj.id}"
    return obj


def update_row(
    db: Session,
    model: type[ModelT],
    obj_id: int,
    payload: BaseModel,
    *,
    label: str,
    references: dict[type, int | None] | None = None,
) -> None:
    """Overwrite a row in place; the path id must match the body id."""

    # inputs: payload carrying its own ``id`` field, foreign ids checked after the row is found
    # outputs: None, raises HTTPException on mismatch, missing row, unknown reference or conflict
    if getattr(payload, "id", None) != obj_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Path id does not match body id")
    get_or_404(db, model, obj_id, label)
    if references:
        ensure_references(db, references)
    values = payload.model_dump(exclude={"id"})
    try:
        updated = (
            db.query(model)
            .filter(model.id == obj_id)
            .update(values, synchronize_session=False)
        )
        if updated == 0:
            db.rollback()
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=f"{label} conflicts with an existing record"
        ) from exc


def delete_row(db: Session, model: type[ModelT], obj_id: int, *, label: str) -> None:
    obj = get_or_404(db, model, obj_id, label)
    db.delete(obj)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Refused to delete %s %s: still referenced", label, obj_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{label} is still referenced by other records",
        ) from exc
