from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, models, schemas

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[schemas.UserOut])
def list_users(db: Session = Depends(get_db)):
    return crud.list_rows(db, models.User)


@router.get("/{user_id}", response_model=schemas.UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return crud.get_or_404(db, models.User, user_id, "User")


@router.post("", response_model=schemas.UserOut, status_code=status.HTTP_201_CREATED)
def create_user(user: schemas.UserCreate, response: Response, db: Session = Depends(get_db)):
    return crud.create_row(
        db,
        models.User,
        user.model_dump(),
        label="User",
        response=response,
        location_prefix=router.prefix,
    )


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(user_id: int, user: schemas.UserUpdate, db: Session = Depends(get_db)):
    crud.update_row(db, models.User, user_id, user, label="User")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    crud.delete_row(db, models.User, user_id, label="User")
