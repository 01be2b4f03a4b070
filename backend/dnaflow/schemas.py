from typing import Optional

from pydantic import BaseModel, EmailStr, ConfigDict, Field

from .models import UserRole


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: UserRole


class UserUpdate(UserCreate):
    id: int


class UserOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    role: UserRole
    model_config = ConfigDict(from_attributes=True)


class DnaProcessCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    created_by: int


class DnaProcessUpdate(DnaProcessCreate):
    id: int


class DnaProcessOut(DnaProcessCreate):
    id: int
    model_config = ConfigDict(from_attributes=True)


class WorkflowCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    created_by: int


class WorkflowUpdate(WorkflowCreate):
    id: int


class WorkflowProcessOut(BaseModel):
    id: int
    process_order: int
    dna_process_id: int
    dna_process_name: str
    model_config = ConfigDict(from_attributes=True)


class WorkflowOut(WorkflowCreate):
    id: int
    processes: list[WorkflowProcessOut] = []
    model_config = ConfigDict(from_attributes=True)


class ProcessSequenceUpdate(BaseModel):
    """Ordered DNA process ids replacing a workflow's whole sequence."""

    dna_process_ids: list[int] = Field(alias="dnaProcessIds")
    model_config = ConfigDict(populate_by_name=True)


class WorkflowGroupCreate(BaseModel):
    workflow_id: int


class WorkflowGroupUpdate(WorkflowGroupCreate):
    id: int


class WorkflowGroupOut(WorkflowGroupCreate):
    id: int
    model_config = ConfigDict(from_attributes=True)


class WorksheetPlacementCreate(BaseModel):
    worksheet_id: int
    step_order: int


class WorksheetPlacementOut(WorksheetPlacementCreate):
    id: int
    workflow_group_id: int
    model_config = ConfigDict(from_attributes=True)


class GroupReportRow(BaseModel):
    workflow_name: str
    step_order: int
    process_name: str
    worksheet_name: str
    analyst_name: str


class MeasurementCreate(BaseModel):
    worksheet_id: int
    prop1: float
    prop2: float


class MeasurementUpdate(MeasurementCreate):
    id: int


class MeasurementOut(MeasurementCreate):
    id: int
    model_config = ConfigDict(from_attributes=True)


class WorksheetCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    analyst_id: int
    dna_process_id: int


class WorksheetUpdate(WorksheetCreate):
    id: int


class WorksheetOut(WorksheetCreate):
    id: int
    extraction: Optional[MeasurementOut] = None
    amplification: Optional[MeasurementOut] = None
    quantification: Optional[MeasurementOut] = None
    model_config = ConfigDict(from_attributes=True)
