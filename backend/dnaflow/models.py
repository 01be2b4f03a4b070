import enum

import sqlalchemy as sa
from sqlalchemy import (
    Column,
    String,
    ForeignKey,
    Integer,
    Float,
    Index,
    UniqueConstraint,
)

from .database import Base

# Foreign keys never cascade: User -> DnaProcess -> Worksheet and
# User -> Worksheet would otherwise form multiple cascade paths.
NO_ACTION = "NO ACTION"


class UserRole(str, enum.Enum):
    ADMIN = "Admin"
    TECHNICIAN = "Technician"
    ANALYST = "Analyst"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    role = Column(
        sa.Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            validate_strings=True,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
    )


class DnaProcess(Base):
    __tablename__ = "dna_processes"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete=NO_ACTION), nullable=False, index=True
    )


class Workflow(Base):
    __tablename__ = "workflows"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete=NO_ACTION), nullable=False, index=True
    )


class WorkflowProcess(Base):
    __tablename__ = "workflow_processes"
    id = Column(Integer, primary_key=True)
    workflow_id = Column(
        Integer, ForeignKey("workflows.id", ondelete=NO_ACTION), nullable=False
    )
    dna_process_id = Column(
        Integer, ForeignKey("dna_processes.id", ondelete=NO_ACTION), nullable=False, index=True
    )
    process_order = Column(Integer, nullable=False)

    __table_args__ = (
        Index(
            "ix_workflow_processes_workflow_id_dna_process_id",
            "workflow_id",
            "dna_process_id",
            unique=True,
        ),
    )


class WorkflowGroup(Base):
    __tablename__ = "workflow_groups"
    id = Column(Integer, primary_key=True)
    workflow_id = Column(
        Integer, ForeignKey("workflows.id", ondelete=NO_ACTION), nullable=False, index=True
    )


class Worksheet(Base):
    __tablename__ = "worksheets"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    analyst_id = Column(
        Integer, ForeignKey("users.id", ondelete=NO_ACTION), nullable=False, index=True
    )
    dna_process_id = Column(
        Integer, ForeignKey("dna_processes.id", ondelete=NO_ACTION), nullable=False, index=True
    )


class WorksheetWorkflowGroup(Base):
    __tablename__ = "worksheet_workflow_groups"
    id = Column(Integer, primary_key=True)
    worksheet_id = Column(
        Integer, ForeignKey("worksheets.id", ondelete=NO_ACTION), nullable=False
    )
    workflow_group_id = Column(
        Integer, ForeignKey("workflow_groups.id", ondelete=NO_ACTION), nullable=False, index=True
    )
    step_order = Column(Integer, nullable=False)

    __table_args__ = (
        Index(
            "ix_worksheet_workflow_groups_worksheet_id_workflow_group_id",
            "worksheet_id",
            "workflow_group_id",
            unique=True,
        ),
    )


class Extraction(Base):
    __tablename__ = "extractions"
    id = Column(Integer, primary_key=True)
    worksheet_id = Column(
        Integer, ForeignKey("worksheets.id", ondelete=NO_ACTION), nullable=False
    )
    prop1 = Column(Float, nullable=False)
    prop2 = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("worksheet_id", name="uq_extractions_worksheet_id"),)


class Amplification(Base):
    __tablename__ = "amplifications"
    id = Column(Integer, primary_key=True)
    worksheet_id = Column(
        Integer, ForeignKey("worksheets.id", ondelete=NO_ACTION), nullable=False
    )
    prop1 = Column(Float, nullable=False)
    prop2 = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("worksheet_id", name="uq_amplifications_worksheet_id"),)


class Quantification(Base):
    __tablename__ = "quantifications"
    id = Column(Integer, primary_key=True)
    worksheet_id = Column(
        Integer, ForeignKey("worksheets.id", ondelete=NO_ACTION), nullable=False
    )
    prop1 = Column(Float, nullable=False)
    prop2 = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("worksheet_id", name="uq_quantifications_worksheet_id"),)
