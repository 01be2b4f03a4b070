"""initial dna workflow schema with seed data

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-10-17 16:59:37.000000
"""

from alembic import op
import sqlalchemy as sa
from typing import Sequence, Union

revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NO_ACTION = 'NO ACTION'


def _fk(column: str, target: str) -> sa.Column:
    return sa.Column(column, sa.Integer(), sa.ForeignKey(target, ondelete=NO_ACTION), nullable=False)


def _measurement_table(name: str) -> sa.Table:
    return op.create_table(
        name,
        sa.Column('id', sa.Integer(), primary_key=True),
        _fk('worksheet_id', 'worksheets.id'),
        sa.Column('prop1', sa.Float(), nullable=False),
        sa.Column('prop2', sa.Float(), nullable=False),
        sa.UniqueConstraint('worksheet_id', name=f'uq_{name}_worksheet_id'),
    )


def upgrade() -> None:
    users = op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column(
            'role',
            sa.Enum('Admin', 'Technician', 'Analyst', name='user_role', native_enum=False),
            nullable=False,
        ),
    )
    dna_processes = op.create_table(
        'dna_processes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        _fk('created_by', 'users.id'),
    )
    op.create_index('ix_dna_processes_created_by', 'dna_processes', ['created_by'])

    workflows = op.create_table(
        'workflows',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        _fk('created_by', 'users.id'),
    )
    op.create_index('ix_workflows_created_by', 'workflows', ['created_by'])

    worksheets = op.create_table(
        'worksheets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        _fk('analyst_id', 'users.id'),
        _fk('dna_process_id', 'dna_processes.id'),
    )
    op.create_index('ix_worksheets_analyst_id', 'worksheets', ['analyst_id'])
    op.create_index('ix_worksheets_dna_process_id', 'worksheets', ['dna_process_id'])

    workflow_groups = op.create_table(
        'workflow_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        _fk('workflow_id', 'workflows.id'),
    )
    op.create_index('ix_workflow_groups_workflow_id', 'workflow_groups', ['workflow_id'])

    workflow_processes = op.create_table(
        'workflow_processes',
        sa.Column('id', sa.Integer(), primary_key=True),
        _fk('workflow_id', 'workflows.id'),
        _fk('dna_process_id', 'dna_processes.id'),
        sa.Column('process_order', sa.Integer(), nullable=False),
    )
    op.create_index('ix_workflow_processes_dna_process_id', 'workflow_processes', ['dna_process_id'])
    op.create_index(
        'ix_workflow_processes_workflow_id_dna_process_id',
        'workflow_processes',
        ['workflow_id', 'dna_process_id'],
        unique=True,
    )

    placements = op.create_table(
        'worksheet_workflow_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        _fk('worksheet_id', 'worksheets.id'),
        _fk('workflow_group_id', 'workflow_groups.id'),
        sa.Column('step_order', sa.Integer(), nullable=False),
    )
    op.create_index(
        'ix_worksheet_workflow_groups_workflow_group_id',
        'worksheet_workflow_groups',
        ['workflow_group_id'],
    )
    op.create_index(
        'ix_worksheet_workflow_groups_worksheet_id_workflow_group_id',
        'worksheet_workflow_groups',
        ['worksheet_id', 'workflow_group_id'],
        unique=True,
    )

    extractions = _measurement_table('extractions')
    amplifications = _measurement_table('amplifications')
    quantifications = _measurement_table('quantifications')

    op.bulk_insert(users, [
        {'id': 1, 'name': 'admin', 'email': 'admin@example.com', 'role': 'Admin'},
        {'id': 2, 'name': 'tech1', 'email': 'tech1@example.com', 'role': 'Technician'},
        {'id': 3, 'name': 'tech2', 'email': 'tech2@example.com', 'role': 'Technician'},
        {'id': 4, 'name': 'analyst1', 'email': 'analyst1@example.com', 'role': 'Analyst'},
    ])
    op.bulk_insert(dna_processes, [
        {'id': 1, 'name': 'Extraction', 'created_by': 1},
        {'id': 2, 'name': 'Amplification', 'created_by': 1},
        {'id': 3, 'name': 'Quantification', 'created_by': 1},
    ])
    op.bulk_insert(workflows, [{'id': 1, 'name': 'Default Workflow', 'created_by': 1}])
    op.bulk_insert(workflow_groups, [{'id': 1, 'workflow_id': 1}])
    op.bulk_insert(workflow_processes, [
        {'id': 1, 'workflow_id': 1, 'dna_process_id': 1, 'process_order': 1},
        {'id': 2, 'workflow_id': 1, 'dna_process_id': 2, 'process_order': 2},
        {'id': 3, 'workflow_id': 1, 'dna_process_id': 3, 'process_order': 3},
    ])
    op.bulk_insert(worksheets, [
        {'id': 1, 'name': 'Process 1 Worksheet', 'analyst_id': 4, 'dna_process_id': 1},
        {'id': 2, 'name': 'Process 2 Worksheet', 'analyst_id': 4, 'dna_process_id': 2},
        {'id': 3, 'name': 'Process 3 Worksheet', 'analyst_id': 4, 'dna_process_id': 3},
    ])
    op.bulk_insert(extractions, [{'id': 1, 'worksheet_id': 1, 'prop1': 2, 'prop2': 4}])
    op.bulk_insert(amplifications, [{'id': 1, 'worksheet_id': 2, 'prop1': 5, 'prop2': 10}])
    op.bulk_insert(quantifications, [{'id': 1, 'worksheet_id': 3, 'prop1': 15, 'prop2': 20}])
    op.bulk_insert(placements, [
        {'id': 1, 'worksheet_id': 1, 'workflow_group_id': 1, 'step_order': 1},
        {'id': 2, 'worksheet_id': 2, 'workflow_group_id': 1, 'step_order': 2},
        {'id': 3, 'worksheet_id': 3, 'workflow_group_id': 1, 'step_order': 3},
    ])

    # explicit ids leave postgres sequences behind the seeded rows
    if op.get_bind().dialect.name == 'postgresql':
        for table in (
            'users', 'dna_processes', 'workflows', 'workflow_groups', 'workflow_processes',
            'worksheets', 'extractions', 'amplifications', 'quantifications',
            'worksheet_workflow_groups',
        ):
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )


def downgrade() -> None:
    op.drop_table('quantifications')
    op.drop_table('amplifications')
    op.drop_table('extractions')
    op.drop_index('ix_worksheet_workflow_groups_worksheet_id_workflow_group_id', table_name='worksheet_workflow_groups')
    op.drop_index('ix_worksheet_workflow_groups_workflow_group_id', table_name='worksheet_workflow_groups')
    op.drop_table('worksheet_workflow_groups')
    op.drop_index('ix_workflow_processes_workflow_id_dna_process_id', table_name='workflow_processes')
    op.drop_index('ix_workflow_processes_dna_process_id', table_name='workflow_processes')
    op.drop_table('workflow_processes')
    op.drop_index('ix_workflow_groups_workflow_id', table_name='workflow_groups')
    op.drop_table('workflow_groups')
    op.drop_index('ix_worksheets_dna_process_id', table_name='worksheets')
    op.drop_index('ix_worksheets_analyst_id', table_name='worksheets')
    op.drop_table('worksheets')
    op.drop_index('ix_workflows_created_by', table_name='workflows')
    op.drop_table('workflows')
    op.drop_index('ix_dna_processes_created_by', table_name='dna_processes')
    op.drop_table('dna_processes')
    op.drop_table('users')
