"""create classes, goals and notes tables

Revision ID: 3e1c9a7d5b20
Revises: 
Create Date: 2025-09-14 20:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1c9a7d5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'classes' not in tables:
        op.create_table(
            'classes',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('date', sa.DateTime(timezone=True), nullable=False),
            sa.Column('class_type', sa.String(), nullable=False, server_default='Class'),
            sa.Column('instructor', sa.String(), nullable=False, server_default=''),
            sa.Column('technique', sa.String(), nullable=False, server_default=''),
            sa.Column('description', sa.String(), nullable=False, server_default=''),
            sa.Column('hours', sa.Numeric(5, 2), nullable=True),
            sa.Column('style', sa.String(length=20), nullable=False, server_default='unknown'),
            sa.Column('url', sa.String(), nullable=True),
            sa.Column('performance', sa.String(length=10), nullable=False, server_default='NONE'),
            sa.Column('performance_notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        )
        op.create_index('ix_classes_id', 'classes', ['id'])
        op.create_index('ix_classes_date', 'classes', ['date'])

    if 'goals' not in tables:
        op.create_table(
            'goals',
            sa.Column('year', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('metric', sa.String(length=10), primary_key=True, nullable=False),
            sa.Column('target', sa.Numeric(7, 2), nullable=False),
            sa.Column('cadence', sa.String(length=10), nullable=False, server_default='weekly'),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        )

    if 'notes' not in tables:
        op.create_table(
            'notes',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('year', sa.Integer(), nullable=False),
            sa.Column('month', sa.Integer(), nullable=False),
            sa.Column('kind', sa.String(length=10), nullable=False, server_default='info'),
            sa.Column('text', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        )
        op.create_index('ix_notes_id', 'notes', ['id'])
        op.create_index('ix_notes_year', 'notes', ['year'])


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS notes')
    op.execute('DROP TABLE IF EXISTS goals')
    op.execute('DROP TABLE IF EXISTS classes')
