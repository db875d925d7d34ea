"""tag and blob

Revision ID: 4f1c2a9d7b3e
Revises:
Create Date: 2025-11-02 10:12:41.318206

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from tagapi.common.settings import get_settings
from tagapi.database.core.service_object import IdType, MetaType

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b3e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema


def _service_object_columns() -> list:
    return [
        sa.Column('id', IdType, autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', MetaType, nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'tag',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_tag')),
        sa.UniqueConstraint('name', name='uq_tag_name'),
        schema=SCHEMA,
    )
    op.create_table(
        'blob',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('content_type', sa.String(length=128), nullable=True),
        sa.Column('data', sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_blob')),
        schema=SCHEMA,
    )


def downgrade() -> None:
    op.drop_table('blob', schema=SCHEMA)
    op.drop_table('tag', schema=SCHEMA)
