"""film, person, film_director and role

Revision ID: 4c1e2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:41.118034

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from filmdb.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4c1e2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
    ]


def _fk(table: str) -> str:
    return f"{SCHEMA}.{table}.id" if SCHEMA else f"{table}.id"


def upgrade() -> None:
    op.create_table(
        'film',
        *_service_object_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=False),
        sa.Column('synopsis', sa.Text(), nullable=True),
        sa.CheckConstraint('length(trim(title)) > 0', name=op.f('ck_film_title_not_blank')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_film')),
        schema=SCHEMA,
    )
    op.create_index('ix_film_title', 'film', ['title'], unique=False, schema=SCHEMA)
    op.create_index('ix_film_release_date', 'film', ['release_date'], unique=False, schema=SCHEMA)

    op.create_table(
        'person',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.CheckConstraint('length(trim(name)) > 0', name=op.f('ck_person_name_not_blank')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_person')),
        schema=SCHEMA,
    )
    op.create_index('ix_person_name', 'person', ['name'], unique=False, schema=SCHEMA)

    op.create_table(
        'film_director',
        sa.Column('film_id', sa.Integer(), nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['film_id'], [_fk('film')],
                                name=op.f('fk_film_director_film_id_film'), ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['person_id'], [_fk('person')],
                                name=op.f('fk_film_director_person_id_person'), ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('film_id', 'person_id', name=op.f('pk_film_director')),
        schema=SCHEMA,
    )
    op.create_index('ix_film_director_person_id', 'film_director', ['person_id'], unique=False, schema=SCHEMA)

    op.create_table(
        'role',
        sa.Column('film_id', sa.Integer(), nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),
        sa.Column('character', sa.String(length=255), nullable=False),
        sa.CheckConstraint('length(trim("character")) > 0', name=op.f('ck_role_character_not_blank')),
        sa.ForeignKeyConstraint(['film_id'], [_fk('film')],
                                name=op.f('fk_role_film_id_film'), ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['person_id'], [_fk('person')],
                                name=op.f('fk_role_person_id_person'), ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('film_id', 'person_id', name=op.f('pk_role')),
        schema=SCHEMA,
    )
    op.create_index('ix_role_person_id', 'role', ['person_id'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_role_person_id', table_name='role', schema=SCHEMA)
    op.drop_table('role', schema=SCHEMA)
    op.drop_index('ix_film_director_person_id', table_name='film_director', schema=SCHEMA)
    op.drop_table('film_director', schema=SCHEMA)
    op.drop_index('ix_person_name', table_name='person', schema=SCHEMA)
    op.drop_table('person', schema=SCHEMA)
    op.drop_index('ix_film_release_date', table_name='film', schema=SCHEMA)
    op.drop_index('ix_film_title', table_name='film', schema=SCHEMA)
    op.drop_table('film', schema=SCHEMA)
