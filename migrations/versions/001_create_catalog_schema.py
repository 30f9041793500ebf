"""create_catalog_schema

Revision ID: 001_create_catalog_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_catalog_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('biography', sa.Text(), nullable=True),
    )
    op.create_table(
        'genres',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )
    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('isbn', sa.String(32), nullable=False),
        sa.Column('page_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('authors.id'), nullable=False),
        sa.UniqueConstraint('isbn', name='uq_books_isbn'),
    )
    op.create_table(
        'book_genres',
        sa.Column('book_id', sa.Integer(), sa.ForeignKey('books.id'), primary_key=True),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genres.id'), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table('book_genres')
    op.drop_table('books')
    op.drop_table('genres')
    op.drop_table('authors')
