"""create directory tables

Revision ID: 3f9c2b7d1a04
Revises:
Create Date: 2026-10-19 10:12:41.318027

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9c2b7d1a04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'account',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('role', sa.String(), nullable=False, server_default='user'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_account_user_id'), 'account', ['user_id'], unique=True)

    op.create_table(
        'category',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('label', sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_category_slug'), 'category', ['slug'], unique=True)

    op.create_table(
        'alternative',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('website_url', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('favicon_url', sa.String(), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_open_source', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_alternative_slug'), 'alternative', ['slug'], unique=True)

    op.create_table(
        'tool',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('website_url', sa.String(), nullable=False),
        sa.Column('screenshot_url', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('favicon_url', sa.String(), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('tagline', sa.String(), nullable=True),
        sa.Column('is_open_source', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('submitter_name', sa.String(), nullable=True),
        sa.Column('submitter_email', sa.String(), nullable=True),
        sa.Column('page_views', sa.Integer(), nullable=True, server_default='0'),
        *_timestamps(),
        sa.Column('category_id', sa.String(), nullable=True),
        sa.Column('account_id', sa.String(), nullable=True),
        sa.Column('description_search', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['category.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['account_id'], ['account.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
    )
    op.create_index('Tool_id_slug_idx', 'tool', ['id', 'slug'])
    op.create_index('Tool_descriptionSearch_idx', 'tool', ['description_search'])

    op.create_table(
        'alternatives_to_tools',
        sa.Column('alternative_id', sa.String(), nullable=False),
        sa.Column('tool_id', sa.String(), nullable=False),
        sa.ForeignKeyConstraint(['alternative_id'], ['alternative.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tool_id'], ['tool.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('alternative_id', 'tool_id'),
    )
    op.create_index('alternatives_to_tools_alternativeId_idx', 'alternatives_to_tools', ['alternative_id'])
    op.create_index('alternatives_to_tools_toolId_idx', 'alternatives_to_tools', ['tool_id'])

    op.create_table(
        'image',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('file_id', sa.String(), nullable=True),
        sa.Column('filename', sa.String(), nullable=True),
        sa.Column('original_name', sa.String(), nullable=True),
        sa.Column('size', sa.Integer(), nullable=True),
        sa.Column('mime_type', sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_image_url'), 'image', ['url'], unique=True)

    op.create_table(
        'like',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('account_id', sa.String(), nullable=True),
        sa.Column('tool_id', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tool_id'], ['tool.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['account_id'], ['account.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tool_id', 'account_id', name='Like_toolId_accountId_key'),
    )
    op.create_index(op.f('ix_like_account_id'), 'like', ['account_id'])
    op.create_index(op.f('ix_like_tool_id'), 'like', ['tool_id'])


def downgrade() -> None:
    op.drop_index(op.f('ix_like_tool_id'), table_name='like')
    op.drop_index(op.f('ix_like_account_id'), table_name='like')
    op.drop_table('like')
    op.drop_index(op.f('ix_image_url'), table_name='image')
    op.drop_table('image')
    op.drop_index('alternatives_to_tools_toolId_idx', table_name='alternatives_to_tools')
    op.drop_index('alternatives_to_tools_alternativeId_idx', table_name='alternatives_to_tools')
    op.drop_table('alternatives_to_tools')
    op.drop_index('Tool_descriptionSearch_idx', table_name='tool')
    op.drop_index('Tool_id_slug_idx', table_name='tool')
    op.drop_table('tool')
    op.drop_index(op.f('ix_alternative_slug'), table_name='alternative')
    op.drop_table('alternative')
    op.drop_index(op.f('ix_category_slug'), table_name='category')
    op.drop_table('category')
    op.drop_index(op.f('ix_account_user_id'), table_name='account')
    op.drop_table('account')
