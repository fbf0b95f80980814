"""Initial migration with users and the ordered profile collections.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SOCIAL_PLATFORMS = ('instagram', 'twitter', 'youtube', 'tiktok', 'linkedin', 'twitch', 'website')
PAYMENT_METHOD_TYPES = ('cashapp', 'paypal', 'venmo', 'zelle', 'crypto', 'stripe', 'custom')
QR_CODE_TYPES = ('profile', 'payment', 'social', 'custom')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Create enum types
    social_platform_enum = postgresql.ENUM(*SOCIAL_PLATFORMS, name='social_platform_enum', create_type=False)
    payment_method_type_enum = postgresql.ENUM(*PAYMENT_METHOD_TYPES, name='payment_method_type_enum', create_type=False)
    qr_code_type_enum = postgresql.ENUM(*QR_CODE_TYPES, name='qr_code_type_enum', create_type=False)
    for enum in (social_platform_enum, payment_method_type_enum, qr_code_type_enum):
        enum.create(op.get_bind(), checkfirst=True)

    # Create users table
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Create social_links table
    op.create_table(
        'social_links',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('platform', social_platform_enum, nullable=False),
        sa.Column('url', sa.String(500), nullable=False),
        sa.Column('label', sa.String(100), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=False, default=True),
        sa.Column('position', sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'platform', name='uq_social_link_platform'),
    )
    op.create_index('ix_social_links_user_id', 'social_links', ['user_id'], unique=False)

    # Create payment_methods table
    op.create_table(
        'payment_methods',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('type', payment_method_type_enum, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('handle', sa.String(255), nullable=True),
        sa.Column('url', sa.String(500), nullable=False),
        sa.Column('preferred', sa.Boolean(), nullable=False, default=False),
        sa.Column('enabled', sa.Boolean(), nullable=False, default=True),
        sa.Column('position', sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_payment_methods_user_id', 'payment_methods', ['user_id'], unique=False)

    # Create qr_codes table
    op.create_table(
        'qr_codes',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('type', qr_code_type_enum, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('data_content', sa.String(2000), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('linked_social_link_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('linked_payment_method_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('scan_count', sa.Integer(), nullable=False, default=0),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        sa.Column('position', sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['linked_social_link_id'], ['social_links.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['linked_payment_method_id'], ['payment_methods.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_qr_codes_user_id', 'qr_codes', ['user_id'], unique=False)
    op.create_index('ix_qr_codes_linked_social_link_id', 'qr_codes', ['linked_social_link_id'], unique=False)
    op.create_index('ix_qr_codes_linked_payment_method_id', 'qr_codes', ['linked_payment_method_id'], unique=False)


def downgrade() -> None:
    op.drop_table('qr_codes')
    op.drop_table('payment_methods')
    op.drop_table('social_links')
    op.drop_table('users')
    op.execute('DROP TYPE IF EXISTS qr_code_type_enum')
    op.execute('DROP TYPE IF EXISTS payment_method_type_enum')
    op.execute('DROP TYPE IF EXISTS social_platform_enum')
