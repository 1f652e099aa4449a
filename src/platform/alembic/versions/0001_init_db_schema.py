"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- bus_diagram_model: Reusable seat layout templates (per-floor grid as JSON)
- bus_diagram_model_zone / bus_seat_model: Template zones and seats
- bus_model: Manufacturer/model/year pointing at its default template
- seat_diagram: One bus's own copy of a template
- seat_diagram_zone / bus_seat: Cloned zones and seats (bus_seat cascades with its diagram)
- bus: Fleet vehicles, each owning exactly one seat diagram

Note: seats_per_floor uses the format:
  [{"floor_number": 1, "num_rows": 10, "seats_left": 2, "seats_right": 2}]
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
    ]


def _seat_columns() -> list[sa.Column]:
    return [
        sa.Column('space_type', sa.String(length=20), nullable=False),
        sa.Column('seat_number', sa.String(length=20), nullable=True),
        sa.Column('floor_number', sa.Integer(), nullable=False),
        sa.Column('seat_type', sa.String(length=20), nullable=False),
        sa.Column('amenities', sa.JSON(), nullable=False),
        sa.Column('reclinement_angle', sa.Integer(), nullable=True),
        sa.Column('position', sa.JSON(), nullable=False),
        sa.Column('meta', sa.JSON(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
    ]


def upgrade() -> None:
    """Create all fleet tables."""

    # ========== Templates ==========

    op.create_table(
        'bus_diagram_model',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('num_floors', sa.Integer(), nullable=False),
        sa.Column('seats_per_floor', sa.JSON(), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('is_factory_default', sa.Boolean(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'bus_model',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('manufacturer', sa.String(length=255), nullable=False),
        sa.Column('model', sa.String(length=255), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('seating_capacity', sa.Integer(), nullable=False),
        sa.Column('num_floors', sa.Integer(), nullable=False),
        sa.Column('engine_type', sa.String(length=100), nullable=True),
        sa.Column('distribution_type', sa.String(length=100), nullable=True),
        sa.Column('amenities', sa.JSON(), nullable=False),
        sa.Column('default_bus_diagram_model_id', sa.Integer(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['default_bus_diagram_model_id'], ['bus_diagram_model.id'], ondelete='RESTRICT'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('manufacturer', 'model', 'year', name='uq_bus_model_identity'),
    )

    op.create_table(
        'bus_diagram_model_zone',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bus_diagram_model_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('row_numbers', sa.JSON(), nullable=False),
        sa.Column('price_multiplier', sa.Float(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['bus_diagram_model_id'], ['bus_diagram_model.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_bus_diagram_model_zone_bus_diagram_model_id'),
        'bus_diagram_model_zone',
        ['bus_diagram_model_id'],
    )

    op.create_table(
        'bus_seat_model',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bus_diagram_model_id', sa.Integer(), nullable=False),
        *_seat_columns(),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['bus_diagram_model_id'], ['bus_diagram_model.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_bus_seat_model_bus_diagram_model_id'), 'bus_seat_model', ['bus_diagram_model_id']
    )

    # ========== Bus-owned seat diagrams ==========

    op.create_table(
        'seat_diagram',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bus_diagram_model_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('num_floors', sa.Integer(), nullable=False),
        sa.Column('seats_per_floor', sa.JSON(), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('is_factory_default', sa.Boolean(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['bus_diagram_model_id'], ['bus_diagram_model.id'], ondelete='RESTRICT'
        ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'seat_diagram_zone',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('seat_diagram_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('row_numbers', sa.JSON(), nullable=False),
        sa.Column('price_multiplier', sa.Float(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['seat_diagram_id'], ['seat_diagram.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_seat_diagram_zone_seat_diagram_id'), 'seat_diagram_zone', ['seat_diagram_id']
    )

    op.create_table(
        'bus_seat',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('seat_diagram_id', sa.Integer(), nullable=False),
        *_seat_columns(),
        *_timestamps(),
        # Seats go away with their diagram
        sa.ForeignKeyConstraint(['seat_diagram_id'], ['seat_diagram.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bus_seat_seat_diagram_id'), 'bus_seat', ['seat_diagram_id'])

    # ========== Buses ==========

    op.create_table(
        'bus',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('economic_number', sa.String(length=50), nullable=False),
        sa.Column('registration_number', sa.String(length=50), nullable=False),
        sa.Column('license_plate_type', sa.String(length=20), nullable=False),
        sa.Column('license_plate_number', sa.String(length=50), nullable=False),
        sa.Column('circulation_card', sa.String(length=100), nullable=True),
        sa.Column('available_for_tourism_only', sa.Boolean(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('purchase_date', sa.Date(), nullable=False),
        sa.Column('expiration_date', sa.Date(), nullable=False),
        sa.Column('erp_client_number', sa.String(length=100), nullable=True),
        sa.Column('model_id', sa.Integer(), nullable=False),
        sa.Column('vehicle_id', sa.String(length=100), nullable=True),
        sa.Column('serial_number', sa.String(length=100), nullable=False),
        sa.Column('engine_number', sa.String(length=100), nullable=True),
        sa.Column('chassis_number', sa.String(length=100), nullable=False),
        sa.Column('gross_vehicle_weight', sa.Float(), nullable=False),
        sa.Column('sct_permit', sa.String(length=100), nullable=True),
        sa.Column('current_kilometer', sa.Float(), nullable=True),
        sa.Column('gps_id', sa.String(length=100), nullable=True),
        sa.Column('last_maintenance_date', sa.Date(), nullable=True),
        sa.Column('next_maintenance_date', sa.Date(), nullable=True),
        sa.Column('seat_diagram_id', sa.Integer(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['model_id'], ['bus_model.id'], ondelete='RESTRICT'),
        # No cascade: a diagram is deleted only after its bus points elsewhere
        sa.ForeignKeyConstraint(['seat_diagram_id'], ['seat_diagram.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('registration_number'),
        sa.UniqueConstraint('license_plate_number'),
        sa.UniqueConstraint('seat_diagram_id'),
    )
    op.create_index(op.f('ix_bus_model_id'), 'bus', ['model_id'])


def downgrade() -> None:
    """Drop all fleet tables."""
    op.drop_index(op.f('ix_bus_model_id'), table_name='bus')
    op.drop_table('bus')
    op.drop_index(op.f('ix_bus_seat_seat_diagram_id'), table_name='bus_seat')
    op.drop_table('bus_seat')
    op.drop_index(op.f('ix_seat_diagram_zone_seat_diagram_id'), table_name='seat_diagram_zone')
    op.drop_table('seat_diagram_zone')
    op.drop_table('seat_diagram')
    op.drop_index(op.f('ix_bus_seat_model_bus_diagram_model_id'), table_name='bus_seat_model')
    op.drop_table('bus_seat_model')
    op.drop_index(
        op.f('ix_bus_diagram_model_zone_bus_diagram_model_id'),
        table_name='bus_diagram_model_zone',
    )
    op.drop_table('bus_diagram_model_zone')
    op.drop_table('bus_model')
    op.drop_table('bus_diagram_model')
