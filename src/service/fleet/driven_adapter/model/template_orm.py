"""
Diagram template tables: the reusable layouts buses are provisioned from
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class BusDiagramModelOrm(Base):
    __tablename__ = 'bus_diagram_model'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    num_floors: Mapped[int] = mapped_column(Integer, nullable=False)
    seats_per_floor: Mapped[list] = mapped_column(JSON, nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    is_factory_default: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class BusModelOrm(Base):
    __tablename__ = 'bus_model'
    __table_args__ = (
        UniqueConstraint('manufacturer', 'model', 'year', name='uq_bus_model_identity'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    seating_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    num_floors: Mapped[int] = mapped_column(Integer, nullable=False)
    engine_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    distribution_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    # Templates are never deleted while a bus model points at them
    default_bus_diagram_model_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('bus_diagram_model.id', ondelete='RESTRICT'), nullable=False
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class BusDiagramModelZoneOrm(Base):
    __tablename__ = 'bus_diagram_model_zone'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bus_diagram_model_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('bus_diagram_model.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    row_numbers: Mapped[list] = mapped_column(JSON, nullable=False)
    price_multiplier: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class BusSeatModelOrm(Base):
    __tablename__ = 'bus_seat_model'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bus_diagram_model_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('bus_diagram_model.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    space_type: Mapped[str] = mapped_column(String(20), nullable=False, default='SEAT')
    seat_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    floor_number: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_type: Mapped[str] = mapped_column(String(20), nullable=False, default='REGULAR')
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    reclinement_angle: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    position: Mapped[dict] = mapped_column(JSON, nullable=False)
    meta: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
