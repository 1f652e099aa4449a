"""
Bus-owned seat diagram tables

Deleting a seat_diagram row cascades to bus_seat at the storage layer.
seat_diagram_zone rows are deleted explicitly before their diagram.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class SeatDiagramOrm(Base):
    __tablename__ = 'seat_diagram'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bus_diagram_model_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('bus_diagram_model.id', ondelete='RESTRICT'), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    num_floors: Mapped[int] = mapped_column(Integer, nullable=False)
    seats_per_floor: Mapped[list] = mapped_column(JSON, nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    is_factory_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class SeatDiagramZoneOrm(Base):
    __tablename__ = 'seat_diagram_zone'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seat_diagram_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('seat_diagram.id'), nullable=False, index=True
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


class BusSeatOrm(Base):
    __tablename__ = 'bus_seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seat_diagram_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('seat_diagram.id', ondelete='CASCADE'), nullable=False, index=True
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
