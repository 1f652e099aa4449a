from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class BusOrm(Base):
    __tablename__ = 'bus'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    economic_number: Mapped[str] = mapped_column(String(50), nullable=False)
    registration_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    license_plate_type: Mapped[str] = mapped_column(String(20), nullable=False)
    license_plate_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    circulation_card: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    available_for_tourism_only: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), default='ACTIVE', nullable=False)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    expiration_date: Mapped[date] = mapped_column(Date, nullable=False)
    erp_client_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    model_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('bus_model.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    vehicle_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    serial_number: Mapped[str] = mapped_column(String(100), nullable=False)
    engine_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    chassis_number: Mapped[str] = mapped_column(String(100), nullable=False)
    gross_vehicle_weight: Mapped[float] = mapped_column(Float, nullable=False)
    sct_permit: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    current_kilometer: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    gps_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_maintenance_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    next_maintenance_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # No cascade: the diagram may only be removed after the bus points elsewhere
    seat_diagram_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('seat_diagram.id'), nullable=False, unique=True
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
