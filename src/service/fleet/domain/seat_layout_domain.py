"""
Seat Layout Domain

Pure seat grid logic for diagram templates: validating a per-floor configuration
and generating the template's seat models from it. No persistence here.

Grid convention per floor:
- rows are 1-based (`position.y`), columns 0-based (`position.x`)
- left block occupies columns 0..seats_left-1, the aisle is column `seats_left`,
  the right block starts at `seats_left + 1`
- seat numbers run from 1 across all floors in floor order
"""

from typing import List, Sequence

from src.platform.exception.exceptions import DomainError
from src.service.fleet.domain.entity.diagram_entity import FloorSeats
from src.service.fleet.domain.entity.seat_entity import DEFAULT_RECLINEMENT_ANGLE, BusSeatModel
from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType


INITIAL_SEAT_NUMBER = 1


def validate_seats_per_floor(*, num_floors: int, seats_per_floor: Sequence[FloorSeats]) -> None:
    floor_numbers = [floor.floor_number for floor in seats_per_floor]
    if len(set(floor_numbers)) != len(floor_numbers):
        raise DomainError('Duplicate floor numbers in seats_per_floor')
    if sorted(floor_numbers) != list(range(1, num_floors + 1)):
        raise DomainError(f'seats_per_floor must describe floors 1 to {num_floors} exactly once')
    if calculate_total_seats(seats_per_floor) == 0:
        raise DomainError('Invalid seats_per_floor configuration: no seats')


def calculate_total_seats(seats_per_floor: Sequence[FloorSeats]) -> int:
    return sum(floor.total_seats for floor in seats_per_floor)


def _build_seat_model(
    *,
    bus_diagram_model_id: int,
    floor: FloorSeats,
    seat_number: int,
    row_index: int,
    col_index: int,
) -> BusSeatModel:
    x, y = col_index, row_index + 1
    return BusSeatModel(
        bus_diagram_model_id=bus_diagram_model_id,
        floor_number=floor.floor_number,
        position={'x': x, 'y': y},
        seat_number=str(seat_number),
        space_type=SpaceType.SEAT,
        seat_type=SeatType.REGULAR,
        amenities=[],
        reclinement_angle=DEFAULT_RECLINEMENT_ANGLE,
        meta={
            'row_index': row_index,
            'col_index': col_index,
            'is_window': x == 0 or x == floor.seats_per_row,
            'is_legroom': y == 1,
        },
        active=True,
    )


def generate_floor_seat_models(
    *, bus_diagram_model_id: int, floor: FloorSeats, first_seat_number: int
) -> List[BusSeatModel]:
    seat_models: List[BusSeatModel] = []
    seat_number = first_seat_number
    for row_index in range(floor.num_rows):
        left_cols = range(floor.seats_left)
        right_cols = range(floor.seats_left + 1, floor.seats_left + 1 + floor.seats_right)
        for col_index in (*left_cols, *right_cols):
            seat_models.append(
                _build_seat_model(
                    bus_diagram_model_id=bus_diagram_model_id,
                    floor=floor,
                    seat_number=seat_number,
                    row_index=row_index,
                    col_index=col_index,
                )
            )
            seat_number += 1
    return seat_models


def generate_seat_models(
    *, bus_diagram_model_id: int, num_floors: int, seats_per_floor: Sequence[FloorSeats]
) -> List[BusSeatModel]:
    validate_seats_per_floor(num_floors=num_floors, seats_per_floor=seats_per_floor)

    seat_models: List[BusSeatModel] = []
    next_seat_number = INITIAL_SEAT_NUMBER
    for floor in sorted(seats_per_floor, key=lambda f: f.floor_number):
        floor_models = generate_floor_seat_models(
            bus_diagram_model_id=bus_diagram_model_id,
            floor=floor,
            first_seat_number=next_seat_number,
        )
        seat_models.extend(floor_models)
        next_seat_number += len(floor_models)
    return seat_models
