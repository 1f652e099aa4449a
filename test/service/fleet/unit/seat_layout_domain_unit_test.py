"""
Unit tests for seat model generation from a floor grid

Test Coverage:
1. 1 floor / 10 rows / 2+2 gives 40 seats numbered 1..40
2. Aisle column is skipped; window and legroom flags
3. Numbering continues across floors
4. Invalid floor configurations are rejected
"""

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.fleet.domain.entity.diagram_entity import FloorSeats
from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType
from src.service.fleet.domain.seat_layout_domain import (
    calculate_total_seats,
    generate_seat_models,
    validate_seats_per_floor,
)


pytestmark = pytest.mark.unit


def _floor(floor_number: int = 1, num_rows: int = 10, left: int = 2, right: int = 2) -> FloorSeats:
    return FloorSeats(
        floor_number=floor_number, num_rows=num_rows, seats_left=left, seats_right=right
    )


class TestGenerateSingleFloor:
    def setup_method(self):
        self.seat_models = generate_seat_models(
            bus_diagram_model_id=7, num_floors=1, seats_per_floor=[_floor()]
        )

    def test_forty_sequential_seats(self):
        assert len(self.seat_models) == 40
        assert [seat.seat_number for seat in self.seat_models] == [str(n) for n in range(1, 41)]
        assert {seat.bus_diagram_model_id for seat in self.seat_models} == {7}

    def test_aisle_column_is_skipped(self):
        columns = sorted({seat.position['x'] for seat in self.seat_models})
        assert columns == [0, 1, 3, 4]

    def test_rows_are_one_based(self):
        rows = sorted({seat.position['y'] for seat in self.seat_models})
        assert rows == list(range(1, 11))

    def test_first_row_layout(self):
        # Given: Seats of the first row, left to right
        first_row = [seat for seat in self.seat_models if seat.position['y'] == 1]

        # Then: Window on both ends, legroom on the whole row
        assert [seat.position['x'] for seat in first_row] == [0, 1, 3, 4]
        assert [seat.meta['is_window'] for seat in first_row] == [True, False, False, True]
        assert all(seat.meta['is_legroom'] for seat in first_row)

    def test_legroom_only_in_first_row(self):
        later_rows = [seat for seat in self.seat_models if seat.position['y'] > 1]
        assert not any(seat.meta['is_legroom'] for seat in later_rows)

    def test_defaults(self):
        seat = self.seat_models[0]
        assert seat.space_type == SpaceType.SEAT
        assert seat.seat_type == SeatType.REGULAR
        assert seat.reclinement_angle == 120
        assert seat.amenities == []
        assert seat.meta['row_index'] == 0 and seat.meta['col_index'] == 0


class TestGenerateMultiFloor:
    def test_numbering_continues_on_second_floor(self):
        seat_models = generate_seat_models(
            bus_diagram_model_id=1,
            num_floors=2,
            seats_per_floor=[_floor(2, num_rows=10), _floor(1, num_rows=8)],
        )

        first_floor = [seat for seat in seat_models if seat.floor_number == 1]
        second_floor = [seat for seat in seat_models if seat.floor_number == 2]
        assert len(seat_models) == 72
        assert first_floor[-1].seat_number == '32'
        assert second_floor[0].seat_number == '33'
        assert second_floor[0].position == {'x': 0, 'y': 1}

    def test_asymmetric_rows(self):
        seat_models = generate_seat_models(
            bus_diagram_model_id=1,
            num_floors=1,
            seats_per_floor=[_floor(num_rows=1, left=1, right=2)],
        )
        assert [seat.position['x'] for seat in seat_models] == [0, 2, 3]
        assert [seat.meta['is_window'] for seat in seat_models] == [True, False, True]


class TestValidateSeatsPerFloor:
    def test_total_is_sum_of_floors(self):
        assert calculate_total_seats([_floor(1, 8), _floor(2, 10)]) == 72

    def test_missing_floor_is_rejected(self):
        with pytest.raises(DomainError):
            validate_seats_per_floor(num_floors=2, seats_per_floor=[_floor(1)])

    def test_duplicate_floor_is_rejected(self):
        with pytest.raises(DomainError, match='Duplicate floor numbers'):
            validate_seats_per_floor(num_floors=2, seats_per_floor=[_floor(1), _floor(1)])

    def test_floor_out_of_range_is_rejected(self):
        with pytest.raises(DomainError):
            validate_seats_per_floor(num_floors=1, seats_per_floor=[_floor(2)])

    def test_grid_without_seats_is_rejected(self):
        with pytest.raises(DomainError, match='no seats'):
            validate_seats_per_floor(num_floors=1, seats_per_floor=[_floor(left=0, right=0)])

    def test_non_positive_rows_rejected_by_entity(self):
        with pytest.raises(DomainError):
            _floor(num_rows=0)
