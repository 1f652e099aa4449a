#!/usr/bin/env python3
"""
Database Seed Script
Populate diagram templates and bus models

Features:
1. Create Templates - a single deck 40 seat coach and a double deck 72 seat coach
2. Create Zones - a premium zone on the front rows of each template
3. Create Bus Models - one bus model per template
"""

import asyncio

from src.platform.config.di import cleanup, container, setup
from src.service.fleet.app.command.create_bus_diagram_model_use_case import (
    CreateBusDiagramModelUseCase,
)
from src.service.fleet.app.command.create_bus_diagram_model_zone_use_case import (
    CreateBusDiagramModelZoneUseCase,
)
from src.service.fleet.app.command.create_bus_model_use_case import CreateBusModelUseCase
from src.service.fleet.domain.entity.diagram_entity import FloorSeats


TEMPLATES = [
    {
        'name': 'Single Deck 40',
        'max_capacity': 40,
        'num_floors': 1,
        'seats_per_floor': [FloorSeats(floor_number=1, num_rows=10, seats_left=2, seats_right=2)],
        'bus_model': {'manufacturer': 'Volvo', 'model': '9800', 'year': 2024},
    },
    {
        'name': 'Double Deck 72',
        'max_capacity': 72,
        'num_floors': 2,
        'seats_per_floor': [
            FloorSeats(floor_number=1, num_rows=8, seats_left=2, seats_right=2),
            FloorSeats(floor_number=2, num_rows=10, seats_left=2, seats_right=2),
        ],
        'bus_model': {'manufacturer': 'Irizar', 'model': 'i8 DD', 'year': 2024},
    },
]


async def main() -> None:
    setup()
    uow_factory = container.unit_of_work
    create_template = CreateBusDiagramModelUseCase(uow_factory=uow_factory)
    create_zone = CreateBusDiagramModelZoneUseCase(uow_factory=uow_factory)
    create_bus_model = CreateBusModelUseCase(
        bus_model_query_repo=container.bus_model_query_repo(),
        bus_diagram_model_query_repo=container.bus_diagram_model_query_repo(),
        uow_factory=uow_factory,
    )

    print('🌱 Seeding fleet data...')
    try:
        for config in TEMPLATES:
            template = await create_template.execute(
                name=config['name'],
                max_capacity=config['max_capacity'],
                num_floors=config['num_floors'],
                seats_per_floor=config['seats_per_floor'],
            )
            assert template.id is not None
            await create_zone.execute(
                bus_diagram_model_id=template.id,
                name='Premium',
                row_numbers=[1, 2, 3],
                price_multiplier=1.5,
            )
            bus_model = await create_bus_model.execute(
                **config['bus_model'], default_bus_diagram_model_id=template.id
            )
            print(
                f'   ✅ {template.name}: {template.total_seats} seats, '
                f'bus model {bus_model.manufacturer} {bus_model.model} (id={bus_model.id})'
            )
    finally:
        await cleanup()
    print('✅ Seed completed!')


if __name__ == '__main__':
    asyncio.run(main())
