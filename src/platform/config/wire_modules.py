"""
Wire Modules Configuration

Modules whose `depends` classmethods use `Provide[Container.*]` markers.
Shared between the service and the test client.
"""

from types import ModuleType

from src.service.fleet.app.command import (
    create_bus_diagram_model_use_case,
    create_bus_diagram_model_zone_use_case,
    create_bus_model_use_case,
    create_bus_use_case,
    delete_bus_use_case,
    regenerate_seat_models_use_case,
    update_bus_use_case,
    update_seat_diagram_zone_use_case,
)
from src.service.fleet.app.query import (
    get_bus_diagram_model_use_case,
    get_bus_model_use_case,
    get_bus_use_case,
    get_seat_diagram_use_case,
    list_bus_valid_next_statuses_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_bus_use_case,
    update_bus_use_case,
    delete_bus_use_case,
    create_bus_model_use_case,
    create_bus_diagram_model_use_case,
    create_bus_diagram_model_zone_use_case,
    regenerate_seat_models_use_case,
    update_seat_diagram_zone_use_case,
    get_bus_use_case,
    list_bus_valid_next_statuses_use_case,
    get_bus_model_use_case,
    get_bus_diagram_model_use_case,
    get_seat_diagram_use_case,
]
