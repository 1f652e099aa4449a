"""
Table-driven finite state machine

A machine is a static mapping of each state to the ordered list of states it may move to.
Every check is a pure lookup; the machine holds no per-entity state and performs no I/O.
"""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Generic, TypeVar

from src.platform.exception.exceptions import InvalidStateTransitionError


S = TypeVar('S', bound=Enum)


def _label(state: object) -> str:
    return str(state.value) if isinstance(state, Enum) else str(state)


class StateMachine(Generic[S]):
    def __init__(self, *, entity: str, transitions: Mapping[S, Sequence[S]]) -> None:
        self.entity = entity
        self._transitions: dict[S, tuple[S, ...]] = {
            state: tuple(allowed) for state, allowed in transitions.items()
        }

    @property
    def states(self) -> list[S]:
        return list(self._transitions)

    def can_transition(self, current: S, proposed: S) -> bool:
        return proposed in self._transitions.get(current, ())

    def validate_transition(self, current: S, proposed: S) -> None:
        if self.can_transition(current, proposed):
            return
        raise InvalidStateTransitionError(
            f'Invalid {self.entity.lower()} status transition from '
            f'{_label(current)} to {_label(proposed)}',
            entity=self.entity,
            current=_label(current),
            proposed=_label(proposed),
        )

    def get_possible_next_states(self, current: S) -> list[S]:
        """Allowed next states in table order; unknown states have none."""
        return list(self._transitions.get(current, ()))

    def validate_initial_state(self, state: S, allowed: Iterable[S]) -> None:
        allowed_states = list(allowed)
        if state in allowed_states:
            return
        raise InvalidStateTransitionError(
            f'Invalid initial {self.entity.lower()} status {_label(state)}, '
            f'expected one of: {", ".join(_label(s) for s in allowed_states)}',
            entity=self.entity,
            proposed=_label(state),
        )
