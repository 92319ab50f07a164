"""
Agreement status lifecycle.

    draft --activate--> active --terminate--> terminated

Statuses only move forward, one step at a time. terminated is terminal.

The graph is plain data so it can be validated without touching the
database. validate_lifecycle_graph() is used by AppConfig.ready() AND tests
directly.
"""

from django.db import models


class AgreementStatus(models.TextChoices):
    DRAFT = 'draft', 'Draft'
    ACTIVE = 'active', 'Active'
    TERMINATED = 'terminated', 'Terminated'


STATUS_ORDER = [
    AgreementStatus.DRAFT,
    AgreementStatus.ACTIVE,
    AgreementStatus.TERMINATED,
]

TRANSITIONS = {
    AgreementStatus.DRAFT: [AgreementStatus.ACTIVE],
    AgreementStatus.ACTIVE: [AgreementStatus.TERMINATED],
}

INITIAL_STATUS = AgreementStatus.DRAFT

TERMINAL_STATUSES = [AgreementStatus.TERMINATED]


def allowed_transitions(status: str) -> list[str]:
    """Return the statuses reachable in one step from status."""
    if status in TERMINAL_STATUSES:
        return []
    return list(TRANSITIONS.get(status, []))


def can_transition(from_status: str, to_status: str) -> bool:
    """Check whether from_status -> to_status is a legal step."""
    return to_status in allowed_transitions(from_status)


def validate_lifecycle_graph(
    states: list[str],
    transitions: dict[str, list[str]],
    initial_state: str,
    terminal_states: list[str],
) -> list[str]:
    """
    Validate a forward-only lifecycle graph.

    Returns list of error messages (empty = valid).

    Checks:
    - initial_state and terminal_states exist in states
    - all transition sources and targets exist in states
    - terminal states have no outgoing transitions
    - every edge advances exactly one position in the order of states
    - all states reachable from initial_state

    Args:
        states: Status names, in lifecycle order
        transitions: Dict mapping status -> list of next statuses
        initial_state: Status of newly created records
        terminal_states: Statuses with no way out

    Returns:
        List of error message strings (empty if valid)
    """
    errors = []
    position = {state: index for index, state in enumerate(states)}

    if initial_state not in position:
        errors.append(f"initial_state '{initial_state}' not in states")

    for ts in terminal_states:
        if ts not in position:
            errors.append(f"terminal_state '{ts}' not in states")

    for from_state, to_states in transitions.items():
        if from_state not in position:
            errors.append(f"transition from unknown state '{from_state}'")
            continue
        for to_state in to_states:
            if to_state not in position:
                errors.append(f"transition to unknown state '{to_state}'")
                continue
            step = position[to_state] - position[from_state]
            if step < 1:
                errors.append(f"transition '{from_state}' -> '{to_state}' moves backward")
            elif step > 1:
                errors.append(f"transition '{from_state}' -> '{to_state}' skips a state")

    for ts in terminal_states:
        if transitions.get(ts):
            errors.append(f"terminal state '{ts}' has outgoing transitions")

    if initial_state in position:
        reachable = _find_reachable_states(initial_state, transitions)
        for state in states:
            if state not in reachable:
                errors.append(f"state '{state}' unreachable from initial_state")

    return errors


def _find_reachable_states(start: str, transitions: dict[str, list[str]]) -> set[str]:
    """BFS over transitions, including start itself."""
    visited = {start}
    queue = [start]

    while queue:
        current = queue.pop(0)
        for next_state in transitions.get(current, []):
            if next_state not in visited:
                visited.add(next_state)
                queue.append(next_state)

    return visited
