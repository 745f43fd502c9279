# src/taskboard/errors.py

from __future__ import annotations


class TaskboardError(Exception):
    """Base class for errors surfaced to users of the tracker."""


class ValidationError(TaskboardError):
    """Malformed or missing required input (empty task name, end before start, ...)."""


class NotFoundError(TaskboardError):
    """The id targeted by a mutation does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class TransportError(TaskboardError):
    """Persistence collaborator unreachable, failing, or returning malformed JSON."""
