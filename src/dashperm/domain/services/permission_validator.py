"""Structural validation of submitted permission entries."""

from collections.abc import Iterable
from typing import Protocol

from dashperm.domain.exceptions import (
    ConflictingSubjectError,
    InvalidSubjectCombinationError,
)


class SubjectDesignator(Protocol):
    user_id: int
    team_id: int
    role: str | None


def validate_permissions_update(items: Iterable[SubjectDesignator]) -> None:
    """Reject entries designating more than one subject kind.

    Raises ConflictingSubjectError for user+team and
    InvalidSubjectCombinationError for a role paired with a user or team.
    """
    for item in items:
        if item.user_id > 0 and item.team_id > 0:
            raise ConflictingSubjectError()
        if (item.user_id > 0 or item.team_id > 0) and item.role is not None:
            raise InvalidSubjectCombinationError()
