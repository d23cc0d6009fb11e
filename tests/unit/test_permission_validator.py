"""Unit tests for permission update validation."""

import pytest

from dashperm.application.dto.permission_dto import PermissionItemInput
from dashperm.domain.exceptions import (
    ConflictingSubjectError,
    InvalidSubjectCombinationError,
    ValidationError,
)
from dashperm.domain.services import validate_permissions_update
from dashperm.domain.value_objects import PermissionLevel


def _item(**kwargs) -> PermissionItemInput:
    return PermissionItemInput(permission=PermissionLevel.VIEW, **kwargs)


def test_single_subjects_are_valid() -> None:
    validate_permissions_update(
        [_item(user_id=5), _item(team_id=7), _item(role="Viewer")]
    )


def test_empty_list_is_valid() -> None:
    validate_permissions_update([])


def test_user_and_team_rejected() -> None:
    with pytest.raises(ConflictingSubjectError, match="both a user and team"):
        validate_permissions_update([_item(user_id=5, team_id=7)])


def test_role_and_user_rejected() -> None:
    with pytest.raises(InvalidSubjectCombinationError, match="role and a user/team"):
        validate_permissions_update([_item(user_id=5, role="Admin")])


def test_role_and_team_rejected() -> None:
    with pytest.raises(InvalidSubjectCombinationError):
        validate_permissions_update([_item(team_id=7, role="Editor")])


def test_validation_errors_share_base_class() -> None:
    assert issubclass(ConflictingSubjectError, ValidationError)
    assert issubclass(InvalidSubjectCombinationError, ValidationError)


def test_first_invalid_item_fails_whole_list() -> None:
    with pytest.raises(ValidationError):
        validate_permissions_update([_item(user_id=1), _item(user_id=2, team_id=3)])
