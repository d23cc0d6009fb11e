"""Unit tests for ACL reconciliation."""

from dashperm.domain.entities import PermissionEntry, ReconciliationCommand
from dashperm.domain.services import reconcile
from dashperm.domain.value_objects import PermissionLevel


def _entry(permission=PermissionLevel.VIEW, **subject) -> PermissionEntry:
    return PermissionEntry(resource_id=1, permission=permission, **subject)


def _revokes(commands: list[ReconciliationCommand]) -> list[ReconciliationCommand]:
    return [c for c in commands if c.is_revoke]


def _grants(commands: list[ReconciliationCommand]) -> list[ReconciliationCommand]:
    return [c for c in commands if not c.is_revoke]


def test_full_resubmission_regrants_without_revokes() -> None:
    """Desired equal to current re-issues identical grants and no revokes."""
    current = [
        _entry(PermissionLevel.ADMIN, user_id=5),
        _entry(PermissionLevel.EDIT, team_id=7),
        _entry(PermissionLevel.VIEW, role="Viewer"),
    ]
    desired = [
        _entry(PermissionLevel.ADMIN, user_id=5),
        _entry(PermissionLevel.EDIT, team_id=7),
        _entry(PermissionLevel.VIEW, role="Viewer"),
    ]

    commands = reconcile(current, desired)

    assert _revokes(commands) == []
    assert commands == [
        ReconciliationCommand(permission=PermissionLevel.ADMIN, user_id=5),
        ReconciliationCommand(permission=PermissionLevel.EDIT, team_id=7),
        ReconciliationCommand(permission=PermissionLevel.VIEW, role="Viewer"),
    ]


def test_omitted_entry_is_revoked_exactly_once() -> None:
    current = [_entry(user_id=5), _entry(team_id=7)]
    desired = [_entry(user_id=5)]

    commands = reconcile(current, desired)

    assert _revokes(commands) == [ReconciliationCommand(permission=None, team_id=7)]


def test_role_matching_is_exact_string() -> None:
    """Editor role does not survive because another role is present."""
    current = [_entry(PermissionLevel.EDIT, role="Editor")]
    desired = [_entry(PermissionLevel.VIEW, role="Viewer")]

    commands = reconcile(current, desired)

    assert _grants(commands) == [
        ReconciliationCommand(permission=PermissionLevel.VIEW, role="Viewer")
    ]
    assert _revokes(commands) == [ReconciliationCommand(permission=None, role="Editor")]


def test_same_role_survives_with_changed_level() -> None:
    current = [_entry(PermissionLevel.VIEW, role="Editor")]
    desired = [_entry(PermissionLevel.EDIT, role="Editor")]

    commands = reconcile(current, desired)

    assert commands == [ReconciliationCommand(permission=PermissionLevel.EDIT, role="Editor")]


def test_protected_entry_kept_when_desired_is_otherwise_empty() -> None:
    """Only the injected protected entry is desired: it is granted, others revoked."""
    protected = _entry(PermissionLevel.ADMIN, user_id=1)
    current = [_entry(PermissionLevel.ADMIN, user_id=1), _entry(user_id=3), _entry(role="Viewer")]

    commands = reconcile(current, [protected])

    assert _grants(commands) == [ReconciliationCommand(permission=PermissionLevel.ADMIN, user_id=1)]
    revoked = _revokes(commands)
    assert ReconciliationCommand(permission=None, user_id=1) not in revoked
    assert revoked == [
        ReconciliationCommand(permission=None, user_id=3),
        ReconciliationCommand(permission=None, role="Viewer"),
    ]


def test_empty_current_produces_only_grants() -> None:
    commands = reconcile([], [_entry(PermissionLevel.EDIT, team_id=9)])

    assert commands == [ReconciliationCommand(permission=PermissionLevel.EDIT, team_id=9)]


def test_empty_desired_revokes_everything() -> None:
    current = [_entry(user_id=5), _entry(team_id=7)]

    commands = reconcile(current, [])

    assert commands == [
        ReconciliationCommand(permission=None, user_id=5),
        ReconciliationCommand(permission=None, team_id=7),
    ]


def test_user_id_does_not_match_team_id() -> None:
    """A user and a team with the same numeric id are different subjects."""
    current = [_entry(team_id=5)]
    desired = [_entry(user_id=5)]

    commands = reconcile(current, desired)

    assert _revokes(commands) == [ReconciliationCommand(permission=None, team_id=5)]


def test_current_is_not_mutated() -> None:
    current = [_entry(user_id=5)]
    snapshot = list(current)

    reconcile(current, [])

    assert current == snapshot
