"""ACL reconciliation - diff a desired ACL against the current one."""

from collections.abc import Sequence

from dashperm.domain.entities import PermissionEntry, ReconciliationCommand


def reconcile(
    current: Sequence[PermissionEntry],
    desired: Sequence[PermissionEntry],
) -> list[ReconciliationCommand]:
    """Compute commands moving the resource from current to desired ACL.

    Every desired entry is (re-)granted, in order. Every current entry whose
    subject is not matched by a desired entry is revoked. Matching is per
    subject kind: same non-zero user id, same non-zero team id, or both
    roles set and equal as strings.
    """
    commands = [
        ReconciliationCommand(
            permission=item.permission,
            user_id=item.user_id,
            team_id=item.team_id,
            role=item.role,
        )
        for item in desired
    ]

    surviving = _subject_keys(desired)
    for old in current:
        if _survives(old, surviving):
            continue
        commands.append(
            ReconciliationCommand(
                permission=None,
                user_id=old.user_id,
                team_id=old.team_id,
                role=old.role,
            )
        )
    return commands


def _subject_keys(entries: Sequence[PermissionEntry]) -> set[str]:
    keys: set[str] = set()
    for item in entries:
        if item.user_id != 0:
            keys.add(f"user:{item.user_id}")
        if item.team_id != 0:
            keys.add(f"team:{item.team_id}")
        if item.role is not None:
            keys.add(f"role:{item.role}")
    return keys


def _survives(old: PermissionEntry, keys: set[str]) -> bool:
    if old.user_id != 0 and f"user:{old.user_id}" in keys:
        return True
    if old.team_id != 0 and f"team:{old.team_id}" in keys:
        return True
    return old.role is not None and f"role:{old.role}" in keys
