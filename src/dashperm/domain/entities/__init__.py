"""Domain entities."""

from dashperm.domain.entities.permission_entry import PermissionEntry, PermissionEntryView
from dashperm.domain.entities.principal import Principal
from dashperm.domain.entities.reconciliation_command import ReconciliationCommand
from dashperm.domain.entities.resource import Resource, resource_url

__all__ = [
    "PermissionEntry",
    "PermissionEntryView",
    "Principal",
    "ReconciliationCommand",
    "Resource",
    "resource_url",
]
