"""Domain services."""

from dashperm.domain.services.acl_reconciler import reconcile
from dashperm.domain.services.permission_validator import validate_permissions_update

__all__ = [
    "reconcile",
    "validate_permissions_update",
]
