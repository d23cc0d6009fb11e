"""List-based ACL store used when the access control model is disabled."""

from dashperm.domain.entities import PermissionEntry
from dashperm.domain.exceptions import AclInfoMissing, ResourceEmpty


class AclListStore:
    """Replaces all own entries of a resource with the given list."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def update_acl(self, resource_id: int, entries: list[PermissionEntry]) -> None:
        if resource_id == 0:
            raise ResourceEmpty()
        for entry in entries:
            if entry.resource_id == 0:
                raise ResourceEmpty()
            if not entry.has_subject():
                raise AclInfoMissing()

        async with self._uow_factory() as uow:
            await uow.permissions.replace_for_resource(resource_id, entries)
