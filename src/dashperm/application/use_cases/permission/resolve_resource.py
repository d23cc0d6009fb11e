"""Resolve a dashboard or folder from its uid or numeric id."""

from dashperm.application.dto.permission_dto import ResourceRef
from dashperm.domain.entities import Resource
from dashperm.domain.exceptions import NotFound, ValidationError


async def resolve_resource(unit_of_work_factory, org_id: int, ref: ResourceRef) -> Resource:
    """Load resource by uid, falling back to numeric id. Kind must match ref."""
    kind = "Folder" if ref.is_folder else "Dashboard"
    if not ref.uid and not ref.id:
        raise ValidationError(f"{kind.lower()}Id is invalid")

    async with unit_of_work_factory() as uow:
        if ref.uid:
            resource = await uow.resources.get_by_uid(org_id, ref.uid)
        else:
            resource = await uow.resources.get_by_id(org_id, ref.id)

    if resource is None or resource.is_folder != ref.is_folder:
        raise NotFound(kind, ref.uid or ref.id)
    return resource
