"""Principal entity - the signed-in user acting on a resource."""

from dataclasses import dataclass

from dashperm.domain.value_objects import BuiltinRole


@dataclass
class Principal:
    """Acting user with organization membership."""

    user_id: int
    login: str
    org_id: int
    org_role: BuiltinRole = BuiltinRole.VIEWER
    is_server_admin: bool = False
