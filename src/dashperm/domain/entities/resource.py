"""Resource entity - dashboard or folder under access control."""

from dataclasses import dataclass


@dataclass
class Resource:
    """Dashboard or folder. Dashboards may live in a folder and inherit its ACL."""

    id: int
    org_id: int
    uid: str
    title: str
    slug: str
    is_folder: bool = False
    folder_id: int = 0

    @property
    def url(self) -> str:
        return resource_url(self.is_folder, self.uid, self.slug)


def resource_url(is_folder: bool, uid: str, slug: str) -> str:
    """Frontend URL of a dashboard or folder."""
    if is_folder:
        return f"/dashboards/f/{uid}/{slug}"
    return f"/d/{uid}/{slug}"
