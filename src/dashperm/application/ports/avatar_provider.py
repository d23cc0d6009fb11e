"""Avatar provider port."""

from typing import Protocol


class AvatarProvider(Protocol):
    """Port for user and team avatar URLs."""

    def user_avatar_url(self, email: str | None) -> str: ...

    def team_avatar_url(self, email: str | None, name: str | None) -> str: ...
