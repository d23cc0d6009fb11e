"""Gravatar avatar URLs."""

import hashlib
from urllib.parse import quote


class GravatarProvider:
    """Builds Gravatar URLs from emails; teams without email hash their name."""

    def __init__(self, base_url: str = "https://secure.gravatar.com/avatar", size: int = 100) -> None:
        self._base_url = base_url.rstrip("/")
        self._size = size

    def _url(self, email: str | None, default: str) -> str:
        digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
        return f"{self._base_url}/{digest}?s={self._size}&d={quote(default, safe='')}"

    def user_avatar_url(self, email: str | None) -> str:
        return self._url(email, "retro")

    def team_avatar_url(self, email: str | None, name: str | None) -> str:
        if email:
            return self._url(email, "retro")
        return self._url(name, "identicon")
