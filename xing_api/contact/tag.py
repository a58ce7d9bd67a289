from typing import Any, Mapping, Optional

from ..base import Base


class Tag(Base):
    """Tags the authenticated user attached to a contact."""

    @classmethod
    def list(cls, user_id: str, options: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        return cls.request('get', f'/v1/users/me/contacts/{user_id}/tags', options, **kwargs)
