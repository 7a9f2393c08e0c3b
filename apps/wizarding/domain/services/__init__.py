"""Domain Services."""

from wizarding.domain.services.fields import text_tuple
from wizarding.domain.services.images import placeholder_avatar_url, resolve_image

__all__ = ["placeholder_avatar_url", "resolve_image", "text_tuple"]
