"""Domain model entities for pod people."""

from pod.domain.model.comment import Comment
from pod.domain.model.common import utcnow
from pod.domain.model.contact import Contact
from pod.domain.model.identity import Identity
from pod.domain.model.local_user import LocalUser
from pod.domain.model.post import Post
from pod.domain.model.profile import Profile

__all__ = [
    "Identity",
    "Profile",
    "LocalUser",
    "Post",
    "Comment",
    "Contact",
    "utcnow",
]
