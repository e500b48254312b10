"""Strongly typed identifiers for Inkwell domain entities.

Identifiers are opaque UUIDs. Ownership checks compare them directly.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
