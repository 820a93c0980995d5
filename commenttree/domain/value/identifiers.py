"""Strongly typed identifiers for comment store entities.

Using NewType for strong typing prevents mixing up the sequential storage id
with the opaque path segment id.
"""

from typing import NewType
from uuid import UUID

# Sequential id assigned by storage on insert
CommentId = NewType("CommentId", int)

# Opaque segment used in materialized paths so they don't leak sequential ids
PathId = NewType("PathId", UUID)
