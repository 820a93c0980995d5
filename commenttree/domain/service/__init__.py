"""Domain services."""

from .base import Service
from .comment_service import (
    CommentService,
    CommentTreePage,
    TreeAssemblyFailure,
    TreeResult,
)
from .path_encoder import PathEncoder
from .tree_assembler import assemble_tree

__all__ = [
    "CommentService",
    "CommentTreePage",
    "PathEncoder",
    "Service",
    "TreeAssemblyFailure",
    "TreeResult",
    "assemble_tree",
]
