"""Check pipeline entrypoints and result carriers."""

from proofmap.pipeline.entrypoints import check_file, configure
from proofmap.pipeline.results import FileCheckResult

__all__ = [
    "FileCheckResult",
    "check_file",
    "configure",
]
