"""Exception types."""


class ProofmapError(Exception):
    """Base class for errors raised by proofmap."""


class ConfigurationError(ProofmapError):
    """Backend selection is ambiguous, incomplete or not available in this installation."""


class BackendError(ProofmapError):
    """A checker backend call failed; no partial results are returned."""


class SourceLookupError(ProofmapError):
    """The document world could not provide the text of a file."""

    def __init__(self, file_id: str, reason: str | None = None) -> None:
        self.file_id = file_id
        self.reason = reason
        message = f"Cannot load source for {file_id!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
