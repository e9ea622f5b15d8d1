"""Error taxonomy of the stage-type engine and its collaborators."""

from __future__ import annotations


class StageTyperError(RuntimeError):
    """Base class for stage-type analysis errors."""


class MissingInputError(StageTyperError):
    """Raised when no identifier stream can be obtained for a run."""


class RegistryUnavailable(StageTyperError):
    """Raised when the known-category registry cannot be read."""


class ExtractorFault(StageTyperError):
    """Raised (and recovered) when a candidate extractor fails on an identifier."""

    def __init__(self, extractor: str, identifier: str, cause: BaseException) -> None:
        super().__init__(f"Extractor {extractor} failed on {identifier!r}: {cause}")
        self.extractor = extractor
        self.identifier = identifier
        self.cause = cause


class PublishFailure(StageTyperError):
    """Raised when new categories cannot be appended to the registry."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
