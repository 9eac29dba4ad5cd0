"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the archive loader, the
knowledge-base providers and the timeline engine. Every domain exception
inherits from ``AtlasError`` and carries structured context fields that
enable consistent fallback decisions and diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``: caller contract violations, never retryable.
- ``TransientError``: temporary failures (network, timeout), retryable.
- ``PermanentError``: unrecoverable data failures, not retryable.
- ``ContractError``: payload/schema drift from an external service.

Environmental failures (``TransientError``, ``PermanentError``,
``ContractError``) are caught at the loader and engine boundaries and turned
into degraded results. Only ``ValidationError`` reaches the caller.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class AtlasError(Exception):
    """Base exception for all atlas-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"parse_kmz"``, ``"knowledge_base"``).
        code: Machine-readable error code (e.g. ``"KMZ_PARSE_FAILED"``).
        retryable: Whether retrying the operation could succeed.
        key: Lookup key the error relates to (body, feature name, URL).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        key: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.key = key
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "key": self.key,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(AtlasError):
    """Caller contract or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(AtlasError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(AtlasError):
    """Unrecoverable data failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(AtlasError):
    """Response shape drift from an external service. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Caller contract violations
# ---------------------------------------------------------------------------


class UnknownBodyError(ValidationError):
    """Raised when an operation is given a body identifier that is not configured."""

    default_stage = "timeline"
    default_code = "UNKNOWN_BODY"

    def __init__(self, body: object) -> None:
        super().__init__(f"Unknown body identifier: {body!r}", key=str(body))


class FeatureContractError(ValidationError):
    """Raised when a feature handed to the timeline engine has no usable name."""

    default_stage = "timeline"
    default_code = "FEATURE_CONTRACT_VIOLATION"
