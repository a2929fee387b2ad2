"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class MonikerError(Exception):
    """Base class for MONIKER errors."""


class InvalidArgumentError(MonikerError, ValueError):
    """Raised when a required descriptor is missing (``None``)."""


# ============================================================================
#                   Generator configuration errors
# ============================================================================


class GeneratorResolutionError(MonikerError):
    """Raised when a custom display name generator cannot be resolved."""

    def __init__(self, reference: object, reason: str) -> None:
        super().__init__(
            f"Cannot resolve display name generator {reference!r}: {reason}"
        )
        self.reference = reference
        self.reason = reason
