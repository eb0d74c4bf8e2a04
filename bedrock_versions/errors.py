"""Exception types raised by the bedrock_versions library."""


class BedrockVersionsError(Exception):
    """Base exception for all bedrock_versions failures."""


class NetworkError(BedrockVersionsError):
    """Raised when the links endpoint could not be fetched.

    Attributes:
        cause: The exception observed on the last attempt, or ``None`` when
            no attempt was made at all.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotFoundError(BedrockVersionsError):
    """Raised when no stable (or preview) version survives extraction."""
