"""Error models"""

from enum import Enum
from typing import Optional
import uuid


class ErrorCode(str, Enum):
    """Error codes surfaced to API callers"""
    GENERATION_FAILED = "GENERATION_FAILED"
    MALFORMED_GENERATION = "MALFORMED_GENERATION"
    PERSISTENCE_UNAVAILABLE = "PERSISTENCE_UNAVAILABLE"
    CONFLICT = "CONFLICT"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    NOT_FOUND = "NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ApplicationError(Exception):
    """Application error carrying a code, a user-facing message and a retry hint"""
    def __init__(self, code: ErrorCode, message: str, retryable: bool = False, hint: Optional[str] = None, website_id: Optional[str] = None):
        self.error_id = str(uuid.uuid4())
        self.code = code
        self.message = message
        self.retryable = retryable
        self.hint = hint
        self.website_id = website_id
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for API responses"""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "message": self.message,
            "hint": self.hint,
            "retryable": self.retryable,
            "website_id": self.website_id
        }

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        mapping = {
            ErrorCode.NOT_FOUND: 404,
            ErrorCode.CONFLICT: 409,
            ErrorCode.INVALID_TRANSITION: 409,
            ErrorCode.GENERATION_FAILED: 502,
            ErrorCode.MALFORMED_GENERATION: 502,
            ErrorCode.PERSISTENCE_UNAVAILABLE: 503,
            ErrorCode.CONFIGURATION_ERROR: 500,
        }
        return mapping.get(self.code, 500)


class GenerationTransportError(ApplicationError):
    """The LLM call failed, timed out, or returned no usable content"""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(
            code=ErrorCode.GENERATION_FAILED,
            message=message,
            retryable=True,
            hint=hint or "The content generator did not respond. Please try again."
        )


class MalformedGenerationError(ApplicationError):
    """The LLM returned text that is not a JSON object"""
    def __init__(self, message: str, raw_excerpt: str = ""):
        self.raw_excerpt = raw_excerpt
        super().__init__(
            code=ErrorCode.MALFORMED_GENERATION,
            message=message,
            retryable=True,
            hint="The generated content could not be read. Please try again."
        )


class PersistenceUnavailable(ApplicationError):
    """Layout counter store could not be reached"""
    def __init__(self, message: str):
        super().__init__(code=ErrorCode.PERSISTENCE_UNAVAILABLE, message=message, retryable=True)


class DuplicateGenerationConflict(ApplicationError):
    """A website already exists for this business"""
    def __init__(self, business_id: str, website_id: Optional[str] = None):
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=f"Website already generated for business {business_id}",
            hint="Use regenerate to refresh the existing website.",
            website_id=website_id
        )


class InvalidTransition(ApplicationError):
    """Requested lifecycle transition is not allowed"""
    def __init__(self, current: str, target: str, website_id: Optional[str] = None):
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot move website from '{current}' to '{target}'",
            website_id=website_id
        )
