"""Domain layer - records, value objects and errors of the exchange"""

from verifier_exchange.domain.clock import Clock, FixedClock, SystemClock
from verifier_exchange.domain.errors import (
    ExchangeError,
    InvalidFormat,
    MissingField,
    PersistenceError,
    PreconditionError,
    PresentationRequestNotFound,
    UnsupportedVersion,
    UpstreamError,
    ValidationError,
    VerifierNotFound,
)
from verifier_exchange.domain.exchange_config import ExchangeConfig
from verifier_exchange.domain.hook_context import HookContext
from verifier_exchange.domain.presentation_request import (
    CredentialRequest,
    PresentationRequestCreateInput,
    parse_timestamp,
)
from verifier_exchange.domain.presentation_request_record import PresentationRequestRecord
from verifier_exchange.domain.submission import (
    SubmissionCurrent,
    SubmissionDeprecatedV2,
    ValidatedSubmission,
    WireFormat,
    create_validated_submission,
    is_current_submission,
    parse_version,
    resolve_wire_format,
)
from verifier_exchange.domain.verifier import Verifier

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Errors
    "ExchangeError",
    "InvalidFormat",
    "MissingField",
    "PersistenceError",
    "PreconditionError",
    "PresentationRequestNotFound",
    "UnsupportedVersion",
    "UpstreamError",
    "ValidationError",
    "VerifierNotFound",
    # Configuration
    "ExchangeConfig",
    # Pipeline context
    "HookContext",
    # Presentation requests
    "CredentialRequest",
    "PresentationRequestCreateInput",
    "parse_timestamp",
    "PresentationRequestRecord",
    # Submissions
    "SubmissionCurrent",
    "SubmissionDeprecatedV2",
    "ValidatedSubmission",
    "WireFormat",
    "create_validated_submission",
    "is_current_submission",
    "parse_version",
    "resolve_wire_format",
    # Verifier
    "Verifier",
]
