"""Error hierarchy for the exchange pipelines

Errors travel as ``Failure`` values between hooks and use cases. The API
layer maps them onto HTTP responses:

- ValidationError (and subclasses): caused by the client, reported as 400
  with the offending field named
- PreconditionError: the pipeline was wired or invoked out of order
- UpstreamError: the issuance protocol call failed
- VerifierNotFound: no Verifier record for the requested DID
- PresentationRequestNotFound: no recorded presentation request for a uuid

Persistence failures raised while rotating a Verifier's auth token are not
wrapped; they are passed along as the store reported them.
"""

from typing import Optional


class ExchangeError(Exception):
    """Base class for errors surfaced by the exchange pipelines"""

    pass


# ======================
# Client errors
# ======================


class ValidationError(ExchangeError):
    """
    Client-caused validation failure.

    Attributes:
        field: Name of the field or condition that failed
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class MissingField(ValidationError):
    """A required field is absent or empty"""

    def __init__(self, field: str):
        super().__init__(field, f"{field} is required.")


class InvalidFormat(ValidationError):
    """A field is present but not in the expected notation"""

    def __init__(self, field: str, expected: str = "valid semver notation"):
        self.expected = expected
        super().__init__(field, f"{field} must be in {expected}.")


class UnsupportedVersion(ValidationError):
    """The negotiated version is older than this service generation accepts"""

    def __init__(self, version: str, minimum: str):
        self.version = version
        self.minimum = minimum
        super().__init__(
            "version header",
            f"version header must be {minimum} or above for this service; got {version}.",
        )


# ======================
# Server errors
# ======================


class PreconditionError(ExchangeError):
    """A hook ran before the hooks it depends on"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Hook context has not been validated. "
            "Did you forget to run the RequestValidator hook before this one?"
        )


class UpstreamError(ExchangeError):
    """
    The issuance protocol call failed.

    The message is deliberately generic; the underlying failure is kept on
    ``cause`` for logging only.
    """

    def __init__(self, cause: Optional[BaseException] = None, message: str = "Error sending request."):
        self.cause = cause
        super().__init__(message)


class VerifierNotFound(ExchangeError):
    """No Verifier record matches the lookup"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Verifier not found: {identifier}")


class PresentationRequestNotFound(ExchangeError):
    """No presentation request was recorded under the uuid"""

    def __init__(self, uuid: str):
        self.uuid = uuid
        super().__init__(f"Presentation request not found: {uuid}")


class PersistenceError(ExchangeError):
    """The entity store rejected a write"""

    pass
