"""Structural validation of presentation request creation payloads"""

from typing import Any, Mapping

from returns.result import Failure, Result, Success

from verifier_exchange.domain import (
    HookContext,
    InvalidFormat,
    MissingField,
    ValidationError,
    parse_timestamp,
)


class RequestValidator:
    """
    First hook of the create pipeline.

    Checks run in a fixed order and the first failure is reported; nothing
    is accumulated:

    1. the payload itself
    2. holderAppUuid
    3. credentialRequests
    4. each credential request in array order: a non-blank type, then its
       issuers as a list of non-blank strings, then an optional boolean
       ``required``
    5. metadata, when given, is an object
    6. expiresAt, when given, is an ISO 8601 timestamp

    On success the context is marked validated for the hooks that follow.
    """

    def validate(self, data: Any) -> Result[Mapping[str, Any], ValidationError]:
        """
        Check a creation payload.

        Args:
            data: Payload as received

        Returns:
            Success(data) or Failure(ValidationError) naming the first bad field
        """
        if data is None or not isinstance(data, Mapping):
            return Failure(MissingField("data"))

        if not _is_text(data.get("holderAppUuid")):
            return Failure(MissingField("holderAppUuid"))

        credential_requests = data.get("credentialRequests")
        if not credential_requests:
            return Failure(MissingField("credentialRequests"))
        if not isinstance(credential_requests, list):
            return Failure(InvalidFormat("credentialRequests", "a list of credential requests"))

        for credential_request in credential_requests:
            if not isinstance(credential_request, Mapping) or not _is_text(credential_request.get("type")):
                return Failure(MissingField("credentialRequest type"))

            issuers = credential_request.get("issuers")
            if not issuers:
                return Failure(MissingField("credentialRequest issuers"))
            if not isinstance(issuers, list) or not all(_is_text(issuer) for issuer in issuers):
                return Failure(InvalidFormat("credentialRequest issuers", "a list of issuer DIDs"))

            if not isinstance(credential_request.get("required", True), bool):
                return Failure(InvalidFormat("credentialRequest required", "a boolean"))

        metadata = data.get("metadata")
        if metadata is not None and not isinstance(metadata, Mapping):
            return Failure(InvalidFormat("metadata", "a JSON object"))

        expires_at = data.get("expiresAt")
        if expires_at is not None:
            try:
                parse_timestamp(expires_at)
            except ValueError:
                return Failure(InvalidFormat("expiresAt", "ISO 8601 notation"))

        return Success(data)

    async def __call__(self, context: HookContext) -> Result[HookContext, ValidationError]:
        result = self.validate(context.data)
        if isinstance(result, Failure):
            return result

        context.mark_validated()
        return Success(context)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
