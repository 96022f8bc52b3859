"""Version gate for presentation submissions"""

import logging
from typing import Any, Mapping, MutableMapping, Optional

from returns.result import Failure, Result, Success
from semver import Version

from verifier_exchange.domain import (
    HookContext,
    InvalidFormat,
    MissingField,
    UnsupportedVersion,
    ValidatedSubmission,
    ValidationError,
    create_validated_submission,
    parse_version,
)

logger = logging.getLogger(__name__)

VERSION_HEADER = "version"
VALIDATED_SUBMISSION = "validated_submission"


class VersionGate:
    """
    Validates a submission and negotiates its wire-format version.

    Checks, first failure wins:

    1. the payload itself
    2. presentationRequestInfo
    3. encryptedPresentation
    4. the version header is present
    5. the version header is a semantic version
    6. the version is at least ``minimum_version``

    Older generations are served by a separate code path and rejected here.
    """

    def __init__(self, minimum_version: Version = Version(2, 0, 0)):
        self.minimum_version = minimum_version

    def gate(
        self, submission: Optional[MutableMapping[str, Any]], version_header: Optional[str]
    ) -> Result[ValidatedSubmission, ValidationError]:
        """
        Validate a submission against its version header.

        On success the normalized version is stamped onto
        ``submission["version"]``; any version already in the body is
        overwritten, never trusted.

        Args:
            submission: Submission body as received
            version_header: Value of the ``version`` transport header

        Returns:
            Success(ValidatedSubmission) or Failure(ValidationError)
        """
        if submission is None or not isinstance(submission, Mapping):
            return Failure(MissingField("data"))

        if not submission.get("presentationRequestInfo"):
            return Failure(MissingField("presentationRequestInfo"))

        if not submission.get("encryptedPresentation"):
            return Failure(MissingField("encryptedPresentation"))

        if not version_header:
            return Failure(MissingField("version header"))

        logger.debug("Presentation submitted with version %s", version_header)

        try:
            version = parse_version(version_header)
        except ValueError:
            return Failure(InvalidFormat("version header"))

        if version < self.minimum_version:
            return Failure(UnsupportedVersion(str(version), minimum=str(self.minimum_version)))

        submission["version"] = str(version)
        return Success(create_validated_submission(submission, version))

    async def __call__(self, context: HookContext) -> Result[HookContext, ValidationError]:
        result = self.gate(context.data, context.header(VERSION_HEADER))
        if isinstance(result, Failure):
            return result

        context.params[VALIDATED_SUBMISSION] = result.unwrap()
        context.mark_validated()
        return Success(context)
