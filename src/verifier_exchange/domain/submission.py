"""Versioned presentation submissions

A Holder submits an encrypted presentation together with a ``version``
transport header. The negotiated version, and only the version, decides
which wire-format generation downstream verification must parse:

1. DeprecatedV1 - versions below 2.0.0, served by a separate code path
2. DeprecatedV2 - 2.x.x
3. Current - 3.0.0 and above

The variant is resolved once, at the version gate, and carried as an
explicit tag from then on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Final, Mapping, Union

from semver import Version

V2_FLOOR: Final[Version] = Version(2, 0, 0)
CURRENT_FLOOR: Final[Version] = Version(3, 0, 0)


class WireFormat(str, Enum):
    """Presentation wire-format generations"""

    DEPRECATED_V1 = "deprecated-v1"
    DEPRECATED_V2 = "deprecated-v2"
    CURRENT = "current"

    def __str__(self) -> str:
        return self.value


def parse_version(value: str) -> Version:
    """
    Parse a version transport header.

    Surrounding whitespace and a single leading ``v`` or ``=`` are
    tolerated, as holder apps commonly send them.

    Raises:
        ValueError: If the value is not a semantic version
    """
    if not isinstance(value, str):
        raise ValueError(f"{value!r} is not valid SemVer string")

    text = value.strip()
    if text[:1] in ("v", "V", "="):
        text = text[1:]
    return Version.parse(text)


def resolve_wire_format(version: Version) -> WireFormat:
    """Map a negotiated version onto its wire-format generation"""
    if version < V2_FLOOR:
        return WireFormat.DEPRECATED_V1
    if version < CURRENT_FLOOR:
        return WireFormat.DEPRECATED_V2
    return WireFormat.CURRENT


@dataclass(frozen=True)
class SubmissionDeprecatedV2:
    """
    Submission in the 2.x.x wire format.

    Attributes:
        version: Negotiated version taken from the transport header
        presentation_request_info: Presentation request the holder responds to
        encrypted_presentation: Encrypted presentation payload
    """

    version: Version
    presentation_request_info: Dict[str, Any]
    encrypted_presentation: Dict[str, Any]
    wire_format: WireFormat = WireFormat.DEPRECATED_V2

    def __post_init__(self) -> None:
        if resolve_wire_format(self.version) is not WireFormat.DEPRECATED_V2:
            raise ValueError(f"Version {self.version} is not a 2.x.x version")


@dataclass(frozen=True)
class SubmissionCurrent:
    """Submission in the current wire format (3.0.0 and above)"""

    version: Version
    presentation_request_info: Dict[str, Any]
    encrypted_presentation: Dict[str, Any]
    wire_format: WireFormat = WireFormat.CURRENT

    def __post_init__(self) -> None:
        if resolve_wire_format(self.version) is not WireFormat.CURRENT:
            raise ValueError(f"Version {self.version} predates the current wire format")


ValidatedSubmission = Union[SubmissionDeprecatedV2, SubmissionCurrent]


def create_validated_submission(data: Mapping[str, Any], version: Version) -> ValidatedSubmission:
    """
    Build the submission variant selected by ``version``.

    Args:
        data: Submission body that already passed the version gate
        version: Negotiated version

    Returns:
        SubmissionDeprecatedV2 or SubmissionCurrent

    Raises:
        ValueError: For 1.x.x versions, which this service generation does not handle
    """
    wire_format = resolve_wire_format(version)
    if wire_format is WireFormat.DEPRECATED_V2:
        return SubmissionDeprecatedV2(
            version=version,
            presentation_request_info=data["presentationRequestInfo"],
            encrypted_presentation=data["encryptedPresentation"],
        )
    if wire_format is WireFormat.CURRENT:
        return SubmissionCurrent(
            version=version,
            presentation_request_info=data["presentationRequestInfo"],
            encrypted_presentation=data["encryptedPresentation"],
        )
    raise ValueError(f"No submission variant for {wire_format} (version {version})")


def is_current_submission(submission: ValidatedSubmission) -> bool:
    return submission.wire_format is WireFormat.CURRENT
