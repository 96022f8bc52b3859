"""Per-request processing context passed along a hook pipeline"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

IS_VALIDATED: str = "is_validated"


@dataclass
class HookContext:
    """
    Mutable state shared by the hooks of one pipeline run.

    Hooks read ``data`` and may replace it; the pipeline's final ``data``
    is the request's result. ``params`` carries flags between hooks, most
    importantly the validated marker set by the validation hooks.

    Attributes:
        data: Request body, replaced by hooks that produce a new payload
        headers: Transport headers of the request
        params: Flags and values shared between hooks
    """

    data: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def for_request(data: Any, headers: Optional[Mapping[str, str]] = None) -> "HookContext":
        # header names are case-insensitive on the wire
        normalized = {name.lower(): value for name, value in (headers or {}).items()}
        return HookContext(data=data, headers=normalized)

    @property
    def is_validated(self) -> bool:
        return self.params.get(IS_VALIDATED) is True

    def mark_validated(self) -> None:
        self.params[IS_VALIDATED] = True

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())
