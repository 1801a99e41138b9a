"""Engine request and result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scriptsmith.errors import InvalidInputError
from scriptsmith.registry.types import TargetOS, parse_os

__all__ = ["GenerationRequest", "GenerationResult"]


class _RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    target_os: str = Field(alias="targetOS")
    selected_ids: list[str] = Field(default_factory=list, alias="selectedIds")
    variables: dict[str, str] = Field(default_factory=dict)


@dataclass
class GenerationRequest:
    """One script generation call.

    Attributes:
        target_os: OS the script is generated for.
        selected_ids: Explicitly chosen module IDs, in caller order.
        variables: Placeholder name to raw (unescaped) value.
    """

    target_os: TargetOS
    selected_ids: list[str] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.target_os = parse_os(self.target_os)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenerationRequest:
        """Build a request from ``{targetOS, selectedIds, variables}``.

        snake_case keys are accepted too.

        Raises:
            InvalidInputError: If the mapping has the wrong shape.
            UnsupportedOSError: If the OS tag is unknown.
        """
        try:
            model = _RequestModel.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(message=f"Invalid generation request: {e}", cause=e) from e
        return cls(
            target_os=model.target_os,
            selected_ids=list(model.selected_ids),
            variables=dict(model.variables),
        )


@dataclass
class GenerationResult:
    """Output of a generation call.

    Attributes:
        script_text: The assembled shell script.
        included_ids: Resolved module IDs, in the order they appear in the script.
        skipped_ids: Included modules that had no fragment for the OS.
        missing_variables: Placeholders used by rendered fragments that got no value.
    """

    script_text: str
    included_ids: list[str] = field(default_factory=list)
    skipped_ids: list[str] = field(default_factory=list)
    missing_variables: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scriptText": self.script_text,
            "includedIds": list(self.included_ids),
            "skippedIds": list(self.skipped_ids),
            "missingVariables": list(self.missing_variables),
        }
