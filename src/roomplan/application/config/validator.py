"""Advisory checks for design documents.

Schema validation (pydantic) rejects documents that cannot be used at all.
The checks here look at a valid document's geometry and report problems the
editor tolerates but a user probably wants to know about.
"""

from dataclasses import dataclass, field
from typing import Any

from roomplan.application.config.adapter import config_to_room, config_to_item
from roomplan.application.config.schema import DesignConfiguration
from roomplan.domain import PlacementClamp, RoomShape


@dataclass
class ValidationError:
    """A blocking problem.

    Attributes:
        path: JSON path of the offending field (e.g. "furniture[0].scale").
        message: Human-readable description.
        value: The offending value.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern.

    Attributes:
        path: JSON path of the concerning field.
        message: Human-readable description.
        suggestion: Optional remediation.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected for one design."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """0 when clean, 1 with errors, 2 when valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_design(
    config: DesignConfiguration, clamp: PlacementClamp | None = None
) -> ValidationResult:
    """Run geometry advisories over a schema-valid design.

    Warnings are raised for:
    - a custom room whose outline has fewer than three points
    - a square room whose width and length differ
    - furniture whose bounding box is not inside the room where it stands
    """
    clamp = clamp or PlacementClamp()
    result = ValidationResult()
    room = config_to_room(config.room)

    if room.is_degenerate:
        result.add_warning(
            "room.customPolygon",
            "Custom room outline is not defined yet; placement is unconstrained",
            "Draw at least three points",
        )
    if room.shape == RoomShape.SQUARE and room.width != room.length:
        result.add_warning(
            "room.shape",
            f"Square room has width {room.width}m and length {room.length}m",
            "Use the Rectangle shape or make both dimensions equal",
        )

    for index, item_config in enumerate(config.furniture):
        item = config_to_item(item_config)
        if not clamp.is_contained(item, room):
            target = clamp.clamp(item, item.x, item.y, room)
            result.add_warning(
                f"furniture[{index}]",
                f"{item.type} '{item.id}' extends outside the room at ({item.x:g}, {item.y:g})",
                f"Move its centre to ({target.x:g}, {target.y:g})",
            )
    return result
