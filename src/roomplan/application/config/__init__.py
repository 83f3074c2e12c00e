"""Design document schema, loading and validation.

Public API:
    - DesignConfiguration: Root design document model
    - RoomConfig: Room configuration model
    - FurnitureConfig: Furniture record model
    - PointConfig: Polygon vertex model
    - EditorSettings: Interactive editor options
    - load_design: Load a design document from a JSON file
    - load_design_from_dict: Validate an already-parsed document
    - ConfigError: Exception for loading and validation failures
    - validate_design: Geometry advisories for a valid document
    - config_to_room / config_to_snapshot / snapshot_to_dict: adapters

Example:
    >>> from pathlib import Path
    >>> from roomplan.application.config import load_design, ConfigError
    >>>
    >>> try:
    ...     design = load_design(Path("living-room.json"))
    ...     print(f"{design.room.width}m x {design.room.length}m")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from roomplan.application.config.adapter import (
    config_to_item,
    config_to_room,
    config_to_snapshot,
    item_to_dict,
    room_to_dict,
    settings_to_snapper,
    snapshot_to_dict,
)
from roomplan.application.config.loader import (
    ConfigError,
    format_json_path,
    load_design,
    load_design_from_dict,
)
from roomplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    DesignConfiguration,
    EditorSettings,
    FurnitureConfig,
    PointConfig,
    RoomConfig,
)
from roomplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_design,
)

__all__ = [
    "ConfigError",
    "DesignConfiguration",
    "EditorSettings",
    "FurnitureConfig",
    "PointConfig",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_item",
    "config_to_room",
    "config_to_snapshot",
    "format_json_path",
    "item_to_dict",
    "load_design",
    "load_design_from_dict",
    "room_to_dict",
    "settings_to_snapper",
    "snapshot_to_dict",
    "validate_design",
]
