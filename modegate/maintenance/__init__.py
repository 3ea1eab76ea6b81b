from modegate.maintenance.mode import (
    DEFAULT_MODE,
    MODES,
    BadConfigError,
    InvalidRequirementError,
    MaintenanceError,
    Mode,
    check_mode,
    mode_bits,
    mode_enabled,
    parse_requirement,
    with_mode,
)
from modegate.maintenance.dependencies import require_mode

__all__ = [
    "DEFAULT_MODE",
    "MODES",
    "BadConfigError",
    "InvalidRequirementError",
    "MaintenanceError",
    "Mode",
    "check_mode",
    "mode_bits",
    "mode_enabled",
    "parse_requirement",
    "require_mode",
    "with_mode",
]
