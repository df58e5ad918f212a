from __future__ import annotations

from .config import RunSettings, ValidateSettings
from .utils import CommandError, exec_cmd_sync, run_command
from .platforms import (
    ARCH_TABLE,
    PLATFORM_TABLE,
    UnsupportedPlatformError,
    artifact_target,
    autodetect_platform_and_arch,
)
from .validate import (
    FilesNotPresentError,
    ValidationReport,
    ancestor_diagnostics,
    check_files,
    validate_files_present,
)
from .display import build_report_render

__all__ = [
    "RunSettings",
    "ValidateSettings",
    "CommandError",
    "exec_cmd_sync",
    "run_command",
    "ARCH_TABLE",
    "PLATFORM_TABLE",
    "UnsupportedPlatformError",
    "artifact_target",
    "autodetect_platform_and_arch",
    "FilesNotPresentError",
    "ValidationReport",
    "ancestor_diagnostics",
    "check_files",
    "validate_files_present",
    "build_report_render",
]
