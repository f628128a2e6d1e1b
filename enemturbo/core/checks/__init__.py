"""Pre-start checks for the project tree and dotenv configuration."""

from .env import check_env_file, env_declares_key
from .extensions import DEFAULT_DISALLOWED_EXTENSIONS, scan_for_extensions
from .files import (
    CLIENT_REQUIRED_FILES,
    DEFAULT_ROOT_SIBLING,
    check_forbidden_files,
    check_required_files,
    find_root_sibling,
)
from .report import EnvCheckOutcome, FileCheck, FileCheckReport, ScanResult, Severity

__all__ = [
    "CLIENT_REQUIRED_FILES",
    "DEFAULT_DISALLOWED_EXTENSIONS",
    "DEFAULT_ROOT_SIBLING",
    "EnvCheckOutcome",
    "FileCheck",
    "FileCheckReport",
    "ScanResult",
    "Severity",
    "check_env_file",
    "check_forbidden_files",
    "check_required_files",
    "env_declares_key",
    "find_root_sibling",
    "scan_for_extensions",
]
