"""Result types for project structure and configuration checks."""


from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal


class Severity(str, Enum):
    OK = "ok"
    WARNING = "warning"
    FATAL = "fatal"


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a disallowed-extension scan.

    ``found`` carries the first matching path, ``clear`` means the whole tree
    was walked without a match, and ``error`` means the walk could not finish
    (missing root, unreadable directory).
    """

    kind: Literal["found", "clear", "error"]
    path: Path | None = None
    reason: str | None = None

    @classmethod
    def found(cls, path: Path) -> "ScanResult":
        return cls(kind="found", path=path)

    @classmethod
    def clear(cls) -> "ScanResult":
        return cls(kind="clear")

    @classmethod
    def error(cls, reason: str) -> "ScanResult":
        return cls(kind="error", reason=reason)


@dataclass(frozen=True)
class FileCheck:
    path: str
    present: bool
    expected: bool = True

    @property
    def passed(self) -> bool:
        return self.present == self.expected


@dataclass
class FileCheckReport:
    items: list[FileCheck] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(item.passed for item in self.items)

    @property
    def failures(self) -> list[FileCheck]:
        return [item for item in self.items if not item.passed]


@dataclass
class EnvCheckOutcome:
    severity: Severity
    messages: list[str] = field(default_factory=list)
    # 1 = reference template missing, 2 = present file lacks the key.
    fatal_code: int = 1

    @property
    def exit_code(self) -> int:
        if self.severity is Severity.FATAL:
            return self.fatal_code
        return 0


__all__ = ["EnvCheckOutcome", "FileCheck", "FileCheckReport", "ScanResult", "Severity"]
