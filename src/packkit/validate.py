from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Union

from packkit.config import ValidateSettings
from packkit.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(slots=True)
class ValidationReport:
    missing: list[str] = field(default_factory=list)
    empty: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.empty

    def summary(self) -> str:
        missing = "\n- ".join(self.missing)
        empty = "\n- ".join(self.empty)
        return (
            f"The following files were missing:\n- {missing}\n\n"
            f"The following files were empty:\n- {empty}"
        )


class FilesNotPresentError(RuntimeError):
    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        super().__init__(report.summary())


def _strip_segments(path: str, count: int) -> str:
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return "/".join(path.split("/")[:-count])


def _listing(folder: str) -> str:
    try:
        return repr(sorted(os.listdir(folder)))
    except OSError as exc:
        return f"<could not list: {exc.strerror or exc}>"


def ancestor_diagnostics(path: str) -> List[str]:
    """Describe the nearest ancestors of a missing ``path``.

    Parent, grandparent and great-grandparent are found by dropping trailing
    ``/`` segments. The great-grandparent is only looked at when the
    grandparent is gone too.
    """
    parent = _strip_segments(path, 1)
    grandparent = _strip_segments(path, 2)
    great_grandparent = _strip_segments(path, 3)

    lines: list[str] = []
    if not os.path.exists(parent):
        lines.append(f"Parent folder {parent} does not exist")
    else:
        lines.append(f"Contents of parent folder: {_listing(parent)}")

    if not os.path.exists(grandparent):
        lines.append(f"Grandparent folder {grandparent} does not exist")
        if not os.path.exists(great_grandparent):
            lines.append(f"Grandgrandparent folder {great_grandparent} does not exist")
        else:
            lines.append(f"Contents of grandgrandparent folder: {_listing(great_grandparent)}")
    else:
        lines.append(f"Contents of grandparent folder: {_listing(grandparent)}")
    return lines


def check_files(
    paths: Iterable[PathLike],
    settings: ValidateSettings | None = None,
) -> ValidationReport:
    """Check every path in order and collect the missing and empty ones."""
    settings = settings or ValidateSettings()
    report = ValidationReport()

    for raw in paths:
        path = os.fspath(raw)
        if not os.path.exists(path):
            log.error("File %s does not exist", path)
            if settings.list_ancestors:
                for line in ancestor_diagnostics(path):
                    log.error(line)
            report.missing.append(path)

        if os.path.exists(path) and os.stat(path).st_size == 0:
            log.error("File %s is empty", path)
            report.empty.append(path)

    return report


def validate_files_present(
    paths: Iterable[PathLike],
    settings: ValidateSettings | None = None,
) -> None:
    report = check_files(paths, settings)
    if not report.ok:
        raise FilesNotPresentError(report)
    log.info("All paths exist")
