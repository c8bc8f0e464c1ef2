from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain_browser.core.exceptions import DomainBrowserError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    column: Optional[str] = None

    def __str__(self) -> str:
        where = f" [{self.column}]" if self.column else ""
        return f"{self.code}{where}: {self.message}"


class ValidationError(DomainBrowserError):
    """All issues found in one catalog, raised together."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(str(i) for i in issues))

    @property
    def codes(self) -> set[str]:
        return {i.code for i in self.issues}
