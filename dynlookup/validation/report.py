"""ValidationReport — Markdown and JSON rendering of a validation run."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from dynlookup.validation.result import ValidationResult


class ValidationReport:
    """A validation result bound to the table or property it describes."""

    def __init__(
        self,
        subject: str = "",
        result: ValidationResult | None = None,
        validated_at: datetime | str | None = None,
    ) -> None:
        self.subject = subject
        self.result = result or ValidationResult()
        if validated_at is None:
            self.validated_at = datetime.now(timezone.utc)
        elif isinstance(validated_at, str):
            self.validated_at = datetime.fromisoformat(validated_at)
        else:
            self.validated_at = validated_at

    @property
    def status(self) -> str:
        return "passed" if self.result.is_valid else "failed"

    def to_markdown(self) -> str:
        """Generate a Markdown summary suitable for an editor panel."""
        lines: list[str] = []

        lines.append(f"# Validation Report — {self.subject or 'Unknown'}")
        lines.append("")
        lines.append(f"**Status:** {self.status.upper()}")
        lines.append(f"**Validated:** {self.validated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append(f"**Errors:** {self.result.error_count}")
        lines.append("")

        if self.result.is_valid:
            lines.append("No issues found.")
            lines.append("")
            return "\n".join(lines)

        lines.append("| Field | Message |")
        lines.append("|-------|---------|")
        for field, message in self.result.items():
            msg = message.replace("|", "\\|")
            lines.append(f"| {field} | {msg} |")
        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        data = self.result.to_dict()
        data.update({
            "subject": self.subject,
            "status": self.status,
            "validated_at": self.validated_at.isoformat(),
        })
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)
