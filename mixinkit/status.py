"""Outcome of generating or deleting a mixin, and a report collecting them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GenerateStatus(Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    WARNING = "Warning"


@dataclass(frozen=True)
class GenerateResult:
    status: GenerateStatus
    message: str


@dataclass
class Report:
    """Messages sorted into success, failure and warning sections."""

    success_title: str = "生成Mixin模板成功:"
    failed_title: str = "生成Mixin模板失败:"
    warning_title: str = "警告:"
    successes: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(self, result: GenerateResult) -> None:
        bucket = {
            GenerateStatus.SUCCESS: self.successes,
            GenerateStatus.FAILED: self.failures,
            GenerateStatus.WARNING: self.warnings,
        }[result.status]
        bucket.append(result.message)

    def format(self, separator: str) -> str:
        sections = (
            (self.success_title, self.successes),
            (self.failed_title, self.failures),
            (self.warning_title, self.warnings),
        )
        return separator.join(
            title + "\n" + "".join(f"{message}\n" for message in messages)
            for title, messages in sections
        )