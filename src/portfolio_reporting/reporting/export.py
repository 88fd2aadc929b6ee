# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Document export boundary.

Concrete renderers (PDF and friends) live outside this package and implement
`DocumentRenderer`. A failing renderer never invalidates the Report: the
failure is logged and surfaced as an `ExportResult` the caller can show.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..core.errors import RenderError
from ..core.primitives import Model
from .directives import (
    ChartSeries,
    Directive,
    KpiTile,
    ProgressBar,
    SectionTitle,
    TableBlock,
    build_document,
)
from .report import Report

logger = logging.getLogger(__name__)

EXPORT_FAILED_MESSAGE = "Export failed, please retry."


class ExportResult(Model):
    ok: bool
    message: str = ""
    content: Optional[bytes] = None


class DocumentRenderer(ABC):
    """Turns layout directives into a document."""

    @abstractmethod
    def render(self, report: Report, directives: Sequence[Directive]) -> bytes:
        """
        Render the document.

        Raises:
            RenderError: If the document cannot be produced.
        """
        pass


class TextRenderer(DocumentRenderer):
    """Plain-text rendering, one line per table row or tile."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def render(self, report: Report, directives: Sequence[Directive]) -> bytes:
        lines: List[str] = [f"Portfolio report as of {report.as_of.isoformat()}"]
        for directive in directives:
            lines.extend(self._lines(directive))
        return "\n".join(lines).encode(self.encoding)

    def _lines(self, directive: Directive) -> List[str]:
        if isinstance(directive, SectionTitle):
            return ["", directive.title, "=" * len(directive.title)]
        if isinstance(directive, KpiTile):
            return [f"{directive.label}: {_format(directive.value, directive.unit)}"]
        if isinstance(directive, TableBlock):
            lines = [directive.title] if directive.title else []
            lines.append(" | ".join(directive.columns))
            lines.extend(" | ".join(_format(c) for c in row) for row in directive.rows)
            return lines
        if isinstance(directive, ChartSeries):
            pairs = ", ".join(
                f"{label}={_format(value)}"
                for label, value in zip(directive.labels, directive.values)
            )
            return [f"[{directive.kind}] {directive.title}: {pairs}"]
        if isinstance(directive, ProgressBar):
            return [f"{directive.label}: {directive.percentage:.1f}%"]
        raise RenderError(f"Unsupported directive {type(directive).__name__}")


def _format(value, unit: str = "") -> str:
    if isinstance(value, str):
        return value
    if unit == "currency":
        return f"{value:,.2f}"
    if unit == "percent":
        return f"{value:.1f}%"
    if unit == "ratio":
        return f"{value:.2f}"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def export_report(report: Report, renderer: DocumentRenderer) -> ExportResult:
    """
    Render a report through `renderer`.

    Any renderer exception is caught and logged; the result then carries
    `ok=False` and a retry message. The report itself is never modified.
    """
    try:
        directives = build_document(report)
        content = renderer.render(report, directives)
    except Exception as e:
        logger.error(f"Report export via {type(renderer).__name__} failed: {e}", exc_info=True)
        return ExportResult(ok=False, message=EXPORT_FAILED_MESSAGE)
    logger.info(f"Exported report ({len(content)} bytes, {len(directives)} directives)")
    return ExportResult(ok=True, content=content)
