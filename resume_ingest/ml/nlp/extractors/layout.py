"""
Reading-order reconstruction for PDF text layers.

A PDF page only reports an unordered bag of positioned text runs. This
module groups runs that share a baseline into lines, orders the lines top
to bottom (PDF y grows upwards), orders runs within a line left to right
and joins them, marking wide horizontal gaps with a multi-space separator
so the multi-column reorderer can find column breaks later.

Everything here is a pure function over plain records.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from resume_ingest.utils.constants import (
    COLUMN_GAP_FACTOR,
    COLUMN_SEPARATOR,
    DEFAULT_GLYPH_WIDTH,
    DEFAULT_RUN_HEIGHT,
    LINE_TOLERANCE_FACTOR,
    PAGE_SEPARATOR,
)


@dataclass(frozen=True)
class PositionedTextRun:
    """A run of glyphs as reported by a PDF text layer."""

    text: Optional[str]
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    has_eol: bool = False

    @classmethod
    def from_transform(
        cls,
        text: Optional[str],
        transform: Sequence[float],
        width: float,
        height: float,
        has_eol: bool = False,
    ) -> "PositionedTextRun":
        """Build a run from a text matrix ``[a, b, c, d, e, f]``."""
        return cls(
            text=text,
            x=float(transform[4]),
            y=float(transform[5]),
            width=float(width),
            height=float(height),
            has_eol=has_eol,
        )

    @property
    def end_x(self) -> float:
        return self.x + self.width

    @property
    def average_glyph_width(self) -> float:
        """Width per character, or a default for empty or unmeasured runs."""
        if not self.text or self.width <= 0:
            return DEFAULT_GLYPH_WIDTH
        return self.width / len(self.text)


@dataclass(frozen=True)
class ReconstructedLine:
    """Runs sharing one baseline band, ordered left to right."""

    y: float
    height: float
    runs: tuple[PositionedTextRun, ...]
    text: str


@dataclass
class _LineBucket:
    y: float
    height: float
    runs: list[PositionedTextRun]


def group_runs_into_lines(
    runs: Iterable[PositionedTextRun],
    tolerance_factor: float = LINE_TOLERANCE_FACTOR,
    gap_factor: float = COLUMN_GAP_FACTOR,
) -> list[ReconstructedLine]:
    """
    Group runs into lines and order them for reading.

    A run joins the first line whose reference y lies strictly within
    ``max(line height, run height) * tolerance_factor`` of its own y;
    otherwise it opens a new line. Runs without text are skipped.

    Returns:
        Lines sorted by descending y, each with runs sorted by x.
    """
    buckets: list[_LineBucket] = []

    for run in runs:
        if run.text is None:
            continue

        height = run.height or DEFAULT_RUN_HEIGHT
        for bucket in buckets:
            if abs(bucket.y - run.y) < max(bucket.height, height) * tolerance_factor:
                bucket.runs.append(run)
                break
        else:
            buckets.append(_LineBucket(y=run.y, height=height, runs=[run]))

    lines = []
    for bucket in sorted(buckets, key=lambda b: -b.y):
        ordered = tuple(sorted(bucket.runs, key=lambda r: r.x))
        lines.append(
            ReconstructedLine(
                y=bucket.y,
                height=bucket.height,
                runs=ordered,
                text=join_line_runs(ordered, gap_factor=gap_factor),
            )
        )
    return lines


def join_line_runs(
    runs: Sequence[PositionedTextRun],
    gap_factor: float = COLUMN_GAP_FACTOR,
) -> str:
    """
    Join left-to-right ordered runs into one line of text.

    A gap of at least ``gap_factor`` average glyph widths (of the run after
    the gap) becomes ``COLUMN_SEPARATOR``; a narrower gap becomes a single
    space unless either side already carries one.
    """
    text = ""
    prev_end: Optional[float] = None

    for run in runs:
        if not run.text:
            continue

        if prev_end is not None:
            gap = run.x - prev_end
            if gap >= run.average_glyph_width * gap_factor:
                text += COLUMN_SEPARATOR
            elif not text.endswith(" ") and not run.text.startswith(" "):
                text += " "

        text += run.text
        prev_end = run.end_x

    return text


def reconstruct_page_text(
    runs: Iterable[PositionedTextRun],
    tolerance_factor: float = LINE_TOLERANCE_FACTOR,
    gap_factor: float = COLUMN_GAP_FACTOR,
) -> str:
    """Reconstruct one page: newline-delimited lines, trimmed."""
    lines = group_runs_into_lines(
        runs, tolerance_factor=tolerance_factor, gap_factor=gap_factor
    )
    return "\n".join(line.text for line in lines).strip()


def reconstruct_document_text(
    pages: Iterable[Iterable[PositionedTextRun]],
    tolerance_factor: float = LINE_TOLERANCE_FACTOR,
    gap_factor: float = COLUMN_GAP_FACTOR,
) -> str:
    """Reconstruct every page and join non-empty pages with a blank line."""
    page_texts = (
        reconstruct_page_text(runs, tolerance_factor=tolerance_factor, gap_factor=gap_factor)
        for runs in pages
    )
    return PAGE_SEPARATOR.join(text for text in page_texts if text)


# Characters outside word characters, whitespace and ordinary punctuation
_GARBAGE_PATTERN = re.compile(r"[^\w\s.,!?;:'\"()\-]")


def garbage_ratio(text: str) -> float:
    """Share of characters that are neither word, space nor punctuation."""
    stripped = text.strip()
    if not stripped:
        return 0.0
    return len(_GARBAGE_PATTERN.findall(stripped)) / len(stripped)


def is_likely_scanned(
    text: str,
    page_count: int,
    min_chars_per_page: int = 100,
    max_garbage_ratio: float = 0.3,
) -> bool:
    """
    Guess whether a PDF is image-based from its extracted text layer.

    True for empty text, fewer than ``min_chars_per_page`` characters per
    page on average, or a garbage-character ratio above
    ``max_garbage_ratio``.
    """
    stripped = text.strip()
    if not stripped:
        return True

    if page_count > 0 and len(stripped) / page_count < min_chars_per_page:
        return True

    return garbage_ratio(stripped) > max_garbage_ratio
