"""Dominant accent color extraction from truecolor ANSI art."""

from __future__ import annotations

import re

from .models import ExtractionResult, RgbColor


QUANTIZE_STEP = 8
DARK_THRESHOLD = 90
LIGHT_THRESHOLD = 180
LINE_OFFSET = -3

# Foreground (38) or background (48) truecolor introducer followed by R;G;B.
_TRUECOLOR_RE = re.compile(r"(?:38|48);2;(\d{1,3});(\d{1,3});(\d{1,3})")


class ExtractionError(ValueError):
    pass


class ColorParseError(ExtractionError):
    pass


class NoDominantColor(ExtractionError):
    pass


def count_lines(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def content_lines(text: str, offset: int = LINE_OFFSET) -> int:
    return max(0, count_lines(text) + offset)


def _parse_channel(field: str, offset: int) -> int:
    # \d also matches non-ASCII digits; only 0-9 are valid channel text.
    if not (field.isascii() and field.isdigit()):
        raise ColorParseError(f"invalid color channel {field!r} at offset {offset}")
    value = int(field)
    if value > 255:
        raise ColorParseError(f"color channel {value} out of range at offset {offset}")
    return value


def iter_samples(text: str):
    """Yield every truecolor (r, g, b) triple in ``text`` in order of appearance."""
    for match in _TRUECOLOR_RE.finditer(text):
        yield tuple(_parse_channel(match.group(i), match.start(i)) for i in (1, 2, 3))


def is_dark(r: int, g: int, b: int) -> bool:
    return r < DARK_THRESHOLD and g < DARK_THRESHOLD and b < DARK_THRESHOLD


def is_light(r: int, g: int, b: int) -> bool:
    return r > LIGHT_THRESHOLD and g > LIGHT_THRESHOLD and b > LIGHT_THRESHOLD


def quantize(r: int, g: int, b: int, step: int = QUANTIZE_STEP) -> tuple[int, int, int]:
    return ((r // step) * step, (g // step) * step, (b // step) * step)


def build_histogram(text: str, step: int = QUANTIZE_STEP) -> dict[tuple[int, int, int], int]:
    """Count quantized buckets of all samples that are neither dark nor light.

    Buckets keep first-seen order, which is what breaks ties in
    :func:`extract_accent`.
    """
    counts: dict[tuple[int, int, int], int] = {}
    for r, g, b in iter_samples(text):
        if is_dark(r, g, b) or is_light(r, g, b):
            continue
        bucket = quantize(r, g, b, step)
        counts[bucket] = counts.get(bucket, 0) + 1
    return counts


def extract_accent(text: str) -> ExtractionResult:
    """Pick the most frequent quantized color in ``text``.

    Raises :class:`ColorParseError` for a channel that is not a byte value and
    :class:`NoDominantColor` when no sample survives the dark/light filters.
    """
    lines = content_lines(text)
    counts = build_histogram(text)
    if not counts:
        raise NoDominantColor("no qualifying truecolor samples found")

    best_bucket, best_count = None, 0
    for bucket, count in counts.items():
        if count > best_count:
            best_bucket, best_count = bucket, count

    r, g, b = best_bucket
    return ExtractionResult(color=RgbColor(r, g, b), content_lines=lines, votes=best_count)
