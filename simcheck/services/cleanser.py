"""Cleansing pipeline.

Reduces a raw source buffer to a canonical, comparison-ready form under a
RuleProfile. Runs four passes, each a full left-to-right scan over a mutable
bytearray:

1. Comment removal: blank line-drop prefixes to the end of their line and
   multi-line comments up to and including their end marker.
2. Token generalization: overwrite generalizees with their generalizer,
   padding the remainder with blanks.
3. Whitespace normalization: tabs become blanks, carriage returns and logical
   newline characters become newlines, and newlines separated only by blanks
   collapse into the last one.
4. Space compaction: drop every blank plus leading newlines.

Passes 1-3 never change the buffer length; only pass 4 shrinks it.

The canonical result has no empty lines, no trailing newline and no two
consecutive newlines. Cleansing is idempotent on such output except where
compaction joined two fragments into a new token ("con st" becomes "const"),
which a second run would rewrite.
"""

from __future__ import annotations

from simcheck.domain.rule_profile import RuleProfile

SPACE = 0x20
NEWLINE = 0x0A
CARRIAGE_RETURN = 0x0D
TAB = 0x09
VERTICAL_TAB = 0x0B

# Maps every byte but the newline to a blank.
_BLANK_KEEP_NEWLINES = bytes(NEWLINE if c == NEWLINE else SPACE for c in range(256))


def _blank(buf: bytearray, start: int, stop: int) -> None:
    """Replace buf[start:stop] with blanks, keeping newlines in place."""
    buf[start:stop] = buf[start:stop].translate(_BLANK_KEEP_NEWLINES)


# ------------------------------------------------------------------
# Pass 1: Comments and line-drop prefixes
# ------------------------------------------------------------------


def _drop_line(buf: bytearray, index: int) -> int:
    """Blank from index to the next newline. Returns the newline's position."""
    stop = buf.find(b"\n", index)
    if stop == -1:
        stop = len(buf)
    buf[index:stop] = b" " * (stop - index)
    return stop


def _drop_multi_comment(buf: bytearray, index: int, comment_end: bytes) -> int:
    """Blank a comment body up to and including comment_end.

    An unterminated comment runs to the end of the buffer.

    Returns:
        Position right after the comment
    """
    end = buf.find(comment_end, index)
    stop = len(buf) if end == -1 else end + len(comment_end)
    _blank(buf, index, stop)
    return stop


def strip_comments(buf: bytearray, profile: RuleProfile) -> None:
    """Blank comments and line-drop prefixes in place."""
    prefixes = profile.line_drop_prefixes
    comment_start = profile.multi_comment_start
    comment_end = profile.multi_comment_end

    index = 0
    length = len(buf)
    while index < length:
        for prefix in prefixes:
            if buf.startswith(prefix, index):
                index = _drop_line(buf, index)
                break
        else:
            if comment_start and buf.startswith(comment_start, index):
                # Blank the opening marker first so "/*/" is not also read
                # as a closing marker.
                marker_end = index + len(comment_start)
                _blank(buf, index, marker_end)
                index = _drop_multi_comment(buf, marker_end, comment_end)
            else:
                index += 1


# ------------------------------------------------------------------
# Pass 2: Token generalization
# ------------------------------------------------------------------


def generalize_tokens(buf: bytearray, profile: RuleProfile) -> None:
    """Replace generalizees with their generalizer in place.

    Groups are tried in profile order and generalizees within a group in
    profile order; the first match wins. Matching is purely textual, so a
    generalizee embedded in a longer identifier is replaced too.
    """
    rules = profile.generalize_rules
    if not rules:
        return

    first_bytes = {g[0] for rule in rules for g in rule.generalizees}

    index = 0
    length = len(buf)
    while index < length:
        if buf[index] not in first_bytes:
            index += 1
            continue

        matched = 0
        for rule in rules:
            for generalizee in rule.generalizees:
                if buf.startswith(generalizee, index):
                    padding = len(generalizee) - len(rule.generalizer)
                    buf[index : index + len(generalizee)] = rule.generalizer + b" " * padding
                    matched = len(generalizee)
                    break
            if matched:
                break

        index += matched or 1


# ------------------------------------------------------------------
# Pass 3: Whitespace and newline normalization
# ------------------------------------------------------------------


def normalize_whitespace(buf: bytearray, profile: RuleProfile) -> None:
    """Canonicalize whitespace and newlines in place.

    Only the most recent newline that has not yet been followed by a
    non-blank byte is tracked; when another newline arrives first, the
    tracked one is blanked. A pending newline at the end is blanked as well.
    """
    newline_chars = profile.newline_chars
    pending: int | None = None

    for index in range(len(buf)):
        char = buf[index]
        if char == TAB or char == VERTICAL_TAB:
            buf[index] = SPACE
        elif char == SPACE:
            continue
        elif char == NEWLINE or char == CARRIAGE_RETURN or char in newline_chars:
            buf[index] = NEWLINE
            if pending is not None:
                buf[pending] = SPACE
            pending = index
        else:
            pending = None

    if pending is not None:
        buf[pending] = SPACE


# ------------------------------------------------------------------
# Pass 4: Space compaction
# ------------------------------------------------------------------


def compact_spaces(buf: bytearray) -> None:
    """Remove all blanks and leading newlines, packing fragments to the left."""
    length = len(buf)
    source = 0
    while source < length and (buf[source] == SPACE or buf[source] == NEWLINE):
        source += 1

    target = 0
    while source < length:
        if buf[source] == SPACE:
            source += 1
            continue

        fragment_end = buf.find(b" ", source)
        if fragment_end == -1:
            fragment_end = length

        size = fragment_end - source
        if target != source:
            buf[target : target + size] = buf[source:fragment_end]
        target += size
        source = fragment_end

    del buf[target:]


# ------------------------------------------------------------------
# Pipeline Entry Point
# ------------------------------------------------------------------


def cleanse_buffer(data: bytes, profile: RuleProfile) -> bytes:
    """Run all cleansing passes over data and return the canonical buffer.

    Args:
        data: Raw file contents
        profile: Rules controlling comments, newlines and generalization

    Returns:
        Canonical buffer, possibly empty
    """
    buf = bytearray(data)
    strip_comments(buf, profile)
    generalize_tokens(buf, profile)
    normalize_whitespace(buf, profile)
    compact_spaces(buf)

    assert b"\n\n" not in buf, "cleansing left an empty line"
    assert not buf.endswith(b"\n"), "cleansing left a trailing newline"
    assert not buf.startswith(b"\n"), "cleansing left a leading newline"

    return bytes(buf)
