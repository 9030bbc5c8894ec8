"""Status and form classification from raw page indicators."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from matchfeed.models import FormResult, MatchStatus

MINUTE_MARK = "'"
SCHEDULED_PLACEHOLDER = "TBD"
STYLE_PREFIX = "color--"

# Insertion order is the priority used by pick_style_tag.
STATUS_STYLES: Dict[str, MatchStatus] = {
    "blue": MatchStatus.HALF_TIME,
    "red": MatchStatus.LIVE,
    "green": MatchStatus.FINISHED,
}

FORM_STYLES: Dict[str, FormResult] = {
    "green": FormResult.WIN,
    "red": FormResult.LOSS,
    "yellow": FormResult.DRAW,
}


def pick_style_tag(classes: Optional[Iterable[str]], table: Iterable[str]) -> str:
    """
    Pick the style tag out of an element's CSS classes, e.g.
    ["status", "color--red"] -> "red". When several known tags are present
    the first one in ``table`` wins; returns "" when none is known.
    """
    present = set()
    for cls in classes or ():
        if cls.startswith(STYLE_PREFIX):
            present.add(cls[len(STYLE_PREFIX):])
    for tag in table:
        if tag in present:
            return tag
    return ""


def classify_status(text: str, style_tag: str) -> MatchStatus:
    # Text does not affect the outcome; unrecognised tags are Unknown.
    return STATUS_STYLES.get((style_tag or "").strip().lower(), MatchStatus.UNKNOWN)


def normalize_live_time(text: str) -> str:
    t = (text or "").strip()
    if t.endswith(MINUTE_MARK):
        return t
    return t + MINUTE_MARK


def read_status(live_text: Optional[str], style_tag: str, scheduled_text: Optional[str]) -> Tuple[MatchStatus, str]:
    """
    Resolve (status, display time) for one match.

    ``live_text`` is the in-play indicator text (None when the indicator is
    absent), ``scheduled_text`` the separate kick-off field (None when absent).
    """
    live = (live_text or "").strip()
    if not live:
        scheduled = scheduled_text.strip() if scheduled_text is not None else SCHEDULED_PLACEHOLDER
        return MatchStatus.SCHEDULED, scheduled
    status = classify_status(live, style_tag)
    if status is MatchStatus.LIVE:
        return status, normalize_live_time(live)
    return status, live


def classify_form(style_tag: str) -> FormResult:
    return FORM_STYLES.get((style_tag or "").strip().lower(), FormResult.UNKNOWN)
