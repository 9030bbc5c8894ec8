from __future__ import annotations

from typing import List, Optional, Tuple

from bs4 import Tag

from matchfeed import dom_selectors as sel
from matchfeed.classify import FORM_STYLES, STATUS_STYLES, classify_form, pick_style_tag, read_status
from matchfeed.config import DEFAULT_ORIGIN
from matchfeed.document import Document, Node, classes_of, closest, first, first_text, select_all, text_of
from matchfeed.errors import ContainerParseFailure
from matchfeed.logging_utils import _dbg, _warn
from matchfeed.models import FormResult, League, MatchStatus, MatchSummary, Score, Scorer

UNKNOWN_LEAGUE = "Unknown"
DEFAULT_SCORE = "0"


def rewrite_match_link(href: str, *, origin: str = DEFAULT_ORIGIN) -> str:
    """
    List-page game link -> absolute detail (stats) link:
      /football/game/a-b/123 -> https://azscore.ng/football/stats/a-b/123
    """
    raw = (href or "").strip()
    if not raw:
        return ""
    path = raw.replace("/game/", "/stats/", 1)
    if path.startswith("http://") or path.startswith("https://"):
        return path
    return f"{origin.rstrip('/')}{path}"


def read_form(node: Node, selector: str) -> List[FormResult]:
    return [classify_form(pick_style_tag(classes_of(b), FORM_STYLES)) for b in select_all(node, selector)]


def read_scorers(node: Node, selector: str) -> List[Scorer]:
    out: List[Scorer] = []
    for el in select_all(node, selector):
        player = first_text(el, sel.SCORER_NAME)
        minute = first_text(el, sel.SCORER_TIME)
        # Both parts are required; a half-filled scorer row is dropped on its own.
        if player and minute:
            out.append(Scorer(player=player, time=minute))
    return out


def _read_league(container: Tag) -> League:
    section = closest(container, sel.LEAGUE_SECTION)
    if section is None:
        return League(country=UNKNOWN_LEAGUE, name=UNKNOWN_LEAGUE)
    country = first(section, sel.LEAGUE_COUNTRY)
    name = first(section, sel.LEAGUE_NAME)
    return League(
        country=text_of(country) if country is not None else UNKNOWN_LEAGUE,
        name=text_of(name) if name is not None else UNKNOWN_LEAGUE,
    )


def _read_status(container: Tag) -> Tuple[MatchStatus, str]:
    info = container.select_one(sel.GAME_INFO)
    live: Optional[Tag] = first(info, sel.LIVE_INDICATOR) if info is not None else None
    live_text = text_of(live) if live is not None else None
    if live_text:
        return read_status(live_text, pick_style_tag(classes_of(live), STATUS_STYLES), None)
    scheduled = first(info, sel.SCHEDULED_TIME) if info is not None else None
    return read_status(None, "", text_of(scheduled) if scheduled is not None else None)


def _read_link(container: Tag, *, origin: str, game_link_marker: str) -> str:
    anchor = closest(container, f'a[href*="{game_link_marker}"]')
    if anchor is None:
        return ""
    return rewrite_match_link(anchor.get("href") or "", origin=origin)


def parse_match_container(
    container: Tag,
    *,
    origin: str = DEFAULT_ORIGIN,
    game_link_marker: str = "/football/game/",
) -> MatchSummary:
    try:
        return _parse_container(container, origin=origin, game_link_marker=game_link_marker)
    except Exception as e:
        raise ContainerParseFailure(f"match container parse failed: {e}") from e


def _parse_container(container: Tag, *, origin: str, game_link_marker: str) -> MatchSummary:
    status, match_time = _read_status(container)
    home_score = first_text(container, sel.HOME_SCORE, DEFAULT_SCORE)
    away_score = first_text(container, sel.AWAY_SCORE, DEFAULT_SCORE)

    return MatchSummary(
        id=container.get(sel.MATCH_ID_ATTR) or "",
        league=_read_league(container),
        time=match_time,
        status=status,
        round=first_text(container, sel.ROUND),
        home_team=first_text(container, sel.HOME_TEAM),
        away_team=first_text(container, sel.AWAY_TEAM),
        score=Score(home=home_score, away=away_score),
        has_livestream=container.select_one(sel.LIVESTREAM_MARKER) is not None,
        link=_read_link(container, origin=origin, game_link_marker=game_link_marker),
        home_form=read_form(container, sel.HOME_FORM),
        away_form=read_form(container, sel.AWAY_FORM),
        home_scorers=read_scorers(container, sel.HOME_SCORERS),
        away_scorers=read_scorers(container, sel.AWAY_SCORERS),
    )


def extract_match_list(
    document: Document,
    *,
    origin: str = DEFAULT_ORIGIN,
    game_link_marker: str = "/football/game/",
) -> List[MatchSummary]:
    """
    All match containers of a rendered list page, in document order.

    A container that fails to parse is logged and skipped; the others are
    still returned. Records with a missing id are kept with id="".
    """
    out: List[MatchSummary] = []
    containers = select_all(document.root, sel.MATCH_CONTAINER)
    for idx, container in enumerate(containers):
        try:
            summary = parse_match_container(container, origin=origin, game_link_marker=game_link_marker)
        except ContainerParseFailure as e:
            _warn(f"skip match container #{idx} id={container.get(sel.MATCH_ID_ATTR)!r}: {e}")
            continue
        if not summary.id:
            _dbg(f"match container #{idx} has no id")
        out.append(summary)
    _dbg(f"list: containers={len(containers)} parsed={len(out)}")
    return out
