from __future__ import annotations

from typing import List, Union

from matchfeed import dom_selectors as sel
from matchfeed.classify import STATUS_STYLES, classify_status, normalize_live_time, pick_style_tag
from matchfeed.document import Document, Node, classes_of, first, first_text, select_all, text_of
from matchfeed.list_extractor import DEFAULT_SCORE, read_form, read_scorers
from matchfeed.logging_utils import _dbg, _warn
from matchfeed.models import (
    DetailError,
    LineupPlayer,
    MatchDetail,
    MatchEvent,
    MatchStatus,
    OddsRow,
    StatRow,
    TeamSide,
)

DETAIL_PARSE_ERROR = "Failed to parse match details"


def _statistics(root: Node) -> List[StatRow]:
    rows: List[StatRow] = []
    for el in select_all(root, sel.STAT_ROW):
        name = first_text(el, sel.STAT_NAME)
        if not name:
            continue
        rows.append(
            StatRow(
                name=name,
                home=first_text(el, sel.STAT_HOME, DEFAULT_SCORE),
                away=first_text(el, sel.STAT_AWAY, DEFAULT_SCORE),
            )
        )
    return rows


def _lineup(root: Node, selector: str) -> List[LineupPlayer]:
    players: List[LineupPlayer] = []
    for el in select_all(root, selector):
        name = first_text(el, sel.LINEUP_NAME)
        if not name:
            continue
        players.append(LineupPlayer(name=name, number=first_text(el, sel.LINEUP_NUMBER)))
    return players


def _odds(root: Node) -> List[OddsRow]:
    rows: List[OddsRow] = []
    for el in select_all(root, sel.ODDS_ROW):
        icon = first(el, sel.ODDS_BOOKMAKER_ICON)
        bookmaker = ((icon.get("alt") if icon is not None else "") or "").strip()
        if not bookmaker:
            continue
        rows.append(
            OddsRow(
                bookmaker=bookmaker,
                home=first_text(el, sel.ODDS_HOME),
                draw=first_text(el, sel.ODDS_DRAW),
                away=first_text(el, sel.ODDS_AWAY),
            )
        )
    return rows


def _events(root: Node, *, home_team: str, away_team: str) -> List[MatchEvent]:
    # Team-grouped: every home goal, then every away goal. Not re-sorted by minute.
    events = [MatchEvent(time=s.time, player=s.player, team=home_team) for s in read_scorers(root, sel.DETAIL_HOME_SCORERS)]
    events.extend(MatchEvent(time=s.time, player=s.player, team=away_team) for s in read_scorers(root, sel.DETAIL_AWAY_SCORERS))
    return events


def _parse(root: Node) -> MatchDetail:
    home_team = first_text(root, sel.DETAIL_HOME_TEAM)
    away_team = first_text(root, sel.DETAIL_AWAY_TEAM)

    status_el = first(root, sel.DETAIL_STATUS)
    match_time = text_of(status_el)
    status = classify_status(match_time, pick_style_tag(classes_of(status_el), STATUS_STYLES))
    if status is MatchStatus.LIVE:
        match_time = normalize_live_time(match_time)

    info_rows = select_all(root, sel.DETAIL_INFO_ROWS)
    date = text_of(info_rows[0]) if len(info_rows) > 0 else ""
    scheduled_time = text_of(info_rows[1]) if len(info_rows) > 1 else ""

    return MatchDetail(
        date=date,
        scheduled_time=scheduled_time,
        round=first_text(root, sel.ROUND),
        status=status,
        time=match_time,
        home=TeamSide(
            name=home_team,
            score=first_text(root, sel.DETAIL_HOME_SCORE, DEFAULT_SCORE),
            form=read_form(root, sel.DETAIL_HOME_FORM),
        ),
        away=TeamSide(
            name=away_team,
            score=first_text(root, sel.DETAIL_AWAY_SCORE, DEFAULT_SCORE),
            form=read_form(root, sel.DETAIL_AWAY_FORM),
        ),
        venue=first_text(root, sel.DETAIL_VENUE),
        statistics=_statistics(root),
        events=_events(root, home_team=home_team, away_team=away_team),
        home_lineup=_lineup(root, sel.HOME_LINEUP),
        away_lineup=_lineup(root, sel.AWAY_LINEUP),
        odds=_odds(root),
    )


def extract_match_detail(document: Document) -> Union[MatchDetail, DetailError]:
    """
    One enriched detail record from a rendered match (stats) page.

    Never raises: a failure anywhere in the page yields a DetailError value
    that callers must not cache as a successful result.
    """
    try:
        detail = _parse(document.root)
    except Exception as e:
        _warn(f"detail parse failed url={document.url!r}: {e}")
        return DetailError(error=DETAIL_PARSE_ERROR, message=str(e))
    _dbg(
        f"detail: stats={len(detail.statistics)} events={len(detail.events)} "
        f"lineups={len(detail.home_lineup)}/{len(detail.away_lineup)} odds={len(detail.odds)}"
    )
    return detail
