"""
CSS selector tables for the list and detail pages.

Single-value fields are ordered strategy tuples: the first selector that
matches wins (a team slot is either tagged with a host/guest attribute or
is one of the two avatar blocks, host first). Repeated fields use one
selector list and keep document order.
"""

from __future__ import annotations

from typing import Tuple

Strategies = Tuple[str, ...]

# --- list page ---------------------------------------------------------------

MATCH_CONTAINER = "div[data-game-id]"
MATCH_ID_ATTR = "data-game-id"

LEAGUE_SECTION = "section.games"
LEAGUE_COUNTRY: Strategies = ("a.games-cat",)
LEAGUE_NAME: Strategies = ("a.games-slug",)

GAME_INFO = ".game-info"
LIVE_INDICATOR: Strategies = (".match-status__minutes", ".status")
SCHEDULED_TIME: Strategies = (".t",)

HOME_TEAM: Strategies = ("span[data-host-id] .team-name", ".avatar[data-team-names] .title")
AWAY_TEAM: Strategies = ("span[data-guest-id] .team-name", ".avatar:not([data-team-names]) .title")

HOME_SCORE: Strategies = (".team-score-item.count[data-host-id]", ".counter .count:first-child")
AWAY_SCORE: Strategies = (".team-score-item.count[data-guest-id]", ".counter .count:last-child")

LIVESTREAM_MARKER = ".livestream-icon"

HOME_FORM = ".avatar[data-team-names] .bullets .bullet, span[data-host-id] .bullets .bullet"
AWAY_FORM = ".avatar:not([data-team-names]) .bullets .bullet, span[data-guest-id] .bullets .bullet"

HOME_SCORERS = ".avatar[data-team-names] .player, span[data-host-id] .player"
AWAY_SCORERS = ".avatar:not([data-team-names]) .player, span[data-guest-id] .player"
SCORER_NAME: Strategies = ("a",)
SCORER_TIME: Strategies = ("span span:last-child",)

ROUND: Strategies = (".match-info .row .text div",)

# --- detail page -------------------------------------------------------------

DETAIL_HOME_TEAM: Strategies = (".avatar[data-team-names] .title",)
DETAIL_AWAY_TEAM: Strategies = (".avatar:not([data-team-names]) .title",)
DETAIL_HOME_SCORE: Strategies = (".counter .count:first-child",)
DETAIL_AWAY_SCORE: Strategies = (".counter .count:last-child",)
DETAIL_STATUS: Strategies = (".status",)
DETAIL_INFO_ROWS = ".match-info .row .text"
DETAIL_VENUE: Strategies = (".match-venue",)

DETAIL_HOME_FORM = ".avatar[data-team-names] .bullets .bullet"
DETAIL_AWAY_FORM = ".avatar:not([data-team-names]) .bullets .bullet"
DETAIL_HOME_SCORERS = ".avatar[data-team-names] .player"
DETAIL_AWAY_SCORERS = ".avatar:not([data-team-names]) .player"

STAT_ROW = ".stat__row"
STAT_NAME: Strategies = (".stat__title",)
STAT_HOME: Strategies = (".stat__score:first-child",)
STAT_AWAY: Strategies = (".stat__score:last-child",)

HOME_LINEUP = ".lineup-h .lineup-player"
AWAY_LINEUP = ".lineup-a .lineup-player"
LINEUP_NAME: Strategies = (".lineup-player-name",)
LINEUP_NUMBER: Strategies = (".lineup-player-number",)

ODDS_ROW = ".b-odds__row"
ODDS_BOOKMAKER_ICON: Strategies = (".b-odds__img img",)
ODDS_HOME: Strategies = (".odd-1",)
ODDS_DRAW: Strategies = (".odd-2",)
ODDS_AWAY: Strategies = (".odd-3",)
