from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class MatchStatus(str, Enum):
    SCHEDULED = "Scheduled"
    LIVE = "Live"
    HALF_TIME = "HalfTime"
    FINISHED = "Finished"
    UNKNOWN = "Unknown"


class FormResult(str, Enum):
    WIN = "W"
    LOSS = "L"
    DRAW = "D"
    UNKNOWN = "U"


@dataclass(frozen=True)
class League:
    country: str
    name: str


@dataclass(frozen=True)
class Score:
    home: str
    away: str

    @property
    def full(self) -> str:
        # Literal concatenation, never a numeric sum.
        return f"{self.home}-{self.away}"

    def to_dict(self) -> Dict[str, str]:
        return {"home": self.home, "away": self.away, "full": self.full}


@dataclass(frozen=True)
class Scorer:
    player: str
    time: str

    def to_dict(self) -> Dict[str, str]:
        return {"player": self.player, "time": self.time}


@dataclass(frozen=True)
class MatchSummary:
    id: str
    league: League
    time: str
    status: MatchStatus
    round: str
    home_team: str
    away_team: str
    score: Score
    has_livestream: bool
    link: str
    home_form: List[FormResult] = field(default_factory=list)
    away_form: List[FormResult] = field(default_factory=list)
    home_scorers: List[Scorer] = field(default_factory=list)
    away_scorers: List[Scorer] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "league": {"country": self.league.country, "name": self.league.name},
            "match": {
                "id": self.id,
                "time": self.time,
                "status": self.status.value,
                "round": self.round,
                "homeTeam": self.home_team,
                "awayTeam": self.away_team,
                "score": self.score.to_dict(),
                "hasLivestream": self.has_livestream,
                "link": self.link,
                "form": {
                    "home": [f.value for f in self.home_form],
                    "away": [f.value for f in self.away_form],
                },
                "scorers": {
                    "home": [s.to_dict() for s in self.home_scorers],
                    "away": [s.to_dict() for s in self.away_scorers],
                },
            },
        }


@dataclass(frozen=True)
class TeamSide:
    name: str
    score: str
    form: List[FormResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "score": self.score, "form": [f.value for f in self.form]}


@dataclass(frozen=True)
class StatRow:
    name: str
    home: str
    away: str


@dataclass(frozen=True)
class MatchEvent:
    time: str
    player: str
    team: str
    type: str = "goal"

    def to_dict(self) -> Dict[str, str]:
        return {"time": self.time, "type": self.type, "player": self.player, "team": self.team}


@dataclass(frozen=True)
class LineupPlayer:
    name: str
    number: str


@dataclass(frozen=True)
class OddsRow:
    bookmaker: str
    home: str
    draw: str
    away: str

    def to_dict(self) -> Dict[str, Any]:
        return {"bookmaker": self.bookmaker, "odds": {"home": self.home, "draw": self.draw, "away": self.away}}


@dataclass(frozen=True)
class MatchDetail:
    date: str
    scheduled_time: str
    round: str
    status: MatchStatus
    time: str
    home: TeamSide
    away: TeamSide
    venue: str
    statistics: List[StatRow] = field(default_factory=list)
    # Home-side events first, then away-side; not sorted by minute.
    events: List[MatchEvent] = field(default_factory=list)
    home_lineup: List[LineupPlayer] = field(default_factory=list)
    away_lineup: List[LineupPlayer] = field(default_factory=list)
    odds: List[OddsRow] = field(default_factory=list)

    @property
    def full_score(self) -> str:
        return f"{self.home.score}-{self.away.score}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matchInfo": {"date": self.date, "scheduledTime": self.scheduled_time, "round": self.round},
            "match": {
                "status": self.status.value,
                "time": self.time,
                "teams": {"home": self.home.to_dict(), "away": self.away.to_dict()},
                "venue": self.venue,
                "score": {"full": self.full_score},
            },
            "statistics": [{"name": s.name, "home": s.home, "away": s.away} for s in self.statistics],
            "events": [e.to_dict() for e in self.events],
            "lineups": {
                "home": [{"name": p.name, "number": p.number} for p in self.home_lineup],
                "away": [{"name": p.name, "number": p.number} for p in self.away_lineup],
            },
            "odds": [o.to_dict() for o in self.odds],
        }


@dataclass(frozen=True)
class DetailError:
    error: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error, "message": self.message}


@dataclass(frozen=True)
class MatchListSnapshot:
    timestamp: str
    source: str
    matches: List[MatchSummary]

    def find(self, match_id: str) -> Optional[MatchSummary]:
        for m in self.matches:
            if m.id == match_id:
                return m
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "source": self.source,
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True)
class DetailPayload:
    timestamp: str
    source: str
    details: Union[MatchDetail, DetailError]

    @property
    def ok(self) -> bool:
        return isinstance(self.details, MatchDetail)

    def to_dict(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "source": self.source, "details": self.details.to_dict()}
