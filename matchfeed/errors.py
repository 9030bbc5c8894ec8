from __future__ import annotations


class MatchfeedError(RuntimeError):
    pass


class RenderFailure(MatchfeedError):
    """Navigation timeout or transport error while rendering a page."""


class ContainerParseFailure(MatchfeedError):
    pass


class ScrapeFailure(MatchfeedError):
    """Unrecovered render/extraction failure surfaced to the request layer."""


class NotFound(MatchfeedError):
    def __init__(self, match_id: str):
        super().__init__(f"match not found: {match_id!r}")
        self.match_id = match_id
