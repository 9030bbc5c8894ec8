"""Rendered-document abstraction consumed by the extractors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

Node = Union[BeautifulSoup, Tag]


@dataclass(frozen=True)
class Document:
    url: str
    root: BeautifulSoup


def parse_document(html: str, *, url: str = "") -> Document:
    return Document(url=url, root=BeautifulSoup(html or "", "html.parser"))


def text_of(node: Optional[Tag]) -> str:
    """textContent-like: all descendant text, trimmed."""
    if node is None:
        return ""
    return node.get_text().strip()


def first(node: Node, strategies: Sequence[str]) -> Optional[Tag]:
    """
    First node matched by an ordered list of selectors: each strategy is
    tried in turn and the first one that matches anything wins.
    """
    for sel in strategies:
        found = node.select_one(sel)
        if found is not None:
            return found
    return None


def first_text(node: Node, strategies: Sequence[str], default: str = "") -> str:
    found = first(node, strategies)
    if found is None:
        return default
    return text_of(found)


def select_all(node: Node, selector: str) -> List[Tag]:
    # Document order, like querySelectorAll with a selector list.
    return list(node.select(selector))


def closest(node: Tag, selector: str) -> Optional[Tag]:
    """Nearest ancestor-or-self matching ``selector``."""
    return node.css.closest(selector)


def classes_of(node: Optional[Tag]) -> List[str]:
    if node is None:
        return []
    cls = node.get("class") or []
    if isinstance(cls, str):
        return cls.split()
    return list(cls)
