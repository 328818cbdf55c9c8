"""
Input Records

Immutable snapshots of what the publication fetcher and the static
papers data file provide. ``from_dict`` reads the camelCase JSON shape
those collaborators emit.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import re


PAPER_LINK_NAME = "Paper"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_year(text: Optional[str]) -> Optional[int]:
    """Leading integer of a year string ("2023", "2023a"), or None."""
    if not text:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class Publication:
    """A publication from the external publications feed."""
    id: str
    title: str
    authors: Tuple[str, ...] = field(default_factory=tuple)
    year: str = ""
    venue: Optional[str] = None
    citations: Optional[int] = None
    abstract: Optional[str] = None
    pdf_url: Optional[str] = None
    source: str = "manual"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Publication:
        return cls(
            id=str(data['id']),
            title=data.get('title', ''),
            authors=tuple(data.get('authors') or ()),
            year=str(data.get('year', '')),
            venue=data.get('venue'),
            citations=data.get('citations'),
            abstract=data.get('abstract'),
            pdf_url=data.get('pdfUrl'),
            source=data.get('source', 'manual'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'authors': list(self.authors),
            'year': self.year,
            'venue': self.venue,
            'citations': self.citations,
            'abstract': self.abstract,
            'pdfUrl': self.pdf_url,
            'source': self.source,
        }


@dataclass(frozen=True)
class PaperLink:
    """Named footer link on a static paper card."""
    name: str
    url: str


@dataclass(frozen=True)
class StaticPaper:
    """
    A hand-curated paper card.

    ``date`` is formatted ``"<month>.<year>"``; it carries no author
    metadata and no native id.
    """
    title: str
    date: str
    subtitle: str = ""
    image: Optional[str] = None
    links: Tuple[PaperLink, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StaticPaper:
        links = tuple(
            PaperLink(name=link['name'], url=link['url'])
            for link in data.get('footerLink') or ()
        )
        return cls(
            title=data.get('title', ''),
            date=str(data.get('date', '')),
            subtitle=data.get('subtitle', ''),
            image=data.get('image'),
            links=links,
        )

    @property
    def pdf_url(self) -> Optional[str]:
        for link in self.links:
            if link.name == PAPER_LINK_NAME:
                return link.url
        return None
