"""
Research Area Classification
============================

Keyword-based topic assignment for publications and static papers.

ORDERING IS LOAD-BEARING:
=========================
Areas are tested in declaration order and the FIRST keyword hit wins.
Two areas can match the same text ("blockchain" and "distributed"
both belong to one area, but "neural" and "machine learning" belong to
two); reordering RESEARCH_AREAS changes classification.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..contracts.records import Publication, StaticPaper


GENERAL = "general"


@dataclass(frozen=True)
class ResearchArea:
    """A topic key, its keyword set and its display color."""
    key: str
    keywords: Tuple[str, ...]
    color: str


RESEARCH_AREAS: Tuple[ResearchArea, ...] = (
    ResearchArea(
        key="neuroevolution",
        keywords=("neural", "evolution", "neuroevolution", "evolving", "genetic"),
        color="rgb(139, 92, 246)",
    ),
    ResearchArea(
        key="ml",
        keywords=(
            "machine learning",
            "deep learning",
            "neural network",
            "ai",
            "artificial intelligence",
        ),
        color="rgb(59, 130, 246)",
    ),
    ResearchArea(
        key="nlp",
        keywords=(
            "natural language",
            "nlp",
            "text",
            "language model",
            "chatbot",
            "question",
            "answering",
        ),
        color="rgb(34, 197, 94)",
    ),
    ResearchArea(
        key="blockchain",
        keywords=("blockchain", "distributed", "ledger", "decentralized", "crypto"),
        color="rgb(245, 158, 11)",
    ),
    ResearchArea(
        key="neuroscience",
        keywords=("vestibular", "perception", "neuroscience", "brain", "cognitive"),
        color="rgb(236, 72, 153)",
    ),
    ResearchArea(key=GENERAL, keywords=(), color="rgb(107, 114, 128)"),
)

_AREAS_BY_KEY = {area.key: area for area in RESEARCH_AREAS}


def area_keys() -> Tuple[str, ...]:
    """All topic keys in declaration order, ``general`` last."""
    return tuple(area.key for area in RESEARCH_AREAS)


def topic_color(key: str) -> str:
    return _AREAS_BY_KEY[key].color


def detect_research_area(
    title: str,
    abstract: Optional[str] = None,
    venue: Optional[str] = None
) -> str:
    """
    Classify text into a research area key.

    The haystack is ``title + abstract + venue`` lowercased; keywords are
    plain substring matches, so "ai" also hits "domain".
    """
    text = f"{title} {abstract or ''} {venue or ''}".lower()

    for area in RESEARCH_AREAS:
        if area.key == GENERAL:
            continue
        if any(keyword in text for keyword in area.keywords):
            return area.key

    return GENERAL


def research_area_for(record: Union[Publication, StaticPaper]) -> str:
    """Classify an input record; static papers use their subtitle as abstract."""
    if isinstance(record, StaticPaper):
        return detect_research_area(record.title, record.subtitle)
    return detect_research_area(record.title, record.abstract, record.venue)
