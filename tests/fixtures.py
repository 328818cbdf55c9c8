"""
Research Graph Test Fixtures

Explicit publication and paper records. All fixtures are deterministic;
the current year is pinned so influence scores do not drift.
"""

from research_graph.contracts import Publication, PaperLink, StaticPaper


CURRENT_YEAR = 2025


# =============================================================================
# PUBLICATIONS
# =============================================================================

PUB_NEURO = Publication(
    id="pub1",
    title="Neural Evolution of Deep Learning Networks",
    authors=("John Smith", "Jane Doe"),
    year="2023",
    venue="ICML",
    citations=50,
    abstract="This paper explores neuroevolution techniques for optimizing neural network architectures.",
    pdf_url="https://example.com/paper1.pdf",
    source="semantic-scholar",
)

PUB_NLP = Publication(
    id="pub2",
    title="Natural Language Processing with Transformers",
    authors=("Alice Johnson", "Bob Wilson"),
    year="2022",
    venue="ACL",
    citations=120,
    abstract="A comprehensive study of transformer models for NLP tasks.",
    pdf_url="https://example.com/paper2.pdf",
    source="semantic-scholar",
)

# "blockchain" contains "ai", so the ml area matches before blockchain.
PUB_BLOCKCHAIN = Publication(
    id="pub3",
    title="Blockchain Technology for Distributed Systems",
    authors=("Charlie Brown", "Diana Prince"),
    year="2021",
    venue="IEEE",
    citations=80,
    abstract="Analysis of blockchain applications in distributed computing.",
    pdf_url="https://example.com/paper3.pdf",
    source="semantic-scholar",
)


def scenario_publications():
    """Two neuroevolution papers sharing the author Smith."""
    return [
        Publication(
            id="p1",
            title="Neural Evolution Methods",
            authors=("A Smith",),
            year="2023",
            citations=50,
        ),
        Publication(
            id="p2",
            title="Neural Plasticity Study",
            authors=("A Smith",),
            year="2022",
            citations=10,
        ),
    ]


def make_publication(pub_id: str, title: str, **overrides) -> Publication:
    fields = dict(
        id=pub_id,
        title=title,
        authors=(),
        year="2020",
        venue=None,
        citations=0,
        abstract=None,
    )
    fields.update(overrides)
    return Publication(**fields)


# =============================================================================
# STATIC PAPERS
# =============================================================================

PAPER_VESTIBULAR = StaticPaper(
    title="Vestibular Perception in Virtual Reality",
    subtitle="Understanding human spatial perception in VR environments",
    date="15.2024",
    image="/images/vr-research.jpg",
    links=(
        PaperLink(name="Paper", url="https://example.com/vr-paper.pdf"),
        PaperLink(name="Code", url="https://github.com/example/vr"),
    ),
)

PAPER_ML = StaticPaper(
    title="Machine Learning for Autonomous Systems",
    subtitle="Deep learning approaches for robotics",
    date="10.2023",
    image="/images/ml-robotics.jpg",
    links=(PaperLink(name="Paper", url="https://example.com/ml-paper.pdf"),),
)

# Real data file entry: a bare year with no month separator.
PAPER_BARE_YEAR = StaticPaper(
    title="Blockchain, a techie overview",
    subtitle="Consensus mechanisms with serious trade-offs",
    date="2016",
    links=(PaperLink(name="Paper", url="/pdfs/paper_blockchain_2016.pdf"),),
)
