"""
Bundled sample corpus of trusted sources and documents.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ..models import Document, Source
from .base import Corpus


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


WIKIPEDIA = Source.from_base_url(
    id="wikipedia",
    name="Wikipedia",
    type="wikipedia",
    base_url="https://en.wikipedia.org",
    authority_score=8.5,
)
BRITANNICA = Source.from_base_url(
    id="britannica",
    name="Encyclopedia Britannica",
    type="encyclopedia",
    base_url="https://www.britannica.com",
    authority_score=9.2,
)
NATURE = Source.from_base_url(
    id="nature",
    name="Nature Journal",
    type="academic",
    base_url="https://www.nature.com",
    authority_score=9.5,
)
ARXIV = Source.from_base_url(
    id="arxiv",
    name="arXiv",
    type="academic",
    base_url="https://arxiv.org",
    authority_score=8.8,
)
NIH = Source.from_base_url(
    id="nih",
    name="National Institutes of Health",
    type="government",
    base_url="https://www.nih.gov",
    authority_score=9.0,
)
CDC = Source.from_base_url(
    id="cdc",
    name="Centers for Disease Control",
    type="government",
    base_url="https://www.cdc.gov",
    authority_score=9.1,
)

SAMPLE_SOURCES: tuple[Source, ...] = (WIKIPEDIA, BRITANNICA, NATURE, ARXIV, NIH, CDC)

SAMPLE_DOCUMENTS: tuple[Document, ...] = (
    # Climate
    Document(
        id="climate-wiki-1",
        title="Climate Change - Wikipedia",
        snippet=(
            "Climate change refers to long-term shifts in global or regional climate "
            "patterns. Since the mid-20th century, humans have been the main driver of "
            "climate change, primarily due to fossil fuel burning, which increases "
            "heat-trapping greenhouse gas levels in Earth's atmosphere."
        ),
        url="https://en.wikipedia.org/wiki/Climate_change",
        source=WIKIPEDIA,
        relevance_score=0.95,
        published_date=_day(2023, 1, 15),
        last_updated=_day(2024, 1, 10),
        topics=("Environment", "Science", "Global Warming", "Greenhouse Gases"),
        content_type="article",
    ),
    Document(
        id="climate-nature-1",
        title="Global Warming Acceleration in Recent Decades",
        snippet=(
            "Recent studies show accelerating trends in global temperature rise. This "
            "comprehensive analysis examines the latest climate data and projections "
            "for the coming decades, highlighting the urgent need for climate action."
        ),
        url="https://nature.com/articles/climate-research-2024",
        source=NATURE,
        relevance_score=0.88,
        published_date=_day(2024, 1, 5),
        last_updated=_day(2024, 1, 5),
        topics=("Climate Science", "Research", "Temperature", "Global Warming"),
        content_type="paper",
    ),
    Document(
        id="climate-britannica-1",
        title="Global Warming | Definition, Causes, Effects",
        snippet=(
            "Global warming, the phenomenon of increasing average air temperatures near "
            "the surface of Earth over the past one to two centuries. Climate scientists "
            "have since the mid-20th century gathered detailed observations of various "
            "weather phenomena."
        ),
        url="https://www.britannica.com/science/global-warming",
        source=BRITANNICA,
        relevance_score=0.82,
        published_date=_day(2023, 6, 20),
        last_updated=_day(2023, 12, 15),
        topics=("Environment", "Science", "Global Warming", "Weather"),
        content_type="article",
    ),
    # Artificial intelligence
    Document(
        id="ai-wiki-1",
        title="Artificial Intelligence - Wikipedia",
        snippet=(
            "Artificial intelligence (AI) is intelligence demonstrated by machines, in "
            "contrast to the natural intelligence displayed by humans and animals. "
            'Leading AI textbooks define the field as the study of "intelligent agents".'
        ),
        url="https://en.wikipedia.org/wiki/Artificial_intelligence",
        source=WIKIPEDIA,
        relevance_score=0.93,
        published_date=_day(2023, 3, 10),
        last_updated=_day(2024, 1, 8),
        topics=("Technology", "Computer Science", "Machine Learning", "AI"),
        content_type="article",
    ),
    Document(
        id="ai-arxiv-1",
        title="Attention Is All You Need",
        snippet=(
            "The dominant sequence transduction models are based on complex recurrent or "
            "convolutional neural networks that include an encoder and a decoder. The best "
            "performing models also connect the encoder and decoder through an attention "
            "mechanism."
        ),
        url="https://arxiv.org/abs/1706.03762",
        source=ARXIV,
        relevance_score=0.91,
        published_date=_day(2017, 6, 12),
        last_updated=_day(2017, 6, 12),
        topics=("Machine Learning", "Neural Networks", "Transformers", "AI"),
        content_type="paper",
    ),
    Document(
        id="ai-nature-1",
        title="Deep Learning Revolution in Scientific Research",
        snippet=(
            "Deep learning has transformed numerous scientific disciplines, from protein "
            "folding prediction to materials discovery. This review examines the current "
            "state and future prospects of AI in scientific discovery."
        ),
        url="https://nature.com/articles/deep-learning-science-2024",
        source=NATURE,
        relevance_score=0.87,
        published_date=_day(2024, 1, 3),
        last_updated=_day(2024, 1, 3),
        topics=("AI", "Deep Learning", "Scientific Research", "Technology"),
        content_type="paper",
    ),
    # Health and medicine
    Document(
        id="health-nih-1",
        title="Understanding COVID-19 Vaccines",
        snippet=(
            "COVID-19 vaccines help protect against COVID-19. Getting vaccinated is one of "
            "many steps you can take to protect yourself and others from COVID-19. Learn "
            "about the different types of vaccines and how they work."
        ),
        url="https://www.nih.gov/health-information/covid-19-vaccines",
        source=NIH,
        relevance_score=0.94,
        published_date=_day(2021, 12, 15),
        last_updated=_day(2023, 11, 20),
        topics=("Health", "Vaccines", "COVID-19", "Medicine", "Public Health"),
        content_type="document",
    ),
    Document(
        id="health-cdc-1",
        title="Heart Disease Facts | CDC",
        snippet=(
            "Heart disease is the leading cause of death for men, women, and people of "
            "most racial and ethnic groups in the United States. Learn about heart disease "
            "risk factors, prevention, and treatment options."
        ),
        url="https://www.cdc.gov/heartdisease/facts.htm",
        source=CDC,
        relevance_score=0.89,
        published_date=_day(2023, 5, 10),
        last_updated=_day(2023, 12, 1),
        topics=("Health", "Heart Disease", "Prevention", "Medicine", "Public Health"),
        content_type="document",
    ),
    Document(
        id="health-wiki-1",
        title="Medicine - Wikipedia",
        snippet=(
            "Medicine is the science and practice of caring for a patient, managing the "
            "diagnosis, prognosis, prevention, treatment, palliation of their injury or "
            "disease, and promoting their health."
        ),
        url="https://en.wikipedia.org/wiki/Medicine",
        source=WIKIPEDIA,
        relevance_score=0.85,
        published_date=_day(2023, 2, 20),
        last_updated=_day(2023, 12, 10),
        topics=("Medicine", "Health", "Healthcare", "Medical Science"),
        content_type="article",
    ),
    Document(
        id="health-cdc-2",
        title="Vaccine Safety Monitoring | CDC",
        snippet=(
            "Vaccine safety systems track possible side effects after vaccination. Reports "
            "are reviewed continuously so that rare adverse events can be detected early."
        ),
        url="https://www.cdc.gov/vaccinesafety/monitoring.html",
        source=CDC,
        relevance_score=0.8,
        last_updated=_day(2024, 1, 20),
        topics=("Health", "Vaccines", "Public Health", "Safety"),
        content_type="page",
    ),
    # Physics
    Document(
        id="physics-wiki-1",
        title="Quantum Mechanics - Wikipedia",
        snippet=(
            "Quantum mechanics is a fundamental theory in physics that provides a "
            "description of the physical properties of nature at the scale of atoms and "
            "subatomic particles. It is the foundation of all quantum physics."
        ),
        url="https://en.wikipedia.org/wiki/Quantum_mechanics",
        source=WIKIPEDIA,
        relevance_score=0.92,
        published_date=_day(2023, 4, 5),
        last_updated=_day(2024, 1, 5),
        topics=("Physics", "Quantum Mechanics", "Science", "Atoms"),
        content_type="article",
    ),
    Document(
        id="physics-arxiv-1",
        title="Quantum Entanglement and Information Theory",
        snippet=(
            "We present a comprehensive review of quantum entanglement from an "
            "information-theoretic perspective. The paper covers recent developments in "
            "quantum information theory and their applications to quantum computing."
        ),
        url="https://arxiv.org/abs/2401.12345",
        source=ARXIV,
        relevance_score=0.88,
        published_date=_day(2024, 1, 15),
        last_updated=_day(2024, 1, 15),
        topics=("Quantum Physics", "Information Theory", "Quantum Computing", "Entanglement"),
        content_type="paper",
    ),
    # History
    Document(
        id="history-britannica-1",
        title="World War II | Summary, Combatants, & Facts",
        snippet=(
            "World War II, conflict that involved virtually every part of the world during "
            "1939-45. The principal belligerents were the Axis powers (Germany, Italy, and "
            "Japan) and the Allies (France, Great Britain, the United States, the Soviet "
            "Union, and China)."
        ),
        url="https://www.britannica.com/event/World-War-II",
        source=BRITANNICA,
        relevance_score=0.96,
        published_date=_day(2023, 1, 1),
        last_updated=_day(2023, 9, 15),
        topics=("History", "World War II", "Military History", "Global Conflict"),
        content_type="article",
    ),
    Document(
        id="history-wiki-1",
        title="Ancient Rome - Wikipedia",
        snippet=(
            "Ancient Rome was a civilization that began as a city-state on the Italian "
            "Peninsula during the 8th century BC. Located along the Mediterranean Sea, it "
            "became one of the largest empires in the ancient world."
        ),
        url="https://en.wikipedia.org/wiki/Ancient_Rome",
        source=WIKIPEDIA,
        relevance_score=0.90,
        published_date=_day(2023, 7, 12),
        last_updated=_day(2023, 11, 30),
        topics=("History", "Ancient Rome", "Civilization", "Empire"),
        content_type="article",
    ),
    # Technology
    Document(
        id="tech-wiki-1",
        title="Blockchain - Wikipedia",
        snippet=(
            "A blockchain is a distributed ledger with growing lists of records, called "
            "blocks, that are linked and secured using cryptography. Each block contains a "
            "cryptographic hash of the previous block, a timestamp, and transaction data."
        ),
        url="https://en.wikipedia.org/wiki/Blockchain",
        source=WIKIPEDIA,
        relevance_score=0.87,
        published_date=_day(2023, 8, 20),
        last_updated=_day(2023, 12, 20),
        topics=("Technology", "Blockchain", "Cryptocurrency", "Distributed Systems"),
        content_type="article",
    ),
    Document(
        id="tech-nature-1",
        title="Solid-State Batteries Approach Commercial Scale",
        snippet=(
            "Researchers report solid electrolytes with improved ionic conductivity and "
            "cycle life, bringing safer high-density batteries closer to mass production. "
            "The study compares ceramic and polymer designs."
        ),
        url="https://nature.com/articles/solid-state-batteries-2024",
        source=NATURE,
        relevance_score=0.84,
        published_date=_day(2024, 1, 12),
        last_updated=_day(2024, 1, 12),
        topics=("Energy Storage", "Technology", "Materials Science", "Research"),
        content_type="paper",
    ),
)

SAMPLE_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "climate": (
        "climate change",
        "climate change effects",
        "climate change solutions",
        "climate change causes",
        "climate science",
    ),
    "artificial": (
        "artificial intelligence",
        "artificial neural networks",
        "artificial intelligence applications",
        "artificial intelligence ethics",
        "artificial intelligence history",
    ),
    "quantum": (
        "quantum mechanics",
        "quantum computing",
        "quantum physics",
        "quantum entanglement",
        "quantum theory",
    ),
    "health": (
        "health care",
        "health insurance",
        "mental health",
        "public health",
        "health benefits",
    ),
    "covid": (
        "covid 19",
        "covid vaccine",
        "covid symptoms",
        "covid treatment",
        "covid prevention",
    ),
    "medicine": (
        "medicine definition",
        "medicine history",
        "medicine types",
        "preventive medicine",
        "traditional medicine",
    ),
    "history": (
        "world history",
        "american history",
        "ancient history",
        "history timeline",
        "historical events",
    ),
    "technology": (
        "technology trends",
        "information technology",
        "technology news",
        "emerging technology",
        "technology impact",
    ),
}


def load_sample_corpus() -> Corpus:
    """Return the bundled demonstration corpus."""
    return Corpus(SAMPLE_SOURCES, SAMPLE_DOCUMENTS, SAMPLE_SUGGESTIONS)
