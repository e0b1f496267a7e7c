"""
Keyword-based legal response classifier.

Each knowledge entry is scored by the share of its keywords found in the query
(plain substring matching), plus a small bonus for longer queries. Weak matches
fall back to a short topic-based answer, so every query gets a response.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from legalbrain.knowledge import KnowledgeEntry

logger = logging.getLogger(__name__)

FALLBACK_THRESHOLD = 0.4
FALLBACK_CONFIDENCE = 0.5
MAX_LENGTH_BONUS = 0.2
LENGTH_BONUS_DIVISOR = 50

DEFAULT_RESPONSE = (
    "I understand your legal query. For specific legal advice tailored to your situation, I recommend "
    "consulting with a qualified lawyer. You can use this portal to file an FIR, track your cases, or get "
    "basic legal information. How else can I assist you with your legal matters?"
)

FALLBACK_ACTIONS: Tuple[str, ...] = ("File FIR if criminal matter", "Consult a lawyer", "Gather evidence")

# Checked in order; the first topic with a marker in the query wins.
FALLBACK_TOPICS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("court", "hearing"),
        "For court-related matters, ensure you have all necessary documents and arrive on time. If you need "
        "to track your case status, you can use the case tracking feature. For specific procedural questions, "
        "consult your lawyer or the court clerk.",
    ),
    (
        ("police", "arrest"),
        "If you need to interact with police, remember your rights: right to remain silent, right to legal "
        "representation, and right to know the charges. For filing complaints, visit the nearest police "
        "station with all relevant evidence.",
    ),
    (
        ("lawyer", "advocate"),
        "When choosing a lawyer, consider their expertise in your specific legal area, experience, fee "
        "structure, and communication style. You can find lawyers through bar associations, legal "
        "directories, or referrals.",
    ),
    (
        ("document", "evidence"),
        "Always maintain proper documentation and evidence for your legal matters. Keep original documents "
        "safe, make multiple copies, and organize them chronologically. Digital evidence should be preserved "
        "in its original format.",
    ),
)

LANGUAGE_HINTS = {
    "hindi": "[हिंदी में सहायता उपलब्ध है - कानूनी सलाह के लिए योग्य वकील से संपर्क करें]",
    "marathi": "[मराठी मध्ये मदत उपलब्ध आहे - कायदेशीर सल्ल्यासाठी पात्र वकीलाशी संपर्क साधा]",
}


@dataclass(frozen=True)
class ClassificationResult:
    response: str
    confidence: float
    suggested_actions: Tuple[str, ...] = ()
    related_sections: Tuple[str, ...] = ()


def normalize_query(query: str) -> str:
    return query.lower().strip()


def length_bonus(normalized_query: str) -> float:
    """Bonus for detailed queries. It is the same for every entry, so it never changes the ranking."""
    return min(len(normalized_query) / LENGTH_BONUS_DIVISOR, MAX_LENGTH_BONUS)


def score_entry(normalized_query: str, entry: KnowledgeEntry) -> float:
    """Return the confidence, in [0, 1], that `entry` answers the (already normalized) query."""
    if not entry.keywords:
        return 0.0
    matches = sum(1 for keyword in entry.keywords if keyword in normalized_query)
    keyword_confidence = matches / len(entry.keywords)
    return min(keyword_confidence + length_bonus(normalized_query), 1.0)


def contextual_response(normalized_query: str) -> str:
    for markers, response in FALLBACK_TOPICS:
        if any(marker in normalized_query for marker in markers):
            return response
    return DEFAULT_RESPONSE


class ResponseClassifier:
    """Match free-text legal questions against an ordered knowledge base.

    The knowledge base is passed in at construction and never modified, so a
    single instance can serve concurrent requests.
    """

    def __init__(self, knowledge_base: Sequence[KnowledgeEntry]):
        self.knowledge_base: Tuple[KnowledgeEntry, ...] = tuple(knowledge_base)
        if not self.knowledge_base:
            logger.warning("Response classifier created with an empty knowledge base; every query will use the fallback")

    def best_match(self, normalized_query: str) -> Tuple[Optional[KnowledgeEntry], float]:
        """Return the highest-scoring entry and its score; earlier entries win ties."""
        best_entry = None
        best_confidence = 0.0
        for entry in self.knowledge_base:
            confidence = score_entry(normalized_query, entry)
            if best_entry is None or confidence > best_confidence:
                best_entry = entry
                best_confidence = confidence
        return best_entry, best_confidence

    def classify(self, query: str, language: str = "english") -> ClassificationResult:
        """Return the best knowledge-base answer for `query`, or a contextual fallback.

        Never raises: an empty query, or one that matches nothing, gets a fallback
        response with confidence 0.5. `language` values without a hint are ignored.
        """
        normalized = normalize_query(query or "")
        entry, confidence = self.best_match(normalized)

        if entry is None or confidence < FALLBACK_THRESHOLD:
            logger.debug("No strong match (best=%.3f); using fallback response", confidence)
            result = ClassificationResult(
                response=contextual_response(normalized),
                confidence=FALLBACK_CONFIDENCE,
                suggested_actions=FALLBACK_ACTIONS,
                related_sections=(),
            )
        else:
            logger.debug("Matched knowledge entry %s (confidence=%.3f)", entry.key, confidence)
            result = ClassificationResult(
                response=entry.response,
                confidence=confidence,
                suggested_actions=entry.suggested_actions,
                related_sections=entry.related_sections,
            )

        hint = LANGUAGE_HINTS.get(language)
        if hint and result.confidence > FALLBACK_CONFIDENCE:
            result = ClassificationResult(
                response=f"{result.response}\n\n{hint}",
                confidence=result.confidence,
                suggested_actions=result.suggested_actions,
                related_sections=result.related_sections,
            )
        return result
