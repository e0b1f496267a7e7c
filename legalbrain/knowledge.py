"""
Static legal reference data used by the chatbot.

The knowledge base is an explicit, ordered tuple of entries. The order matters:
when two entries score the same for a query, the one declared first wins.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple


class KnowledgeBaseError(ValueError):
    """Raised when the knowledge base cannot be used to answer queries."""


@dataclass(frozen=True)
class KnowledgeEntry:
    key: str
    keywords: Tuple[str, ...]
    response: str
    base_confidence: float
    suggested_actions: Tuple[str, ...] = ()
    related_sections: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EmergencyContact:
    name: str
    number: str
    description: str


KNOWLEDGE_BASE: Tuple[KnowledgeEntry, ...] = (
    KnowledgeEntry(
        key="section_498a",
        keywords=("498a", "498-a", "domestic violence", "dowry", "cruelty", "husband", "in-laws"),
        response=(
            "Section 498A of the Indian Penal Code deals with cruelty by husband or his relatives "
            "towards a married woman. It is a cognizable and non-bailable offense punishable with "
            "imprisonment up to 3 years and fine. The offense covers both physical and mental cruelty "
            "including dowry harassment."
        ),
        base_confidence=0.95,
        suggested_actions=("File FIR", "Contact women helpline", "Gather evidence"),
        related_sections=("Section 304B (Dowry Death)", "Section 406 (Criminal Breach of Trust)"),
    ),
    KnowledgeEntry(
        key="fir_filing",
        keywords=("file fir", "register fir", "police station", "complaint", "report crime"),
        response=(
            "To file an FIR (First Information Report): 1) Visit the nearest police station, "
            "2) Provide complete incident details in writing, 3) Ensure the FIR copy is given to you "
            "with the FIR number, 4) Keep the acknowledgment safely. Police cannot refuse to register "
            "FIR for cognizable offenses."
        ),
        base_confidence=0.9,
        suggested_actions=("Visit police station", "Gather evidence", "Prepare incident details"),
        related_sections=("Section 154 CrPC (Information in cognizable cases)",),
    ),
    KnowledgeEntry(
        key="bail_procedure",
        keywords=("bail", "anticipatory bail", "regular bail", "surety", "custody"),
        response=(
            "Bail can be of three types: 1) Regular Bail - Apply to Sessions Court/High Court for "
            "non-bailable offenses, 2) Anticipatory Bail - Apply before arrest under Section 438 CrPC, "
            "3) Interim Bail - Temporary relief. Required documents include bail application, surety "
            "arrangement, and affidavit of surety."
        ),
        base_confidence=0.85,
        suggested_actions=("Consult lawyer", "Arrange surety", "Prepare documents"),
        related_sections=("Section 437 CrPC (Bail)", "Section 438 CrPC (Anticipatory Bail)"),
    ),
    KnowledgeEntry(
        key="consumer_court",
        keywords=("consumer court", "consumer dispute", "defective product", "service deficiency"),
        response=(
            "Consumer disputes are handled by three-tier system: 1) District Consumer Court "
            "(up to ₹20 lakhs), 2) State Consumer Court (₹20 lakhs to ₹1 crore), 3) National Consumer "
            "Court (above ₹1 crore). File complaint within 2 years of cause of action. Required "
            "documents include purchase receipt, warranty card, and evidence of deficiency."
        ),
        base_confidence=0.8,
        suggested_actions=("Gather purchase documents", "Document the deficiency", "File complaint online"),
        related_sections=("Consumer Protection Act 2019",),
    ),
    KnowledgeEntry(
        key="property_dispute",
        keywords=("property dispute", "land dispute", "title", "possession", "ownership"),
        response=(
            "Property disputes are primarily civil matters handled by civil courts. File a suit for "
            "declaration, possession, or partition in the court of appropriate jurisdiction. Required "
            "documents include sale deed, title documents, survey records, and possession certificate. "
            "Consider mediation before litigation."
        ),
        base_confidence=0.75,
        suggested_actions=("Verify title documents", "Consult civil lawyer", "Consider mediation"),
        related_sections=("Transfer of Property Act 1882", "Registration Act 1908"),
    ),
    KnowledgeEntry(
        key="cybercrime",
        keywords=("cybercrime", "online fraud", "digital fraud", "internet crime", "hacking"),
        response=(
            "For cybercrime complaints: 1) File complaint at nearest cyber police station or online at "
            "cybercrime.gov.in, 2) Preserve all digital evidence (screenshots, emails, transactions), "
            "3) Relevant sections include IT Act 66 (Computer related offenses), 66C (Identity theft), "
            "66D (Cheating by personation) and IPC 419 (Cheating by personation), 420 (Cheating)."
        ),
        base_confidence=0.9,
        suggested_actions=("File online complaint", "Preserve digital evidence", "Block fraudulent accounts"),
        related_sections=("IT Act Section 66", "IT Act Section 66C", "IPC Section 420"),
    ),
    KnowledgeEntry(
        key="cheating_fraud",
        keywords=("cheating", "fraud", "financial fraud", "scam", "money"),
        response=(
            "IPC Section 420 deals with cheating and dishonestly inducing delivery of property. "
            "Punishment includes imprisonment up to 7 years and fine. For financial fraud, also "
            "consider Section 409 (Criminal breach of trust by public servant) and various sections "
            "under the Prevention of Money Laundering Act."
        ),
        base_confidence=0.85,
        suggested_actions=("File FIR immediately", "Gather transaction evidence", "Report to bank"),
        related_sections=("Section 420 (Cheating)", "Section 406 (Criminal breach of trust)"),
    ),
    KnowledgeEntry(
        key="divorce",
        keywords=("divorce", "separation", "marriage dissolution", "matrimonial"),
        response=(
            "Divorce can be filed under various grounds: 1) Mutual consent divorce (Section 13B Hindu "
            "Marriage Act), 2) Contested divorce on grounds like cruelty, desertion, adultery. Required "
            "documents include marriage certificate, evidence of grounds, income proof. Consider "
            "counseling before legal proceedings."
        ),
        base_confidence=0.8,
        suggested_actions=("Attempt reconciliation", "Consult family lawyer", "Gather evidence"),
        related_sections=("Hindu Marriage Act 1955", "Special Marriage Act 1954"),
    ),
    KnowledgeEntry(
        key="child_custody",
        keywords=("child custody", "custody battle", "guardianship", "child welfare"),
        response=(
            "Child custody is determined by the best interest of the child principle. Types include "
            "physical custody, legal custody, joint custody. Courts consider factors like child's age, "
            "preference (if above 9 years), parent's financial status, and living conditions. File "
            "petition under Guardians and Wards Act."
        ),
        base_confidence=0.75,
        suggested_actions=("Document child care", "Maintain stability", "Consider mediation"),
        related_sections=("Guardians and Wards Act 1890", "Hindu Minority and Guardianship Act 1956"),
    ),
    KnowledgeEntry(
        key="labour_dispute",
        keywords=("labour dispute", "employment issue", "wrongful termination", "salary issue"),
        response=(
            "Labour disputes can be resolved through: 1) Internal grievance mechanism, 2) Labour "
            "Commissioner office, 3) Industrial Tribunal, 4) Labour Court. Common issues include "
            "wrongful termination, non-payment of wages, harassment. File complaint within prescribed "
            "time limits."
        ),
        base_confidence=0.7,
        suggested_actions=("Document workplace issues", "Approach labour commissioner", "Maintain records"),
        related_sections=("Industrial Disputes Act 1947", "Labour Laws"),
    ),
)


SUGGESTED_QUESTIONS: Tuple[str, ...] = (
    "How to file an FIR?",
    "What is Section 498A?",
    "Bail procedure in India",
    "Consumer court process",
    "Property dispute resolution",
    "Cybercrime reporting",
    "Divorce procedure",
    "Child custody laws",
    "Labour dispute resolution",
    "Legal aid services",
)


EMERGENCY_CONTACTS: Tuple[EmergencyContact, ...] = (
    EmergencyContact("Police Emergency", "100", "For immediate police assistance"),
    EmergencyContact("Women Helpline", "1091", "For women in distress"),
    EmergencyContact("Child Helpline", "1098", "For child-related emergencies"),
    EmergencyContact("Cyber Crime Helpline", "155260", "For cybercrime reporting"),
    EmergencyContact("Legal Aid", "15100", "For free legal aid services"),
)


def validate_knowledge_base(entries: Iterable[KnowledgeEntry]) -> Tuple[KnowledgeEntry, ...]:
    """Check a knowledge base before the service starts answering queries.

    Returns the entries as a tuple so callers can keep an immutable reference.
    Raises KnowledgeBaseError for an empty base, an entry without keywords,
    repeated keywords inside an entry, repeated entry keys, or a base confidence
    outside [0, 1].
    """
    entries = tuple(entries)
    if not entries:
        raise KnowledgeBaseError("Knowledge base must contain at least one entry")

    seen_keys = set()
    for entry in entries:
        if entry.key in seen_keys:
            raise KnowledgeBaseError(f"Duplicate knowledge entry key: {entry.key!r}")
        seen_keys.add(entry.key)

        if not entry.keywords:
            raise KnowledgeBaseError(f"Knowledge entry {entry.key!r} has no keywords")
        if len(set(entry.keywords)) != len(entry.keywords):
            raise KnowledgeBaseError(f"Knowledge entry {entry.key!r} repeats a keyword")
        if any(not kw or kw != kw.lower() for kw in entry.keywords):
            # queries are lowercased before matching
            raise KnowledgeBaseError(f"Knowledge entry {entry.key!r} has an empty or non-lowercase keyword")
        if not 0.0 <= entry.base_confidence <= 1.0:
            raise KnowledgeBaseError(
                f"Knowledge entry {entry.key!r} has base confidence {entry.base_confidence} outside [0, 1]"
            )
    return entries
