"""
IPC section suggestions for FIR drafting.

A fixed, ordered list of rules is checked against the incident description and
the selected crime type. Rules are independent: one description can trigger
several of them.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class IPCSuggestion:
    section: str
    title: str
    description: str
    confidence: float


@dataclass(frozen=True)
class IPCRule:
    suggestion: IPCSuggestion
    crime_type_markers: Tuple[str, ...]
    description_markers: Tuple[str, ...]

    def matches(self, description: str, crime_type: str) -> bool:
        """Both arguments are expected to be lowercased already."""
        return any(marker in crime_type for marker in self.crime_type_markers) or any(
            marker in description for marker in self.description_markers
        )


IPC_RULES: Tuple[IPCRule, ...] = (
    IPCRule(
        suggestion=IPCSuggestion(
            section="379",
            title="Theft",
            description="Whoever intends to take dishonestly any movable property out of the possession of any person",
            confidence=0.9,
        ),
        crime_type_markers=("theft",),
        description_markers=("steal", "theft"),
    ),
    IPCRule(
        suggestion=IPCSuggestion(
            section="420",
            title="Cheating and dishonestly inducing delivery of property",
            description="Whoever cheats and thereby dishonestly induces the person deceived to deliver any property",
            confidence=0.85,
        ),
        crime_type_markers=("fraud",),
        description_markers=("cheat", "fraud"),
    ),
    IPCRule(
        suggestion=IPCSuggestion(
            section="351",
            title="Assault",
            description=(
                "Whoever makes any gesture or preparation intending or knowing it to be likely to cause apprehension"
            ),
            confidence=0.8,
        ),
        crime_type_markers=("assault",),
        description_markers=("assault", "attack"),
    ),
    IPCRule(
        suggestion=IPCSuggestion(
            section="IT Act 66",
            title="Computer related offenses",
            description="If any person, dishonestly or fraudulently, does any act referred to in section 43",
            confidence=0.9,
        ),
        crime_type_markers=("cybercrime",),
        description_markers=("online", "internet"),
    ),
)


def suggest_sections(description: str, crime_type: str, rules: Sequence[IPCRule] = IPC_RULES) -> List[IPCSuggestion]:
    """Return the suggestions of every matching rule, highest confidence first.

    The sort is stable, so rules with equal confidence keep their rule order.
    """
    description = (description or "").lower()
    crime_type = (crime_type or "").lower()
    suggestions = [rule.suggestion for rule in rules if rule.matches(description, crime_type)]
    return sorted(suggestions, key=lambda s: s.confidence, reverse=True)


def top_sections(suggestions: Sequence[IPCSuggestion], limit: int = 3) -> List[str]:
    """Section codes of the first `limit` suggestions, as recorded on a generated FIR."""
    return [s.section for s in suggestions[:limit]]
