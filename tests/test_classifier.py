import pytest

from legalbrain.classifier import (
    DEFAULT_RESPONSE,
    FALLBACK_ACTIONS,
    FALLBACK_TOPICS,
    LANGUAGE_HINTS,
    ResponseClassifier,
    length_bonus,
    score_entry,
)
from legalbrain.knowledge import KNOWLEDGE_BASE, KnowledgeEntry


ENTRIES = {entry.key: entry for entry in KNOWLEDGE_BASE}
COURT_RESPONSE, POLICE_RESPONSE, LAWYER_RESPONSE, DOCUMENT_RESPONSE = [resp for _, resp in FALLBACK_TOPICS]

DOWRY_QUERY = "498a dowry cruelty by husband"


@pytest.fixture
def classifier():
    return ResponseClassifier(KNOWLEDGE_BASE)


def test_empty_query_returns_default_response(classifier):
    result = classifier.classify("")
    assert result.response == DEFAULT_RESPONSE
    assert result.confidence == 0.5
    assert result.suggested_actions == FALLBACK_ACTIONS
    assert result.related_sections == ()


def test_whitespace_query_is_treated_as_empty(classifier):
    assert classifier.classify("   \n\t ") == classifier.classify("")


@pytest.mark.parametrize(
    "query",
    [
        "",
        "a",
        "lawyer",
        DOWRY_QUERY,
        "bail anticipatory bail regular bail surety custody",
        "x" * 500,
        "COURT HEARING",
        "नमस्ते",
    ],
)
def test_confidence_is_always_between_zero_and_one(classifier, query):
    result = classifier.classify(query)
    assert 0.0 <= result.confidence <= 1.0


def test_strong_match_returns_entry_metadata(classifier):
    entry = ENTRIES["section_498a"]
    result = classifier.classify(DOWRY_QUERY)

    assert result.response == entry.response
    assert result.confidence == pytest.approx(4 / 7 + 0.2)
    assert result.suggested_actions == entry.suggested_actions
    assert result.related_sections == entry.related_sections


def test_query_is_lowercased_before_matching(classifier):
    assert classifier.classify(DOWRY_QUERY.upper()) == classifier.classify(DOWRY_QUERY)


def test_confidence_is_capped_at_one(classifier):
    result = classifier.classify("bail anticipatory bail regular bail surety custody")
    assert result.response == ENTRIES["bail_procedure"].response
    assert result.confidence == 1.0


def test_498a_keyword_lifts_its_entry_above_entries_without_hits():
    query = "what is 498a"
    entry = ENTRIES["section_498a"]
    score = score_entry(query, entry)

    assert score >= 1 / len(entry.keywords)
    for other in KNOWLEDGE_BASE:
        if other is not entry:
            assert score > score_entry(query, other)


def test_keywords_match_as_plain_substrings():
    # "title" inside "subtitle" still counts
    assert score_entry("subtitle", ENTRIES["property_dispute"]) == pytest.approx(1 / 5 + 8 / 50)


def test_length_bonus_is_capped():
    assert length_bonus("") == 0.0
    assert length_bonus("abcde") == pytest.approx(0.1)
    assert length_bonus("x" * 50) == 0.2
    assert length_bonus("x" * 400) == 0.2


def test_long_query_bonus_does_not_change_ranking():
    first = KnowledgeEntry("first", ("alpha", "beta"), "first response", 0.9)
    second = KnowledgeEntry("second", ("alpha", "gamma"), "second response", 0.9)
    short_query = "alpha"
    long_query = "alpha " + "padding " * 10

    assert score_entry(short_query, first) == score_entry(short_query, second)
    assert score_entry(long_query, first) == score_entry(long_query, second)
    assert score_entry(long_query, first) == pytest.approx(0.5 + 0.2)


def test_ties_keep_the_first_entry():
    first = KnowledgeEntry("first", ("alpha",), "first response", 0.5)
    second = KnowledgeEntry("second", ("alpha",), "second response", 0.9)

    assert ResponseClassifier([first, second]).classify("alpha").response == "first response"
    assert ResponseClassifier([second, first]).classify("alpha").response == "second response"


def test_lawyer_query_without_keywords_gets_lawyer_fallback(classifier):
    result = classifier.classify("Where can I find a good lawyer?")
    assert result.response == LAWYER_RESPONSE
    assert result.confidence == 0.5
    assert result.suggested_actions == FALLBACK_ACTIONS


@pytest.mark.parametrize(
    "query, expected",
    [
        ("my hearing is next week", COURT_RESPONSE),
        ("they threatened to arrest me", POLICE_RESPONSE),
        ("need an advocate", LAWYER_RESPONSE),
        ("which evidence should I keep", DOCUMENT_RESPONSE),
        ("court hearing with my lawyer", COURT_RESPONSE),
        ("police and my advocate", POLICE_RESPONSE),
        ("hello there", DEFAULT_RESPONSE),
    ],
)
def test_fallback_topics_are_checked_in_priority_order(classifier, query, expected):
    assert classifier.classify(query).response == expected


def test_empty_knowledge_base_always_falls_back():
    result = ResponseClassifier([]).classify(DOWRY_QUERY)
    assert result.response == DEFAULT_RESPONSE
    assert result.confidence == 0.5


@pytest.mark.parametrize("language", ["hindi", "marathi"])
def test_language_hint_is_appended_for_confident_answers(classifier, language):
    result = classifier.classify(DOWRY_QUERY, language)
    assert result.response == ENTRIES["section_498a"].response + "\n\n" + LANGUAGE_HINTS[language]
    assert result.confidence == classifier.classify(DOWRY_QUERY).confidence


def test_language_hint_is_skipped_for_fallback_answers(classifier):
    assert classifier.classify("", "hindi").response == DEFAULT_RESPONSE


def test_unsupported_language_passes_through(classifier):
    assert classifier.classify(DOWRY_QUERY, "tamil") == classifier.classify(DOWRY_QUERY)


def test_classify_is_deterministic(classifier):
    assert classifier.classify(DOWRY_QUERY, "hindi") == classifier.classify(DOWRY_QUERY, "hindi")
    assert classifier.classify("lawyer") == classifier.classify("lawyer")


def test_threshold_boundary():
    entry = KnowledgeEntry("entry", ("alpha", "b1", "c1", "d1", "e1"), "entry response", 0.5)
    classifier = ResponseClassifier([entry])

    # 1/5 + 10/50 lands exactly on the threshold and keeps the entry
    at_threshold = classifier.classify("alpha zzzz")
    assert at_threshold.response == "entry response"
    assert at_threshold.confidence == pytest.approx(0.4)

    # 1/5 + 9/50 is just below it
    below = classifier.classify("alpha zzz")
    assert below.response == DEFAULT_RESPONSE
    assert below.confidence == 0.5

    # 0.4 is not above 0.5, so no hint
    assert classifier.classify("alpha zzzz", "hindi").response == "entry response"


@pytest.mark.parametrize("language", ["Hindi", "MARATHI", " hindi"])
def test_language_tags_must_match_exactly(classifier, language):
    assert classifier.classify(DOWRY_QUERY, language) == classifier.classify(DOWRY_QUERY)
