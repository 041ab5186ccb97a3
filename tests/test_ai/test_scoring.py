from ai.scoring import KeywordPresenceScorer, TermFrequencyScorer, tokenize_query


def test_tokenize_drops_short_tokens() -> None:
    assert tokenize_query(query="the best diabetes care for you") == [
        "best",
        "diabetes",
        "care",
    ]


def test_tokenize_strips_punctuation_and_duplicates() -> None:
    assert tokenize_query(query="Diabetes? diabetes, (insulin)!") == [
        "Diabetes",
        "insulin",
    ]


def test_tokenize_punctuation_only_query_is_empty() -> None:
    assert tokenize_query(query="?!?! ... ---- a an") == []


def test_keyword_presence_counts_distinct_tokens_case_insensitively() -> None:
    scorer = KeywordPresenceScorer()

    score = scorer.score(
        tokens=["DIABETES", "insulin", "asthma"],
        content="Diabetes is managed with insulin. Diabetes diet matters.",
    )

    assert score == 2


def test_term_frequency_counts_occurrences() -> None:
    scorer = TermFrequencyScorer()

    score = scorer.score(
        tokens=["diabetes", "insulin"],
        content="Diabetes is managed with insulin. Diabetes diet matters.",
    )

    assert score == 3
