"""Unit tests for bigram similarity."""

from adsradar.services.search.similarity import bigrams, normalize_text, similarity


def test_normalize_text_strips_accents_and_case() -> None:
    assert normalize_text("São Paulo") == "sao paulo"
    assert normalize_text("FARMÁCIA") == "farmacia"


def test_bigrams_are_ordered_and_overlapping() -> None:
    assert bigrams("Natal") == ["na", "at", "ta", "al"]
    assert bigrams("a") == []
    assert bigrams("") == []


def test_identical_strings_score_one() -> None:
    for value in ["Natal", "São Paulo", "banana", "aaaa"]:
        assert similarity(value, value) == 1.0


def test_empty_input_scores_zero() -> None:
    assert similarity("Recife", "") == 0.0
    assert similarity("", "") == 0.0
    assert similarity("a", "b") == 0.0


def test_similarity_ignores_accents_and_case() -> None:
    assert similarity("sao paulo", "São Paulo") == 1.0
    assert similarity("FARMACIA", "farmácia") == 1.0


def test_similarity_is_symmetric() -> None:
    pairs = [("Recif", "Recife"), ("pet shop", "petshop"), ("Belém", "Belo Horizonte")]
    for left, right in pairs:
        assert similarity(left, right) == similarity(right, left)


def test_similarity_dice_coefficient_value() -> None:
    # recif: re ec ci if / recife: re ec ci if fe -> 2*4 / 9
    assert similarity("Recif", "Recife") == 8 / 9


def test_repeated_bigrams_count_with_multiplicity() -> None:
    # "aaa" -> [aa, aa]; "aa" -> [aa]: one shared pair
    assert similarity("aaa", "aa") == 2 / 3
    assert 0.0 <= similarity("banana", "bananas") <= 1.0
