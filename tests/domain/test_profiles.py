import pytest

from numeral_codec.domain.profiles import LanguageNumeralProfile, MultiplierTier

DIGITS = {value: f"d{value}" for value in range(10)}
TIERS = (
    MultiplierTier(4, "grp", groups_recursively=True),
    MultiplierTier(3, "k"),
    MultiplierTier(2, "h"),
    MultiplierTier(1, "t"),
)


def test_profile_is_immutable(korean):
    with pytest.raises(AttributeError):
        korean.joiner = "-"
    with pytest.raises(TypeError):
        korean.digit_lexicon[1] = ("하나",)


def test_profile_exposes_zero_tokens(korean, swedish):
    assert korean.zero_token == "영"
    assert korean.zero_tokens == ("영", "공")
    assert swedish.zero_token == "noll"


def test_tier_words_and_tokens(swedish):
    miljon = swedish.tier_for_power(6)
    assert miljon.word_for(1) == "miljon"
    assert miljon.word_for(3) == "miljoner"
    assert miljon.tokens() == ("miljon", "miljoner")
    assert miljon.value == 1_000_000
    assert swedish.tier_for_power(5) is None


def test_valid_custom_profile():
    profile = LanguageNumeralProfile("test", DIGITS, TIERS)
    assert profile.lowest_tier.token == "t"
    assert profile.digit_token(3) == "d3"


def test_profiles_hash_by_identity():
    first = LanguageNumeralProfile("test", DIGITS, TIERS)
    second = LanguageNumeralProfile("test", DIGITS, TIERS)
    assert first != second
    assert len({first, second}) == 2


def test_missing_digit_is_rejected():
    digits = dict(DIGITS)
    del digits[7]
    with pytest.raises(ValueError, match="missing"):
        LanguageNumeralProfile("test", digits, TIERS)


def test_unordered_tiers_are_rejected():
    with pytest.raises(ValueError, match="descending"):
        LanguageNumeralProfile("test", DIGITS, tuple(reversed(TIERS)))


def test_duplicate_powers_are_rejected():
    tiers = TIERS + (MultiplierTier(1, "t2"),)
    with pytest.raises(ValueError, match="descending"):
        LanguageNumeralProfile("test", DIGITS, tiers)


def test_token_collisions_are_rejected():
    tiers = (MultiplierTier(4, "d1", groups_recursively=True),) + TIERS[1:]
    with pytest.raises(ValueError, match="duplicate"):
        LanguageNumeralProfile("test", DIGITS, tiers)


def test_case_insensitive_collisions_are_rejected():
    tiers = (MultiplierTier(4, "D1", groups_recursively=True),) + TIERS[1:]
    with pytest.raises(ValueError, match="duplicate"):
        LanguageNumeralProfile("test", DIGITS, tiers, case_insensitive=True)


def test_non_recursive_tier_needs_adjacent_parent():
    tiers = (MultiplierTier(4, "grp", groups_recursively=True), MultiplierTier(2, "h"), MultiplierTier(1, "t"))
    with pytest.raises(ValueError, match="power 3"):
        LanguageNumeralProfile("test", DIGITS, tiers)


def test_hundreds_based_profile_needs_small_number_words():
    tiers = (MultiplierTier(3, "k", groups_recursively=True), MultiplierTier(2, "h"))
    with pytest.raises(ValueError, match="teen"):
        LanguageNumeralProfile("test", DIGITS, tiers)


def test_negative_token_must_not_collide():
    with pytest.raises(ValueError, match="negative"):
        LanguageNumeralProfile("test", DIGITS, TIERS, negative_token="d1")
