from numeral_codec.domain.normalization import (
    MAX_DIGIT_RUN,
    TextNormalizer,
    clean_transcript,
    compile_token_pattern,
    longest_digit_run,
    normalize_numbers,
    rewrite_digit_runs,
    scan_tokens,
)
from numeral_codec.domain.serializer import serialize


def test_clean_transcript_collapses_whitespace():
    assert clean_transcript("  오 \t십\n사  ") == "오 십 사"
    assert clean_transcript("  FEMTIO  fyra ", casefold=True) == "femtio fyra"
    assert clean_transcript("   ") == ""


def test_rewrite_digit_runs_uses_given_speller(korean):
    assert rewrite_digit_runs("5십4", lambda value: serialize(korean, value)) == "오십사"
    assert rewrite_digit_runs("no digits", str) == "no digits"


def test_scan_tokens_prefers_longest_and_skips_noise():
    pattern = compile_token_pattern(["fem", "femtio", "fyra"])
    assert list(scan_tokens("femtiofyra", pattern)) == ["femtio", "fyra"]
    assert list(scan_tokens("xx fem!", pattern)) == ["fem"]
    assert list(scan_tokens("", pattern)) == []


def test_normalize_numbers_spells_out_integers(korean, swedish):
    def korean_words(value):
        return serialize(korean, value)

    def swedish_words(value):
        return serialize(swedish, value)

    assert normalize_numbers("가격은 5000원", korean_words) == "가격은 오천원"
    assert normalize_numbers("1,234 kronor", swedish_words) == "tusentvåhundratrettiofyra kronor"
    assert normalize_numbers("pi is 3.14", swedish_words) == "pi is 3.14"
    assert normalize_numbers("No digits", swedish_words) == "No digits"


def test_normalize_numbers_rewrites_every_integer(swedish):
    def swedish_words(value):
        return serialize(swedish, value)

    text = "Read chapter 2, say /54/ then 3"
    assert normalize_numbers(text, swedish_words) == "Read chapter två, say /femtiofyra/ then tre"


def test_normalize_numbers_leaves_overlong_digit_runs(korean):
    def korean_words(value):
        return serialize(korean, value)

    long_run = "7" * (MAX_DIGIT_RUN + 1)
    assert normalize_numbers(f"code {long_run} and 5", korean_words) == f"code {long_run} and 오"


def test_longest_digit_run():
    assert longest_digit_run("12ab3456 7") == 4
    assert longest_digit_run("오십사") == 0


def test_text_normalizer_applies_char_limit(korean):
    normalizer = TextNormalizer(lambda value: serialize(korean, value), char_limit=3)
    assert normalizer.preprocess(" 12345 ") == "백이십삼"
    assert normalizer.preprocess("12345", apply_char_limit=False) == "만이천삼백사십오"
    assert normalizer.preprocess("54", normalize_numbers_enabled=False) == "54"
