import pytest

from numeral_codec.domain.serializer import serialize, serialize_pieces


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "영"),
        (1, "일"),
        (5, "오"),
        (9, "구"),
        (10, "십"),
        (11, "십일"),
        (19, "십구"),
        (20, "이십"),
        (54, "오십사"),
        (99, "구십구"),
        (100, "백"),
        (123, "백이십삼"),
        (456, "사백오십육"),
        (1000, "천"),
        (1234, "천이백삼십사"),
        (9999, "구천구백구십구"),
        (10000, "만"),
        (20000, "이만"),
        (12345, "만이천삼백사십오"),
        (54321, "오만사천삼백이십일"),
        (100000, "십만"),
        (200000, "이십만"),
        (1000000, "백만"),
        (10000000, "천만"),
        (100000000, "억"),
        (230000000, "이억삼천만"),
        (10**12, "조"),
        (3 * 10**12 + 5, "삼조오"),
    ],
)
def test_korean_serialization(korean, value, expected):
    assert serialize(korean, value) == expected


def test_korean_elides_one_but_not_other_digits(korean):
    assert serialize(korean, 100) == "백"
    assert "일" not in serialize(korean, 100)
    assert serialize(korean, 200) == "이백"


def test_korean_skips_empty_tiers(korean):
    assert serialize(korean, 5006) == "오천육"
    assert serialize(korean, 100001) == "십만일"


def test_korean_negative_numbers(korean):
    assert serialize(korean, -54) == "마이너스 오십사"


def test_korean_beyond_top_tier_recurses_into_multiplicand(korean):
    assert serialize(korean, 10**16) == "만조"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "noll"),
        (1, "ett"),
        (2, "två"),
        (7, "sju"),
        (10, "tio"),
        (11, "elva"),
        (18, "arton"),
        (20, "tjugo"),
        (21, "tjugoett"),
        (54, "femtiofyra"),
        (99, "nittionio"),
        (100, "hundra"),
        (123, "hundratjugotre"),
        (999, "niohundranittionio"),
        (1000, "tusen"),
        (1234, "tusentvåhundratrettiofyra"),
        (10000, "tiotusen"),
        (12345, "tolvtusentrehundrafyrtiofem"),
        (54321, "femtiofyratusentrehundratjugoett"),
        (100000, "hundratusen"),
        (500000, "femhundratusen"),
        (1000000, "en miljon"),
        (2000000, "två miljoner"),
        (1500000, "en miljon femhundratusen"),
        (1_000_000_000, "en miljard"),
        (2_000_000_000, "två miljarder"),
        (1_500_000_000, "en miljard femhundra miljoner"),
        (1_000_000_000_000, "en biljon"),
        (2_000_000_000_000, "två biljoner"),
    ],
)
def test_swedish_serialization(swedish, value, expected):
    assert serialize(swedish, value) == expected


def test_swedish_negative_numbers(swedish):
    assert serialize(swedish, -5) == "minus fem"
    assert serialize(swedish, -42) == "minus fyrtiotvå"


def test_serialize_pieces_pairs_text_with_tiers(korean):
    pieces = serialize_pieces(korean, 12345)
    assert [text for text, _ in pieces] == ["만", "이천", "삼백", "사십", "오"]
    assert [tier.power if tier else None for _, tier in pieces] == [4, 3, 2, 1, None]


def test_serialize_rejects_non_integers(korean):
    with pytest.raises(TypeError):
        serialize(korean, 5.0)
    with pytest.raises(TypeError):
        serialize(korean, True)
