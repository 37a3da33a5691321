import pytest
import xxhash

from hashpage.hashing import SUPPORTED_WIDTHS, hash_hex, parse_width


def test_xxh32_empty_reference_vector():
    assert hash_hex(b"", 32) == "02cc5d05"


def test_xxh64_empty_reference_vector():
    assert hash_hex(b"", 64) == "ef46db3751d8e999"


def test_128_digest_is_low_half_then_high_half():
    data = b"Hello, World!"
    canonical = xxhash.xxh3_128(data, seed=0).hexdigest()
    digest = hash_hex(data, 128)
    assert len(digest) == 32
    assert digest == canonical[16:] + canonical[:16]


def test_digests_are_zero_padded():
    # Small values still render at full width.
    for width, length in [(32, 8), (64, 16), (128, 32)]:
        for i in range(200):
            assert len(hash_hex(str(i).encode(), width)) == length


def test_unsupported_width_has_no_digest():
    assert hash_hex(b"abc", 16) is None


@pytest.mark.parametrize("raw,expected", [("32", 32), ("64", 64), ("128", 128), ("0128", 128)])
def test_parse_width_accepts_supported(raw, expected):
    assert parse_width(raw) == expected


@pytest.mark.parametrize("raw", ["", "0", "-64", "+64", "64.0", "sixty-four", "٦٤", "1024"])
def test_parse_width_rejects_everything_else(raw):
    assert parse_width(raw) is None


def test_supported_widths():
    assert SUPPORTED_WIDTHS == (32, 64, 128)
