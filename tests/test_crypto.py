"""
Unit tests for HMAC signing and timing-safe comparison.
"""

import hashlib
import hmac
import statistics
import time

import pytest

from warranted import create_hmac, time_safe_compare


class TestCreateHMAC:
    """Test request signing."""

    def test_sha256_default(self):
        """Test default signing is HMAC-SHA256 over url + body."""
        url = "https://example.com/webhook"
        body = '{"id":"decision-1"}'
        signature = create_hmac(url, body, "secret")

        expected = hmac.new(
            b"secret",
            (url + body).encode('utf-8'),
            hashlib.sha256
        ).hexdigest()
        assert signature == expected
        assert len(signature) == 64
        assert signature == signature.lower()

    def test_sha512(self):
        """Test signing with sha512."""
        signature = create_hmac("https://example.com", "{}", "secret", "sha512")

        expected = hmac.new(b"secret", b"https://example.com{}", hashlib.sha512).hexdigest()
        assert signature == expected
        assert len(signature) == 128

    def test_no_separator(self):
        """Test that url and body are concatenated directly."""
        assert create_hmac("ab", "c", "k") == create_hmac("a", "bc", "k")

    def test_known_vector(self):
        """Test against the RFC 4231 test case 2 vector."""
        signature = create_hmac("what do ya want ", "for nothing?", "Jefe")
        assert signature == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_utf8_encoding(self):
        """Test that str and bytes inputs sign identically."""
        url = "https://example.com/é"
        body = '{"name":"Zoë"}'
        assert create_hmac(url, body, "kéy") == create_hmac(
            url.encode('utf-8'), body.encode('utf-8'), "kéy".encode('utf-8')
        )

    def test_deterministic(self):
        assert create_hmac("u", "b", "k") == create_hmac("u", "b", "k")

    def test_different_keys(self):
        """Test that different keys produce different signatures."""
        assert create_hmac("u", "b", "key-1") != create_hmac("u", "b", "key-2")

    def test_unsupported_algorithm(self):
        with pytest.raises(ValueError):
            create_hmac("u", "b", "k", "not-a-hash")

    def test_lone_surrogates(self):
        """Test that lone surrogates sign as U+FFFD and valid pairs as one character."""
        assert create_hmac("https://example.com/\ud800", "{}", "k") == \
            create_hmac("https://example.com/\ufffd", "{}", "k")
        assert create_hmac("u", "\ud83d\ude00", "k") == create_hmac("u", "\U0001f600", "k")
        assert create_hmac("u\ud83d", "\ude00", "k") == create_hmac("u", "\U0001f600", "k")


class TestTimeSafeCompare:
    """Test constant-time comparison."""

    def test_equal(self):
        signature = create_hmac("u", "b", "k")
        assert time_safe_compare(signature, create_hmac("u", "b", "k")) is True

    def test_different_keys(self):
        assert time_safe_compare(
            create_hmac("u", "b", "key-1"), create_hmac("u", "b", "key-2")
        ) is False

    def test_empty_strings(self):
        assert time_safe_compare("", "") is True

    def test_different_length(self):
        """Test that length mismatch is a plain inequality."""
        assert time_safe_compare("abc", "abcd") is False
        assert time_safe_compare("abcd", "abc") is False

    def test_non_ascii(self):
        assert time_safe_compare("zoë", "zoë") is True
        assert time_safe_compare("zoë", "zoe") is False

    @pytest.mark.parametrize("a, b", [
        (None, "abc"),
        ("abc", None),
        (None, None),
        (123, "123"),
        ({"a": 1}, "abc"),
        ("\ud800", "abc"),
        ("\udcff" * 64, "0" * 64),
    ])
    def test_non_comparable(self, a, b):
        """Test that non-string or unencodable inputs compare unequal without raising."""
        assert time_safe_compare(a, b) is False

    def test_binary_types(self):
        """Test that bytearray and memoryview compare by content."""
        assert time_safe_compare(bytearray(b"abc"), "abc") is True
        assert time_safe_compare(memoryview(b"abc"), b"abc") is True
        assert time_safe_compare(bytearray(b"abc"), "abd") is False

    def test_lone_surrogates(self):
        """Test that lone surrogates are compared as U+FFFD instead of raising."""
        assert time_safe_compare("\ud800", "\ufffd") is True
        assert time_safe_compare("\udcff" * 2, "\ufffd\ufffd") is True

    @pytest.mark.slow
    def test_timing_independent_of_mismatch_position(self):
        """Test that an early mismatch is not measurably faster than a late one."""
        size = 4096
        expected = "a" * size
        early = "b" + "a" * (size - 1)
        late = "a" * (size - 1) + "b"

        def measure(candidate):
            samples = []
            for _ in range(50):
                start = time.perf_counter()
                for _ in range(500):
                    time_safe_compare(candidate, expected)
                samples.append(time.perf_counter() - start)
            return statistics.median(samples)

        # Warm up
        measure(early)
        measure(late)

        early_time = measure(early)
        late_time = measure(late)

        ratio = late_time / early_time
        assert 0.5 < ratio < 2.0
