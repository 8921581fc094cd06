"""Tests for SaltGenerator."""

import string

import pytest

from authcore.services import SaltGenerator


class TestSaltGenerator:
    """Tests for salt generation."""

    def test_default_length(self):
        assert len(SaltGenerator().generate()) == 16

    def test_only_letters_and_digits(self):
        allowed = set(string.ascii_letters + string.digits)
        for _ in range(50):
            assert set(SaltGenerator().generate()) <= allowed

    def test_salts_are_unique(self):
        generator = SaltGenerator()
        salts = {generator.generate() for _ in range(1000)}
        assert len(salts) == 1000

    def test_custom_length(self):
        assert len(SaltGenerator(length=32).generate()) == 32

    def test_rejects_length_below_argon2_minimum(self):
        with pytest.raises(ValueError, match="at least 8"):
            SaltGenerator(length=7)
