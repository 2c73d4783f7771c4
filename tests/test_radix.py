"""Unit tests for radix decoding."""

import random
import string
import unittest
from unittest import mock

from polyrecon_pkg import config
from polyrecon_pkg.radix import decode, digit_value
from polyrecon_pkg.types import InvalidDigitError, ValidationError

ALPHABET = string.digits + string.ascii_uppercase


class TestDecodeValidDigits(unittest.TestCase):
    """Standard positional values for well-formed input."""

    def test_known_values(self):
        self.assertEqual(decode("111", 2), 7)
        self.assertEqual(decode("12", 10), 12)
        self.assertEqual(decode("213", 4), 39)
        self.assertEqual(decode("4", 10), 4)

    def test_letters_are_case_insensitive(self):
        self.assertEqual(decode("ff", 16), 255)
        self.assertEqual(decode("FF", 16), 255)
        self.assertEqual(decode("Zz", 36), 35 * 36 + 35)

    def test_leading_zeros(self):
        self.assertEqual(decode("000101", 2), 5)

    def test_large_values_do_not_overflow(self):
        digits = "f" * 40
        self.assertEqual(decode(digits, 16), int(digits, 16))

    def test_random_valid_strings_match_int(self):
        rng = random.Random(1234)
        for _ in range(200):
            base = rng.randint(2, 36)
            length = rng.randint(1, 20)
            digits = "".join(rng.choice(ALPHABET[:base]) for _ in range(length))
            self.assertEqual(decode(digits, base), int(digits, base), (digits, base))

    def test_digit_value(self):
        self.assertEqual(digit_value("0"), 0)
        self.assertEqual(digit_value("a"), 10)
        self.assertEqual(digit_value("Z"), 35)
        self.assertIsNone(digit_value("-"))


class TestLenientSkipping(unittest.TestCase):
    """Invalid characters are skipped without taking a positional slot."""

    def test_character_outside_alphabet(self):
        self.assertEqual(decode("1x1", 2), 3)
        self.assertEqual(decode("1-0", 2), 2)
        self.assertEqual(decode(" 12 ", 10), 12)

    def test_digit_not_below_base(self):
        self.assertEqual(decode("19", 8), 1)
        self.assertEqual(decode("A", 10), 0)
        self.assertEqual(decode("2", 2), 0)

    def test_empty_string_is_zero(self):
        self.assertEqual(decode("", 10), 0)

    def test_random_noise_does_not_shift_weights(self):
        rng = random.Random(99)
        noise_pool = "-_ !@#.,"
        for _ in range(200):
            base = rng.randint(2, 36)
            invalid = noise_pool + ALPHABET[base:]
            valid = "".join(rng.choice(ALPHABET[:base]) for _ in range(rng.randint(1, 12)))
            noisy = []
            for char in valid:
                if rng.random() < 0.5:
                    noisy.append(rng.choice(invalid))
                noisy.append(char)
            if rng.random() < 0.5:
                noisy.append(rng.choice(invalid))
            self.assertEqual(decode("".join(noisy), base), int(valid, base))


class TestStrictMode(unittest.TestCase):
    def test_strict_rejects_invalid_digit(self):
        with self.assertRaises(InvalidDigitError) as ctx:
            decode("19", 8, strict=True)
        self.assertEqual(ctx.exception.code, "INVALID_DIGIT")
        self.assertEqual(ctx.exception.char, "9")
        self.assertEqual(ctx.exception.position, 1)

    def test_strict_rejects_empty(self):
        with self.assertRaises(InvalidDigitError):
            decode("", 10, strict=True)

    def test_strict_accepts_valid(self):
        self.assertEqual(decode("213", 4, strict=True), 39)

    def test_strict_default_follows_config_at_call_time(self):
        with mock.patch.object(config, "STRICT_DIGITS", True):
            with self.assertRaises(InvalidDigitError):
                decode("19", 8)
        with mock.patch.object(config, "STRICT_DIGITS", False):
            self.assertEqual(decode("19", 8), 1)

    def test_invalid_digit_is_validation_error(self):
        with self.assertRaises(ValidationError):
            decode("1x", 2, strict=True)


class TestBaseValidation(unittest.TestCase):
    def test_base_out_of_range(self):
        for base in (0, 1, 37, -2):
            with self.assertRaises(ValidationError) as ctx:
                decode("1", base)
            self.assertEqual(ctx.exception.code, "INVALID_BASE")

    def test_base_must_be_int(self):
        with self.assertRaises(ValidationError):
            decode("1", True)
        with self.assertRaises(ValidationError):
            decode("1", 10.0)

    def test_digits_must_be_string(self):
        with self.assertRaises(ValidationError):
            decode(101, 2)


if __name__ == "__main__":
    unittest.main()
