"""Tests for name normalization and image keys."""
import string

from barbershop.core import random_image_name, to_title_case


def test_title_case_is_idempotent():
    assert to_title_case("john") == "John"
    assert to_title_case("JOHN") == "John"
    assert to_title_case("John") == "John"
    assert to_title_case(to_title_case("jOhN")) == "John"


def test_title_case_each_word():
    assert to_title_case("mary ann") == "Mary Ann"
    assert to_title_case("VAN DER berg") == "Van Der Berg"


def test_title_case_keeps_empty_string():
    assert to_title_case("") == ""


def test_random_image_name_is_32_bytes_of_hex():
    name = random_image_name()
    assert len(name) == 64
    assert set(name) <= set(string.hexdigits.lower())


def test_random_image_names_differ():
    assert random_image_name() != random_image_name()
