from __future__ import annotations

import re

import pytest

from libscaffold.naming import camel_case, is_valid_email, normalize_scope, pascal_case, slugify


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My Cool Lib", "my-cool-lib"),
        ("   My    Project  ", "my-project"),
        ("Project! @ 2025", "project-2025"),
        ("snake_case_name", "snake-case-name"),
        ("ng2.Lib", "ng2-lib"),
        ("Café ☕", "cafe"),
        (("alpha", "beta"), "alpha-beta"),
        ("---", ""),
    ],
)
def test_slugify_basic(value, expected):
    assert slugify(value) == expected


@pytest.mark.parametrize("value", ["Hello World", "A_B-c.D", "  x!!y  ", "ÉLAN vital", "MiXeD CaSe 42"])
def test_slugify_only_emits_kebab_characters(value):
    assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slugify(value))


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-cool-lib", "myCoolLib"),
        ("lib", "lib"),
        ("", ""),
    ],
)
def test_camel_case(value, expected):
    assert camel_case(value) == expected


def test_pascal_case():
    assert pascal_case("my-cool-lib") == "MyCoolLib"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("@acme", "@acme/"),
        ("@acme/", "@acme/"),
    ],
)
def test_normalize_scope(value, expected):
    assert normalize_scope(value) == expected


@pytest.mark.parametrize("value", ["jane@example.com", "JANE.DOE+x@Mail.Example.ORG", "a@b.io"])
def test_valid_emails(value):
    assert is_valid_email(value)


@pytest.mark.parametrize("value", ["", "jane", "jane@example", "jane@example.com\n", "jane@example.c", "jane@example.museum", "@example.com"])
def test_invalid_emails(value):
    assert not is_valid_email(value)
