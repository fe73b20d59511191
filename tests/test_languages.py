"""Tests for the language tables."""

from __future__ import annotations

import pytest

from codenudge.languages import (
    CODE_SNIPPETS,
    LANGUAGE_VERSIONS,
    UnsupportedLanguageError,
    get_snippet,
    get_version,
    supported_languages,
)


def test_every_language_has_a_snippet():
    assert set(LANGUAGE_VERSIONS) == set(CODE_SNIPPETS)


def test_get_version():
    assert get_version("javascript") == "18.15.0"
    assert get_version("go") == "1.22.0"


def test_get_snippet():
    assert "def greet(name):" in get_snippet("python")
    assert get_snippet("php").startswith("<?php")


def test_unknown_language():
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        get_snippet("cobol")
    assert isinstance(exc_info.value, KeyError)
    assert "cobol" in str(exc_info.value)


def test_supported_languages_order():
    assert supported_languages()[0] == "javascript"
    assert len(supported_languages()) == 8
