import pytest

from LightIni.LineClassifier import classify, validate_comment_prefix
from LightIni.utils.exceptions import IniConfigurationError
from LightIni.utils.line_models import Blank, Comment, Invalid, Option, Section


@pytest.mark.parametrize("line", ["[one]", "[ one ]", "  [one]", "[one] trailing text"])
def test_section_names_are_trimmed(line):
    assert classify(line) == Section("one")


def test_section_name_keeps_interior_whitespace():
    assert classify("[ my section ]") == Section("my section")


@pytest.mark.parametrize("line", ["[one", "[]", "[   ]"])
def test_malformed_sections_are_invalid(line):
    assert isinstance(classify(line), Invalid)


def test_options():
    assert classify("name = test suite") == Option("name", "test suite")
    assert classify("name=one two three  ") == Option("name", "one two three")
    assert classify("  name =   a  b  ") == Option("name", "a  b")


def test_option_value_may_be_empty_or_contain_separator():
    assert classify("empty =") == Option("empty", "")
    assert classify("url = a=b") == Option("url", "a=b")


@pytest.mark.parametrize("line", ["name", "= value", "just some words"])
def test_lines_without_key_are_invalid(line):
    assert isinstance(classify(line), Invalid)


@pytest.mark.parametrize("line", ["; comment", "  ; comment", ";comment"])
def test_comments_with_default_prefix(line):
    assert classify(line) == Comment("comment")


def test_comment_with_custom_prefix():
    assert classify("# logging section", "#") == Comment("logging section")
    # the default prefix is just an invalid line once another prefix is configured
    assert isinstance(classify("; logging section", "#"), Invalid)


def test_comment_wins_over_option():
    assert classify("; key = value") == Comment("key = value")


@pytest.mark.parametrize("line", ["", "  \t  "])
def test_blank_lines(line):
    assert classify(line) == Blank()


def test_non_ascii_text():
    assert classify("[ŝipo]") == Section("ŝipo")
    assert classify("ĵurnalo = ĉirkaŭ") == Option("ĵurnalo", "ĉirkaŭ")
    assert classify("; ĉu ne?") == Comment("ĉu ne?")


def test_multibyte_first_character_falls_through_to_option():
    assert classify("ĉ = 1", "#") == Option("ĉ", "1")
    assert isinstance(classify("ĉapelo"), Invalid)


def test_multibyte_comment_prefix():
    assert classify("§ note", "§") == Comment("note")


@pytest.mark.parametrize("prefix", ["", "##", "[", "=", " ", "\t", None])
def test_rejected_comment_prefixes(prefix):
    with pytest.raises(IniConfigurationError):
        validate_comment_prefix(prefix)


@pytest.mark.parametrize("prefix", [";", "#", "]"])
def test_accepted_comment_prefixes(prefix):
    assert validate_comment_prefix(prefix) == prefix
