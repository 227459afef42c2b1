from urls_core.models import FileFormat, Position, RecoveryAction, Severity
from urls_core.scanner import extract_urls
from urls_core.scanner.formats import IniScanner, TomlScanner
from urls_core.scanner.formats.structured import Fallback, ParsedTree

CARGO_STYLE = """\
[package]
name = "demo"
homepage = "https://example.com"
repository = "https://github.com/org/demo"

[package.metadata]
links = ["https://docs.example.com", "not a url"]
description = "See https://blog.example.com for details"
"""

INI_TEXT = """\
; top comment https://ignored.example.com
homepage = https://top.example.com

[server]
url = https://api.example.com ; inline note
mirror = ftp://files.example.com/pub

[DEFAULT]
docs = https://docs.example.com
"""


def test_toml_values_carry_key_paths():
    result = extract_urls(CARGO_STYLE, "toml")
    assert result.success
    assert result.errors == ()
    assert [(url.value, url.context) for url in result.urls] == [
        ("https://example.com", "root.package.homepage"),
        ("https://github.com/org/demo", "root.package.repository"),
        ("https://docs.example.com", "root.package.metadata.links[0]"),
        ("https://blog.example.com", "root.package.metadata.description"),
    ]


def test_toml_positions_follow_source():
    urls = TomlScanner().scan(CARGO_STYLE).urls
    assert urls[0].position == Position(line=3, column=13)
    assert urls[1].position == Position(line=4, column=15)
    assert urls[2].position == Position(line=7, column=11)


def test_toml_parse_outcome():
    assert isinstance(TomlScanner().parse('a = "b"'), ParsedTree)
    outcome = TomlScanner().parse("this is = = not toml")
    assert isinstance(outcome, Fallback)
    assert outcome.reason


def test_toml_falls_back_to_lines():
    text = "this is = = not toml\nurl = https://fallback.example.com"
    result = extract_urls(text, "toml")
    assert not result.success
    assert result.values == ("https://fallback.example.com",)
    assert result.urls[0].position == Position(line=2, column=7)
    (error,) = result.errors
    assert error.recovery_action is RecoveryAction.FALLBACK
    assert error.severity is Severity.WARNING
    assert error.message.startswith("TOML parsing failed, falling back to line scanning")


def test_ini_sections_and_top_level_keys():
    result = extract_urls(INI_TEXT, "ini")
    assert result.file_type is FileFormat.INI
    assert [(url.value, url.context) for url in result.urls] == [
        ("https://top.example.com", "root.homepage"),
        ("https://api.example.com", "root.server.url"),
        ("ftp://files.example.com/pub", "root.server.mirror"),
        ("https://docs.example.com", "root.DEFAULT.docs"),
    ]
    assert result.urls[1].position == Position(line=5, column=7)


def test_ini_keys_keep_their_case():
    (url,) = IniScanner().scan("[Links]\nHomePage = https://example.com").urls
    assert url.context == "root.Links.HomePage"


def test_ini_duplicate_section_falls_back():
    text = "[a]\nurl = https://one.example.com\n[a]\nother = https://two.example.com"
    result = extract_urls(text, "ini")
    assert not result.success
    assert result.values == ("https://one.example.com", "https://two.example.com")
    (error,) = result.errors
    assert error.recovery_action is RecoveryAction.FALLBACK
    assert error.message.startswith("INI parsing failed")


def test_ini_fallback_skips_comment_lines():
    text = "[a]\n; https://commented.example.com\n[a]\nurl = https://kept.example.com"
    assert extract_urls(text, "ini").values == ("https://kept.example.com",)


def test_toml_position_skips_commented_occurrence():
    text = '# old https://a.example.com\nurl = "https://a.example.com"'
    (url,) = extract_urls(text, "toml").urls
    assert url.position == Position(line=2, column=8)


def test_ini_position_skips_commented_occurrence():
    text = "; https://a.example.com\nurl = https://a.example.com"
    (url,) = extract_urls(text, "ini").urls
    assert url.context == "root.url"
    assert url.position == Position(line=2, column=7)
