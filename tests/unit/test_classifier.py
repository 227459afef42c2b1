import pytest

from urls_core.classifier import classify, extract_components, host_of, is_valid_url, to_url
from urls_core.models import Scheme, Url


def test_classify_secure_web_with_host():
    assert classify("https://a.com") is Scheme.HTTPS
    components = extract_components("https://a.com")
    assert components is not None
    assert components.host == "a.com"
    assert components.path == "/"


def test_classify_rejects_script_scheme():
    assert classify("javascript:x") is Scheme.UNKNOWN


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("http://example.com", Scheme.HTTP),
        ("HTTPS://EXAMPLE.COM", Scheme.HTTPS),
        ("ftp://files.example.com/pub", Scheme.FTP),
        ("file:///etc/hosts", Scheme.FILE),
        ("mailto:team@example.com", Scheme.MAILTO),
        ("tel:+15551234567", Scheme.TEL),
        ("data:text/plain,hi", Scheme.UNKNOWN),
        ("/docs/page", Scheme.UNKNOWN),
        ("example.com", Scheme.UNKNOWN),
    ],
)
def test_classify_by_prefix(candidate: str, expected: Scheme) -> None:
    assert classify(candidate) is expected


def test_components_include_query_and_fragment():
    components = extract_components("https://Example.com/path?q=1#top")
    assert components is not None
    assert components.scheme is Scheme.HTTPS
    assert components.host == "example.com"
    assert components.path == "/path?q=1#top"


def test_components_skip_host_for_mail_and_phone():
    components = extract_components("mailto:team@example.com")
    assert components is not None
    assert components.scheme is Scheme.MAILTO
    assert components.host is None
    assert components.path is None


@pytest.mark.parametrize("candidate", ["http://[::1", "http://example.com:99999/"])
def test_components_none_when_unparseable(candidate: str) -> None:
    assert extract_components(candidate) is None
    assert classify(candidate) is Scheme.HTTP


@pytest.mark.parametrize(
    ("candidate", "valid"),
    [
        ("https://example.com", True),
        ("https://", False),
        ("mailto:someone", False),
        ("mailto:someone@example.com", True),
        ("tel:+15551234567", True),
        ("file:///etc/hosts", True),
        ("file:///", False),
        ("javascript:alert(1)", False),
        ("data:text/plain,hi", False),
        ("./relative/path", False),
    ],
)
def test_is_valid_url(candidate: str, valid: bool) -> None:
    assert is_valid_url(candidate) is valid


def test_host_of_only_for_authority_schemes():
    assert host_of("ftp://files.example.com/pub") == "files.example.com"
    assert host_of("tel:+15551234567") is None


def test_to_url_always_sets_scheme():
    url = to_url("urn:isbn:0451450523")
    assert url.scheme is Scheme.UNKNOWN
    assert url.host is None


def test_url_value_must_not_be_empty():
    with pytest.raises(ValueError):
        Url(value="", scheme=Scheme.UNKNOWN)
