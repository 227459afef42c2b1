import json
from pathlib import Path

from urls_core.scanner import extract_urls


def test_extraction_matches_golden():
    root = Path(__file__).resolve().parents[1]
    text = (root / "golden" / "sample_extract.html").read_text(encoding="utf-8")
    expected = json.loads((root / "golden" / "sample_extract.json").read_text(encoding="utf-8"))
    result = extract_urls(text, "html")
    simplified = [
        {"value": url.value, "scheme": url.scheme.value, "line": url.position.line}
        for url in result.urls
        if url.position is not None
    ]
    for entry in expected:
        assert entry in simplified
    assert "https://old.example.com/legacy.js" not in result.values
