# tests/test_extract.py
import json

import pytest

from wikisummary.errors import ArticleNotFound, ParseError
from wikisummary.extractor import extract_summary, summary_text


def test_extract_returns_text():
    body = b'{"query":{"pages":{"12345":{"extract":"Example summary text."}}}}'
    result = extract_summary(body)
    assert result.found
    assert result.text == "Example summary text."


@pytest.mark.parametrize(
    "body",
    [
        b"{}",
        b'{"query":{"pages":{}}}',
        b'{"query":{"pages":{"-1":{"ns":0,"title":"Nope","missing":""}}}}',
        b'{"query":{"pages":{"1":{"extract":""}}}}',
    ],
)
def test_not_found_shapes(body):
    result = extract_summary(body)
    assert not result.found
    assert result.text is None
    assert result.error == "not_found"


@pytest.mark.parametrize("body", [b"<html>oops</html>", b"", b"[1, 2]", b"[" * 200000])
def test_malformed_body(body):
    result = extract_summary(body)
    assert not result.found
    assert result.error == "parse"


def test_first_page_wins_when_several_returned():
    body = json.dumps(
        {"query": {"pages": {"1": {"extract": "First."}, "2": {"extract": "Second."}}}}
    )
    assert extract_summary(body).text == "First."


def test_keys_are_case_sensitive():
    assert not extract_summary(b'{"Query":{"pages":{"1":{"extract":"x"}}}}').found


def test_summary_text_raises_distinct_errors():
    with pytest.raises(ParseError):
        summary_text(b"not json")
    with pytest.raises(ArticleNotFound):
        summary_text(b"{}")
    assert summary_text(b'{"query":{"pages":{"9":{"extract":"ok"}}}}') == "ok"
