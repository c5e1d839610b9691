# tests/test_linkify.py

from annotator.config import AnnotatorConfig
from annotator.linkify import linkify, to_href
from annotator.models import Link, PlainText


def test_schemeless_link_gets_https_href():
    runs = linkify("see www.example.com/path")
    assert runs == [
        PlainText("see "),
        Link("www.example.com/path", href="https://www.example.com/path"),
    ]


def test_explicit_scheme_href_unchanged():
    runs = linkify("see http://example.com")
    assert runs[-1] == Link("http://example.com", href="http://example.com")

    runs = linkify("HTTPS://Example.com/a?b=1")
    assert runs == [Link("HTTPS://Example.com/a?b=1", href="HTTPS://Example.com/a?b=1")]


def test_multiple_links():
    runs = linkify("a https://x.io b docs.python.org/3/ c")
    assert [r.content for r in runs] == ["a ", "https://x.io", " b ", "docs.python.org/3/", " c"]
    assert [type(r) for r in runs] == [PlainText, Link, PlainText, Link, PlainText]


def test_bare_suffix_is_not_a_link():
    assert linkify(".com is online") == [PlainText(".com is online")]


def test_non_links_stay_plain():
    assert linkify("just plain text") == [PlainText("just plain text")]
    assert linkify("version 3.14 is out") == [PlainText("version 3.14 is out")]
    assert linkify("foo.abcdefgh") == [PlainText("foo.abcdefgh")]
    assert linkify("http://localhost") == [PlainText("http://localhost")]


def test_empty_content():
    assert linkify("") == []


def test_default_scheme_from_config():
    config = AnnotatorConfig(default_scheme="http")
    assert to_href("example.com", config) == "http://example.com"
    assert to_href("https://example.com", config) == "https://example.com"
    assert to_href("example.com") == "https://example.com"
