# tests/test_pipeline.py

from annotator.config import AnnotatorConfig
from annotator.models import Link, Mention, PlainText, SelfMention
from annotator.pipeline import annotate, annotate_spans, runs_to_text
from annotator.validators import is_lossless, spans_are_contiguous


SAMPLES = [
    "",
    "just plain text",
    "Hi @Bob, how are you?",
    "@john.com is online",
    "@Alice @Bob @Carol",
    "mail me at bob.smith@example.com!",
    "see www.example.com/path and http://example.org?q=1#top.",
    "@ @@ @@Bob @ Bob\n@\t@",
    "emoji 🎉 @Zoë ünïcödé www.müller.de",
    "line one\n@Dana\r\nline three",
]


def test_punctuation_boundary():
    assert annotate("Hi @Bob, how are you?") == [
        PlainText("Hi "),
        Mention("@Bob"),
        PlainText(", how are you?"),
    ]


def test_mention_domain_adjacency():
    runs = annotate("@john.com is online")
    assert runs == [Mention("@john"), PlainText(".com is online")]


def test_mention_is_never_rescanned_for_links():
    runs = annotate("@bob.example.com")
    assert runs == [
        Mention("@bob"),
        PlainText("."),
        Link("example.com", href="https://example.com"),
    ]


def test_self_mention_exactness():
    assert annotate("@Alice", current_user_name="Alice") == [SelfMention("@Alice")]
    assert annotate("@Alice", current_user_name="alice") == [Mention("@Alice")]


def test_link_synthesis():
    assert annotate("see www.example.com/path") == [
        PlainText("see "),
        Link("www.example.com/path", href="https://www.example.com/path"),
    ]
    runs = annotate("see http://example.com")
    assert runs[-1].href == runs[-1].content == "http://example.com"


def test_mentions_and_links_together():
    runs = annotate("@Bob check example.com, @Alice!", current_user_name="Alice")
    assert runs == [
        Mention("@Bob"),
        PlainText(" check "),
        Link("example.com", href="https://example.com"),
        PlainText(", "),
        SelfMention("@Alice"),
        PlainText("!"),
    ]


def test_no_mention_no_link():
    assert annotate("just plain text") == [PlainText("just plain text")]


def test_empty_input_gives_no_runs():
    assert annotate("") == []
    assert annotate_spans("") == []


def test_linkify_can_be_disabled():
    config = AnnotatorConfig(linkify=False)
    assert annotate("@Bob see example.com", config=config) == [
        Mention("@Bob"),
        PlainText(" see example.com"),
    ]
    assert annotate("", config=config) == []


def test_losslessness_and_contiguity():
    for text in SAMPLES:
        for user in (None, "Bob", "Zoë"):
            runs = annotate(text, user)
            assert runs_to_text(runs) == text
            assert is_lossless(text, runs)
            assert spans_are_contiguous(text, annotate_spans(text, user))


def test_deterministic():
    for text in SAMPLES:
        assert annotate(text, "Bob") == annotate(text, "Bob")
