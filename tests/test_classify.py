# tests/test_classify.py

from annotator.classify import classify
from annotator.models import Mention, PlainText, SelfMention
from annotator.tokenize import tokenize


def test_no_candidates_gives_single_plain_run():
    assert classify("just text", [], "Alice") == [PlainText("just text")]
    assert classify("", [], None) == [PlainText("")]


def test_self_mention_is_case_sensitive():
    text = "@Alice hi"
    cands = tokenize(text)

    assert classify(text, cands, "Alice") == [SelfMention("@Alice"), PlainText(" hi")]
    assert classify(text, cands, "alice") == [Mention("@Alice"), PlainText(" hi")]
    assert classify(text, cands, None) == [Mention("@Alice"), PlainText(" hi")]


def test_gaps_between_mentions_become_plain_text():
    text = "hey @Bob and @Alice."
    runs = classify(text, tokenize(text), "Alice")
    assert runs == [
        PlainText("hey "),
        Mention("@Bob"),
        PlainText(" and "),
        SelfMention("@Alice"),
        PlainText("."),
    ]
    assert "".join(r.content for r in runs) == text
