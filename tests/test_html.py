"""Tests for the page shell."""

from pagewire import compose


def test_script_precedes_fragment():
    doc = compose("<h1>Hi</h1>", "/js/index.js")
    tag = '<script src="/js/index.js"></script>'
    assert doc.count(tag) == 1
    assert doc.count("<script") == 1
    assert doc.index(tag) < doc.index("<h1>Hi</h1>")


def test_no_script_without_path():
    doc = compose("<p>x</p>")
    assert "<script" not in doc
    assert "<p>x</p>" in doc


def test_document_shell():
    doc = compose("")
    assert doc.startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in doc
    assert '<meta charset="utf-8">' in doc
    assert "<title>Hello!</title>" in doc
    assert doc.index("<body>") < doc.index("</body>")


def test_inserted_verbatim():
    """Fragments and script paths are not escaped."""
    doc = compose("<b>{braces} & </b>", 'a.js"></script><script>alert(1)')
    assert "<b>{braces} & </b>" in doc
    assert '<script src="a.js"></script><script>alert(1)"></script>' in doc
