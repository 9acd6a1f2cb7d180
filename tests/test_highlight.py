from markupsafe import Markup

from lwcsearch import highlight, highlight_markup, make_snippet


def test_highlight_is_case_insensitive():
    assert highlight("Lightning Web Components", ["light"]) == "<mark>Light</mark>ning Web Components"


def test_highlight_marks_every_occurrence():
    assert highlight("wire a Wire", ["wire"]) == "<mark>wire</mark> a <mark>Wire</mark>"


def test_highlight_applies_terms_in_sequence():
    assert highlight("wire", ["wire", "ire"]) == "<mark>w<mark>ire</mark></mark>"
    # later terms can match inside earlier markup
    assert highlight("mark it", ["it", "mark"]) == "<mark>mark</mark> <<mark>mark</mark>>it</<mark>mark</mark>>"


def test_highlight_unchanged_without_text_or_terms():
    assert highlight("", ["x"]) == ""
    assert highlight(None, ["x"]) is None
    assert highlight("text", []) == "text"
    assert highlight("text", None) == "text"
    assert highlight("text", ["", None]) == "text"


def test_highlight_treats_terms_literally():
    assert highlight("c++ and c#", ["c++"]) == "<mark>c++</mark> and c#"
    assert highlight("a.b axb", ["a.b"]) == "<mark>a.b</mark> axb"


def test_highlight_does_not_escape():
    assert highlight("<b>wire</b>", ["wire"]) == "<b><mark>wire</mark></b>"


def test_highlight_markup_escapes_and_does_not_nest():
    out = highlight_markup("<b>Wire</b> & wired", ["wire", "ire"])
    assert isinstance(out, Markup)
    assert out == "&lt;b&gt;<mark>Wire</mark>&lt;/b&gt; &amp; <mark>wire</mark>d"


def test_highlight_markup_empty():
    assert highlight_markup(None, ["x"]) == Markup("")
    assert highlight_markup("a < b", []) == "a &lt; b"


def test_make_snippet_centres_on_first_match():
    text = "x" * 300 + " lwc " + "y" * 300
    out = make_snippet(text, ["lwc"], max_len=100)
    assert out.startswith("…")
    assert out.endswith("…")
    assert "<mark>lwc</mark>" in out


def test_make_snippet_without_match_is_escaped_prefix():
    out = make_snippet("<i>" + "z" * 50, ["nothing"], max_len=10)
    assert out == "&lt;i&gt;zzzzzzz…"
    assert make_snippet("short", [], max_len=10) == "short"
    assert make_snippet(None, ["x"]) == ""
