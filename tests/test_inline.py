import pytest

from RenderHTML.inline import transform


def test_inline_composition():
    text = "**bold** and *italic* and `code`"
    assert transform(text) == "<strong>bold</strong> and <em>italic</em> and <code>code</code>"


def test_link():
    assert transform("see [docs](https://example.com).") == 'see <a href="https://example.com">docs</a>.'


@pytest.mark.parametrize(
    "text",
    [
        "plain words",
        "numbers 1. 2. 3",
        "a - b # c",
        "",
    ],
)
def test_plain_text_is_unchanged_and_idempotent(text):
    assert transform(text) == text
    assert transform(transform(text)) == transform(text)


def test_empty_spans_are_left_alone():
    assert transform("`` and [](x) and [t]() and ****") == "`` and [](x) and [t]() and ****"


def test_code_span_runs_first_but_is_not_protected_from_emphasis():
    # Later passes see the generated <code> markup and still rewrite it.
    assert transform("`*a*`") == "<code><em>a</em></code>"


def test_bold_before_italic():
    assert transform("***x***") == "<em><strong>x</strong></em>"


def test_asterisk_in_url_is_reprocessed():
    text = "[a](http://x/*y) and *z*"
    assert transform(text) == '<a href="http://x/<em>y">a</a> and </em>z*'


def test_link_text_with_emphasis():
    assert transform("[**b**](u)") == '<a href="u"><strong>b</strong></a>'


def test_no_escaping():
    assert transform("<b>&") == "<b>&"
