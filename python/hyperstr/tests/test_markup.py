"""Test escaping, safe_html, tag building and comment removal."""

import pytest

from hyperstr import (
    Markup,
    Safe,
    TemplateCall,
    TemplateShapeError,
    div,
    each,
    escape_html,
    html,
    p,
    remove_html_comments,
    safe,
    safe_html,
    span,
    tag,
    when,
)


class TestEscapeHtml:
    """Test escape_html."""

    def test_escapes_all_special_characters(self):
        assert escape_html("<b>&'\"") == "&lt;b&gt;&amp;&#39;&quot;"

    def test_plain_string_returned_unchanged(self):
        """Strings with nothing to escape are returned as the same object."""
        s = "plain text without specials"
        assert escape_html(s) is s

    def test_surrounding_text_preserved(self):
        assert escape_html("a < b && c") == "a &lt; b &amp;&amp; c"

    def test_no_double_escaping_in_one_pass(self):
        """Produced entities are not rescanned."""
        assert escape_html("&lt;") == "&amp;lt;"

    def test_non_strings_coerced(self):
        assert escape_html(42) == "42"
        assert escape_html(["<a>"]) == "[&#39;&lt;a&gt;&#39;]"

    def test_none_is_empty(self):
        assert escape_html(None) == ""

    def test_safe_values_pass_through(self):
        assert escape_html(safe("<b>bold</b>")) == "<b>bold</b>"

    def test_html_protocol(self):
        class Widget:
            def __html__(self):
                return "<widget>"

        assert escape_html(Widget()) == "<widget>"


class TestSafe:
    def test_marks_markup(self):
        result = safe("<b>")
        assert isinstance(result, Markup)
        assert result == "<b>"

    def test_none(self):
        assert safe(None) == Markup("")


class TestSafeHtml:
    """Test safe_html in template and plain modes."""

    def test_template_escapes_only_values(self):
        assert safe_html(["Hello, ", ""], "<script>") == "Hello, &lt;script&gt;"

    def test_literal_segments_untouched(self):
        assert safe_html(["<p>", "</p>"], "a & b") == "<p>a &amp; b</p>"

    def test_template_call(self):
        call = TemplateCall(("<i>", "</i>"), ("'q'",))
        assert safe_html(call) == "<i>&#39;q&#39;</i>"

    def test_plain_string(self):
        assert safe_html("<b>") == "&lt;b&gt;"

    def test_plain_number(self):
        assert safe_html(3) == "3"
        assert safe_html(1.5) == "1.5"

    def test_returns_safe_string(self):
        """Results carry __html__ so escape_html leaves them alone."""
        assert isinstance(safe_html("x"), Safe)
        assert isinstance(safe_html(["", ""], "x"), Safe)
        assert not isinstance(safe_html("x"), Markup)

    def test_nested_results_not_escaped_twice(self):
        inner = safe_html(["<b>", "</b>"], "<i>")
        outer = safe_html(["<p>", "</p>"], inner)
        assert outer == "<p><b>&lt;i&gt;</b></p>"

    def test_none_raises(self):
        with pytest.raises(TemplateShapeError):
            safe_html(None)

    def test_plain_value_with_extra_values_raises(self):
        with pytest.raises(TemplateShapeError):
            safe_html("a", "b")

    def test_mismatched_template_raises(self):
        with pytest.raises(TemplateShapeError):
            safe_html(["a", "b", "c"], 1)

    @pytest.mark.parametrize("value", [["<script>x</script>"], ("<b>", "</b>"), []])
    def test_bare_list_is_not_trusted_as_template(self, value):
        """A list without values is rejected instead of passed through unescaped."""
        with pytest.raises(TemplateShapeError):
            safe_html(value)

    def test_template_without_values_via_template_call(self):
        assert safe_html(TemplateCall(("<hr>",))) == "<hr>"


class TestSafeHtmlComposition:
    """Test safe_html results used in ordinary string composition."""

    def test_concatenation_keeps_caller_markup(self):
        """Appending markup to a result does not escape the appended text."""
        result = safe_html("a") + "<br>"
        assert result == "a<br>"
        assert type(result) is str

    def test_concatenation_with_tag(self):
        assert safe_html("Hi") + tag("br") == "Hi<br></br>"

    def test_format_keeps_caller_markup(self):
        assert "<p>{}</p>".format(safe_html("<x>")) == "<p>&lt;x&gt;</p>"
        assert f"{safe_html('&')}<br>" == "&amp;<br>"

    def test_inside_each(self):
        result = each(["<a>", "b"], lambda v: safe_html(v) + "<br>")
        assert result == "&lt;a&gt;<br>b<br>"

    def test_inside_tag(self):
        result = tag("li", "item", safe_html("1 < 2"))
        assert result == '<li class="item">1 &lt; 2</li>'

    def test_inside_when(self):
        assert when("<b>", lambda v: safe_html(v) + "!") == "&lt;b&gt;!"

    def test_inside_raw_template(self):
        result = html(["<ul>", "</ul>"], each(["<x>"], lambda v: tag("li", None, safe_html(v))))
        assert result == "<ul><li>&lt;x&gt;</li></ul>"


class TestTag:
    """Test tag and its specializations."""

    def test_class_shorthand(self):
        assert tag("div", "card", "hi") == '<div class="card">hi</div>'

    def test_attribute_map_and_list_content(self):
        result = tag("ul", {"id": "x"}, ["<li>a</li>", "<li>b</li>"])
        assert result == '<ul id="x"><li>a</li> <li>b</li></ul>'

    def test_multiple_attributes_in_order(self):
        result = tag("a", {"href": "/x", "target": "_blank"}, "go")
        assert result == '<a href="/x" target="_blank">go</a>'

    def test_attribute_values_not_escaped(self):
        assert tag("i", {"title": "<x>"}, "") == '<i title="<x>"></i>'

    def test_no_attributes(self):
        assert tag("b", None, "x") == "<b>x</b>"
        assert tag("b", {}, "x") == "<b>x</b>"
        assert tag("b", 42, "x") == "<b>x</b>"

    def test_content_coerced(self):
        assert tag("td", None, 7) == "<td>7</td>"
        assert tag("td", None, None) == "<td></td>"
        assert tag("td") == "<td></td>"

    def test_specializations(self):
        assert div("row", "x") == '<div class="row">x</div>'
        assert span({"id": "s"}, ["a", "b"]) == '<span id="s">a b</span>'
        assert p(None, "text") == "<p>text</p>"


class TestRemoveHtmlComments:
    """Test remove_html_comments."""

    def test_single_and_multiline(self):
        assert remove_html_comments("a<!-- c -->b<!--\nmulti\n-->c") == "abc"

    def test_each_comment_removed_separately(self):
        """Text between two comments survives."""
        assert remove_html_comments("<!--x-->keep<!--y-->") == "keep"

    def test_unterminated_opener_kept(self):
        assert remove_html_comments("a<!-- open") == "a<!-- open"

    def test_no_comments(self):
        assert remove_html_comments("<p>hi</p>") == "<p>hi</p>"
