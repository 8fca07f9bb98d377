"""Tests for the markdown-it backed parsers."""

import pytest

from crispymd.parser.markdown_it import BasicParser, ExtraParser


@pytest.fixture(params=[BasicParser, ExtraParser], ids=["basic", "extra"])
def any_parser(request):
    return request.param()


class TestCommonSyntax:
    def test_heading(self, any_parser):
        assert "<h1>Hello</h1>" in any_parser.parse("# Hello")

    def test_bold_and_italic(self, any_parser):
        html = any_parser.parse("This is **bold** and *italic* text.")
        assert "<strong>bold</strong>" in html
        assert "<em>italic</em>" in html

    def test_fenced_code_with_language(self, any_parser):
        html = any_parser.parse("```php\necho 'hi';\n```")
        assert '<code class="language-php">' in html
        assert "<pre>" in html

    def test_inline_code(self, any_parser):
        assert "<code>print()</code>" in any_parser.parse("Use `print()` here.")

    def test_link(self, any_parser):
        html = any_parser.parse("Check [this link](https://example.com).")
        assert '<a href="https://example.com">this link</a>' in html

    def test_image(self, any_parser):
        html = any_parser.parse("![alt text](image.jpg)")
        assert 'src="image.jpg"' in html
        assert 'alt="alt text"' in html

    def test_blockquote(self, any_parser):
        html = any_parser.parse("> A quote")
        assert "<blockquote>" in html
        assert "A quote" in html

    def test_lists(self, any_parser):
        unordered = any_parser.parse("- one\n- two")
        ordered = any_parser.parse("1. one\n2. two")
        assert "<ul>" in unordered and "<li>one</li>" in unordered
        assert "<ol>" in ordered and "<li>two</li>" in ordered

    def test_nested_list(self, any_parser):
        html = any_parser.parse("- outer\n  - inner")
        assert html.count("<ul>") == 2

    def test_horizontal_rule(self, any_parser):
        assert "<hr />" in any_parser.parse("Above\n\n---\n\nBelow")

    def test_table(self, any_parser):
        html = any_parser.parse("| a | b |\n| --- | --- |\n| 1 | 2 |")
        assert "<table>" in html
        assert "<th>a</th>" in html
        assert "<td>2</td>" in html

    def test_strikethrough(self, any_parser):
        assert "<s>gone</s>" in any_parser.parse("~~gone~~")

    def test_empty_input(self, any_parser):
        assert any_parser.parse("") == ""
        assert any_parser.parse("   \n\n") == ""

    def test_malformed_input_does_not_raise(self, any_parser):
        html = any_parser.parse("[unclosed](link\n**bold\n<div\n```\nnever closed")
        assert isinstance(html, str)
        assert html

    def test_deterministic(self, any_parser, complex_markdown):
        assert any_parser.parse(complex_markdown) == any_parser.parse(complex_markdown)


class TestUnsafeHtml:
    def test_raw_html_passes_through_by_default(self):
        parser = BasicParser()
        assert parser.allows_unsafe_html is True
        html = parser.parse('<div class="note">raw</div>')
        assert '<div class="note">raw</div>' in html

    def test_raw_html_escaped_in_safe_mode(self):
        parser = ExtraParser(allow_unsafe_html=False)
        assert parser.allows_unsafe_html is False
        html = parser.parse("<script>alert(1)</script>\n\nText with <b>inline</b> tag.")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "<b>" not in html

    def test_javascript_links_not_rendered(self):
        html = ExtraParser(allow_unsafe_html=False).parse("[x](javascript:alert(1))")
        assert 'href="javascript' not in html


class TestExtraDialect:
    def test_footnotes(self):
        html = ExtraParser().parse("Text[^1]\n\n[^1]: The note.")
        assert "footnote-ref" in html
        assert "The note." in html

    def test_basic_has_no_footnotes(self):
        html = BasicParser().parse("Text[^1]\n\n[^1]: The note.")
        assert "footnote-ref" not in html

    def test_definition_list(self):
        html = ExtraParser().parse("Term\n: Definition")
        assert "<dl>" in html
        assert "<dt>Term</dt>" in html
        assert "<dd>" in html

    def test_attributes(self):
        html = ExtraParser().parse("![logo](a.png){#logo .wide}")
        assert 'id="logo"' in html
        assert 'class="wide"' in html


class TestAttributeAllowList:
    @pytest.mark.parametrize("allow_unsafe_html", [False, True])
    def test_event_handler_on_image_dropped(self, allow_unsafe_html):
        html = ExtraParser(allow_unsafe_html=allow_unsafe_html).parse(
            '![a](b.png){onerror="alert(2)"}'
        )
        assert "onerror" not in html
        assert 'src="b.png"' in html

    def test_event_handler_on_block_dropped(self):
        html = ExtraParser(allow_unsafe_html=False).parse('{onclick="x()"}\nParagraph')
        assert "onclick" not in html
        assert "Paragraph" in html

    def test_id_and_class_kept_next_to_dropped_attribute(self):
        html = ExtraParser(allow_unsafe_html=False).parse('[t](u){#k .c style="color:red"}')
        assert 'id="k"' in html
        assert 'class="c"' in html
        assert "style" not in html
