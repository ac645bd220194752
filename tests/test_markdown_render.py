"""
test_markdown_render.py
-----------------------
Tests for Markdown rendering with the real Markdown library.
"""
import time

from content_pipeline.markdown_render import markdown_to_html, render_markdown


class TestRenderMarkdown:
    """Test render_markdown function."""

    def test_plain_text_is_single_paragraph(self):
        assert render_markdown("Hello world\n") == "<p>Hello world</p>"

    def test_tables(self):
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_fenced_code_keeps_info_string(self):
        html = render_markdown("```python\nx = 1\n```\n")
        assert '<pre><code class="language-python">' in html

    def test_deterministic(self):
        body = "# Title\n\n- a\n- b\n"
        assert render_markdown(body) == render_markdown(body)


class TestMarkdownToHtml:
    """Test the renderer followed by the rewriter chain."""

    def test_inline_math(self):
        assert markdown_to_html("Value $x + y$ here\n") == "<p>Value \\(x + y\\) here</p>"

    def test_block_math(self):
        html = markdown_to_html("$$\nx + y\n$$\n")
        assert html == "\\[\nx + y\n\\]"

    def test_list_wrapped(self):
        html = markdown_to_html("- one\n- two\n")
        assert html.startswith('<div style="margin-left: 2em;"><ul>')
        assert html.endswith("</ul></div>")

    def test_indented_code_prefix_detection(self):
        html = markdown_to_html("Intro\n\n    python\n    x = 1\n")
        assert '<pre class="code-block"><code class="language-python">python\nx = 1\n</code></pre>' in html

    def test_fenced_code_declared_language(self):
        html = markdown_to_html("```vhdl\nsignal a : bit;\n```\n")
        assert '<code class="language-vhdl">' in html

    def test_fenced_code_without_language(self):
        html = markdown_to_html("```\nls -la\n```\n")
        assert '<code class="language-none">ls -la\n</code>' in html

    def test_image_reference_kept_relative(self):
        html = markdown_to_html("![plot](images/plot.png)\n")
        assert 'src="images/plot.png"' in html

    def test_long_list_with_nested_last_item(self):
        body = "".join(f"- item {i}\n" for i in range(40)) + "- last\n    - nested\n"
        started = time.perf_counter()
        html = markdown_to_html(body)
        assert time.perf_counter() - started < 2.0
        assert '<div style="margin-left: 2em;"><ul>\n<li>nested</li>\n</ul></div>' in html
