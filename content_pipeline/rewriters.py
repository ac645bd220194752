"""
rewriters.py
------------
Regex rewrites applied to rendered HTML so that it matches what the page
component expects: MathJax delimiters, indented lists and Prism language
classes on code blocks.

Every rewrite leaves already rewritten markup untouched, so running the
chain twice gives the same result as running it once.
"""
from __future__ import annotations

import re
from typing import Callable, Sequence

BLOCK_MATH_RE = re.compile(r"<p>\$\$([\s\S]*?)\$\$</p>")
INLINE_MATH_RE = re.compile(r"(?<!\$)\$([^$\n]+?)\$(?!\$)")
CODE_SPAN_RE = re.compile(r"(<code[^>]*>[\s\S]*?</code>)")

LIST_WRAPPER_OPEN = '<div style="margin-left: 2em;">'
LIST_WRAPPER_CLOSE = "</div>"
LIST_RE = re.compile(
    r"(?<!" + re.escape(LIST_WRAPPER_OPEN) + r")"
    r"(<([ou])l>(?:\s*<li>.*?</li>)+\s*</\2l>)"
)

CODE_BLOCK_RE = re.compile(
    r'<pre><code(?: class="language-(?P<declared>[^"\s]+)")?>(?P<code>[\s\S]*?)</code></pre>'
)

# Checked in order: "cpp" must win over "c".
LANGUAGE_PREFIXES = ("python", "vhdl", "cpp", "c")
NO_LANGUAGE = "none"


def rewrite_block_math(html: str) -> str:
    """Turn paragraphs holding $$...$$ into \\[...\\] display math."""
    return BLOCK_MATH_RE.sub(lambda m: f"\\[{m.group(1)}\\]", html)


def rewrite_inline_math(html: str) -> str:
    """
    Turn single-line $...$ spans into \\(...\\) inline math.

    Text inside <code> elements is left alone, and a $ next to another $
    never opens or closes a span, so $$x$$ in running text stays as is.
    """
    parts = CODE_SPAN_RE.split(html)
    for idx in range(0, len(parts), 2):
        parts[idx] = INLINE_MATH_RE.sub(lambda m: f"\\({m.group(1)}\\)", parts[idx])
    return "".join(parts)


def wrap_lists(html: str) -> str:
    return LIST_RE.sub(lambda m: f"{LIST_WRAPPER_OPEN}{m.group(1)}{LIST_WRAPPER_CLOSE}", html)


def detect_language(code: str) -> str:
    """
    Guess a code block's language from its first characters.

    Only used for blocks without a fence info string. Any block whose text
    merely starts with one of the prefixes is classified as that language,
    so ``const x = 1`` comes out as ``c``.
    """
    for prefix in LANGUAGE_PREFIXES:
        if code.startswith(prefix):
            return prefix
    return NO_LANGUAGE


def _annotate(match: re.Match) -> str:
    code = match.group("code")
    language = match.group("declared") or detect_language(code)
    return f'<pre class="code-block"><code class="language-{language}">{code}</code></pre>'


def annotate_code_blocks(html: str) -> str:
    return CODE_BLOCK_RE.sub(_annotate, html)


REWRITERS: Sequence[Callable[[str], str]] = (
    rewrite_block_math,
    rewrite_inline_math,
    wrap_lists,
    annotate_code_blocks,
)


def postprocess(html: str) -> str:
    for rewrite in REWRITERS:
        html = rewrite(html)
    return html
