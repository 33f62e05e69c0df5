"""Paragraph reflow: blank-line separation and list continuation indentation."""

from __future__ import annotations

from .classifier import line_kind
from .config import FormatConfig
from .models import LineKind, ReflowContext


def _update_list_context(ctx: ReflowContext, kind: LineKind) -> None:
    """Open the list context on ordered items; close it on quotes and headers.

    Unordered items and blank lines leave the context unchanged.
    """
    if kind is LineKind.ORDERED_LIST:
        ctx.in_list = True
    elif kind in (LineKind.BLOCKQUOTE, LineKind.HEADER):
        ctx.in_list = False


def _indent_continuation(ctx: ReflowContext, line: str, kind: LineKind, indent: str) -> str:
    """Indent a line that continues an open ordered list.

    New ordered items are siblings and stay flush left.
    """
    if not ctx.in_list:
        return line
    if kind in (LineKind.EMPTY, LineKind.BLOCKQUOTE, LineKind.HEADER, LineKind.ORDERED_LIST):
        return line
    return f"{indent}{line}"


def needs_blank_line(current: LineKind, following: LineKind) -> bool:
    """Decide whether a blank line belongs between two adjacent lines.

    Rules, tested in order:

    - a blank line or code fence on either side: nothing to add
    - list followed by list: no blank line
    - blockquote followed by blockquote: no blank line
    - list followed by anything but a blockquote: no blank line, the
      paragraph continues the list
    - header followed by anything: blank line
    - plain text on both sides: blank line

    Args:
        current: Kind of the current line.
        following: Kind of the next line.

    Returns:
        bool: True when a blank separator line should be inserted.
    """
    if LineKind.EMPTY in (current, following):
        return False
    if LineKind.CODE_FENCE in (current, following):
        return False

    current_is_list = current.is_list
    following_is_list = following.is_list
    current_is_quote = current is LineKind.BLOCKQUOTE
    following_is_quote = following is LineKind.BLOCKQUOTE

    if current_is_list and following_is_list:
        return False
    if current_is_quote and following_is_quote:
        return False
    if current_is_list and not following_is_quote:
        return False
    if current is LineKind.HEADER:
        return True
    return not (current_is_list or following_is_list or current_is_quote or following_is_quote)


def reflow_lines(lines: list[str], config: FormatConfig | None = None) -> list[str]:
    """Separate paragraphs and indent list continuations in one pass.

    Lines inside fenced code blocks, and the fences themselves, are passed
    through untouched. The list context is scoped to this call.

    Args:
        lines: Normalized lines, markers already in canonical form.
        config: Formatting configuration. Defaults to a new `FormatConfig`.

    Returns:
        list[str]: Reflowed lines, including any inserted blank lines.

    Examples:
        reflow_lines(["first", "second"])  # ["first", "", "second"]
        reflow_lines(["- a", "- b"])  # ["- a", "- b"]
    """
    config = config or FormatConfig()
    indent = " " * config.continuation_indent
    ctx = ReflowContext()
    kinds = [line_kind(line) for line in lines]
    reflowed: list[str] = []

    for index, line in enumerate(lines):
        kind = kinds[index]

        if kind is LineKind.CODE_FENCE:
            ctx.in_code_block = not ctx.in_code_block
            reflowed.append(line)
            continue

        if ctx.in_code_block:
            reflowed.append(line)
            continue

        reflowed.append(_indent_continuation(ctx, line, kind, indent))
        _update_list_context(ctx, kind)

        if index + 1 < len(lines) and needs_blank_line(kind, kinds[index + 1]):
            reflowed.append("")

    return reflowed
