"""Paragraph-level unit extractor for HTML-like section content."""

import re
from dataclasses import dataclass, field
from html import unescape
from html.parser import HTMLParser

from parlance.application.dto.extraction import ExtractedSection, Segment

BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "dd", "details", "div", "dl",
        "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
        "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "li", "main", "nav",
        "ol", "p", "pre", "section", "summary", "table", "tbody", "td", "tfoot",
        "th", "thead", "tr", "ul",
    }
)

VOID_TAGS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
        "meta", "source", "track", "wbr",
    }
)

# raw text elements hold code, never copy
RAW_TEXT_TAGS = frozenset({"script", "style"})

_TAG = re.compile(r"<[^>]+>")
_RAW_TEXT = re.compile(r"<(script|style)\b.*?</\1\s*>", re.DOTALL | re.IGNORECASE)
_WORD = re.compile(r"\w")


@dataclass
class _Text:
    start: int
    end: int


@dataclass
class _Markup:
    """Comment, declaration or stray end tag - never translatable."""

    start: int
    end: int


@dataclass
class _Element:
    tag: str
    start: int
    open_end: int
    close_start: int = -1
    end: int = -1
    children: list = field(default_factory=list)


class _MarkupScanner(HTMLParser):
    """Records the source span of every markup token. Text is whatever lies between."""

    def __init__(self, source: str) -> None:
        super().__init__(convert_charrefs=False)
        self._source = source
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]
        self.tokens: list[tuple[str, str | None, int, int]] = []

    def _offset(self) -> int:
        line, col = self.getpos()
        return self._line_starts[line - 1] + col

    def _until(self, start: int, terminator: str) -> int:
        idx = self._source.find(terminator, start)
        return len(self._source) if idx == -1 else idx + len(terminator)

    def handle_starttag(self, tag: str, attrs: list) -> None:
        start = self._offset()
        self.tokens.append(("start", tag, start, start + len(self.get_starttag_text() or "")))

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        start = self._offset()
        self.tokens.append(("void", tag, start, start + len(self.get_starttag_text() or "")))

    def handle_endtag(self, tag: str) -> None:
        start = self._offset()
        self.tokens.append(("end", tag, start, self._until(start, ">")))

    def handle_comment(self, data: str) -> None:
        start = self._offset()
        terminator = "-->" if self._source.startswith("<!--", start) else ">"
        self.tokens.append(("markup", None, start, self._until(start, terminator)))

    def handle_decl(self, decl: str) -> None:
        start = self._offset()
        self.tokens.append(("markup", None, start, self._until(start, ">")))

    def handle_pi(self, data: str) -> None:
        start = self._offset()
        self.tokens.append(("markup", None, start, self._until(start, ">")))

    def unknown_decl(self, data: str) -> None:
        start = self._offset()
        self.tokens.append(("markup", None, start, self._until(start, "]]>")))


def _close(element: _Element, close_start: int, end: int) -> None:
    element.close_start = close_start
    element.end = end


def _build_tree(source: str, tokens: list[tuple[str, str | None, int, int]]) -> _Element:
    root = _Element(tag="", start=0, open_end=0)
    stack = [root]
    cursor = 0
    for kind, tag, start, end in tokens:
        if start < cursor:
            continue
        if cursor < start:
            stack[-1].children.append(_Text(cursor, start))
        if kind == "start":
            # a block start tag implicitly closes an open paragraph
            if tag in BLOCK_TAGS and stack[-1].tag == "p":
                _close(stack.pop(), start, start)
            element = _Element(tag=tag, start=start, open_end=end)
            stack[-1].children.append(element)
            if tag in VOID_TAGS:
                _close(element, end, end)
            else:
                stack.append(element)
        elif kind == "void":
            element = _Element(tag=tag, start=start, open_end=end)
            _close(element, end, end)
            stack[-1].children.append(element)
        elif kind == "end":
            depth = next(
                (i for i in range(len(stack) - 1, 0, -1) if stack[i].tag == tag), None
            )
            if depth is None:
                stack[-1].children.append(_Markup(start, end))
            else:
                while len(stack) > depth + 1:
                    _close(stack.pop(), start, start)
                _close(stack.pop(), start, end)
        else:
            stack[-1].children.append(_Markup(start, end))
        cursor = end
    if cursor < len(source):
        stack[-1].children.append(_Text(cursor, len(source)))
    while len(stack) > 1:
        _close(stack.pop(), len(source), len(source))
    return root


def _has_text(fragment: str) -> bool:
    text = unescape(_TAG.sub(" ", _RAW_TEXT.sub(" ", fragment)))
    return _WORD.search(text) is not None


def _is_container(element: _Element) -> bool:
    return any(isinstance(c, _Element) and c.tag in BLOCK_TAGS for c in element.children)


class _SegmentWriter:
    """Accumulates segments, merging adjacent layout."""

    def __init__(self) -> None:
        self.segments: list[Segment] = []

    def layout(self, text: str) -> None:
        if not text:
            return
        if self.segments and not self.segments[-1].is_unit:
            self.segments[-1] = Segment(self.segments[-1].text + text)
        else:
            self.segments.append(Segment(text))

    def unit(self, text: str) -> None:
        """Unit without its surrounding whitespace; blank or text-less content is layout."""
        core = text.strip()
        if not core or not _has_text(core):
            self.layout(text)
            return
        lead = len(text) - len(text.lstrip())
        self.layout(text[:lead])
        self.segments.append(Segment(core, is_unit=True))
        self.layout(text[lead + len(core):])


class ParagraphExtractor:
    """Splits section source into paragraph-level units.

    Block elements that hold other block elements are containers: their tags
    stay as layout and their children are split further. Every other block
    element with text is one unit, as is every run of loose inline content.
    """

    def extract(self, content: str) -> ExtractedSection:
        """Split content into layout and unit segments covering the whole source."""
        if not content:
            return ExtractedSection()
        scanner = _MarkupScanner(content)
        scanner.feed(content)
        scanner.close()
        writer = _SegmentWriter()
        self._walk(content, _build_tree(content, scanner.tokens), writer)
        return ExtractedSection(segments=writer.segments)

    def _walk(self, source: str, node: _Element, writer: _SegmentWriter) -> None:
        run: tuple[int, int] | None = None
        for child in node.children:
            inline = isinstance(child, _Text) or (
                isinstance(child, _Element)
                and child.tag not in BLOCK_TAGS
                and child.tag not in RAW_TEXT_TAGS
            )
            if inline:
                run = (run[0] if run else child.start, child.end)
                continue
            if run:
                writer.unit(source[run[0]:run[1]])
                run = None
            if isinstance(child, _Markup) or child.tag in RAW_TEXT_TAGS:
                writer.layout(source[child.start:child.end])
            elif _is_container(child):
                writer.layout(source[child.start:child.open_end])
                self._walk(source, child, writer)
                writer.layout(source[child.close_start:child.end])
            else:
                writer.unit(source[child.start:child.end])
        if run:
            writer.unit(source[run[0]:run[1]])
