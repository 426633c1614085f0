#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/state.py
"""Block-structured text accumulation for the HTML renderer.

A render call owns a single :class:`RenderState`. The node renderer never
writes to it directly; it asks the current :class:`Block` to push text, and
asks it for nested blocks when it meets block-level elements. Blocks are
context managers: leaving the ``with`` statement flushes the block's pending
text (filled to the line length, with the active quote/list prefixes) and
unwinds the prefix the block installed, so the parent resumes exactly where
it left off.

Prefixes compose by concatenation. Each has an initial form used on the
first line a block emits and a subsequent form used afterwards, e.g.
``("* ", "  ")`` for a bullet. Blocks are separated by a gap line holding the
enclosing prefix, so two paragraphs in a quote are separated by ``>``.

"""

from __future__ import annotations

from types import TracebackType
from typing import Literal, Optional

from zxcv.html.escape import escape_markdown
from zxcv.html.whitespace import is_whitespace, squeeze_whitespace
from zxcv.utils.text import display_width, fill


class RenderState:
    """Text assembled by one render call.

    Parameters
    ----------
    max_width : int or None, default None
        Width to fill text to; ``None`` or ``0`` disables wrapping

    Attributes
    ----------
    result : str
        Text already emitted
    pending : str
        Text of the innermost open block that has not been emitted yet
    initial_prefix : str
        Prefix for the next line emitted
    subsequent_prefix : str
        Prefix for lines after the next one
    gap_prefix_offset : int
        Length of the trailing part of the prefix installed by blocks that
        have not emitted anything yet; gap lines leave it out
    adjacent : bool
        Whether the last emitted text belonged to a list item
    flush_count : int
        Number of times text has been emitted

    """

    def __init__(self, max_width: int | None = None):
        """Initialize an empty state."""
        self.max_width = max_width or None
        self.result = ""
        self.pending = ""
        self.initial_prefix = ""
        self.subsequent_prefix = ""
        self.gap_prefix_offset = 0
        self.adjacent = False
        self.flush_count = 0

    def root_block(self) -> Block:
        """Return the outermost block of this render."""
        return Block(self)

    def render(self) -> str:
        """Return the rendered text; every block must have been closed."""
        assert not self.pending, "pending text left in render state"
        return self.result

    def push_gap(self, join: bool) -> None:
        """Separate the next emitted text from what precedes it.

        Parameters
        ----------
        join : bool
            Use a single newline instead of a gap line

        """
        if not self.result:
            return
        if join:
            self.result += "\n"
            return
        end = len(self.subsequent_prefix) - self.gap_prefix_offset
        self.result += "\n" + self.subsequent_prefix[:end].rstrip() + "\n"

    def consume_prefix(self) -> None:
        """Record that a line using the initial prefix has been emitted."""
        self.initial_prefix = self.subsequent_prefix
        self.gap_prefix_offset = 0
        self.flush_count += 1


class Block:
    """A paragraph-like unit of text.

    Blocks are created by :meth:`RenderState.root_block`, :meth:`new_block`
    and :meth:`new_item`, and must be closed in LIFO order, normally by
    using them as context managers.

    Parameters
    ----------
    state : RenderState
        The state shared by every block of this render
    in_code : bool, default False
        Squeeze whitespace but do not escape pushed text
    in_item : bool, default False
        The block is a list item; consecutive items are joined without a
        blank line

    """

    def __init__(self, state: RenderState, *, in_code: bool = False, in_item: bool = False):
        """Initialize a block borrowing ``state``."""
        self.state = state
        self.in_code = in_code
        self.in_item = in_item
        self.pending_whitespace = False
        self._must_emit = False
        self._markers: list[str] = []
        # Flush count when each materialized start marker was written
        self._open_markers: list[int] = []
        self._saved_prefixes: Optional[tuple[str, str, int]] = None
        self._prefix_flush_count = state.flush_count
        self._created_flush_count = state.flush_count
        self._closed = False

    def __enter__(self) -> Block:
        """Return the block itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        """Close the block."""
        self.close()
        return False

    def push(self, text: str) -> None:
        """Add text from the document.

        Whitespace is squeezed, and unless in code mode Markdown characters
        are escaped. Whitespace at either end of ``text`` becomes a single
        space between it and neighbouring text.
        """
        if all(is_whitespace(char) for char in text):
            if text:
                self.pending_whitespace = True
            return

        self._resolve_whitespace(is_whitespace(text[0]))
        self._materialize_markers()
        squeezed = squeeze_whitespace(text)
        self.state.pending += "".join(squeezed if self.in_code else escape_markdown(squeezed))
        self.pending_whitespace = is_whitespace(text[-1])

    def push_raw(self, text: str) -> None:
        """Add already rendered text verbatim."""
        if not text:
            return
        self._resolve_whitespace(False)
        self._materialize_markers()
        self.state.pending += text

    def push_raw_start(self, marker: str) -> None:
        """Open an inline marker such as ``**``.

        The marker is only written once content follows it, so an element
        with no content renders as nothing.
        """
        self._markers.append(marker)

    def push_raw_end(self, marker: str) -> None:
        """Close the inline marker opened by the matching :meth:`push_raw_start`."""
        if self._markers:
            # Nothing was pushed since the start marker
            self._markers.pop()
            return
        if self._open_markers and self._open_markers.pop() != self.state.flush_count:
            # The start marker went out with an earlier paragraph
            return
        self.state.pending += marker

    def newline(self) -> None:
        """Break the line without starting a new block."""
        if self.state.pending:
            self.state.pending += "\n"
        self.pending_whitespace = False

    def must_emit(self) -> None:
        """Emit the bare prefix on close if the block turned out empty.

        Used for list items so an empty item still takes up its number.
        """
        self._must_emit = True

    def prefix(self, initial: str, subsequent: str) -> None:
        """Indent the lines this block emits.

        Parameters
        ----------
        initial : str
            Added to the prefix of the first line
        subsequent : str
            Added to the prefix of later lines; must have the same display
            width as ``initial``

        """
        assert display_width(initial) == display_width(subsequent), (
            f"prefix widths differ: {initial!r} and {subsequent!r}"
        )
        assert self._saved_prefixes is None, "block already has a prefix"
        state = self.state
        self._saved_prefixes = (state.initial_prefix, state.subsequent_prefix, state.gap_prefix_offset)
        self._prefix_flush_count = state.flush_count
        state.initial_prefix += initial
        state.subsequent_prefix += subsequent
        state.gap_prefix_offset += len(subsequent)

    def end_list(self) -> None:
        """Mark the end of a list whose items were opened from this block.

        A list item that follows is separated by a gap line, unless this block
        is itself an item and the list was nested in it.
        """
        if not self.in_item:
            self.state.adjacent = False

    def new_block(self) -> Block:
        """Emit pending text and return a nested block."""
        self._flush()
        return Block(self.state, in_code=self.in_code)

    def new_item(self) -> Block:
        """Emit pending text and return a nested list item block."""
        self._flush()
        return Block(self.state, in_code=self.in_code, in_item=True)

    def new_raw_block(self) -> RawBlock:
        """Emit pending text and return a nested preformatted block."""
        self._flush()
        return RawBlock(self.state)

    def close(self) -> None:
        """Emit pending text and restore the prefixes of the parent block."""
        if self._closed:
            return
        self._closed = True
        self._flush()

        state = self.state
        if self._must_emit and state.flush_count == self._created_flush_count:
            bare = state.initial_prefix.rstrip()
            if bare:
                state.push_gap(self.in_item and state.adjacent)
                state.result += bare
                state.consume_prefix()
                state.adjacent = self.in_item

        if self._saved_prefixes is not None:
            initial, subsequent, offset = self._saved_prefixes
            consumed = state.flush_count != self._prefix_flush_count
            state.initial_prefix = subsequent if consumed else initial
            state.subsequent_prefix = subsequent
            state.gap_prefix_offset = 0 if consumed else offset

    def _resolve_whitespace(self, leading: bool) -> None:
        pending = self.state.pending
        if (self.pending_whitespace or leading) and pending and not pending.endswith("\n"):
            self.state.pending += " "
        self.pending_whitespace = False

    def _materialize_markers(self) -> None:
        if self._markers:
            self.state.pending += "".join(self._markers)
            self._open_markers.extend(self.state.flush_count for _ in self._markers)
            self._markers.clear()

    def _flush(self) -> None:
        state = self.state
        text = state.pending.rstrip("\n")
        state.pending = ""
        if not text:
            return
        state.push_gap(self.in_item and state.adjacent)
        state.result += fill(text, state.max_width, state.initial_prefix, state.subsequent_prefix)
        state.consume_prefix()
        state.adjacent = self.in_item


class RawBlock:
    """A preformatted region, written without squeezing or escaping.

    The active prefix is written at the start of every physical line so
    code inside a quote or list stays inside it.

    Parameters
    ----------
    state : RenderState
        The state shared by every block of this render

    """

    def __init__(self, state: RenderState):
        """Initialize a raw block borrowing ``state``."""
        self.state = state
        self.at_start_of_line = True
        self._started = False

    def __enter__(self) -> RawBlock:
        """Return the block itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        """Close the block."""
        self.close()
        return False

    def push(self, text: str) -> None:
        """Write ``text`` verbatim, prefixing each new line."""
        for index, line in enumerate(text.split("\n")):
            if index:
                self._end_line()
            if line:
                self._start_line()
                self.state.result += line

    def ensure_newline(self) -> None:
        """Terminate the current line unless it is already terminated."""
        if not self.at_start_of_line:
            self.state.result += "\n"
            self.at_start_of_line = True

    def close(self) -> None:
        """Finish the block; following items are separated by a blank line."""
        self.state.adjacent = False

    def _start_line(self, empty: bool = False) -> None:
        if not self.at_start_of_line:
            return
        state = self.state
        if self._started:
            prefix = state.subsequent_prefix
        else:
            state.push_gap(False)
            prefix = state.initial_prefix
            state.consume_prefix()
            self._started = True
        state.result += prefix.rstrip() if empty else prefix
        self.at_start_of_line = False

    def _end_line(self) -> None:
        if self.at_start_of_line:
            self._start_line(empty=True)
        self.state.result += "\n"
        self.at_start_of_line = True
