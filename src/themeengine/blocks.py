"""
Output buffers and named blocks.

Every render writes into an explicit stack of ``OutputBuffer`` objects instead
of the process stdout. ``start``/``end`` push and pop a buffer on that stack
and file the captured text under a block name. Block content accumulates: a
second ``start('scripts') ... end()`` pair appends to the first.
"""

import io
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from themeengine.exceptions import EmptyBlockStack


class OutputBuffer:
    """String builder a template writes into"""

    def __init__(self):
        self._buffer = io.StringIO()

    def write(self, text: str) -> int:
        return self._buffer.write(text)

    def flush(self):
        pass

    def getvalue(self) -> str:
        return self._buffer.getvalue()


class BlockStack:
    """Named block captures plus the writer stack they live on.

    The bottom of the writer stack belongs to whatever template is being
    executed; open blocks sit above it. ``end`` always closes the most
    recently started block, it does not check which name the caller meant.
    """

    def __init__(self):
        self.blocks: Dict[str, str] = {}
        self._open: List[Tuple[str, OutputBuffer]] = []
        self._writers: List[OutputBuffer] = []

    @property
    def writer(self) -> OutputBuffer:
        """Buffer that output currently goes to"""
        if not self._writers:
            raise RuntimeError("No output buffer is active")
        return self._writers[-1]

    @property
    def open_blocks(self) -> List[str]:
        return [name for name, _ in self._open]

    @property
    def depth(self) -> int:
        return len(self._open)

    def push_writer(self) -> OutputBuffer:
        buffer = OutputBuffer()
        self._writers.append(buffer)
        return buffer

    def pop_writer(self, buffer: OutputBuffer) -> List[str]:
        """Remove ``buffer`` and every writer above it.

        Blocks whose buffers sit above ``buffer`` were never closed; they are
        dropped along with their partial output and their names returned.
        """
        index = next(i for i, w in enumerate(self._writers) if w is buffer)
        abandoned = self._writers[index + 1:]
        del self._writers[index:]

        dropped = [name for name, b in self._open if any(b is w for w in abandoned)]
        if dropped:
            self._open = [(name, b) for name, b in self._open
                          if not any(b is w for w in abandoned)]
        return dropped

    def start(self, name: str):
        """Begin capturing output under ``name``"""
        buffer = self.push_writer()
        self._open.append((name, buffer))

    def end(self) -> str:
        """Close the innermost open block and store its content"""
        if not self._open:
            raise EmptyBlockStack()

        name, buffer = self._open.pop()
        # a partial may have pushed its own writer above this block's buffer
        self._writers = [w for w in self._writers if w is not buffer]
        self.blocks[name] = self.blocks.get(name, '') + buffer.getvalue()
        return name

    def yield_(self, name: str, default: str = '') -> str:
        """Content captured for ``name``, or ``default`` if none was"""
        return self.blocks.get(name, default)

    def has(self, name: str) -> bool:
        return name in self.blocks

    @contextmanager
    def block(self, name: str) -> Iterator[None]:
        """``with block('sidebar'):`` form of start/end"""
        self.start(name)
        try:
            yield
        finally:
            self.end()

    def write(self, text: str) -> int:
        return self.writer.write(text)
