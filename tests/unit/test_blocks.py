"""
Unit tests for output buffers and named blocks
"""
import pytest

from themeengine import BlockStack, EmptyBlockStack


@pytest.fixture
def stack():
    stack = BlockStack()
    stack.push_writer()
    return stack


class TestBlockStack:
    """Test BlockStack"""

    def test_block_captures_output(self, stack):
        stack.start("title")
        stack.write("Hello")
        assert stack.end() == "title"
        assert stack.yield_("title") == "Hello"

    def test_block_output_not_in_parent(self, stack):
        parent = stack.writer
        stack.write("before ")
        stack.start("side")
        stack.write("captured")
        stack.end()
        stack.write("after")
        assert parent.getvalue() == "before after"

    def test_repeated_blocks_accumulate(self, stack):
        stack.start("n")
        stack.write("a")
        stack.end()
        stack.start("n")
        stack.write("b")
        stack.end()
        assert stack.yield_("n") == "ab"

    def test_yield_default(self, stack):
        assert stack.yield_("missing", "fallback") == "fallback"
        assert stack.yield_("missing") == ""

    def test_nested_blocks_close_lifo(self, stack):
        stack.start("outer")
        stack.write("o1 ")
        stack.start("inner")
        stack.write("i")
        assert stack.depth == 2
        assert stack.end() == "inner"
        stack.write("o2")
        assert stack.end() == "outer"

        assert stack.yield_("inner") == "i"
        assert stack.yield_("outer") == "o1 o2"

    def test_end_without_start(self, stack):
        with pytest.raises(EmptyBlockStack):
            stack.end()

    def test_empty_block_stack_is_index_error(self, stack):
        with pytest.raises(IndexError):
            stack.end()

    def test_context_manager(self, stack):
        with stack.block("footer"):
            stack.write("bye")
        assert stack.yield_("footer") == "bye"
        assert stack.open_blocks == []

    def test_context_manager_closes_on_error(self, stack):
        parent = stack.writer
        with pytest.raises(ValueError):
            with stack.block("x"):
                stack.write("in")
                raise ValueError("boom")

        assert stack.open_blocks == []
        assert stack.yield_("x") == "in"
        stack.write("after")
        assert parent.getvalue() == "after"

    def test_pop_writer_drops_unclosed_blocks(self):
        stack = BlockStack()
        outer = stack.push_writer()
        stack.start("kept")
        template = stack.push_writer()
        stack.start("left-open")
        stack.write("lost")

        assert stack.pop_writer(template) == ["left-open"]
        assert stack.open_blocks == ["kept"]
        assert not stack.has("left-open")

        stack.write("k")
        stack.end()
        assert stack.yield_("kept") == "k"
        assert stack.writer is outer

    def test_no_writer(self):
        with pytest.raises(RuntimeError):
            BlockStack().write("x")
