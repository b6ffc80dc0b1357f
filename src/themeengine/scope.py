"""
Namespace a template body executes in.
"""

import builtins
import keyword
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from themeengine.escaping import escape

if TYPE_CHECKING:
    from themeengine.engine import RenderContext, ThemeEngine


class TemplateParams(Mapping):
    """Read-only view of the parameters passed to a template"""

    def __init__(self, values: Dict[str, Any]):
        self._values = values

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"TemplateParams({self._values!r})"


class TemplateScope:
    """Builds the globals for one template execution.

    Helpers are bound first; a parameter is exposed as a bare name only when
    its key is a valid identifier that does not shadow a helper. Every
    parameter stays reachable through ``params``.
    """

    def __init__(self, engine: 'ThemeEngine', context: 'RenderContext',
                 params: Dict[str, Any], filename: str):
        self.engine = engine
        self.context = context
        self.params = TemplateParams(params)
        self.filename = filename

    def echo(self, *values: Any):
        writer = self.context.blocks.writer
        for value in values:
            writer.write(value if isinstance(value, str) else str(value))

    def print(self, *values: Any, sep: Optional[str] = ' ', end: Optional[str] = '\n',
              file=None, flush: bool = False):
        builtins.print(*values, sep=sep, end=end, file=file or self.context.blocks.writer, flush=flush)

    def helpers(self) -> Dict[str, Any]:
        engine = self.engine
        blocks = self.context.blocks
        return {
            'echo': self.echo,
            'print': self.print,
            'e': escape,
            'escape': escape,
            'asset': engine.asset,
            'start': blocks.start,
            'end': blocks.end,
            'yield_': blocks.yield_,
            'get_block': blocks.yield_,
            'block': blocks.block,
            'extend': engine.extend,
            'partial': engine.partial,
            'params': self.params,
        }

    def namespace(self) -> Dict[str, Any]:
        namespace: Dict[str, Any] = {
            '__name__': '__template__',
            '__file__': self.filename,
            '__builtins__': builtins,
        }
        helpers = self.helpers()
        namespace.update(helpers)

        for key, value in self.params.items():
            if (isinstance(key, str) and key.isidentifier() and not keyword.iskeyword(key)
                    and key not in namespace):
                namespace[key] = value
        return namespace
