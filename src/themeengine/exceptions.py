"""
Exception hierarchy for the theme engine.
"""

from typing import Iterable, List, Optional


class ThemeEngineError(Exception):
    """Base exception for theme engine errors"""
    pass


class TemplateNotFound(ThemeEngineError, FileNotFoundError):
    """Raised when a template name resolves to no existing file"""

    def __init__(self, name: str, candidates: Optional[Iterable[str]] = None):
        self.name = name
        self.candidates: List[str] = [str(c) for c in (candidates or [])]
        tried = f" (tried: {', '.join(self.candidates)})" if self.candidates else ""
        super().__init__(f"Template not found: {name}{tried}")

    def __str__(self) -> str:
        return self.args[0]


class EmptyBlockStack(ThemeEngineError, IndexError):
    """Raised when end() is called with no open block"""

    def __init__(self, message: str = "end() called without a matching start()"):
        super().__init__(message)
