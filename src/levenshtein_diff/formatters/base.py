from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, List, TextIO, Optional, Dict
from enum import Enum
import sys

from ..algorithms.utils import DiffResult, Edit, OpType


class OutputTarget(Enum):
    STDOUT = "stdout"
    FILE = "file"
    STRING = "string"


@dataclass
class FormatterConfig:
    use_color: bool = True
    cell_width: int = 1
    show_headers: bool = True
    highlight_path: bool = True

    def copy(self) -> 'FormatterConfig':
        return replace(self)

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        return replace(self, use_color=use_color)

    def with_cell_width(self, width: int) -> 'FormatterConfig':
        return replace(self, cell_width=width)

    def with_headers(self, show_headers: bool) -> 'FormatterConfig':
        return replace(self, show_headers=show_headers)


ANSI_CODES = {
    'reset': '\033[0m',
    'bold': '\033[1m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'cyan': '\033[36m',
}


class ColorScheme:
    """ANSI escapes by name. Every attribute is '' once colors are disabled."""

    def __init__(self, enabled: bool = True):
        for name, code in ANSI_CODES.items():
            setattr(self, name, code if enabled else '')

    def disable_colors(self):
        for name in ANSI_CODES:
            setattr(self, name, '')

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        return cls(enabled=False)

    def for_op(self, op: OpType) -> str:
        names = {OpType.INSERT: 'green', OpType.DELETE: 'red', OpType.SUBSTITUTE: 'yellow'}
        return getattr(self, names[OpType(op)])


class OutputWriter:
    """Sends text to a stream, or collects it when the target is STRING."""

    def __init__(self, target: OutputTarget = OutputTarget.STDOUT, output: Optional[TextIO] = None):
        self.target = target
        self._chunks: List[str] = []
        self._stream = None
        if target != OutputTarget.STRING:
            self._stream = output or sys.stdout

    def write(self, text: str):
        if self._stream is None:
            self._chunks.append(text)
        else:
            self._stream.write(text)

    def writeln(self, text: str = ""):
        self.write(f"{text}\n")

    def get_output(self) -> str:
        return "".join(self._chunks)


def describe_value(value: object) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return repr(value)


class BaseFormatter(ABC):
    """Renders a DiffResult. Subclasses only implement ``_format_impl``."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme(enabled=self.config.use_color)
        self.writer: Optional[OutputWriter] = None

    def format(self, result: DiffResult, output: Optional[TextIO] = None) -> str:
        """Return the rendering, or write it to ``output`` and return ''."""
        target = OutputTarget.STRING if output is None else OutputTarget.FILE
        self.writer = OutputWriter(target, output)
        self._format_impl(result)
        return self.writer.get_output()

    @abstractmethod
    def _format_impl(self, result: DiffResult):
        pass

    def _write(self, text: str):
        self.writer.write(text)

    def _writeln(self, text: str = ""):
        self.writer.writeln(text)

    def _paint(self, text: str, color: str) -> str:
        if not color:
            return text
        return f"{color}{text}{self.colors.reset}"


class FormatterFactory:
    _registry: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type], type]:
        def decorator(formatter_class: type) -> type:
            cls._registry[name] = formatter_class
            return formatter_class
        return decorator

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        try:
            formatter_class = cls._registry[name]
        except KeyError:
            raise ValueError(f"Unknown formatter {name!r}, expected one of {cls.available()}") from None
        return formatter_class(config)

    @classmethod
    def available(cls) -> List[str]:
        return sorted(cls._registry)


@FormatterFactory.register("edits")
class EditListFormatter(BaseFormatter):
    SYMBOLS = {
        OpType.INSERT: '+',
        OpType.DELETE: '-',
        OpType.SUBSTITUTE: '~',
    }

    def _format_impl(self, result: DiffResult):
        for edit in result.edits:
            self._writeln(self._paint(self.format_edit(edit), self.colors.for_op(edit.op)))
        counts = result.counts()
        self._writeln(f"{counts['total']} edits: {counts['inserts']} inserts, "
                      f"{counts['deletes']} deletes, {counts['substitutes']} substitutes")

    def format_edit(self, edit: Edit) -> str:
        symbol = self.SYMBOLS[OpType(edit.op)]
        if edit.op == OpType.DELETE:
            return f"{symbol} {edit.position}"
        return f"{symbol} {edit.position} {edit.value!r}"
