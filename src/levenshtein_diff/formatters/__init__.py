from .base import (
    BaseFormatter, EditListFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget, describe_value
)
from .matrix import PlainMatrixFormatter, TableMatrixFormatter
from .structured import JSONFormatter
from ..algorithms.utils import DiffResult
from ..algorithms.edit import backtrack_path


__all__ = [
    "BaseFormatter", "EditListFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget", "describe_value",
    "PlainMatrixFormatter", "TableMatrixFormatter", "JSONFormatter",
    "create_formatter", "get_available_formatters", "format_result", "backtrack_path",
]


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()


def format_result(result: DiffResult, formatter_name: str = "edits", config: FormatterConfig = None) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(result)
