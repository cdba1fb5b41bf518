#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import Optional, List, Sequence, TextIO

from . import __version__
from .algorithms.distance import DistanceEngine, EngineConfig, Strategy
from .algorithms.edit import apply_edits, diff
from .algorithms.utils import DiffResult
from .formatters import FormatterConfig, create_formatter, get_available_formatters
from .fs.reader import TokenType, read_sequence, tokenize

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class ColorPrinter:
    RED = '\033[31m'
    GREEN = '\033[32m'
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True, output: Optional[TextIO] = None):
        self.use_color = use_color
        self.output = output or sys.stdout

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_ok(self, text: str):
        self.print(self._paint(text, self.GREEN))

    def print_error(self, text: str):
        sys.stderr.write(f"{self._paint('Error: ' + text, self.RED)}\n")

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{self.RESET}"


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='levenshtein-diff',
            description='Compute the Levenshtein distance and a minimal edit script between two sequences',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s SATURDAY SUNDAY
  %(prog)s --edits --check kitten sitting
  %(prog)s --matrix FLAW LAWN
  %(prog)s -f -t line old.txt new.txt --format json
            '''
        )
        parser.add_argument('source', help='Source sequence (or file with --files)')
        parser.add_argument('target', help='Target sequence (or file with --files)')
        parser.add_argument(
            '-f', '--files',
            action='store_true',
            help='Treat SOURCE and TARGET as file paths'
        )
        parser.add_argument(
            '-t', '--tokens',
            choices=[t.value for t in TokenType],
            default=None,
            help='Element type: char, word, line or byte (default: char, or line with --files)'
        )
        parser.add_argument(
            '-a', '--algorithm',
            choices=[s.value for s in Strategy],
            default=Strategy.TABULATION.value,
            help='Distance algorithm (default: tabulation)'
        )
        parser.add_argument(
            '--no-trim',
            action='store_true',
            help='Do not strip the common prefix and suffix before computing the distance'
        )
        parser.add_argument(
            '--format',
            choices=get_available_formatters(),
            default=None,
            help='Render the result with the given formatter'
        )
        parser.add_argument(
            '-m', '--matrix',
            action='store_true',
            help='Print the distance matrix'
        )
        parser.add_argument(
            '-e', '--edits',
            action='store_true',
            help='Print the edit script'
        )
        parser.add_argument(
            '--check',
            action='store_true',
            help='Apply the edit script to the source and verify it yields the target'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Print nothing, report only through the exit status'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Log debug information to stderr'
        )
        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                            format=LOG_FORMAT, stream=sys.stderr)
        use_color = not args.no_color and sys.stdout.isatty()
        self.printer = ColorPrinter(use_color=use_color)
        try:
            return self._execute(args, use_color)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            return 130
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            self.printer.print_error(str(e))
            return 2

    def _load(self, value: str, args) -> Sequence:
        token_type = TokenType(args.tokens or (TokenType.LINE if args.files else TokenType.CHAR))
        if args.files:
            return read_sequence(value, token_type)
        return tokenize(value, token_type)

    def _execute(self, args, use_color: bool) -> int:
        source = self._load(args.source, args)
        target = self._load(args.target, args)
        config = EngineConfig(strategy=Strategy(args.algorithm), trim_affixes=not args.no_trim)
        engine = DistanceEngine(config)
        logger.debug("Comparing %d and %d elements with %s",
                     len(source), len(target), config.strategy.value)

        if config.strategy == Strategy.NAIVE:
            if args.matrix or args.edits or args.check or args.format:
                raise ValueError("The naive algorithm only computes the distance")
            result = DiffResult(source=source, target=target,
                                distance=engine.distance(source, target), matrix=None, edits=[])
        else:
            result = diff(source, target, engine)

        status = 0 if result.identical else 1
        if args.check and list(apply_edits(source, result.edits)) != list(target):
            self.printer.print_error("Applying the edit script did not reproduce the target")
            return 2
        if args.quiet:
            return status

        fmt_config = FormatterConfig(use_color=use_color)
        if args.format:
            self.printer.print(create_formatter(args.format, fmt_config).format(result).rstrip('\n'))
            return status
        self.printer.print(f"distance: {result.distance}")
        if args.matrix:
            self.printer.print(create_formatter('table', fmt_config).format(result), end='')
        if args.edits:
            self.printer.print(create_formatter('edits', fmt_config).format(result), end='')
        if args.check:
            self.printer.print_ok("round trip: ok")
        return status


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
