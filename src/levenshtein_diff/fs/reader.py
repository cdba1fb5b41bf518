import os
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union


CHECK_SIZE = 8192
NON_TEXT_THRESHOLD = 0.30

# Control bytes that still show up in ordinary text files.
_TEXT_CONTROLS = frozenset(b'\a\b\t\n\f\r\x1b')


class TokenType(str, Enum):
    CHAR = 'char'
    WORD = 'word'
    LINE = 'line'
    BYTE = 'byte'


class BinaryDetector:
    """Guesses whether content is text from a sample of its first bytes."""

    def __init__(self, sample_size: int = CHECK_SIZE, threshold: float = NON_TEXT_THRESHOLD):
        self.sample_size = sample_size
        self.threshold = threshold

    def is_binary_by_content(self, data: bytes) -> bool:
        if b'\x00' in data:
            return True
        try:
            data.decode('utf-8')
        except UnicodeDecodeError:
            suspicious = sum(1 for byte in data if byte < 0x20 and byte not in _TEXT_CONTROLS)
            return suspicious > self.threshold * len(data)
        return False

    def check_file(self, filepath: str) -> bool:
        _require_file(filepath)
        with open(filepath, 'rb') as f:
            return self.is_binary_by_content(f.read(self.sample_size))


def _require_file(filepath: str):
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    if not os.path.isfile(filepath):
        raise ValueError(f"Not a file: {filepath}")


def is_binary_file(filepath: str) -> bool:
    return BinaryDetector().check_file(filepath)


def tokenize_lines(text: str) -> List[str]:
    if not text:
        return []
    return text[:-1].split('\n') if text.endswith('\n') else text.split('\n')


def tokenize_words(text: str) -> List[str]:
    if not text:
        return []
    return re.findall(r'\S+|\s+', text)


def tokenize_chars(text: str) -> List[str]:
    return list(text)


def get_tokenizer(token_type: TokenType) -> Callable[[str], List[str]]:
    tokenizers: Dict[TokenType, Callable[[str], List[str]]] = {
        TokenType.LINE: tokenize_lines,
        TokenType.WORD: tokenize_words,
        TokenType.CHAR: tokenize_chars,
    }
    token_type = TokenType(token_type)
    if token_type not in tokenizers:
        raise ValueError(f"No text tokenizer for {token_type.value!r}")
    return tokenizers[token_type]


def tokenize(text: Union[str, bytes], token_type: TokenType = TokenType.CHAR) -> Sequence:
    token_type = TokenType(token_type)
    if token_type == TokenType.BYTE:
        return text.encode('utf-8') if isinstance(text, str) else bytes(text)
    if isinstance(text, bytes):
        text = text.decode('utf-8')
    return get_tokenizer(token_type)(text)


def join_tokens(tokens: Sequence, token_type: TokenType) -> Union[str, bytes]:
    token_type = TokenType(token_type)
    if token_type == TokenType.BYTE:
        return bytes(tokens)
    if token_type == TokenType.LINE:
        return '\n'.join(tokens)
    return ''.join(tokens)


def read_sequence(filepath: str, token_type: TokenType = TokenType.LINE,
                  encoding: Optional[str] = None) -> Sequence:
    """Load a file as a sequence of ``token_type`` elements.

    Byte mode returns the raw ``bytes``. Other modes refuse binary content
    and normalise CRLF line endings before tokenizing.
    """
    token_type = TokenType(token_type)
    _require_file(filepath)
    with open(filepath, 'rb') as f:
        raw = f.read()
    if token_type == TokenType.BYTE:
        return raw
    detector = BinaryDetector()
    if detector.is_binary_by_content(raw[:detector.sample_size]):
        raise ValueError(f"Cannot tokenize binary file as {token_type.value}s: {filepath}")
    text = raw.decode(encoding or 'utf-8', errors='replace').replace('\r\n', '\n')
    return get_tokenizer(token_type)(text)
