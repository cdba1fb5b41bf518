from .reader import (
    TokenType, BinaryDetector, is_binary_file,
    tokenize, tokenize_chars, tokenize_words, tokenize_lines,
    get_tokenizer, join_tokens, read_sequence,
)
