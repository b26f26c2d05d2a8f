"""Encoding and decoding of stored option shapes."""

from .codec import (
    clean_option_text,
    decode,
    encode,
    encode_json,
    option_pairs,
    option_text,
    render_lines,
    split_compound,
    statement_pairs,
)

__all__ = [
    "encode",
    "encode_json",
    "decode",
    "split_compound",
    "option_pairs",
    "statement_pairs",
    "option_text",
    "clean_option_text",
    "render_lines",
]
