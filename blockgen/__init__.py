"""blockgen: block trees to Python source - public API."""

from __future__ import annotations

from .blocks import Block as Block, chain_of as chain_of
from .errors import (
    GenerationError as GenerationError,
    UnresolvedNameError as UnresolvedNameError,
    UnsupportedBlockError as UnsupportedBlockError,
)
from .generator import Generator as Generator, generate as generate
from .order import Order as Order
from .parse import ParseError as ParseError, parse_xml


def generate_xml(source: str, indent: str = "    ") -> str:
    """Parse workspace XML and generate its Python program."""
    return generate(parse_xml(source), indent=indent)
