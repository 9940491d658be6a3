from __future__ import annotations

from .kinds import SyntaxKind
from .nodes import SourceFile, SyntaxNode, get_original_node
from .parser import parse_source
from .printer import Printer, get_text, print_source_file
from .visitor import TransformationContext

__all__ = [
    "SyntaxKind",
    "SyntaxNode",
    "SourceFile",
    "get_original_node",
    "parse_source",
    "Printer",
    "get_text",
    "print_source_file",
    "TransformationContext",
]
