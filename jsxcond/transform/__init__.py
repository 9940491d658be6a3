from __future__ import annotations

# Public API of the rewrite engine:
#  • create_transformer: plugin entry point (options -> ctx -> source file -> source file)
#  • ConditionalRewriter: the per-file rewrite pass
from .driver import ConditionalRewriter, TransformOptions, create_transformer, DEFAULT_MARKER_MODULE

__all__ = ["ConditionalRewriter", "TransformOptions", "create_transformer", "DEFAULT_MARKER_MODULE"]
