from __future__ import annotations

# Public API:
#  • transform_text: rewrite If/Else constructs in a source string
#  • create_transformer: plugin entry point for pipelines that hold parsed trees
from .engine import transform_text
from .transform import create_transformer

__all__ = ["transform_text", "create_transformer"]
