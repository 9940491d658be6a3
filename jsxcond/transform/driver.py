"""
Tree rewrite driver.

Walks a source file top-down and replaces every

    <If condition={C}>A</If> <Else>B</Else>

with `{C ? <>A</> : <>B</>}` (or `{C ? <>A</> : null}` without an <Else>).
Replacements are visited again, so nested If/Else constructs in either branch
are rewritten by the same pass. The import of the marker module is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ..errors import OrphanedElseError, TransformError
from ..syntax.kinds import SyntaxKind
from ..syntax.nodes import SourceFile, SyntaxNode
from ..syntax.printer import get_text
from ..syntax.visitor import TransformationContext
from .branches import create_when_false_expression, create_when_true_expression
from .classify import is_else_node, is_if_node, is_markup_parent, markup_parent_of
from .condition import get_condition_expression
from .orphans import check_for_orphaned_else

logger = logging.getLogger(__name__)

DEFAULT_MARKER_MODULE = "jsx-conditionals"

TOP_LEVEL_ELSE_MESSAGE = "<Else> is used a top-level node and has no associated <If> condition"


@dataclass(frozen=True)
class TransformOptions:
    marker_module: str = DEFAULT_MARKER_MODULE

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> TransformOptions:
        if not d:
            return TransformOptions()
        return TransformOptions(marker_module=str(d.get("marker_module", DEFAULT_MARKER_MODULE)))


class ConditionalRewriter:
    """Rewrites one source file. Instances are not reused across files."""

    def __init__(self, ctx: TransformationContext, source_file: SourceFile, options: TransformOptions):
        self.ctx = ctx
        self.source_file = source_file
        self.options = options

    def rewrite(self) -> SourceFile:
        root = self.ctx.visit_each_child(self.source_file.root, self.visit)
        return self.source_file.with_root(root)

    @property
    def file_name(self) -> str:
        return self.ctx.file_name or self.source_file.file_name

    def visit(self, node: SyntaxNode) -> Optional[SyntaxNode]:
        try:
            return self._visit(node)
        except TransformError as err:
            if not node.has_source:
                # Synthesized text is not in the file; the enclosing <If> reports it
                raise
            raise err.with_context(self.file_name, get_text(self.source_file, node))

    def _visit(self, node: SyntaxNode) -> Optional[SyntaxNode]:
        if node.kind is SyntaxKind.IMPORT_DECLARATION and node.module_specifier == self.options.marker_module:
            logger.debug("Removing import of '%s' in %s", node.module_specifier, self.file_name)
            return None

        if is_markup_parent(node):
            check_for_orphaned_else(node)

        if is_if_node(node):
            return self._rewrite_if(node)

        if is_else_node(node):
            # Already consumed by the <If> in front of it
            if markup_parent_of(node) is None:
                raise OrphanedElseError(TOP_LEVEL_ELSE_MESSAGE)
            return None

        return self.ctx.visit_each_child(node, self.visit)

    def _rewrite_if(self, if_node: SyntaxNode) -> SyntaxNode:
        factory = self.ctx.factory
        replacement = factory.create_jsx_expression(
            factory.create_conditional_expression(
                get_condition_expression(if_node),
                create_when_true_expression(self.ctx, if_node),
                create_when_false_expression(self.ctx, if_node),
            )
        )
        logger.debug("Rewriting <If> at %d in %s", if_node.pos, self.file_name)
        return self.ctx.set_original_node(self.ctx.visit_each_child(replacement, self.visit), if_node)


TransformerFactory = Callable[[TransformationContext], Callable[[SourceFile], SourceFile]]


def create_transformer(options: Union[TransformOptions, Dict[str, Any], None] = None) -> TransformerFactory:
    """
    Plugin entry point: options -> (context -> (source file -> source file)).

    Options may be given as a plain mapping (as read from a build tool
    configuration) or as TransformOptions.
    """
    opts = options if isinstance(options, TransformOptions) else TransformOptions.from_dict(options)

    def factory(ctx: TransformationContext) -> Callable[[SourceFile], SourceFile]:
        def transform(source_file: SourceFile) -> SourceFile:
            return ConditionalRewriter(ctx, source_file, opts).rewrite()
        return transform

    return factory


__all__ = [
    "DEFAULT_MARKER_MODULE",
    "TOP_LEVEL_ELSE_MESSAGE",
    "TransformOptions",
    "ConditionalRewriter",
    "create_transformer",
]
