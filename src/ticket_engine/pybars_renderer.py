"""
PyBars3-based Handlebars renderer.

Compiles the ticket templates with pybars3 and renders them against a plain
dict context.

Architecture:
- Templates are compiled once and cached by content hash
- Compilation is serialized by a class-level RLock: pybars3 Compiler
  instances share one code builder
- Context is prepared to handle None values (converted to empty strings)
- Supports: {{{variable}}}, {{#if}}...{{else}}...{{/if}}, {{#each}}
"""
import logging
import threading
from typing import Dict, Any, Callable

from pybars import Compiler

logger = logging.getLogger(__name__)


class PybarsRenderer:
    """
    Renders Handlebars templates using pybars3.

    Rendering never raises: a template that fails to compile or render is
    logged and returned as-is.
    """

    _lock = threading.RLock()

    def __init__(self):
        self.compiler = Compiler()
        self._compiled_cache: Dict[int, Callable] = {}

    def _compile(self, template_content: str) -> Callable:
        template_hash = hash(template_content)
        with self._lock:
            if template_hash not in self._compiled_cache:
                self._compiled_cache[template_hash] = self.compiler.compile(template_content)
            return self._compiled_cache[template_hash]

    def _prepare_context(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Prepare context for pybars3 rendering.

        - Converts None values to empty strings (pybars3 doesn't handle None well)
        - Converts tuples to lists so {{#each}} iterates them

        Args:
            context: The original template context

        Returns:
            Prepared context safe for pybars3
        """
        if context is None:
            return {}

        result = {}
        for key, value in context.items():
            if value is None:
                result[key] = ''
            elif isinstance(value, (list, tuple)):
                result[key] = ['' if item is None else item for item in value]
            else:
                result[key] = value
        return result

    def render(self, template_content: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_content: The Handlebars template string
            context: Data to render into the template

        Returns:
            Rendered template string
        """
        try:
            template = self._compile(template_content)
        except Exception as e:
            logger.error(f"Failed to compile template: {e}")
            logger.debug(f"Template content:\n{template_content[:500]}...")
            return template_content

        prepared_context = self._prepare_context(context)

        try:
            return str(template(prepared_context))
        except Exception as e:
            logger.error(f"Failed to render template: {e}")
            logger.debug(f"Context keys: {list(prepared_context.keys())}")
            return template_content
