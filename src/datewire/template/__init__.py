"""Pattern-template compiler and its cache.

Python 3.13+.
"""

from .cache import TemplateCache, TemplateCacheConfig, default_cache, get_template
from .compiler import (
    CompiledTemplate,
    FieldPart,
    LiteralPart,
    TemplatePart,
    compile_template,
    scan_pattern,
)

__all__ = [
    "CompiledTemplate",
    "FieldPart",
    "LiteralPart",
    "TemplateCache",
    "TemplateCacheConfig",
    "TemplatePart",
    "compile_template",
    "default_cache",
    "get_template",
    "scan_pattern",
]
