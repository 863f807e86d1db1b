"""Generate and delete TypeScript mixin files from a template and maintain their auto-import file."""

__version__ = "0.1.0"