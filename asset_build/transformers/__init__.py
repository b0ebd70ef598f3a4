"""Single-file config transformers."""

from .css import make_css_transformer
from .js import make_js_transformer

__all__ = ["make_css_transformer", "make_js_transformer"]
