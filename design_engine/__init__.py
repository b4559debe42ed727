"""
Design Engine - converts HTML and CSS into a design tree.

A design tree is a nested JSON-serializable structure of frames, text,
images and SVG nodes with absolute layout boxes and a reduced style record,
suitable for import into a vector design tool.
"""

from design_engine.utils.logging import setup_logging

# Console logging only; the CLI adds file logging from configuration
logger = setup_logging()

# Package information
__version__ = "1.0.0"
__author__ = "Design Engine Team"
__description__ = "HTML and CSS to design tree layout and style resolution"

from design_engine.converter import (  # noqa: E402
    DesignTreeConverter, create_empty_design_tree, document_to_design_tree, extract_color_palette,
    html_to_design_tree, url_to_design_tree
)
from design_engine.dom.document import DocumentSnapshot, parse_html  # noqa: E402
from design_engine.exceptions import DesignEngineError, DesignTreeError, DocumentLoadError  # noqa: E402
from design_engine.layout.flex import apply_flex_layout  # noqa: E402
from design_engine.layout.flow import build_layout_tree, compute_layout  # noqa: E402

__all__ = [
    'DesignTreeConverter', 'create_empty_design_tree', 'document_to_design_tree',
    'extract_color_palette', 'html_to_design_tree', 'url_to_design_tree', 'DocumentSnapshot',
    'parse_html', 'DesignEngineError', 'DesignTreeError', 'DocumentLoadError',
    'apply_flex_layout', 'build_layout_tree', 'compute_layout'
]

logger.debug(f"Design Engine v{__version__} initialized")
