"""Document serialization: JSON text for rendered documents.

Output keeps document insertion order (``type`` first in every record)
and leaves non-ASCII text unescaped.

Example:
    from rusty_ast import parse, to_model
    from rusty_ast.renderers.document import build_document
    from rusty_ast.serialization import to_json

    text = to_json(build_document(to_model(parse("struct Unit;"))))

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Mapping
from typing import Any

from rusty_ast.config import get_render_config
from rusty_ast.utils.logger import get_logger

logger = get_logger(__name__)

# Returned when a document cannot be encoded
EMPTY_DOCUMENT = "{}"


def to_json(document: Mapping[str, Any], *, indent: int | None = None) -> str:
    """Serialize a document to a JSON string.

    Never raises. A document that cannot be encoded is logged and replaced
    by ``EMPTY_DOCUMENT``.

    Args:
        document: Document from DocumentBuilder (or any JSON-shaped mapping)
        indent: Spaces per level. Defaults to ``RenderConfig.json_indent``;
            configure ``json_indent=None`` for compact output.

    Returns:
        JSON text

    """
    if indent is None:
        indent = get_render_config().json_indent
    try:
        return json.dumps(document, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Could not serialize document: %s", e)
        return EMPTY_DOCUMENT
