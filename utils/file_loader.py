"""
File Loader
Utilities for reading, parsing and writing BANI files
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from core.data_structures import AnimationDocument
from core.errors import ParseError
from core.validator import validate

# A comma directly before a closing bracket or brace, whitespace allowed
_TRAILING_COMMA = re.compile(r',\s*([\]}])')


def strip_trailing_commas(text: str) -> str:
    """Remove trailing commas so relaxed BANI text becomes strict JSON"""
    return _TRAILING_COMMA.sub(r'\1', text)


def parse_bani_text(text: str) -> Dict[str, Any]:
    """
    Parse BANI text into a mapping

    Args:
        text: File contents

    Returns:
        Parsed top-level object

    Raises:
        ParseError: Text is not valid (relaxed) JSON or its root is not an object
    """
    if text.startswith('\ufeff'):
        text = text[1:]
    try:
        data = json.loads(strip_trailing_commas(text))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.msg}", e.lineno, e.colno) from e
    if not isinstance(data, dict):
        raise ParseError("BANI root must be a JSON object")
    return data


def load_document(text: str, log_fn: Optional[Callable[[str, str], None]] = None) -> AnimationDocument:
    """
    Parse, validate and model BANI text

    Raises:
        ParseError: Malformed text or document structure
        ValidationError: A required field is missing or has the wrong shape
    """
    data = parse_bani_text(text)
    validate(data, log_fn)
    return AnimationDocument.from_dict(data)


def load_bani_file(path: Union[str, Path], log_fn: Optional[Callable[[str, str], None]] = None) -> AnimationDocument:
    """
    Load a BANI document from disk

    Args:
        path: Path to the .bani file
        log_fn: Optional logger

    Returns:
        The validated document
    """
    try:
        text = Path(path).read_text(encoding='utf-8-sig')
    except UnicodeDecodeError as e:
        raise ParseError(f"{Path(path).name} is not UTF-8 text: {e.reason} at byte {e.start}") from e
    return load_document(text, log_fn)


def serialize_document(document: Union[AnimationDocument, Dict[str, Any]]) -> str:
    """Render a document as 4-space indented JSON"""
    data = document.to_dict() if isinstance(document, AnimationDocument) else document
    return json.dumps(data, indent=4, ensure_ascii=False)
