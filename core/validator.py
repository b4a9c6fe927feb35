"""
Validator
Structural checks run on a parsed BANI mapping before it is transformed
"""

from typing import Any, Callable, Dict, Optional, Sequence

from .data_structures import MODIFICATION_DATE_ALIASES, MODIFICATION_DATE_KEY
from .errors import InvalidBlockingBounds, InvalidSprites, MissingProperty

REQUIRED_PROPERTIES = ('name', MODIFICATION_DATE_KEY, 'filetype', 'options', 'sprites', 'defaults')
REQUIRED_OPTIONS_PROPERTIES = ('looping', 'continuous', 'blockingbounds', 'center')
REQUIRED_DEFAULTS_PROPERTIES = ('BODY', 'HEAD', 'HAT')


def _has_property(obj: Any, prop: str) -> bool:
    if not isinstance(obj, dict):
        return False
    if prop == MODIFICATION_DATE_KEY:
        return any(alias in obj for alias in MODIFICATION_DATE_ALIASES)
    return prop in obj


def check_properties(obj: Any, properties: Sequence[str], prefix: str = '') -> None:
    """Raise MissingProperty for the first property of `properties` absent from obj"""
    for prop in properties:
        if not _has_property(obj, prop):
            raise MissingProperty(f"{prefix}{prop}")


def validate(data: Dict[str, Any], log_fn: Optional[Callable[[str, str], None]] = None) -> None:
    """
    Validate the structure of a parsed BANI document

    Stops at the first violation. The mapping is never modified.

    Args:
        data: Parsed document
        log_fn: Optional logger receiving a trace on success

    Raises:
        MissingProperty: A required property is absent
        InvalidBlockingBounds: options.blockingbounds is not a list of 4 elements
        InvalidSprites: sprites is not a mapping
    """
    check_properties(data, REQUIRED_PROPERTIES)
    check_properties(data['options'], REQUIRED_OPTIONS_PROPERTIES, 'options.')
    check_properties(data['defaults'], REQUIRED_DEFAULTS_PROPERTIES, 'defaults.')

    blocking_bounds = data['options']['blockingbounds']
    if not isinstance(blocking_bounds, list) or len(blocking_bounds) != 4:
        raise InvalidBlockingBounds()

    if not isinstance(data['sprites'], dict):
        raise InvalidSprites()

    if log_fn:
        log_fn(f"Validated '{data['name']}' ({len(data['sprites'])} sprites)", "DEBUG")
