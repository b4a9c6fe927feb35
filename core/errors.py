"""
Errors
Exception types raised while loading, validating and transforming BANI files
"""

from typing import Optional


class BaniError(Exception):
    """Base class for every BANI processing failure"""


class ParseError(BaniError):
    """Input text is not a readable BANI document"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ValidationError(BaniError):
    """Parsed document is missing required structure"""


class MissingProperty(ValidationError):
    """A required property is absent"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Missing property '{path}' in the BANI file")


class InvalidBlockingBounds(ValidationError):
    def __init__(self):
        super().__init__("Invalid blockingbounds format. Expected an array of 4 elements.")


class InvalidSprites(ValidationError):
    def __init__(self):
        super().__init__("Missing or invalid sprites property.")


class NoHeadSpritesFound(BaniError):
    """
    No HEAD sprite with 48x48 bounds is referenced by any frame.

    Recoverable: the document stays valid and exportable, it just gets no
    mask placements.
    """

    def __init__(self, document_name: str = ""):
        self.document_name = document_name
        suffix = f" in '{document_name}'" if document_name else ""
        super().__init__(f"No HEAD sprites with bounds 48x48 found{suffix}.")


class NoDocumentLoaded(BaniError):
    def __init__(self):
        super().__init__("No BANI files loaded.")


class NothingToExport(BaniError):
    """Documents were loaded but none of them qualifies for export"""

    def __init__(self, skipped: int = 0):
        self.skipped = skipped
        super().__init__(f"No document to export: all {skipped} loaded document(s) were skipped.")
