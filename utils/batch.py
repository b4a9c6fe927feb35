"""
Batch Processing
Loads and transforms several BANI files, one failure never stopping the others
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from core.data_structures import AnimationDocument
from core.errors import BaniError
from core.pipeline import ProcessedDocument, ProcessingOptions, process_document
from .file_loader import load_document


def _default_logger(message: str, level: str = "INFO") -> None:
    print(f"[{level}] {message}")


@dataclass
class LoadedDocument:
    """A document that passed validation, with the file it came from"""
    filename: str
    document: AnimationDocument


@dataclass
class BatchResult:
    processed: List[ProcessedDocument] = field(default_factory=list)
    failures: List[Tuple[str, BaniError]] = field(default_factory=list)

    @property
    def exportable(self) -> List[ProcessedDocument]:
        return [item for item in self.processed if item.exportable]


def load_sources(
    sources: Iterable[Tuple[str, str]],
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> Tuple[List[LoadedDocument], List[Tuple[str, BaniError]]]:
    """
    Parse and validate (filename, text) pairs

    Returns:
        Tuple of (loaded documents, (filename, error) for each rejected file)
    """
    log = log_fn or _default_logger
    loaded: List[LoadedDocument] = []
    failures: List[Tuple[str, BaniError]] = []
    for filename, text in sources:
        try:
            document = load_document(text, log)
        except BaniError as e:
            log(f"Error parsing BANI file {filename}: {e}", "ERROR")
            failures.append((filename, e))
            continue
        loaded.append(LoadedDocument(filename, document))
        log(f"Loaded {filename}", "SUCCESS")
    return loaded, failures


def process_loaded(
    loaded: Iterable[LoadedDocument],
    options: Optional[ProcessingOptions] = None,
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> List[ProcessedDocument]:
    """Transform each loaded document independently"""
    return [
        process_document(item.document, options, source_name=item.filename, log_fn=log_fn or _default_logger)
        for item in loaded
    ]


def process_batch(
    sources: Iterable[Tuple[str, str]],
    options: Optional[ProcessingOptions] = None,
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> BatchResult:
    """
    Load and transform every (filename, text) pair

    Args:
        sources: File names with their contents
        options: Processing settings shared by all documents
        log_fn: Logger, prints to stdout when None

    Returns:
        BatchResult with the transformed documents and the rejected files
    """
    loaded, failures = load_sources(sources, log_fn)
    return BatchResult(process_loaded(loaded, options, log_fn), failures)
