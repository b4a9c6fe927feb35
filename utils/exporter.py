"""
Exporter
Writes transformed BANI documents as a single file or a zip archive
"""

import os
import zipfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Set, Union

from core.errors import NoDocumentLoaded, NothingToExport
from core.pipeline import ProcessedDocument
from .file_loader import serialize_document

ARCHIVE_NAME = 'bani_files.zip'
BANI_EXTENSION = '.bani'
UPDATED_SUFFIX = '_updated.bani'


def output_filename(name: str) -> str:
    """
    Derive the output file name for a source file or document name

    'walk.bani' -> 'walk_updated.bani'; names without the extension get the
    suffix appended.
    """
    base = os.path.basename(str(name)) or 'animation'
    if base.lower().endswith(BANI_EXTENSION):
        base = base[:-len(BANI_EXTENSION)]
    return base + UPDATED_SUFFIX


def _unique_names(items: Sequence[ProcessedDocument]) -> List[str]:
    used: Set[str] = set()
    names: List[str] = []
    for item in items:
        name = output_filename(item.source_name)
        stem = name[:-len(UPDATED_SUFFIX)]
        counter = 2
        while name in used:
            name = f"{stem}_{counter}{UPDATED_SUFFIX}"
            counter += 1
        used.add(name)
        names.append(name)
    return names


def export_documents(
    processed: Sequence[ProcessedDocument],
    destination: Union[str, Path],
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> Path:
    """
    Write processed documents to destination

    One document is written as a single file, several go into one zip archive.
    A directory destination receives the default file or archive name.

    Args:
        processed: Documents to write; the non-exportable ones are skipped
        destination: Target file or directory
        log_fn: Optional logger

    Returns:
        Path of the written file or archive

    Raises:
        NoDocumentLoaded: processed is empty
        NothingToExport: Every document was skipped
    """
    if not processed:
        raise NoDocumentLoaded()
    items = [item for item in processed if item.exportable]
    if not items:
        raise NothingToExport(len(processed))

    destination = Path(destination)
    names = _unique_names(items)

    if len(items) == 1:
        target = destination / names[0] if destination.is_dir() else destination
        target.write_text(serialize_document(items[0].document), encoding='utf-8')
    else:
        target = destination / ARCHIVE_NAME if destination.is_dir() else destination
        with zipfile.ZipFile(target, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for name, item in zip(names, items):
                archive.writestr(name, serialize_document(item.document))

    if log_fn:
        log_fn(f"Exported {len(items)} file(s) to {target}", "SUCCESS")
    return target
