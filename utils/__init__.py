"""
Utils module for BANI Mask Builder
Contains file loading, batch processing and export helpers
"""

from .file_loader import load_bani_file, load_document, parse_bani_text, serialize_document
from .batch import BatchResult, LoadedDocument, process_batch
from .exporter import export_documents, output_filename

__all__ = [
    'load_bani_file',
    'load_document',
    'parse_bani_text',
    'serialize_document',
    'BatchResult',
    'LoadedDocument',
    'process_batch',
    'export_documents',
    'output_filename',
]
