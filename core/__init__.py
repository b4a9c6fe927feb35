"""
Core module for BANI Mask Builder
Contains the document model, validation and the mask transformation
"""

from .data_structures import (
    Direction,
    STORAGE_ORDER,
    SCAN_ORDER,
    SpriteRef,
    SpriteDef,
    FrameDirections,
    Frame,
    AnimationOptions,
    AnimationDocument,
)
from .errors import (
    BaniError,
    ParseError,
    ValidationError,
    MissingProperty,
    InvalidBlockingBounds,
    InvalidSprites,
    NoHeadSpritesFound,
    NoDocumentLoaded,
    NothingToExport,
)
from .validator import validate
from .key_allocator import next_key
from .mask_generator import MaskRef, MaskSpriteRefs, generate_mask_sprites
from .head_mask_placement import HeadMaskCandidate, find_head_mask_candidates, place_masks
from .pipeline import ProcessingOptions, ProcessedDocument, process_document

__all__ = [
    'Direction',
    'STORAGE_ORDER',
    'SCAN_ORDER',
    'SpriteRef',
    'SpriteDef',
    'FrameDirections',
    'Frame',
    'AnimationOptions',
    'AnimationDocument',
    'BaniError',
    'ParseError',
    'ValidationError',
    'MissingProperty',
    'InvalidBlockingBounds',
    'InvalidSprites',
    'NoHeadSpritesFound',
    'NoDocumentLoaded',
    'NothingToExport',
    'validate',
    'next_key',
    'MaskRef',
    'MaskSpriteRefs',
    'generate_mask_sprites',
    'HeadMaskCandidate',
    'find_head_mask_candidates',
    'place_masks',
    'ProcessingOptions',
    'ProcessedDocument',
    'process_document',
]
