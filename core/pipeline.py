"""
Pipeline
Runs the mask transformation on one loaded document
"""

import copy
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .data_structures import AnimationDocument, Direction
from .errors import NoHeadSpritesFound
from .head_mask_placement import HeadMaskCandidate, place_masks
from .mask_generator import MaskSpriteRefs, generate_mask_sprites

DEFAULT_MASK_FILENAME = 'bbuilder_enueanbumask.png'

# Value of the top-level 'online' field; 2 makes the client fetch the server's file set
DEFAULT_ONLINE_FLAG = 2


def _default_logger(message: str, level: str = "INFO") -> None:
    print(f"[{level}] {message}")


def _zero_offsets() -> Dict[Direction, Tuple[int, int]]:
    return {direction: (0, 0) for direction in Direction}


@dataclass
class ProcessingOptions:
    """User-tunable settings of a processing run"""
    mask_filename: str = DEFAULT_MASK_FILENAME
    online_flag: Optional[int] = DEFAULT_ONLINE_FLAG
    offsets: Dict[Direction, Tuple[int, int]] = field(default_factory=_zero_offsets)
    export_without_masks: bool = True

    def offset_for(self, direction: Direction) -> Tuple[int, int]:
        return self.offsets.get(direction, (0, 0))


@dataclass
class ProcessedDocument:
    """Result of transforming one document"""
    document: AnimationDocument
    source_name: str
    mask_refs: MaskSpriteRefs
    placed: List[HeadMaskCandidate] = field(default_factory=list)
    notice: Optional[NoHeadSpritesFound] = None
    exportable: bool = True

    @property
    def has_masks(self) -> bool:
        return self.notice is None


def process_document(
    document: AnimationDocument,
    options: Optional[ProcessingOptions] = None,
    source_name: str = "",
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> ProcessedDocument:
    """
    Add mask sprites and head mask placements to a copy of document

    The input document is left untouched, so the same loaded document can be
    exported any number of times.

    Args:
        document: Validated document
        options: Processing settings (defaults when None)
        source_name: File name the document was loaded from
        log_fn: Logger, prints to stdout when None

    Returns:
        ProcessedDocument wrapping the transformed copy
    """
    options = options or ProcessingOptions()
    log = log_fn or _default_logger
    source_name = source_name or str(document.name)
    working = copy.deepcopy(document)

    if not working.defaults.get('MASK'):
        working.defaults['MASK'] = options.mask_filename

    if options.online_flag is not None:
        working.extra['online'] = options.online_flag

    offsets = {direction: options.offset_for(direction) for direction in Direction}
    mask_refs = generate_mask_sprites(working, offsets, log_fn=log)

    result = ProcessedDocument(working, source_name, mask_refs)
    try:
        result.placed = place_masks(working, mask_refs, log_fn=log)
    except NoHeadSpritesFound as notice:
        result.notice = notice
        result.exportable = options.export_without_masks
        action = "exporting without placements" if result.exportable else "skipping export"
        log(f"{source_name}: {notice} ({action})", "WARNING")
    return result
