"""
Head-Mask Placement
Finds 48x48 HEAD sprite references in every frame and places a mask above each one
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .data_structures import AnimationDocument, Direction, Number, SpriteRef
from .errors import NoHeadSpritesFound
from .mask_generator import MaskSpriteRefs

# Head position -> mask position, indexed by SCAN_ORDER position
HEAD_MASK_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -16),   # down
    (0, -10),   # up
    (-1, -15),  # left
    (1, -15),   # right
)


@dataclass
class HeadMaskCandidate:
    """A head reference that needs a mask, as found during the scan"""
    sprite_key: str
    head_x: Number
    head_y: Number
    mask_x: Number
    mask_y: Number
    direction: Direction
    direction_index: int
    frame_index: int

    @property
    def mask_position(self) -> Tuple[Number, Number]:
        return (self.mask_x, self.mask_y)


def mask_position(head_x: Number, head_y: Number, direction_index: int) -> Tuple[Number, Number]:
    """Mask coordinates for a head at (head_x, head_y) scanned at direction_index"""
    dx, dy = HEAD_MASK_OFFSETS[direction_index]
    return head_x + dx, head_y + dy


def find_head_mask_candidates(
    document: AnimationDocument,
    mask_refs: Optional[MaskSpriteRefs] = None,
) -> List[HeadMaskCandidate]:
    """
    Scan all frames for maskable HEAD references

    A frame yields at most one candidate per mask position, whatever the
    direction or sprite the position came from.

    Args:
        document: Document to scan
        mask_refs: Generated masks; their configured offsets shift the positions

    Returns:
        Candidates in frame and scan order
    """
    candidates: List[HeadMaskCandidate] = []

    for frame_index, frame in enumerate(document.frames):
        seen = set()
        for direction_index, direction, refs in frame.directions.iter_scan_order():
            for ref in refs:
                sprite = document.get_sprite(ref.sprite_key)
                if sprite is None or not sprite.is_maskable_head():
                    continue

                mask_x, mask_y = mask_position(ref.x, ref.y, direction_index)
                if mask_refs is not None:
                    mask_ref = mask_refs.get(direction)
                    mask_x += mask_ref.offset_x
                    mask_y += mask_ref.offset_y

                if (mask_x, mask_y) in seen:
                    continue
                seen.add((mask_x, mask_y))
                candidates.append(HeadMaskCandidate(
                    sprite_key=ref.sprite_key,
                    head_x=ref.x,
                    head_y=ref.y,
                    mask_x=mask_x,
                    mask_y=mask_y,
                    direction=direction,
                    direction_index=direction_index,
                    frame_index=frame_index,
                ))

    return candidates


def place_masks(
    document: AnimationDocument,
    mask_refs: MaskSpriteRefs,
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> List[HeadMaskCandidate]:
    """
    Append a mask reference for every head found in the document

    A position already present in the target direction list (compared on
    x/y only) is not added again, so running this twice changes nothing
    the second time.

    Args:
        document: Document to modify in place
        mask_refs: Keys and offsets from generate_mask_sprites
        log_fn: Optional logger

    Returns:
        Candidates that produced a new reference

    Raises:
        NoHeadSpritesFound: No frame references a 48x48 HEAD sprite
    """
    candidates = find_head_mask_candidates(document, mask_refs)
    if not candidates:
        raise NoHeadSpritesFound(document.name)

    by_frame: Dict[int, List[HeadMaskCandidate]] = {}
    for candidate in candidates:
        by_frame.setdefault(candidate.frame_index, []).append(candidate)

    placed: List[HeadMaskCandidate] = []
    for frame_index, frame in enumerate(document.frames):
        for candidate in by_frame.get(frame_index, []):
            refs = frame.directions.get(candidate.direction)
            if any(ref.position == candidate.mask_position for ref in refs):
                continue
            refs.append(SpriteRef(
                mask_refs.get(candidate.direction).sprite_key,
                candidate.mask_x,
                candidate.mask_y,
            ))
            placed.append(candidate)

    if log_fn:
        log_fn(
            f"Placed {len(placed)} mask reference(s) in '{document.name}' "
            f"({len(candidates)} head position(s) found)",
            "INFO",
        )
    return placed
