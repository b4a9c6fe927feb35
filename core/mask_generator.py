"""
Mask Sprite Generator
Adds the four directional MASK sprites to a document's sprite table
"""

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple

from .data_structures import AnimationDocument, Direction, SpriteDef
from .key_allocator import next_key

MASK_GFX = 'MASK'

Offset = Tuple[int, int]


@dataclass(frozen=True)
class MaskGeometry:
    """Where a direction's mask sits on the mask sprite sheet"""
    direction: Direction
    bounds: Tuple[int, int, int, int]
    scale: Optional[Tuple[int, int]] = None


# Allocation order: down, up, right, left. Left reuses the right-facing
# rectangle mirrored horizontally.
MASK_GEOMETRY: Tuple[MaskGeometry, ...] = (
    MaskGeometry(Direction.DOWN, (0, 0, 48, 72)),
    MaskGeometry(Direction.UP, (48, 0, 48, 72)),
    MaskGeometry(Direction.RIGHT, (96, 0, 48, 72)),
    MaskGeometry(Direction.LEFT, (96, 0, 48, 72), scale=(-1, 1)),
)

MASK_ALLOCATION_ORDER: Tuple[Direction, ...] = tuple(geometry.direction for geometry in MASK_GEOMETRY)


@dataclass
class MaskRef:
    """Sprite key of a generated mask plus the extra placement offset for its direction"""
    sprite_key: str
    offset_x: int = 0
    offset_y: int = 0


@dataclass
class MaskSpriteRefs:
    up: MaskRef
    left: MaskRef
    down: MaskRef
    right: MaskRef

    def get(self, direction: Direction) -> MaskRef:
        return getattr(self, direction.value)

    def keys(self) -> Dict[Direction, str]:
        return {direction: self.get(direction).sprite_key for direction in MASK_ALLOCATION_ORDER}


def generate_mask_sprites(
    document: AnimationDocument,
    offsets: Optional[Mapping[Direction, Offset]] = None,
    log_fn: Optional[Callable[[str, str], None]] = None,
) -> MaskSpriteRefs:
    """
    Insert one MASK sprite per direction into document.sprites

    Calling this twice on the same document adds four more sprites.

    Args:
        document: Document to modify in place
        offsets: Optional (dx, dy) per direction, (0, 0) when missing
        log_fn: Optional logger

    Returns:
        The allocated key and offset of each direction's mask
    """
    offsets = offsets or {}
    existing = document.sprite_keys()
    start = len(document.sprites)
    refs: Dict[str, MaskRef] = {}

    for geometry in MASK_GEOMETRY:
        key = next_key(existing, start)
        existing.add(key)
        document.sprites[key] = SpriteDef(
            gfx=MASK_GFX,
            bounds=list(geometry.bounds),
            scale=geometry.scale,
        )
        offset_x, offset_y = offsets.get(geometry.direction, (0, 0))
        refs[geometry.direction.value] = MaskRef(key, int(offset_x), int(offset_y))

    mask_refs = MaskSpriteRefs(**refs)
    if log_fn:
        summary = ", ".join(f"{d.value}={k}" for d, k in mask_refs.keys().items())
        log_fn(f"Added mask sprites to '{document.name}': {summary}", "DEBUG")
    return mask_refs
