"""
Data structures for BANI Mask Builder
Defines the document model of a BANI animation file
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Union

from .errors import ParseError

Number = Union[int, float]

# Width and height a HEAD sprite must have to receive a mask
HEAD_SPRITE_SIZE = 48

MODIFICATION_DATE_KEY = 'modificatedDate'
MODIFICATION_DATE_ALIASES = (MODIFICATION_DATE_KEY, 'modificationDate')


class Direction(Enum):
    UP = 'up'
    LEFT = 'left'
    DOWN = 'down'
    RIGHT = 'right'


# Positional order of a frame's direction lists on the wire
STORAGE_ORDER: Tuple[Direction, ...] = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)

# Order in which placement scans a frame; the index selects the head offset
SCAN_ORDER: Tuple[Direction, ...] = (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _ordered(values: Dict[str, Any], key_order: List[str]) -> Dict[str, Any]:
    """Rebuild a mapping in its original key order, new keys last"""
    result: Dict[str, Any] = {}
    for key in key_order:
        if key in values:
            result[key] = values[key]
    for key, value in values.items():
        if key not in result:
            result[key] = value
    return result


@dataclass
class SpriteRef:
    """One sprite placement inside a direction list: [sprite, x, y, ...]"""
    sprite_key: str
    x: Number
    y: Number
    trailing: List[Any] = field(default_factory=list)
    numeric_key: bool = False  # written back as a JSON number

    @classmethod
    def from_list(cls, raw: Any) -> 'SpriteRef':
        if not isinstance(raw, list) or len(raw) < 3:
            raise ParseError(f"Invalid sprite reference {raw!r}, expected [sprite, x, y]")
        key, x, y = raw[0], raw[1], raw[2]
        if not is_number(x) or not is_number(y):
            raise ParseError(f"Invalid sprite position in reference {raw!r}")
        numeric_key = isinstance(key, int) and not isinstance(key, bool)
        return cls(str(key), x, y, list(raw[3:]), numeric_key)

    def to_list(self) -> List[Any]:
        key: Any = int(self.sprite_key) if self.numeric_key else self.sprite_key
        return [key, self.x, self.y, *self.trailing]

    @property
    def position(self) -> Tuple[Number, Number]:
        return (self.x, self.y)


@dataclass
class SpriteDef:
    """Entry of the sprite table: a rectangle on a sprite sheet"""
    gfx: Optional[str]
    bounds: List[Number]
    scale: Optional[Tuple[Number, Number]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, key: str, raw: Any) -> 'SpriteDef':
        if not isinstance(raw, dict):
            raise ParseError(f"Sprite '{key}' is not an object")
        bounds = raw.get('bounds')
        if not isinstance(bounds, list) or len(bounds) != 4 or not all(is_number(v) for v in bounds):
            raise ParseError(f"Sprite '{key}' has invalid bounds {bounds!r}, expected [x, y, width, height]")
        scale = raw.get('scale')
        if scale is not None:
            if not isinstance(scale, list) or len(scale) != 2:
                raise ParseError(f"Sprite '{key}' has invalid scale {scale!r}")
            scale = (scale[0], scale[1])
        extra = {k: v for k, v in raw.items() if k not in ('gfx', 'bounds', 'scale')}
        return cls(raw.get('gfx'), list(bounds), scale, extra, list(raw.keys()))

    def to_dict(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        # keys present in the source are written back even when null
        if self.gfx is not None or 'gfx' in self.key_order:
            values['gfx'] = self.gfx
        values['bounds'] = list(self.bounds)
        if self.scale is not None or 'scale' in self.key_order:
            values['scale'] = None if self.scale is None else list(self.scale)
        values.update(self.extra)
        return _ordered(values, self.key_order)

    @property
    def width(self) -> Number:
        return self.bounds[2]

    @property
    def height(self) -> Number:
        return self.bounds[3]

    def is_maskable_head(self) -> bool:
        return self.gfx == 'HEAD' and self.width == HEAD_SPRITE_SIZE and self.height == HEAD_SPRITE_SIZE


@dataclass
class FrameDirections:
    """The four per-direction placement lists of a frame"""
    up: List[SpriteRef] = field(default_factory=list)
    left: List[SpriteRef] = field(default_factory=list)
    down: List[SpriteRef] = field(default_factory=list)
    right: List[SpriteRef] = field(default_factory=list)

    @classmethod
    def from_list(cls, raw: Any) -> 'FrameDirections':
        if not isinstance(raw, list) or len(raw) != len(STORAGE_ORDER):
            raise ParseError(f"Frame directions must be a list of {len(STORAGE_ORDER)} lists")
        lists: Dict[str, List[SpriteRef]] = {}
        for direction, entries in zip(STORAGE_ORDER, raw):
            if not isinstance(entries, list):
                raise ParseError(f"Direction '{direction.value}' is not a list")
            lists[direction.value] = [SpriteRef.from_list(entry) for entry in entries]
        return cls(**lists)

    def to_list(self) -> List[List[List[Any]]]:
        return [[ref.to_list() for ref in self.get(direction)] for direction in STORAGE_ORDER]

    def get(self, direction: Direction) -> List[SpriteRef]:
        return getattr(self, direction.value)

    def is_empty(self) -> bool:
        return not any(self.get(direction) for direction in STORAGE_ORDER)

    def iter_scan_order(self) -> Iterator[Tuple[int, Direction, List[SpriteRef]]]:
        """Yield (scan index, direction, references) in placement scan order"""
        for index, direction in enumerate(SCAN_ORDER):
            yield index, direction, self.get(direction)


@dataclass
class Frame:
    """One animation step"""
    directions: FrameDirections = field(default_factory=FrameDirections)
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: List[str] = field(default_factory=list)
    directions_blank: bool = False  # source had no directions list (absent or null)

    @classmethod
    def from_dict(cls, raw: Any) -> 'Frame':
        if not isinstance(raw, dict):
            raise ParseError("Frame is not an object")
        raw_directions = raw.get('directions')
        directions = FrameDirections() if raw_directions is None else FrameDirections.from_list(raw_directions)
        extra = {k: v for k, v in raw.items() if k != 'directions'}
        return cls(directions, extra, list(raw.keys()), raw_directions is None)

    def to_dict(self) -> Dict[str, Any]:
        values = dict(self.extra)
        if not (self.directions_blank and self.directions.is_empty()):
            values['directions'] = self.directions.to_list()
        elif 'directions' in self.key_order:
            values['directions'] = None
        return _ordered(values, self.key_order)


@dataclass
class AnimationOptions:
    """The document's options block"""
    looping: bool
    continuous: bool
    blocking_bounds: List[Number]
    center: Any
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'AnimationOptions':
        extra = {k: v for k, v in raw.items() if k not in ('looping', 'continuous', 'blockingbounds', 'center')}
        return cls(
            looping=raw['looping'],
            continuous=raw['continuous'],
            blocking_bounds=list(raw['blockingbounds']),
            center=raw['center'],
            extra=extra,
            key_order=list(raw.keys()),
        )

    def to_dict(self) -> Dict[str, Any]:
        values = dict(self.extra)
        values.update({
            'looping': self.looping,
            'continuous': self.continuous,
            'blockingbounds': list(self.blocking_bounds),
            'center': self.center,
        })
        return _ordered(values, self.key_order)


@dataclass
class AnimationDocument:
    """A complete BANI document"""
    name: str
    modification_date: Any
    filetype: Any
    options: AnimationOptions
    defaults: Dict[str, Any]
    sprites: Dict[str, SpriteDef]
    frames: List[Frame] = field(default_factory=list)
    frames_blank: bool = False  # source had 'frames': null
    extra: Dict[str, Any] = field(default_factory=dict)
    key_order: List[str] = field(default_factory=list)
    modification_date_key: str = MODIFICATION_DATE_KEY

    KNOWN_KEYS = ('name', 'filetype', 'options', 'defaults', 'sprites', 'frames') + MODIFICATION_DATE_ALIASES

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'AnimationDocument':
        """
        Build the model from an already validated mapping

        Args:
            raw: Parsed document, as accepted by core.validator.validate

        Returns:
            AnimationDocument holding every field of raw
        """
        date_key = next((k for k in MODIFICATION_DATE_ALIASES if k in raw), MODIFICATION_DATE_KEY)
        raw_frames = raw.get('frames')
        frames_blank = raw_frames is None
        if frames_blank:
            raw_frames = []
        if not isinstance(raw_frames, list):
            raise ParseError("'frames' is not a list")
        sprites = {str(key): SpriteDef.from_dict(str(key), value) for key, value in raw['sprites'].items()}
        extra = {k: v for k, v in raw.items() if k not in cls.KNOWN_KEYS}
        # an unused alias is kept verbatim
        for alias in MODIFICATION_DATE_ALIASES:
            if alias != date_key and alias in raw:
                extra[alias] = raw[alias]
        return cls(
            name=raw['name'],
            modification_date=raw[date_key],
            filetype=raw['filetype'],
            options=AnimationOptions.from_dict(raw['options']),
            defaults=dict(raw['defaults']),
            sprites=sprites,
            frames=[Frame.from_dict(frame) for frame in raw_frames],
            frames_blank=frames_blank and 'frames' in raw,
            extra=extra,
            key_order=list(raw.keys()),
            modification_date_key=date_key,
        )

    def to_dict(self) -> Dict[str, Any]:
        values = dict(self.extra)
        values.update({
            'name': self.name,
            self.modification_date_key: self.modification_date,
            'filetype': self.filetype,
            'options': self.options.to_dict(),
            'defaults': dict(self.defaults),
            'sprites': {key: sprite.to_dict() for key, sprite in self.sprites.items()},
        })
        if self.frames or ('frames' in self.key_order and not self.frames_blank):
            values['frames'] = [frame.to_dict() for frame in self.frames]
        elif self.frames_blank:
            values['frames'] = None
        return _ordered(values, self.key_order)

    def sprite_keys(self) -> Set[str]:
        return set(self.sprites.keys())

    def get_sprite(self, key: str) -> Optional[SpriteDef]:
        return self.sprites.get(key)
