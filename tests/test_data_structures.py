import pytest

from conftest import make_raw_document
from core.data_structures import (
    AnimationDocument,
    Direction,
    Frame,
    FrameDirections,
    SCAN_ORDER,
    STORAGE_ORDER,
    SpriteDef,
    SpriteRef,
)
from core.errors import ParseError


def test_orderings_are_distinct():
    assert STORAGE_ORDER == (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)
    assert SCAN_ORDER == (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)


def test_frame_directions_map_positional_lists_to_named_fields():
    directions = FrameDirections.from_list([[["1", 0, 0]], [["2", 1, 1]], [["3", 2, 2]], [["4", 3, 3]]])
    assert directions.up[0].sprite_key == "1"
    assert directions.left[0].sprite_key == "2"
    assert directions.down[0].sprite_key == "3"
    assert directions.right[0].sprite_key == "4"
    assert directions.get(Direction.DOWN) is directions.down


def test_frame_directions_scan_order():
    directions = FrameDirections.from_list([[["up", 0, 0]], [["left", 0, 0]], [["down", 0, 0]], [["right", 0, 0]]])
    scanned = [(index, direction, refs[0].sprite_key) for index, direction, refs in directions.iter_scan_order()]
    assert scanned == [
        (0, Direction.DOWN, "down"),
        (1, Direction.UP, "up"),
        (2, Direction.LEFT, "left"),
        (3, Direction.RIGHT, "right"),
    ]


def test_frame_directions_require_four_lists():
    with pytest.raises(ParseError):
        FrameDirections.from_list([[], [], []])
    with pytest.raises(ParseError):
        FrameDirections.from_list([[], [], [], {}])


def test_sprite_ref_keeps_numeric_key_and_trailing_values():
    ref = SpriteRef.from_list([7, 1, 2, "extra"])
    assert ref.sprite_key == "7"
    assert ref.position == (1, 2)
    assert ref.to_list() == [7, 1, 2, "extra"]


def test_sprite_ref_rejects_bad_positions():
    with pytest.raises(ParseError):
        SpriteRef.from_list(["1", "x", 2])
    with pytest.raises(ParseError):
        SpriteRef.from_list(["1", 2])


def test_sprite_def_requires_four_bounds():
    with pytest.raises(ParseError):
        SpriteDef.from_dict("1", {"gfx": "HEAD", "bounds": [0, 0, 48]})


def test_maskable_head_needs_head_role_and_48x48():
    assert SpriteDef("HEAD", [10, 20, 48, 48]).is_maskable_head()
    assert not SpriteDef("HEAD", [0, 0, 48, 72]).is_maskable_head()
    assert not SpriteDef("BODY", [0, 0, 48, 48]).is_maskable_head()


def test_sprite_def_scale_is_optional():
    plain = SpriteDef.from_dict("1", {"gfx": "BODY", "bounds": [0, 0, 32, 32]})
    mirrored = SpriteDef.from_dict("2", {"gfx": "BODY", "bounds": [0, 0, 32, 32], "scale": [-1, 1]})
    assert plain.scale is None
    assert "scale" not in plain.to_dict()
    assert mirrored.scale == (-1, 1)
    assert mirrored.to_dict()["scale"] == [-1, 1]


def test_frame_without_directions_gets_empty_lists():
    frame = Frame.from_dict({"wait": 50})
    assert frame.directions.is_empty()
    assert frame.to_dict() == {"wait": 50}
    frame.directions.down.append(SpriteRef("3", 1, 2))
    assert frame.to_dict() == {"wait": 50, "directions": [[], [], [["3", 1, 2]], []]}


def test_document_round_trip_keeps_unknown_fields_and_order():
    raw = make_raw_document(
        sprites={
            "5": {"gfx": "HEAD", "bounds": [0, 0, 48, 48], "comment": "face"},
            "12": {"gfx": "BODY", "bounds": [0, 0, 32, 48], "scale": [-1, 1]},
        },
        frames=[{"wait": 100, "directions": [[], [], [["5", 10, 10], [12, 0, 0]], []], "sound": "step.wav"}],
        setbackto="walk",
    )
    raw["options"]["singledirection"] = False
    raw["defaults"]["ATTR1"] = "x.png"

    result = AnimationDocument.from_dict(raw).to_dict()

    assert result == raw
    assert list(result) == list(raw)
    assert list(result["frames"][0]) == ["wait", "directions", "sound"]
    assert list(result["options"]) == list(raw["options"])


def test_document_accepts_modification_date_alias():
    raw = make_raw_document()
    raw["modificationDate"] = raw.pop("modificatedDate")
    document = AnimationDocument.from_dict(raw)
    assert document.modification_date == "2024-01-01 12:00:00"
    assert document.to_dict() == raw


def test_document_without_frames():
    raw = make_raw_document()
    del raw["frames"]
    document = AnimationDocument.from_dict(raw)
    assert document.frames == []
    assert "frames" not in document.to_dict()


def test_round_trip_keeps_null_values():
    raw = make_raw_document(
        sprites={
            "5": {"gfx": "HEAD", "bounds": [0, 0, 48, 48]},
            "6": {"gfx": None, "bounds": [0, 0, 1, 1], "scale": None},
        },
        frames=[{"directions": None, "wait": 1}, {"wait": 2}, {"directions": [[], [], [["5", 10, 10]], []]}],
    )
    assert AnimationDocument.from_dict(raw).to_dict() == raw


def test_round_trip_keeps_null_frames():
    raw = make_raw_document(frames=None)
    raw["frames"] = None
    document = AnimationDocument.from_dict(raw)
    assert document.frames == []
    assert document.to_dict() == raw
