from conftest import make_raw_document
from core.data_structures import AnimationDocument, Direction
from core.mask_generator import MASK_ALLOCATION_ORDER, MASK_GEOMETRY, MASK_GFX, generate_mask_sprites

EXPECTED_BOUNDS = {
    Direction.DOWN: [0, 0, 48, 72],
    Direction.UP: [48, 0, 48, 72],
    Direction.RIGHT: [96, 0, 48, 72],
    Direction.LEFT: [96, 0, 48, 72],
}


def test_adds_four_mask_sprites(document):
    before = set(document.sprites)
    refs = generate_mask_sprites(document)
    added = set(document.sprites) - before
    assert len(added) == 4
    assert added == set(refs.keys().values())
    for key in added:
        assert document.sprites[key].gfx == MASK_GFX


def test_geometry_and_mirroring(document):
    refs = generate_mask_sprites(document)
    for direction, bounds in EXPECTED_BOUNDS.items():
        sprite = document.sprites[refs.get(direction).sprite_key]
        assert sprite.bounds == bounds
        if direction is Direction.LEFT:
            assert sprite.scale == (-1, 1)
        else:
            assert sprite.scale is None


def test_serialized_mask_sprites(document):
    refs = generate_mask_sprites(document)
    data = document.to_dict()["sprites"]
    assert data[refs.left.sprite_key] == {"gfx": "MASK", "bounds": [96, 0, 48, 72], "scale": [-1, 1]}
    assert data[refs.down.sprite_key] == {"gfx": "MASK", "bounds": [0, 0, 48, 72]}


def test_allocation_order_starts_at_sprite_count(document):
    refs = generate_mask_sprites(document)
    assert (refs.down.sprite_key, refs.up.sprite_key, refs.right.sprite_key, refs.left.sprite_key) == ("1", "2", "3", "4")


def test_allocation_skips_existing_keys():
    document = AnimationDocument.from_dict(make_raw_document(sprites={
        "0": {"gfx": "BODY", "bounds": [0, 0, 32, 32]},
        "2": {"gfx": "HEAD", "bounds": [0, 0, 48, 48]},
        "4": {"gfx": "HAT", "bounds": [0, 0, 48, 48]},
    }, frames=[]))
    refs = generate_mask_sprites(document)
    keys = [refs.down.sprite_key, refs.up.sprite_key, refs.right.sprite_key, refs.left.sprite_key]
    assert keys == ["3", "5", "6", "7"]
    assert document.sprites["2"].gfx == "HEAD"
    assert document.sprites["4"].gfx == "HAT"


def test_offsets_default_to_zero(document):
    refs = generate_mask_sprites(document, {Direction.UP: (3, -2)})
    assert (refs.up.offset_x, refs.up.offset_y) == (3, -2)
    assert (refs.down.offset_x, refs.down.offset_y) == (0, 0)


def test_second_run_appends_four_more(document):
    first = generate_mask_sprites(document)
    second = generate_mask_sprites(document)
    assert len(document.sprites) == 9
    assert set(first.keys().values()).isdisjoint(second.keys().values())


def test_allocation_order_follows_geometry():
    assert MASK_ALLOCATION_ORDER == (Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT)
    assert MASK_ALLOCATION_ORDER == tuple(geometry.direction for geometry in MASK_GEOMETRY)
