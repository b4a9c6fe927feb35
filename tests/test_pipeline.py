import copy

import pytest

from conftest import make_raw_document, quiet_log
from core.data_structures import AnimationDocument, Direction
from core.errors import MissingProperty
from core.pipeline import DEFAULT_MASK_FILENAME, ProcessingOptions, process_document
from utils.file_loader import load_document, serialize_document


def test_end_to_end_single_head(document):
    result = process_document(document, log_fn=quiet_log)
    sprites = result.document.sprites
    masks = {key: sprite for key, sprite in sprites.items() if sprite.gfx == "MASK"}
    assert len(masks) == 4

    down = result.document.to_dict()["frames"][0]["directions"][2]
    assert down == [["5", 10, 10], [result.mask_refs.down.sprite_key, 10, -6]]
    assert result.has_masks
    assert result.exportable


def test_input_document_is_not_modified(document):
    before = copy.deepcopy(document)
    process_document(document, log_fn=quiet_log)
    process_document(document, log_fn=quiet_log)
    assert document == before


def test_mask_default_is_added_when_missing(document):
    result = process_document(document, log_fn=quiet_log)
    assert result.document.defaults["MASK"] == DEFAULT_MASK_FILENAME


def test_existing_mask_default_is_kept():
    raw = make_raw_document()
    raw["defaults"]["MASK"] = "custom_mask.png"
    result = process_document(AnimationDocument.from_dict(raw), log_fn=quiet_log)
    assert result.document.defaults["MASK"] == "custom_mask.png"


def test_online_flag(document):
    assert process_document(document, log_fn=quiet_log).document.to_dict()["online"] == 2
    options = ProcessingOptions(online_flag=None)
    assert "online" not in process_document(document, options, log_fn=quiet_log).document.to_dict()


def test_offsets_from_options(document):
    options = ProcessingOptions()
    options.offsets[Direction.DOWN] = (-4, 2)
    result = process_document(document, options, log_fn=quiet_log)
    assert result.document.frames[0].directions.down[-1].position == (6, -4)


def test_no_heads_is_a_notice(log_records):
    raw = make_raw_document(sprites={"1": {"gfx": "BODY", "bounds": [0, 0, 32, 32]}}, frames=[])
    result = process_document(AnimationDocument.from_dict(raw), log_fn=log_records)
    assert not result.has_masks
    assert result.exportable
    assert len(result.document.sprites) == 5
    assert any(level == "WARNING" for level, _ in log_records.records)


def test_no_heads_can_skip_export():
    raw = make_raw_document(sprites={"1": {"gfx": "BODY", "bounds": [0, 0, 32, 32]}}, frames=[])
    options = ProcessingOptions(export_without_masks=False)
    result = process_document(AnimationDocument.from_dict(raw), options, log_fn=quiet_log)
    assert not result.exportable


def test_missing_center_stops_before_any_change():
    raw = make_raw_document()
    del raw["options"]["center"]
    text = serialize_document(raw)
    with pytest.raises(MissingProperty) as exc:
        load_document(text)
    assert exc.value.path == "options.center"
    assert len(raw["sprites"]) == 1
