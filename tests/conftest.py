import copy

import pytest

from core.data_structures import AnimationDocument


HEAD_SPRITE = {"gfx": "HEAD", "bounds": [0, 0, 48, 48]}


def make_raw_document(sprites=None, frames=None, **overrides):
    """Minimal valid BANI mapping: one 48x48 HEAD sprite '5' at (10, 10) facing down"""
    raw = {
        "name": "idle",
        "modificatedDate": "2024-01-01 12:00:00",
        "filetype": "BANI",
        "options": {
            "looping": True,
            "continuous": False,
            "blockingbounds": [0, 0, 32, 32],
            "center": [24, 24],
        },
        "defaults": {"BODY": "body.png", "HEAD": "head0.png", "HAT": "hat0.png"},
        "sprites": copy.deepcopy(sprites) if sprites is not None else {"5": dict(HEAD_SPRITE)},
        "frames": copy.deepcopy(frames) if frames is not None else [
            {"directions": [[], [], [["5", 10, 10]], []]},
        ],
    }
    raw.update(overrides)
    return raw


def frame_with(direction_index, refs):
    """Frame whose storage slot direction_index (0=up, 1=left, 2=down, 3=right) holds refs"""
    directions = [[], [], [], []]
    directions[direction_index] = refs
    return {"directions": directions}


@pytest.fixture
def raw_document():
    return make_raw_document()


@pytest.fixture
def document(raw_document):
    return AnimationDocument.from_dict(raw_document)


def quiet_log(message, level="INFO"):
    pass


@pytest.fixture
def log_records():
    records = []

    def log(message, level="INFO"):
        records.append((level, message))

    log.records = records
    return log
