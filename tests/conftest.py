import pytest

import builders

SAMPLE_CUE_TRACKS = [
    builders.cue_track(0, 1),
    builders.cue_track(3528, 2),
    builders.cue_track(4704, 3),
    builders.cue_track(793287, 255, indices=()),
]


@pytest.fixture
def sample_bytes():
    """A metadata section with one block of every defined type, padding last."""
    return builders.flac(
        builders.block(0, builders.stream_info()),
        builders.block(3, builders.seek_table((0, 0, 4096))),
        builders.block(2, b'ATCHC@K3'),
        builders.block(4, builders.vorbis_comment()),
        builders.block(5, builders.cue_sheet(SAMPLE_CUE_TRACKS)),
        builders.block(6, builders.picture(builders.JPEG)),
        builders.block(1, b'\x00' * 7596, last=True),
    )


@pytest.fixture
def sample_path(tmp_path, sample_bytes):
    path = tmp_path / 'sample.flac'
    # Audio frames follow the metadata; they must never be read.
    path.write_bytes(sample_bytes + b'\xff\xf8' + b'\x00' * 64)
    return path
