from collections import namedtuple
from ..base import MetadataBlock

CueSheetTrackIndex = namedtuple('CueSheetTrackIndex', ['offset', 'index_number'])

CueSheetTrack = namedtuple('CueSheetTrack', [
    'offset',
    'track_number',
    'isrc',
    'is_audio',
    'pre_emphasis',
    'indices',
])

# Lead-out track number on CD-DA and non-CD cue sheets respectively.
LEAD_OUT_CDDA = 170
LEAD_OUT = 255


def read_index(cursor):
    index = CueSheetTrackIndex(
        offset=cursor.read_uint(64),
        index_number=cursor.read_uint(8),
    )
    cursor.skip(3 * 8)
    return index


def read_track(cursor):
    offset = cursor.read_uint(64)
    track_number = cursor.read_uint(8)
    isrc = cursor.read_text(12 * 8)

    # A clear bit marks an audio track.
    is_audio = cursor.read_uint(1) == 0
    pre_emphasis = cursor.read_uint(1) == 1
    cursor.skip(6 + 13 * 8)

    indices = tuple(read_index(cursor) for _ in range(cursor.read_uint(8)))
    return CueSheetTrack(offset, track_number, isrc, is_audio, pre_emphasis, indices)


class CueSheet(MetadataBlock, namedtuple('CueSheet', [
        'header',
        'media_catalog_number',
        'lead_in_samples',
        'is_cd',
        'tracks',
])):
    __slots__ = ()

    @classmethod
    def read(cls, header, cursor):
        media_catalog_number = cursor.read_text(128 * 8)
        lead_in_samples = cursor.read_uint(64)
        is_cd = cursor.read_uint(1) == 1
        cursor.skip(7 + 258 * 8)

        tracks = tuple(read_track(cursor) for _ in range(cursor.read_uint(8)))
        return cls(header, media_catalog_number, lead_in_samples, is_cd, tracks)

    @property
    def lead_out(self):
        for track in self.tracks:
            if track.track_number in (LEAD_OUT_CDDA, LEAD_OUT):
                return track
        return None
