from collections import namedtuple
from ..base import MetadataBlock

SEEK_POINT_SIZE = 18

# Placeholder points carry this sample number.
PLACEHOLDER_SAMPLE = 0xFFFFFFFFFFFFFFFF


class SeekPoint(namedtuple('SeekPoint', ['sample', 'byte_offset', 'num_samples'])):
    __slots__ = ()

    @property
    def is_placeholder(self):
        return self.sample == PLACEHOLDER_SAMPLE


class SeekTable(MetadataBlock, namedtuple('SeekTable', ['header', 'seek_points'])):
    """Seek points, 18 bytes each.

    A trailing run shorter than a whole point is skipped rather than treated
    as an error.
    """
    __slots__ = ()

    @classmethod
    def read(cls, header, cursor):
        points = []
        for _ in range(header.data_length // SEEK_POINT_SIZE):
            points.append(SeekPoint(
                sample=cursor.read_uint(64),
                byte_offset=cursor.read_uint(64),
                num_samples=cursor.read_uint(16),
            ))
        cursor.skip(cursor.remaining())
        return cls(header, tuple(points))
