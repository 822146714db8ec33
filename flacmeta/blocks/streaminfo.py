from collections import namedtuple
from ..base import MetadataBlock


class StreamInfo(MetadataBlock, namedtuple('StreamInfo', [
        'header',
        'min_block_size',
        'max_block_size',
        'min_frame_size',
        'max_frame_size',
        'sample_rate',
        'channels',
        'bits_per_sample',
        'total_samples',
        'md5',
])):
    __slots__ = ()

    @classmethod
    def read(cls, header, cursor):
        return cls(
            header,
            min_block_size=cursor.read_uint(16),
            max_block_size=cursor.read_uint(16),
            min_frame_size=cursor.read_uint(24),
            max_frame_size=cursor.read_uint(24),
            sample_rate=cursor.read_uint(20),
            channels=cursor.read_uint(3) + 1,
            bits_per_sample=cursor.read_uint(5) + 1,
            total_samples=cursor.read_uint(36),
            md5=cursor.read_bytes(128),
        )

    @property
    def duration(self):
        # Seconds; zero when the sample rate or sample count is unknown.
        if not self.sample_rate:
            return 0.0
        return self.total_samples / self.sample_rate
