import hashlib
from collections import namedtuple
from ..base import MetadataBlock

PICTURE_TYPES = [
    'Other',
    'FileIcon',
    'OtherFileIcon',
    'FrontCover',
    'BackCover',
    'LeafletPage',
    'Media',
    'LeadArtist',
    'Artist',
    'Conductor',
    'Band',
    'Composer',
    'Lyricist',
    'RecordingLocation',
    'DuringRecording',
    'DuringPerformance',
    'ScreenCapture',
    'Fish',
    'Illustration',
    'BandLogo',
    'PublisherLogo',
]

FRONT_COVER = 3


class Picture(MetadataBlock, namedtuple('Picture', [
        'header',
        'picture_type',
        'mime_type',
        'description',
        'width',
        'height',
        'colour_depth',
        'num_colours',
        'data',
        'picture_md5',
])):
    __slots__ = ()

    @classmethod
    def read(cls, header, cursor):
        picture_type = cursor.read_uint(32)
        mime_type = cursor.read_text(cursor.read_uint(32) * 8)
        description = cursor.read_text(cursor.read_uint(32) * 8)
        width = cursor.read_uint(32)
        height = cursor.read_uint(32)
        colour_depth = cursor.read_uint(32)
        num_colours = cursor.read_uint(32)
        data = cursor.read_bytes(cursor.read_uint(32) * 8)

        return cls(header, picture_type, mime_type, description, width, height,
                   colour_depth, num_colours, data, hashlib.md5(data).digest())

    @property
    def type_name(self):
        if self.picture_type < len(PICTURE_TYPES):
            return PICTURE_TYPES[self.picture_type]
        return str(self.picture_type)
