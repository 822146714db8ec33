from collections import namedtuple


BLOCK_TYPES = [
    'STREAMINFO',
    'PADDING',
    'APPLICATION',
    'SEEKTABLE',
    'VORBIS_COMMENT',
    'CUESHEET',
    'PICTURE',
]

STREAMINFO = 0
PADDING = 1
APPLICATION = 2
SEEKTABLE = 3
VORBIS_COMMENT = 4
CUESHEET = 5
PICTURE = 6
INVALID = 127


class FlacError(Exception):
    pass


class BadMarker(FlacError):
    pass


class TruncatedHeader(FlacError):
    pass


class TruncatedRead(FlacError):
    pass


class InvalidBlockType(FlacError):
    pass


class MalformedVorbisComment(FlacError):
    pass


class MissingStreamInfo(FlacError):
    pass


class DuplicateStreamInfo(FlacError):
    pass


class TrailingData(FlacError):
    pass


def block_type_name(block_type):
    if block_type < len(BLOCK_TYPES):
        return BLOCK_TYPES[block_type]
    if block_type == INVALID:
        return 'INVALID'
    return f'RESERVED({block_type})'


class BlockHeader(namedtuple('BlockHeader', ['is_last', 'block_type', 'data_length'])):
    __slots__ = ()

    @property
    def type_name(self):
        return block_type_name(self.block_type)

    # Size on disk, header included.
    @property
    def size(self):
        return self.data_length + 4


class MetadataBlock:
    """Mixin for the per-type block records.

    Subclasses are named tuples whose first field is ``header``. ``read``
    decodes the payload from a cursor holding exactly ``header.data_length``
    bytes. ``swapped`` selects a little-endian cursor, and ``exact`` blocks must
    consume their whole payload.
    """
    __slots__ = ()

    swapped = False
    exact = True

    @classmethod
    def read(cls, header, cursor):
        raise NotImplementedError()

    @property
    def is_last(self):
        return self.header.is_last

    @property
    def block_type(self):
        return self.header.block_type

    @property
    def data_length(self):
        return self.header.data_length
