import io
from construct import *
from pathlib import Path
from .base import (
    APPLICATION, CUESHEET, INVALID, PADDING, PICTURE, SEEKTABLE, STREAMINFO, VORBIS_COMMENT,
    BadMarker, BlockHeader, DuplicateStreamInfo, InvalidBlockType, MissingStreamInfo, TrailingData,
    TruncatedHeader, TruncatedRead, block_type_name,
)
from .bitcursor import BitCursor
from .blocks.cuesheet import CueSheet
from .blocks.opaque import Application, Padding, Reserved
from .blocks.picture import FRONT_COVER, Picture
from .blocks.seektable import SeekTable
from .blocks.streaminfo import StreamInfo
from .blocks.vorbis import VorbisComment


MARKER = b'fLaC'

MarkerFormat = Const(MARKER)

BlockHeaderFormat = Struct(
    'info' / BitStruct(
        'last' / Flag,
        'block_type' / BitsInteger(7),
    ),
    'size' / Int24ub,
)

BLOCK_DECODERS = {
    STREAMINFO: StreamInfo,
    PADDING: Padding,
    APPLICATION: Application,
    SEEKTABLE: SeekTable,
    VORBIS_COMMENT: VorbisComment,
    CUESHEET: CueSheet,
    PICTURE: Picture,
}

# Decode loop states.
EXPECT_MARKER = 'expect_marker'
EXPECT_STREAMINFO = 'expect_streaminfo'
EXPECT_METADATA_BLOCK = 'expect_metadata_block'
DONE = 'done'


def read_marker(stream):
    data = stream.read(4)
    try:
        MarkerFormat.parse(data)
    except (ConstError, StreamError):
        raise BadMarker(f'expected {MARKER!r}, found {data!r}')
    return data.decode('ascii')


def read_block_header(stream):
    """Reads a 4-byte block header, or returns None at a clean end of stream."""
    data = stream.read(4)
    if not data:
        return None
    if len(data) < 4:
        raise TruncatedHeader(f'block header needs 4 bytes, found {len(data)}')
    header = BlockHeaderFormat.parse(data)
    return BlockHeader(header.info.last, header.info.block_type, header.size)


def decoder_for(block_type):
    if block_type == INVALID:
        raise InvalidBlockType(f'block type {block_type} is invalid')
    return BLOCK_DECODERS.get(block_type, Reserved)


def decode_block(header, data):
    """Decodes one block payload of exactly ``header.data_length`` bytes."""
    decoder = decoder_for(header.block_type)
    cursor = BitCursor(data, swapped=decoder.swapped)
    block = decoder.read(header, cursor)
    if decoder.exact and not cursor.consumed_all():
        raise TrailingData(f'{header.type_name} block left {cursor.remaining() // 8} '
                           f'of {header.data_length} bytes unread')
    return block


def read_block(stream):
    header = read_block_header(stream)
    if header is None:
        return None

    # Rejected before the payload is touched.
    decoder_for(header.block_type)

    data = stream.read(header.data_length)
    if len(data) < header.data_length:
        raise TruncatedRead(f'{header.type_name} block declares {header.data_length} bytes, '
                            f'found {len(data)}')
    return decode_block(header, data)


class FlacReader:
    """Decodes the metadata section of one FLAC stream, front to back.

    Blocks are read strictly in file order. Any error is final; the reader
    does not try to resynchronise. ``on_block`` is called with each decoded
    block; raising from it stops the decode between blocks.
    """

    def __init__(self, stream, on_block=None):
        self.stream = stream
        self.on_block = on_block
        self.state = EXPECT_MARKER
        self.marker = None
        self.stream_info = None
        self.metadata_blocks = []

    def _decoded(self, block):
        if self.on_block:
            self.on_block(block)

    def read_marker(self):
        self.marker = read_marker(self.stream)
        self.state = EXPECT_STREAMINFO

    def read_stream_info(self):
        block = read_block(self.stream)
        if block is None:
            raise MissingStreamInfo('no metadata blocks follow the marker')
        if not isinstance(block, StreamInfo):
            raise MissingStreamInfo(f'first block is {block.header.type_name}, not STREAMINFO')

        self.stream_info = block
        self.state = EXPECT_METADATA_BLOCK if not block.is_last else DONE
        self._decoded(block)

    def read_metadata_block(self):
        block = read_block(self.stream)
        if block is None:
            raise TruncatedHeader('stream ended before the last metadata block')
        if isinstance(block, StreamInfo):
            raise DuplicateStreamInfo(f'STREAMINFO block repeated after {len(self.metadata_blocks)} metadata blocks')
        self.metadata_blocks.append(block)
        if block.is_last:
            self.state = DONE
        self._decoded(block)

    def parse(self):
        self.read_marker()
        self.read_stream_info()
        while self.state != DONE:
            self.read_metadata_block()
        return Flac(self.marker, self.stream_info, self.metadata_blocks)


class Flac:
    @staticmethod
    def from_stream(stream, on_block=None):
        return FlacReader(stream, on_block).parse()

    @staticmethod
    def from_bytes(b, on_block=None):
        return Flac.from_stream(io.BytesIO(b), on_block)

    @staticmethod
    def from_path(path, on_block=None):
        with Path(path).open('rb') as f:
            return Flac.from_stream(f, on_block)

    def __init__(self, marker, stream_info, metadata_blocks):
        self.marker = marker
        self.stream_info = stream_info
        self.metadata_blocks = tuple(metadata_blocks)

    def __iter__(self):
        for block in (self.stream_info,) + self.metadata_blocks:
            yield block_type_name(block.block_type), block.header.size

    def __eq__(self, other):
        if not isinstance(other, Flac):
            return NotImplemented
        return (self.marker, self.stream_info, self.metadata_blocks) == \
               (other.marker, other.stream_info, other.metadata_blocks)

    def blocks(self, block_type):
        if block_type == STREAMINFO:
            return [self.stream_info]
        return [b for b in self.metadata_blocks if b.block_type == block_type]

    def _first(self, block_type):
        return next(iter(self.blocks(block_type)), None)

    @property
    def vorbis_comment(self):
        return self._first(VORBIS_COMMENT)

    @property
    def seek_table(self):
        return self._first(SEEKTABLE)

    @property
    def cue_sheet(self):
        return self._first(CUESHEET)

    @property
    def pictures(self):
        return self.blocks(PICTURE)

    @property
    def cover(self):
        pictures = self.pictures
        for picture in pictures:
            if picture.picture_type == FRONT_COVER:
                return picture
        return next(iter(pictures), None)

    # Size of the metadata section on disk, marker included.
    @property
    def size(self):
        return len(MARKER) + sum(size for _, size in self)
