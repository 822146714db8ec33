#!/usr/bin/env python3
import json
import sys
from pathlib import Path

from .base import FlacError
from .blocks.cuesheet import CueSheet
from .blocks.opaque import Application, Padding, Reserved
from .blocks.picture import Picture
from .blocks.seektable import SeekTable
from .blocks.vorbis import VorbisComment
from .core import Flac


class CommandException(Exception):
    pass


class VerboseLog:
    def __init__(self, verbose):
        self.verbose = verbose

    def _log_verbose(self, msg):
        if self.verbose:
            print(msg, file=sys.stderr)

    def __call__(self, block):
        header = block.header
        self._log_verbose(f'read {header.type_name} block: {header.data_length} bytes'
                          + (' (last)' if header.is_last else ''))


def load(path, verbose=False):
    path = Path(path)
    if not path.is_file():
        raise CommandException(f'File does not exist: {path}')

    try:
        return Flac.from_path(path, on_block=VerboseLog(verbose))
    except FlacError as e:
        raise CommandException(f'Cannot read {path}: {type(e).__name__}: {e}')


def describe(block):
    if isinstance(block, SeekTable):
        return f'{len(block.seek_points)} seek points'
    if isinstance(block, VorbisComment):
        return f'{block.vendor_string}, {block.num_comments} comments'
    if isinstance(block, CueSheet):
        return f'{len(block.tracks)} tracks' + (', CD-DA' if block.is_cd else '')
    if isinstance(block, Picture):
        return f'{block.type_name} {block.mime_type} {block.width}x{block.height}, md5 {block.picture_md5.hex()}'
    if isinstance(block, Application):
        return f'application {block.app_id!r}, {len(block.app_data)} bytes'
    if isinstance(block, Padding):
        return f'{block.num_bytes} bytes'
    if isinstance(block, Reserved):
        return f'{len(block.data)} bytes'
    return ''


def stream_info_dict(info):
    return {
        'min_block_size': info.min_block_size,
        'max_block_size': info.max_block_size,
        'min_frame_size': info.min_frame_size,
        'max_frame_size': info.max_frame_size,
        'sample_rate': info.sample_rate,
        'channels': info.channels,
        'bits_per_sample': info.bits_per_sample,
        'total_samples': info.total_samples,
        'md5': info.md5.hex(),
    }


def show(path, as_json, verbose, **kwargs):
    flac = load(path, verbose)
    info = flac.stream_info

    if as_json:
        print(json.dumps({
            'marker': flac.marker,
            'stream_info': stream_info_dict(info),
            'blocks': [{
                'type': block.header.type_name,
                'length': block.data_length,
                'last': block.is_last,
                'summary': describe(block),
            } for block in flac.metadata_blocks],
        }, indent=2))
        return

    print(f'sample rate:     {info.sample_rate} Hz')
    print(f'channels:        {info.channels}')
    print(f'bits per sample: {info.bits_per_sample}')
    print(f'total samples:   {info.total_samples} ({info.duration:.2f}s)')
    print(f'block size:      {info.min_block_size}-{info.max_block_size}')
    print(f'frame size:      {info.min_frame_size}-{info.max_frame_size}')
    print(f'md5:             {info.md5.hex()}')
    for block in flac.metadata_blocks:
        print(f'{block.header.type_name} ({block.header.size}) {describe(block)}'.rstrip())


def tags(path, as_json, **kwargs):
    comment = load(path).vorbis_comment
    if not comment:
        raise CommandException(f'No VORBIS_COMMENT block in {path}')

    if as_json:
        print(json.dumps({
            'vendor': comment.vendor_string,
            'comments': {key: list(values) for key, values in comment.comments.items()},
        }, indent=2, ensure_ascii=False))
        return

    print(f'vendor: {comment.vendor_string}')
    for key, values in comment.comments.items():
        for value in values:
            print(f'{key}={value}')


def picture(path, out, index, **kwargs):
    pictures = load(path).pictures
    if not 0 <= index < len(pictures):
        raise CommandException(f'No picture #{index} in {path} ({len(pictures)} found)')

    pic = pictures[index]
    out = Path(out)
    with out.open('wb') as f:
        f.write(pic.data)

    print(f'Wrote {pic.type_name} {pic.mime_type} ({len(pic.data)} bytes) to {out}')
