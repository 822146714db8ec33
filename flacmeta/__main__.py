#!/usr/bin/env python3
import argparse
import sys
from . import commands


def parse_args(argv=None):
    parent = argparse.ArgumentParser(add_help=False)
    main = argparse.ArgumentParser(parents=[parent],
        epilog='Use "flacmeta [command] --help" for more information about a command.',
        description='Reads the metadata blocks of FLAC files.',
        formatter_class=argparse.RawTextHelpFormatter)
    sub = main.add_subparsers(metavar='command', dest='command')
    sub.required = True

    def add_subparser(command, help, description=''):
        return sub.add_parser(command, help=help, description=help + description,
                              formatter_class=argparse.RawTextHelpFormatter, parents=[parent])

    show = add_subparser('show', 'Display stream info and the list of metadata blocks.',
        '\n\nEvery block up to and including the one flagged as last is decoded.'
          '\nAudio frames are never read.')
    show.add_argument('--verbose', '-v', action='store_true',
        help='Print each block header to stderr as it is decoded.')

    tags = add_subparser('tags', 'Display the Vorbis comments (tags) of a FLAC file.',
        '\n\nKeys are printed as stored, once per value, in file order.')

    picture = add_subparser('picture', 'Write an embedded picture to a file.')
    picture.add_argument('--index', '-i', type=int, default=0,
        help='Which PICTURE block to extract, counting from 0 (default: 0).')

    for parser in [show, tags, picture]:
        parser.add_argument('path', help='FLAC file to read.')

    for parser in [show, tags]:
        parser.add_argument('--json', dest='as_json', action='store_true', help='Prints JSON output.')

    picture.add_argument('out', help='Output file for the raw picture bytes.')

    return main.parse_args(argv)


def main(argv=None):
    try:
        args = parse_args(argv)
        getattr(commands, args.command)(**vars(args))
    except commands.CommandException as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
