from collections import namedtuple
from collections.abc import Mapping
from ..base import MalformedVorbisComment, MetadataBlock


class Comments(Mapping):
    """Read-only map of comment keys to tuples of values, in file order."""

    def __init__(self, pairs=()):
        items = {}
        for key, value in pairs:
            items.setdefault(key, []).append(value)
        self._items = {key: tuple(values) for key, values in items.items()}

    def __getitem__(self, key):
        return self._items[key]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __hash__(self):
        return hash(tuple(self._items.items()))

    def __repr__(self):
        return f'Comments({self._items!r})'


class VorbisComment(MetadataBlock, namedtuple('VorbisComment', ['header', 'vendor_string', 'comments'])):
    """Vendor string plus ``KEY=value`` comments.

    ``comments`` maps each key, exactly as written, to its values in file
    order. Unlike the rest of the container, the length fields in this block
    are little-endian.
    """
    __slots__ = ()
    swapped = True

    @classmethod
    def read(cls, header, cursor):
        vendor_string = cursor.read_text(cursor.read_uint(32) * 8)
        pairs = []

        for _ in range(cursor.read_uint(32)):
            comment = cursor.read_text(cursor.read_uint(32) * 8)
            key, sep, value = comment.partition('=')
            if not sep:
                raise MalformedVorbisComment(f'comment has no "=" separator: {comment!r}')
            pairs.append((key, value))

        return cls(header, vendor_string, Comments(pairs))

    def get(self, key, default=None):
        """Returns all values for ``key``, ignoring case, in file order."""
        values = [v for k, vs in self.comments.items() if k.upper() == key.upper() for v in vs]
        return values or default

    @property
    def num_comments(self):
        return sum(len(values) for values in self.comments.values())
