from collections import namedtuple
from ..base import MetadataBlock


# Payloads of these blocks have no fixed layout, so whatever remains after
# their fixed fields belongs to them.

class Padding(MetadataBlock, namedtuple('Padding', ['header', 'num_bytes'])):
    __slots__ = ()
    exact = False

    @classmethod
    def read(cls, header, cursor):
        return cls(header, header.data_length)


class Application(MetadataBlock, namedtuple('Application', ['header', 'app_id', 'app_data'])):
    __slots__ = ()
    exact = False

    @classmethod
    def read(cls, header, cursor):
        app_id = cursor.read_text(32)
        return cls(header, app_id, cursor.read_bytes(header.data_length * 8 - 32))


# Block types 7..126 are undefined; keep the payload so it can be passed on untouched.
class Reserved(MetadataBlock, namedtuple('Reserved', ['header', 'data'])):
    __slots__ = ()
    exact = False

    @classmethod
    def read(cls, header, cursor):
        return cls(header, cursor.read_bytes(header.data_length * 8))
