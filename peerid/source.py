import re
import urllib.parse as parse

from .peerid_error import InvalidLengthError
from .styles import PEER_ID_LENGTH

# Any byte not in the set 0-9, a-z, A-Z, '.', '-', '_' and '~' must be
# escaped using the "%nn" format in tracker requests.
_URL_ENCODED = re.compile(r'(?:[0-9A-Za-z._~-]|%[0-9A-Fa-f]{1,2})+')

def is_url_encoded(source):
    return '%' in source and not _URL_ENCODED.fullmatch(source) is None

def decode_url_binary(source):
    return parse.unquote_to_bytes(source)

def normalize(source):
    """Canonical 20 byte peer id from bytes, a buffer or (escaped) text.

    Input longer than 20 bytes is truncated, only the first 20 bytes are
    part of the peer id.
    """
    if isinstance(source, str):
        if is_url_encoded(source):
            source = decode_url_binary(source)
        else:
            source = source.encode('utf-8')
    elif isinstance(source, (bytearray, memoryview)):
        source = bytes(source)
    elif not isinstance(source, bytes):
        raise TypeError("Can't read a peer id from " + \
                            source.__class__.__name__)

    if len(source) < PEER_ID_LENGTH:
        raise InvalidLengthError(\
            "peer id must be at least %d bytes, was %d" % \
                (PEER_ID_LENGTH, len(source)))

    return source[:PEER_ID_LENGTH]
