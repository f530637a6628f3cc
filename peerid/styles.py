import random

from . import chars
from . import clients
from . import versions
from .peerid_error import InvalidCodeError, InvalidLengthError, \
    NotThisStyleError

PEER_ID_LENGTH = 20

AZUREUS = 'az'
SHADOW = 'shadow'

STYLES = (AZUREUS, SHADOW)

# Azureus: '-', two characters client id, four ASCII digits version, '-',
# followed by random characters. e.g. -AZ2060-...
AZ_STYLE_CODE_LENGTH = 2
AZ_STYLE_HEADER_LENGTH = 8

# Shadow: one ASCII letter client id, up to five characters version padded
# with '-', three characters (usually '---'), followed by random characters.
SHADOW_STYLE_CODE_LENGTH = 1
SHADOW_STYLE_PADDED_VERSION_LENGTH = 5
SHADOW_STYLE_SEPARATOR = '---'

MAX_RANDOM_LENGTH = 100

_DASH = ord('-')
_SHADOW_STYLE_VERSION_CODES = chars.SHADOW_STYLE_VERSION_CHARS.encode('ascii')

def _length_error(peer_id):
    if len(peer_id) != PEER_ID_LENGTH:
        raise InvalidLengthError("peer id length must be %d, was %d" % \
                                     (PEER_ID_LENGTH, len(peer_id)))

def is_az_style(peer_id):
    _length_error(peer_id)

    if peer_id[0] != _DASH or peer_id[7] != _DASH:
        return False

    if not all(chars.is_visible(c) for c in peer_id[1:3]):
        return False

    return all(chars.is_digit(c) for c in peer_id[3:7])

def is_shadow_style(peer_id):
    _length_error(peer_id)

    if not chars.is_letter(peer_id[0]):
        return False

    return all(c in _SHADOW_STYLE_VERSION_CODES for c in peer_id[1:4])

def detect(peer_id):
    """Style of the peer id, Azureus takes precedence over Shadow."""
    if is_az_style(peer_id):
        return AZUREUS
    elif is_shadow_style(peer_id):
        return SHADOW
    else:
        return None

def az_style_client(peer_id):
    if not is_az_style(peer_id):
        raise NotThisStyleError("peer id %r is not Azureus style" % \
                                    (bytes(peer_id),))

    code = bytes(peer_id[1:3]).decode('ascii')
    version = versions.az_style_to_semantic(bytes(peer_id[3:7]).decode('ascii'))

    return clients.Client(code, clients.az_style_client_name(code), version)

def shadow_style_client(peer_id):
    if not is_shadow_style(peer_id):
        raise NotThisStyleError("peer id %r is not Shadow style" % \
                                    (bytes(peer_id),))

    code = bytes(peer_id[0:1]).decode('ascii')
    version = versions.shadow_style_to_semantic(\
        bytes(peer_id[1:4]).decode('ascii'))

    return clients.Client(code, clients.shadow_style_client_name(code), version)

def random_str(length, rand = random):
    if not 0 < length < MAX_RANDOM_LENGTH:
        raise InvalidLengthError(\
            "random string length must be between 1 and %d, was %d" % \
                (MAX_RANDOM_LENGTH - 1, length))

    return ''.join([rand.choice(chars.VISIBLE_CHARS) for _ in range(length)])

def build_az_style(code, version, rand = random):
    if len(code) != AZ_STYLE_CODE_LENGTH or \
            not all(chars.is_visible(ord(c)) for c in code):
        raise InvalidCodeError(\
            "Azureus style client code must be %d visible characters, was %r" \
                % (AZ_STYLE_CODE_LENGTH, code))

    header = '-' + code + versions.semantic_to_az_style(version) + '-'
    header += random_str(PEER_ID_LENGTH - len(header), rand)

    return header.encode('ascii')

def build_shadow_style(code, version, rand = random):
    if len(code) != SHADOW_STYLE_CODE_LENGTH or not chars.is_letter(ord(code)):
        raise InvalidCodeError(\
            "Shadow style client code must be %d letter, was %r" % \
                (SHADOW_STYLE_CODE_LENGTH, code))

    vstr = versions.semantic_to_shadow_style(version)
    padding = '-' * (SHADOW_STYLE_PADDED_VERSION_LENGTH - len(vstr))

    header = code + vstr + padding + SHADOW_STYLE_SEPARATOR
    header += random_str(PEER_ID_LENGTH - len(header), rand)

    return header.encode('ascii')

if __name__ == '__main__':
    id = b'-AZ2030-randomstring'
    print(detect(id), az_style_client(id))

    id = b'S58B-----randomrando'
    print(detect(id), shadow_style_client(id))

    print(build_az_style('bL', '0.7.0'))
    print(build_shadow_style('T', '0.4.0'))
