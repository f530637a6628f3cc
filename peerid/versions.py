import re

from .chars import SHADOW_STYLE_VERSION_CHARS, is_digit
from .peerid_error import InvalidFormatError, InvalidVersionError, \
    OutOfRangeError

AZ_STYLE_VERSION_LENGTH = 4
AZ_STYLE_LIMITS = (9, 9, 99)

SHADOW_STYLE_VERSION_LENGTH = 3
SHADOW_STYLE_LIMIT = len(SHADOW_STYLE_VERSION_CHARS) - 1

_SEMANTIC_VERSION = re.compile(r'([0-9]+)\.([0-9]+)\.([0-9]+)')

def is_semantic_version(version):
    return isinstance(version, str) and \
        not _SEMANTIC_VERSION.fullmatch(version) is None

def is_az_style_version(version):
    return len(version) == AZ_STYLE_VERSION_LENGTH and \
        all(is_digit(ord(c)) for c in version)

def is_shadow_style_version(version):
    return len(version) == SHADOW_STYLE_VERSION_LENGTH and \
        all(c in SHADOW_STYLE_VERSION_CHARS for c in version)

def parse_semantic(version):
    """Split 'major.minor.patch' into a tuple of three ints."""
    if not is_semantic_version(version):
        raise InvalidVersionError(\
            "Invalid version %r, expected major.minor.patch" % (version,))

    return tuple(int(part) for part in version.split('.'))

def format_semantic(major, minor, patch):
    return '%d.%d.%d' % (major, minor, patch)

def _range_error(parts, limits, style):
    for part, limit, name in zip(parts, limits, ('major', 'minor', 'patch')):
        if part > limit:
            raise OutOfRangeError("%s version %d exceeds %d in %s style" % \
                                      (name, part, limit, style))

def semantic_to_az_style(version):
    major, minor, patch = parse_semantic(version)
    _range_error((major, minor, patch), AZ_STYLE_LIMITS, 'Azureus')

    return '%d%d%02d' % (major, minor, patch)

def az_style_to_semantic(version):
    if not is_az_style_version(version):
        raise InvalidFormatError(\
            "Invalid Azureus style version %r, expected 4 digits" % (version,))

    return format_semantic(int(version[0]), int(version[1]), int(version[2:4]))

def semantic_to_shadow_style(version):
    parts = parse_semantic(version)
    _range_error(parts, (SHADOW_STYLE_LIMIT,) * 3, 'Shadow')

    return ''.join(SHADOW_STYLE_VERSION_CHARS[part] for part in parts)

def shadow_style_to_semantic(version):
    # A '-' used as padding can't be told apart from the value 63.
    if not is_shadow_style_version(version):
        raise InvalidFormatError(\
            "Invalid Shadow style version %r, expected 3 characters" % \
                (version,))

    return format_semantic(\
        *[SHADOW_STYLE_VERSION_CHARS.index(c) for c in version])

if __name__ == '__main__':
    print(semantic_to_az_style('2.0.60'), az_style_to_semantic('2060'))
    print(semantic_to_shadow_style('5.8.11'), shadow_style_to_semantic('20-'))
