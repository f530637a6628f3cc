import logging
import random

from . import source
from . import styles
from . import versions
from .clients import UNKNOWN
from .peerid_error import InvalidStyleError, InvalidVersionError

_logger = logging.getLogger('peerid.codec')

_EXTRACTORS = {
    styles.AZUREUS: styles.az_style_client,
    styles.SHADOW: styles.shadow_style_client
}

_BUILDERS = {
    styles.AZUREUS: styles.build_az_style,
    styles.SHADOW: styles.build_shadow_style
}

def identify(peer_id):
    """Style and client of the peer id, (None, None) if unrecognized."""
    peer_id = source.normalize(peer_id)

    style = styles.detect(peer_id)
    if style is None:
        _logger.debug("Unrecognized peer id %r" % peer_id)
        return None, None

    client = _EXTRACTORS[style](peer_id)
    _logger.debug("Decoded %s style peer id %r as %r" % \
                      (style, peer_id, client))

    return style, client

def decode(peer_id):
    """Client encoded in the peer id, None if the style is unrecognized."""
    style, client = identify(peer_id)
    return client

def encode(code, version, style = styles.AZUREUS, rand = random):
    if not versions.is_semantic_version(version):
        raise InvalidVersionError(\
            "Invalid version %r, expected major.minor.patch" % (version,))

    builder = _BUILDERS.get(style, None)
    if builder is None:
        raise InvalidStyleError("Unknown peer id style %r, expected one of %s"\
                                    % (style, ', '.join(styles.STYLES)))

    return builder(code, version, rand)

def describe(peer_id):
    client = decode(peer_id)
    if client is None:
        return UNKNOWN

    return str(client)
