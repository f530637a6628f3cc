from .clients import Client, UNKNOWN
from .codec import decode, describe, encode, identify
from .peerid_error import PeerIdError, InvalidLengthError, \
    InvalidFormatError, InvalidVersionError, OutOfRangeError, \
    InvalidCodeError, InvalidStyleError, NotThisStyleError
from .styles import AZUREUS, SHADOW, STYLES, PEER_ID_LENGTH
