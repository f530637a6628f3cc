class PeerIdError(ValueError):
    pass

class InvalidLengthError(PeerIdError):
    pass

class InvalidFormatError(PeerIdError):
    pass

class InvalidVersionError(PeerIdError):
    pass

class OutOfRangeError(PeerIdError):
    pass

class InvalidCodeError(PeerIdError):
    pass

class InvalidStyleError(PeerIdError):
    pass

class NotThisStyleError(PeerIdError):
    pass
