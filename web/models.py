from .base import Field, Model, ascii_text, bytes_to_hex, hex_to_bytes

from peerid import codec
from peerid import styles

class Client(Model):
    fields = (
        Field('code'),
        Field('name'),
        Field('version'),
        Field('style'),
        Field('description')
    )

    @classmethod
    def decode(cls, peer_id):
        style, client = codec.identify(peer_id)
        if client is None:
            return None

        return cls(code = client.code, name = client.name, \
                   version = client.version, style = style, \
                   description = str(client))

class PeerId(Model):
    # Encoded peer ids only hold visible ASCII characters.
    fields = (
        Field('id', key = 'peer_id', serialize = ascii_text),
        Field('id', key = 'hex', serialize = bytes_to_hex)
    )

    @classmethod
    def encode(cls, code, version, style):
        return cls(id = codec.encode(code, version, style))

class DecodeRequest(Model):
    fields = (
        Field('peer_id'),
        Field('raw', key = 'hex', parse = hex_to_bytes)
    )

    def source(self):
        if not self.raw is None:
            return self.raw

        return self.peer_id or ''

class EncodeRequest(Model):
    fields = (
        Field('code'),
        Field('version'),
        Field('style')
    )

    def encode(self):
        return PeerId.encode(self.code or '', self.version, \
                                 self.style or styles.AZUREUS)
