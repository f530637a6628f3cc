import json

import cherrypy

class Encoder(json.JSONEncoder):
    def default(self, o):
        if hasattr(o, 'serialize'):
            return o.serialize()

        return super(Encoder, self).default(o)

JSON = Encoder()

def produces_json(f):
    def deco(self, *args, **kwargs):
        out = f(self, *args, **kwargs)
        cherrypy.response.headers['Content-Type'] = 'application/json'
        return JSON.encode(out).encode('ascii')

    deco.exposed = True

    return deco

def hex_to_bytes(value):
    """Raw peer id bytes from their hex form, e.g. '2d415a...'."""
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError):
        raise ValueError("Invalid hex encoded peer id %r" % (value,))

def bytes_to_hex(value):
    return value.hex()

def ascii_text(value):
    return value.decode('ascii')

class Field(object):
    """Maps a model attribute to its query parameter / JSON key."""

    def __init__(self, attr, key = None, parse = None, serialize = None):
        self.attr = attr
        self.key = key or attr
        self._parse = parse
        self._serialize = serialize

    def parse(self, value):
        return value if self._parse is None else self._parse(value)

    def serialize(self, value):
        return value if self._serialize is None else self._serialize(value)

class Model(object):
    fields = ()

    @classmethod
    def from_params(cls, params):
        model = cls()
        for field in cls.fields:
            if field.key in params:
                setattr(model, field.attr, field.parse(params[field.key]))

        return model

    def __init__(self, **attrs):
        for field in self.fields:
            setattr(self, field.attr, attrs.get(field.attr, None))

    def serialize(self):
        out = {}
        for field in self.fields:
            value = getattr(self, field.attr)
            if not value is None:
                out[field.key] = field.serialize(value)

        return out
