import json

import cherrypy
import pytest

import peerid
from web import base
from web.controllers import PeerIdResource
from web.models import DecodeRequest, PeerId


def load(body):
    return json.loads(body.decode('ascii'))


def test_index():
    out = load(PeerIdResource().index())
    assert out == {'styles': ['az', 'shadow']}
    assert cherrypy.response.headers['Content-Type'] == 'application/json'


def test_decode():
    out = load(PeerIdResource().decode.index(peer_id = '-AZ2060-4f2f1f2f1f2f'))
    assert out == {
        'code': 'AZ',
        'name': 'Azureus',
        'version': '2.0.60',
        'style': 'az',
        'description': 'Azureus 2.0.60'
    }


def test_decode_hex():
    raw = base.bytes_to_hex(b'S58B-----fffffffffff')
    out = load(PeerIdResource().decode.index(hex = raw))
    assert out['code'] == 'S'
    assert out['version'] == '5.8.11'
    assert out['style'] == 'shadow'


def test_decode_unknown_code_has_no_name():
    out = load(PeerIdResource().decode.index(peer_id = '-zz1234-4f2f1f2f1f2f'))
    assert not 'name' in out
    assert out['description'] == 'Unknown zz/1.2.34'


def test_decode_unrecognized():
    with pytest.raises(cherrypy.HTTPError) as err:
        PeerIdResource().decode.index(peer_id = '0123456789abcdefghij')
    assert err.value.code == 404


def test_decode_invalid():
    for params in [{'peer_id': '-AZ2060-'}, {'hex': 'zz'}, {'hex': 'abc'}, {}]:
        with pytest.raises(cherrypy.HTTPError) as err:
            PeerIdResource().decode.index(**params)
        assert err.value.code == 422


def test_encode():
    out = load(PeerIdResource().encode.index(code = 'S', version = '5.8.11', \
                                                 style = 'shadow'))
    assert out['peer_id'].startswith('S58B-----')
    assert out['hex'] == base.bytes_to_hex(out['peer_id'].encode('ascii'))
    assert peerid.decode(out['peer_id'].encode('ascii')).version == '5.8.11'


def test_encode_default_style():
    out = load(PeerIdResource().encode.index(code = 'AZ', version = '2.0.60'))
    assert out['peer_id'].startswith('-AZ2060-')


def test_encode_invalid():
    for params in [{'code': 'AZ', 'version': '2.0.100'},
                   {'code': 'AZ', 'version': '2.0.60', 'style': 'mainline'},
                   {'code': 'AZ'}]:
        with pytest.raises(cherrypy.HTTPError) as err:
            PeerIdResource().encode.index(**params)
        assert err.value.code == 422


def test_hex_to_bytes():
    assert base.hex_to_bytes('2d415a') == b'-AZ'

    for value in ['zz', 'abc', None]:
        with pytest.raises(ValueError):
            base.hex_to_bytes(value)


def test_model_from_params():
    request = DecodeRequest.from_params({'hex': '2d415a', 'other': 'x'})
    assert request.raw == b'-AZ'
    assert request.peer_id is None
    assert request.source() == b'-AZ'


def test_peer_id_model_serializes_both_keys():
    out = PeerId(id = b'-AZ2060-4f2f1f2f1f2f').serialize()
    assert out == {'peer_id': '-AZ2060-4f2f1f2f1f2f',
                   'hex': base.bytes_to_hex(b'-AZ2060-4f2f1f2f1f2f')}


def test_decode_uses_a_single_detection(monkeypatch):
    from peerid import styles

    calls = []
    detect = styles.detect

    def counting_detect(peer_id):
        calls.append(peer_id)
        return detect(peer_id)

    monkeypatch.setattr(styles, 'detect', counting_detect)
    out = load(PeerIdResource().decode.index(peer_id = 'S58B-----fffffffffff'))

    assert out['style'] == 'shadow'
    assert len(calls) == 1
