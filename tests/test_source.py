import pytest

from peerid.peerid_error import InvalidLengthError
from peerid.source import decode_url_binary, is_url_encoded, normalize


def test_is_url_encoded():
    for source in ['%2', '%24', '%2B', '%B', '%BD', '%B4', '%Bd', '%b4',
                   '%ba21', '-AZ2060-%2f%2F']:
        assert is_url_encoded(source)

    for source in ['%tesd%ss', '%a2^', '%^a2', '^%a2', '',
                   '-AZ2060-4f2f1f2f1f2f']:
        assert not is_url_encoded(source)


def test_decode_url_binary():
    assert decode_url_binary('%2DAZ2060%2D4f2f1f2f1f2f') == \
        b'-AZ2060-4f2f1f2f1f2f'
    assert decode_url_binary('%ff%00abc') == b'\xff\x00abc'


def test_normalize():
    peer_id = b'-AZ2060-4f2f1f2f1f2f'

    assert normalize(peer_id) == peer_id
    assert normalize(bytearray(peer_id)) == peer_id
    assert normalize(memoryview(peer_id)) == peer_id
    assert normalize(peer_id.decode('ascii')) == peer_id
    assert normalize('%2DAZ2060%2D4f2f1f2f1f2f') == peer_id
    assert isinstance(normalize(bytearray(peer_id)), bytes)


def test_normalize_truncates():
    assert normalize(b'-AZ2060-4f2f1f2f1f2fEXTRA') == b'-AZ2060-4f2f1f2f1f2f'


def test_normalize_too_short():
    for source in [b'', b'-AZ2060-', '-AZ2060-4f2f1f2f1f2', '%2DAZ2060']:
        with pytest.raises(InvalidLengthError):
            normalize(source)


def test_normalize_type():
    with pytest.raises(TypeError):
        normalize(20)


def test_normalize_unescapes_unreserved_text():
    assert is_url_encoded('-AZ2060-%41bcdefghij')
    assert normalize('-AZ2060-%41bcdefghijkl') == b'-AZ2060-Abcdefghijkl'

    with pytest.raises(InvalidLengthError):
        normalize('-AZ2060-%41bcdefghij')
