from types import MappingProxyType

UNKNOWN = 'Unknown'

AZUREUS_STYLE_CLIENTS = MappingProxyType({
    'AG' : 'Ares',
    'A~' : 'Ares',
    'AR' : 'Arctic',
    'AT' : 'Artemis',
    'AX' : 'BitPump',
    'AZ' : 'Azureus',
    'BB' : 'BitBuddy',
    'BC' : 'BitComet',
    'BF' : 'Bitflu',
    'BG' : 'BTG (uses Rasterbar libtorrent)',
    'BI' : 'BiglyBT',
    'bL' : 'Bitless',
    'BL' : 'BitBlinder',
    'BP' : 'BitTorrent Pro (Azureus + spyware)',
    'BR' : 'BitRocket',
    'BS' : 'BTSlave',
    'BT' : 'mainline BitTorrent',
    'BW' : 'BitWombat',
    'BX' : '~Bittorrent X',
    'CD' : 'Enhanced CTorrent',
    'CT' : 'CTorrent',
    'DE' : 'DelugeTorrent',
    'DP' : 'Propagate Data Client',
    'EB' : 'EBit',
    'ES' : 'electric sheep',
    'FC' : 'FileCroc',
    'FD' : 'Free Download Manager',
    'FT' : 'FoxTorrent',
    'GS' : 'GSTorrent',
    'HK' : 'Hekate',
    'HL' : 'Halite',
    'HN' : 'Hydranode',
    'KG' : 'KGet',
    'KT' : 'KTorrent',
    'LC' : 'LeechCraft',
    'LH' : 'LH-ABC',
    'LP' : 'Lphant',
    'LT' : 'libtorrent',
    'lt' : 'libTorrent',
    'LW' : 'LimeWire',
    'MK' : 'Meerkat',
    'MO' : 'MonoTorrent',
    'MP' : 'MooPolice',
    'MR' : 'Miro',
    'MT' : 'MoonlightTorrent',
    'NX' : 'Net Transport',
    'OS' : 'OneSwarm',
    'OT' : 'OmegaTorrent',
    'PD' : 'Pando',
    'PI' : 'PicoTorrent',
    'PT' : 'PHPTracker',
    'qB' : 'qBittorrent',
    'QD' : 'QQDownload',
    'QT' : 'Qt 4 Torrent example',
    'RT' : 'Retriever',
    'RZ' : 'RezTorrent',
    'S~' : 'Shareaza alpha/beta',
    'SB' : '~Swiftbit',
    'SD' : 'Thunder (aka XunLei)',
    'SM' : 'SoMud',
    'SS' : 'SwarmScope',
    'ST' : 'SymTorrent',
    'st' : 'sharktorrent',
    'SZ' : 'Shareaza',
    'TL' : 'Tribler',
    'TN' : 'TorrentDotNET',
    'TR' : 'Transmission',
    'TS' : 'Torrentstorm',
    'TT' : 'TuoTu',
    'UL' : 'uLeecher!',
    'UM' : 'uTorrent for Mac',
    'UT' : 'uTorrent',
    'UW' : 'uTorrent Web',
    'VG' : 'Vagaa',
    'WT' : 'BitLet',
    'WW' : 'WebTorrent',
    'WY' : 'FireTorrent',
    'XL' : 'Xunlei',
    'XS' : 'XSwifter',
    'XT' : 'XanTorrent',
    'XX' : 'Xtorrent',
    'ZT' : 'ZipTorrent'
})

SHADOW_STYLE_CLIENTS = MappingProxyType({
    'A' : 'ABC',
    'O' : 'Osprey Permaseed',
    'Q' : 'BTQueue',
    'R' : 'Tribler',
    'S' : 'Shadow\'s client',
    'T' : 'BitTornado',
    'U' : 'UPnP NAT Bit Torrent'
})

def az_style_client_name(code):
    return AZUREUS_STYLE_CLIENTS.get(code, None)

def shadow_style_client_name(code):
    return SHADOW_STYLE_CLIENTS.get(code, None)

class Client(object):
    def __init__(self, code, name, version):
        self._code = code
        self._name = name
        self._version = version

    @property
    def code(self):
        return self._code

    @property
    def name(self):
        return self._name

    @property
    def version(self):
        return self._version

    def serialize(self):
        return {
            'code': self._code,
            'name': self._name,
            'version': self._version
        }

    def __eq__(self, other):
        if not isinstance(other, Client):
            return NotImplemented

        return (self._code, self._name, self._version) == \
            (other.code, other.name, other.version)

    def __hash__(self):
        return hash((self._code, self._name, self._version))

    def __repr__(self):
        return "Client(%r, %r, %r)" % (self._code, self._name, self._version)

    def __str__(self):
        if self._name is None:
            return '%s %s/%s' % (UNKNOWN, self._code, self._version)
        else:
            return '%s %s' % (self._name, self._version)
