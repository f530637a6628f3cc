import logging

import cherrypy

from . import base
from .models import Client, DecodeRequest, EncodeRequest

from peerid import styles

_logger = logging.getLogger('peerid.web')

def _unprocessable(err):
    _logger.info("Rejected request, because %s" % err)
    return cherrypy.HTTPError(422, str(err))

class DecodeResource(object):
    @base.produces_json
    def index(self, **params):
        try:
            request = DecodeRequest.from_params(params)
            client = Client.decode(request.source())
        except ValueError as err:
            raise _unprocessable(err)

        if client is None:
            raise cherrypy.HTTPError(404, "Unrecognized peer id style")

        return client

class EncodeResource(object):
    @base.produces_json
    def index(self, **params):
        try:
            return EncodeRequest.from_params(params).encode()
        except ValueError as err:
            raise _unprocessable(err)

class PeerIdResource(object):
    decode = DecodeResource()
    encode = EncodeResource()

    @base.produces_json
    def index(self):
        return {'styles': list(styles.STYLES)}

def start(config = 'server.config', host = None, port = None):
    cherrypy.config.update(config)

    overrides = {}
    if host:
        overrides['server.socket_host'] = host
    if port:
        overrides['server.socket_port'] = port
    cherrypy.config.update(overrides)

    _logger.info("Serving peer id resources on %s:%s" % \
                     (cherrypy.config.get('server.socket_host'), \
                          cherrypy.config.get('server.socket_port')))

    cherrypy.quickstart(PeerIdResource())
