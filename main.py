import logging
import optparse
import sys

import peerid
from peerid import styles
from web import base

logger = logging.getLogger('peerid')

USAGE = """usage: python %prog decode <peer_id> [options]
       python %prog encode <code> <version> [options]
       python %prog serve [options]

Peer ids starting with '-' must follow '--', e.g. decode -- -AZ2060-..."""

def setup_logger(level = logging.INFO):
    logger.setLevel(level)
    if logger.handlers:
        return

    sthl = logging.StreamHandler()
    formatter = logging.Formatter(\
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    sthl.setFormatter(formatter)
    logger.addHandler(sthl)

def option_parser():
    opts = optparse.OptionParser(usage = USAGE)
    opts.add_option('-x', '--hex', action = 'store_true', dest = 'hex', \
                        help = 'the peer id to decode is given as hex bytes')
    opts.add_option('-s', '--style', default = styles.AZUREUS, \
      dest = 'style', choices = list(styles.STYLES), \
      help = 'peer id style to encode, az or shadow [default: %default]')
    opts.add_option('-c', '--config', default = 'server.config', \
      dest = 'config', metavar = 'FILE', help = 'web server configuration')
    opts.add_option('--host', dest = 'host', help = 'web server host')
    opts.add_option('--port', dest = 'port', type = 'int', \
                        help = 'web server port')
    opts.add_option('-v', '--verbose', action = 'store_true', \
                        dest = 'verbose', help = 'log debug messages')

    return opts

def decode(options, args):
    peer_id = args[0]
    if options.hex:
        peer_id = base.hex_to_bytes(peer_id)

    client = peerid.decode(peer_id)
    if client is None:
        print(peerid.UNKNOWN)
        return 2

    print(client)
    print("code:    %s" % client.code)
    print("version: %s" % client.version)

    return 0

def encode(options, args):
    code, version = args
    peer_id = peerid.encode(code, version, options.style)

    print(peer_id.decode('ascii'))

    return 0

def serve(options, args):
    import web.controllers as controllers
    controllers.start(options.config, options.host, options.port)

    return 0

COMMANDS = {
    'decode': (decode, 1),
    'encode': (encode, 2),
    'serve': (serve, 0)
}

def main(argv = None):
    opts = option_parser()
    options, args = opts.parse_args(argv)

    if not args or not args[0] in COMMANDS:
        opts.error('unknown command')

    command, nargs = COMMANDS[args[0]]
    if len(args) - 1 != nargs:
        opts.error('incorrect number of arguments')

    setup_logger(logging.DEBUG if options.verbose else logging.INFO)

    try:
        return command(options, args[1:])
    except ValueError as err:
        logger.error(err)
        return 1

if __name__ == '__main__':
    sys.exit(main())
