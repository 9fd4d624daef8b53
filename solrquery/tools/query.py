"""
Sends a search to a Solr endpoint and prints the response body. Parameters
are given as key=value arguments and may be repeated, e.g.

    solrquery-query --url http://localhost:8983/solr/gettingstarted --handler select \
        q='*' rows=10 fq=cat:electronics fq='popularity:[0 TO *]'
"""

import sys
import json
import logging
from argparse import ArgumentParser

from solrquery import conf
from solrquery.client import Client
from solrquery.errors import SolrError
from solrquery.url import Endpoint, resolve_endpoint


def parse_param(arg):
    """
    >>> parse_param('fq=popularity:[0 TO *]')
    ('fq', 'popularity:[0 TO *]')
    """
    (key, sep, value) = arg.partition('=')
    if not sep or not key:
        raise ValueError('Expected key=value, got {0!r}'.format(arg))
    return (key, value)


def build_parser():
    parser = ArgumentParser(description='Query a Solr endpoint.')
    parser.add_argument('--url', metavar='URL', type=str,
                        default='default', action='store',
                        help='URL or configured key of the Solr endpoint. (default: default)')
    parser.add_argument('--handler', metavar='HANDLER', action='store', default=None,
                        help='Request handler, overriding the configured one, e.g. select.')
    parser.add_argument('--config', metavar='FILE', action='store', default=None,
                        help='JSON file of named endpoint configurations.')
    parser.add_argument('--strict', default=False, action='store_true',
                        help='Fail on non-2xx responses.')
    parser.add_argument('--loglevel', metavar='LEVEL', default='WARN',
                        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'), action='store',
                        help='Level of logging.')
    parser.add_argument('params', metavar='KEY=VALUE', nargs='+', type=parse_param,
                        help='Solr request parameters.')
    return parser


def endpoint_from_args(args):
    if args.config:
        conf.load_file(args.config)
    endpoint = resolve_endpoint(args.url)
    if args.handler:
        endpoint = Endpoint(endpoint.url, args.handler, endpoint.headers, endpoint.options)
    return endpoint


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper()))

    try:
        with Client(endpoint_from_args(args), strict=args.strict) as solr:
            response = solr.search(args.params)
    except SolrError as e:
        sys.stderr.write("{0}\n".format(e))
        return 1

    if not isinstance(response.body, str):
        sys.stdout.write(json.dumps(response.body, indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(response.body)
    sys.stdout.write("\n")
    return 0 if response.ok else 2


if __name__ == "__main__":
    sys.exit(main())
