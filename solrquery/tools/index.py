"""
Reads Solr documents from a JSON file (a single document or a list of
documents) and posts them to an update handler, committing by default.
"""

import os
import sys
import json
import logging
from argparse import ArgumentParser

from solrquery.client import Client
from solrquery.errors import SolrError
from solrquery.tools.query import endpoint_from_args


log = logging.getLogger(__name__)


def build_parser():
    parser = ArgumentParser(description='Index documents into Solr.')
    parser.add_argument('--url', metavar='URL', type=str,
                        default='default', action='store',
                        help='URL or configured key of the Solr endpoint. (default: default)')
    parser.add_argument('--handler', metavar='HANDLER', action='store', default='update',
                        help='Update handler, overriding the configured one. (default: update)')
    parser.add_argument('--config', metavar='FILE', action='store', default=None,
                        help='JSON file of named endpoint configurations.')
    parser.add_argument('--no-commit', dest='commit', default=True, action='store_false',
                        help='Leave the documents uncommitted, e.g. when autocommit is set up.')
    parser.add_argument('--loglevel', metavar='LEVEL', default='WARN',
                        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'), action='store',
                        help='Level of logging.')
    parser.add_argument('inpath', metavar='INPATH', action='store',
                        help='JSON file of documents to index.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper()))

    if os.path.exists(args.inpath) == False:
        sys.stderr.write("Unable to find {inpath}.\n".format(**vars(args)))
        return 1

    try:
        with open(args.inpath, encoding='utf-8') as inf:
            docs = json.load(inf)
    except ValueError as e:
        sys.stderr.write("Unable to read {0}: {1}\n".format(args.inpath, e))
        return 1
    count = len(docs) if isinstance(docs, list) else 1
    log.info("Indexing {0} document(s) from {1}".format(count, args.inpath))

    try:
        with Client(endpoint_from_args(args), strict=True) as solr:
            solr.update(docs, commit=args.commit)
    except SolrError as e:
        sys.stderr.write("{0}\n".format(e))
        return 1

    sys.stdout.write("Indexed {0} document(s).\n".format(count))
    return 0


if __name__ == "__main__":
    sys.exit(main())
