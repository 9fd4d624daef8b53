"""
Registry of named Solr endpoints.

Each entry maps a key to a dict with 'url' and optionally 'handler',
'headers' and 'options', or to a `solrquery.url.Endpoint`. The 'default'
key is used by `solrquery.q`.

    solrquery.configure(default={'url': 'http://localhost:8983/solr/gettingstarted',
                                 'handler': 'select'},
                        updater={'url': 'http://localhost:8983/solr/gettingstarted',
                                 'handler': 'update',
                                 'headers': {'Content-Type': 'application/json'}})
"""

import json
import logging


log = logging.getLogger(__name__)

__all__ = ['configure', 'get', 'keys', 'load_file', 'reset']


_endpoints = {}


def configure(mapping=None, **endpoints):
    if mapping:
        endpoints = dict(mapping, **endpoints)
    for (key, value) in endpoints.items():
        if not hasattr(value, 'url') and not hasattr(value, 'keys'):
            raise ValueError('Endpoint configuration for {0!r} must be a dict or an Endpoint, got {1!r}'.format(key, value))
        log.debug('Configuring endpoint {0!r}'.format(key))
        _endpoints[key] = value


def load_file(path):
    """Read endpoint configuration from a JSON file of the shape accepted by `configure`."""
    with open(path) as inf:
        configure(json.load(inf))


def get(key):
    return _endpoints.get(key)


def keys():
    return sorted(_endpoints.keys())


def reset():
    _endpoints.clear()
