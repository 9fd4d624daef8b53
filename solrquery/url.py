"""
Solr endpoints.

An endpoint is given either as a literal URL, as the key of a configured
endpoint (see `solrquery.conf`) or as an `Endpoint`:

>>> str(Endpoint('http://localhost:8983/solr/collection', handler='suggest'))
'http://localhost:8983/solr/collection/suggest'
>>> str(resolve_endpoint('http://localhost:8983/solr/collection'))
'http://localhost:8983/solr/collection'
"""

import logging
from copy import deepcopy

from . import conf
from .errors import URLNotConfiguredError


log = logging.getLogger(__name__)

__all__ = ['Endpoint', 'configured_url', 'resolve_endpoint']

# Keyword arguments of requests.Session.request that the client always sets itself.
RESERVED_OPTIONS = ('method', 'url', 'data')


class Endpoint(object):
    """
    `url`: base URL of a Solr core or collection.
    `handler`: optional request handler appended to the URL, e.g. 'select'.
    `headers`: HTTP headers, a dict or a list of (name, value) pairs.
    `options`: extra keyword arguments for `requests`, e.g. timeout, params.
    """

    def __init__(self, url, handler=None, headers=None, options=None):
        self.url = url
        self.handler = handler
        self.headers = dict(headers or {})
        self.options = dict(options or {})
        reserved = [key for key in RESERVED_OPTIONS if key in self.options]
        if reserved:
            raise ValueError("Endpoint options may not set {0}".format(", ".join(reserved)))

    def __repr__(self):
        return u"<Endpoint(url={0}, handler={1})>".format(self.url, self.handler)

    def __str__(self):
        if not self.handler:
            return self.url
        return '{0}/{1}'.format(self.url.rstrip('/'), self.handler.lstrip('/'))

    def __eq__(self, other):
        return (isinstance(other, Endpoint)
                and self.__dict__ == other.__dict__)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def has_header(self, name):
        return name.lower() in (k.lower() for k in self.headers)

    @classmethod
    def from_conf(cls, conf_value):
        if isinstance(conf_value, Endpoint):
            return deepcopy(conf_value)
        return cls(url=conf_value.get('url'),
                   handler=conf_value.get('handler'),
                   headers=conf_value.get('headers'),
                   options=conf_value.get('options'))


def configured_url(key):
    """Look up the endpoint configured under `key`."""
    conf_value = conf.get(key)
    if conf_value is None:
        raise URLNotConfiguredError('URL not configured: {0!r}'.format(key))
    endpoint = Endpoint.from_conf(conf_value)
    if not endpoint.url:
        raise URLNotConfiguredError('URL not configured: {0!r}'.format(key))
    return endpoint


def resolve_endpoint(url):
    if isinstance(url, Endpoint):
        return url
    if not url:
        raise URLNotConfiguredError()
    if '://' in url:
        return Endpoint(url)
    log.debug('Resolving configured endpoint {0!r}'.format(url))
    return configured_url(url)


if __name__ == "__main__":
    import doctest
    doctest.testmod()
