""" Python library for querying and updating Solr.
"""

import logging
import requests

from .encoding import encode_query, encode_update
from .errors import InvalidQueryError, ResponseError, TransportError
from .params import Facet, Params, Query, Suggest, Update
from .url import resolve_endpoint
from .util import ensure_sequence, is_empty


log = logging.getLogger(__name__)

SUCCESS_STATUSES = range(200, 300)


class SolrResponse(object):
    """
    Outcome of a Solr request.

    `body` is the decoded JSON payload, or the response text when the payload
    is not JSON (e.g. wt=xml).
    """

    def __init__(self, response):
        self.raw = response
        self.status_code = response.status_code
        self.headers = response.headers
        self.request_url = response.url
        try:
            self.body = response.json()
        except ValueError:
            self.body = response.text

    def __repr__(self):
        return u"<SolrResponse(status={0}, url={1})>".format(self.status_code, self.request_url)

    @property
    def ok(self):
        return self.status_code in SUCCESS_STATUSES


class Client(object):
    """
    Issues requests to one Solr endpoint.

    `url`: a literal URL, a configured endpoint key or a `solrquery.url.Endpoint`.
    `strict`: raise `ResponseError` for non-2xx responses instead of returning them.
    `timeout`: default request timeout in seconds, overridden by endpoint options.
    """

    def __init__(self, url='default', strict=False, timeout=None):
        self.endpoint = resolve_endpoint(url)
        self.strict = strict
        self.timeout = timeout
        self.requests = requests.Session()

    def __repr__(self):
        return u"<Client(url={0})>".format(self.endpoint)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Release the pooled connections of the underlying session."""
        self.requests.close()

    def _apicall(self, method, query=None, data=None, headers=None, expected_status=None):
        url = str(self.endpoint)
        if query:
            url = '{0}?{1}'.format(url, query)
        log.debug('_apicall({0}, {1}, ...'.format(method, url))

        options = dict(self.endpoint.options)
        request_headers = dict(self.endpoint.headers)
        request_headers.update(options.pop('headers', None) or {})
        request_headers.update(headers or {})
        options.setdefault('timeout', self.timeout)
        if data is not None and hasattr(data, 'encode'):
            data = data.encode('utf-8')

        try:
            response = self.requests.request(method, url,
                                             data=data,
                                             headers=request_headers,
                                             **options)
        except requests.RequestException as e:
            log.warning('Request to {0} failed: {1!r}'.format(url, e))
            raise TransportError('Request to {0} failed: {1}'.format(url, e), e)

        if expected_status is None and self.strict:
            expected_status = SUCCESS_STATUSES
        if expected_status is not None and response.status_code not in expected_status:
            tmpl = "Unexpected HTTP status. Expecting {0!r} but got {1!r} on {2!r}"
            msg = tmpl.format(str(expected_status), response.status_code, url)
            raise ResponseError(msg, response.status_code, expected_status, SolrResponse(response))
        return SolrResponse(response)

    def search(self, query, rows=None, start=None, filters=None, facet_fields=None, sort=None):
        """
        Search with parameter records, a mapping or (key, value) pairs. A
        string is taken as keywords and combined with the paging, filter,
        facet field and sort arguments.
        """
        if hasattr(query, 'strip'):
            return self._keywords(query, rows, start, filters, facet_fields, sort)
        if is_empty(query) or (hasattr(query, 'keys') and len(query) == 0):
            raise InvalidQueryError()
        if isinstance(query, Params):
            query = [query]
        return self._apicall('GET', encode_query(query))

    def _keywords(self, keywords, rows=None, start=None, filters=None, facet_fields=None, sort=None):
        if is_empty(keywords):
            raise InvalidQueryError()
        query = Query(q=keywords, rows=rows, start=start, fq=filters, sort=sort)
        facet = Facet(field=facet_fields)
        return self._apicall('GET', encode_query([query, facet]))

    def spellcheck(self, spellcheck, query=None):
        params = [spellcheck] if query is None else [query, spellcheck]
        return self._apicall('GET', encode_query(params))

    def suggest(self, query, count=None, dictionaries=None, context=None):
        if isinstance(query, Suggest):
            return self._apicall('GET', encode_query(query))
        if is_empty(query):
            raise InvalidQueryError()
        suggest = Suggest(q=query, count=count, dictionary=dictionaries, cfq=context)
        return self._apicall('GET', encode_query(suggest))

    def mlt(self, query, mlt):
        return self._apicall('GET', encode_query([query, mlt]))

    def update(self, docs, commit=True):
        """
        Add or replace documents. `docs` is a dict, a list of dicts, an
        `Update` record or a string holding any Solr update body, which is
        sent verbatim with the endpoint's headers.
        """
        if hasattr(docs, 'strip'):
            if is_empty(docs):
                raise InvalidQueryError()
            log.debug('Posting raw update to {0}'.format(self.endpoint))
            return self._apicall('POST', data=docs)
        if isinstance(docs, Update):
            update = docs
        else:
            if is_empty(docs) or (hasattr(docs, 'keys') and len(docs) == 0):
                raise InvalidQueryError()
            update = Update(doc=docs, commit=commit)

        headers = {}
        if not self.endpoint.has_header('Content-Type'):
            headers['Content-Type'] = 'application/json'
        return self._apicall('POST', data=encode_update(update), headers=headers)

    def delete(self, ids, commit=True):
        if is_empty(ids):
            raise InvalidQueryError()
        return self.update(Update(delete_id=ids, commit=commit))

    def delete_by_query(self, queries, commit=True):
        if is_empty(queries):
            raise InvalidQueryError()
        return self.update(Update(delete_query=list(ensure_sequence(queries)), commit=commit))

    def commit(self, wait_searcher=True):
        return self.update(Update(commit=True, waitSearcher=wait_searcher))

    def optimize(self, max_segments=None, wait_searcher=True):
        return self.update(Update(optimize=True, maxSegments=max_segments,
                                  waitSearcher=wait_searcher))

    def rollback(self):
        return self.update(Update(rollback=True))
