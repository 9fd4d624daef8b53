"""
Module-level shortcuts taking the endpoint as the first argument. The
endpoint is a URL, a configured key (see `solrquery.conf`) or an
`Endpoint`; `q` uses the 'default' key.

    solrquery.q(Query(q='loch', fq=['type:illustration', 'format:image/jpeg']))
    solrquery.q('loch', 10, 20)
    solrquery.search('library', [DisMax(q='run', qf='description^2.3 title', mm='2<-25% 9<-3'),
                                 Query(rows=10, start=10, fq=['edited:true']),
                                 Facet(field=['cat', 'author_str'], mincount=1)])
    solrquery.suggest('autocomplete', 'bo', 5, ['name_infix', 'ln_prefix', 'fn_prefix'], '1939')
    solrquery.update('updater', [doc1, doc2], commit=False)

Every function accepts `strict=True` to raise `ResponseError` for non-2xx
responses.
"""

from .client import Client
from .errors import InvalidQueryError, URLNotConfiguredError
from .util import is_empty


__all__ = ['q', 'search', 'spellcheck', 'suggest', 'mlt',
           'update', 'delete', 'delete_by_query', 'commit']


def _check(url, query):
    if is_empty(url):
        raise URLNotConfiguredError()
    if is_empty(query) or (hasattr(query, 'keys') and len(query) == 0):
        raise InvalidQueryError()


def q(query, rows=None, start=None, filters=None, facet_fields=None, sort=None, strict=False):
    """Search the 'default' endpoint, see `search`."""
    return search('default', query, rows, start, filters, facet_fields, sort, strict=strict)


def search(url, query, rows=None, start=None, filters=None, facet_fields=None, sort=None, strict=False):
    """
    `query` is a parameter record, a list of records, a mapping or a list of
    (key, value) pairs. A string is taken as keywords, combined with the
    rows, start, filters (fq), facet_fields and sort arguments.
    """
    _check(url, query)
    with Client(url, strict=strict) as solr:
        return solr.search(query, rows, start, filters, facet_fields, sort)


def spellcheck(url, spellcheck_query, query=None, strict=False):
    _check(url, spellcheck_query)
    with Client(url, strict=strict) as solr:
        return solr.spellcheck(spellcheck_query, query)


def suggest(url, query, count=None, dictionaries=None, context=None, strict=False):
    """`query` is a `Suggest` record or the term to complete."""
    _check(url, query)
    with Client(url, strict=strict) as solr:
        return solr.suggest(query, count, dictionaries, context)


def mlt(url, query, mlt_query, strict=False):
    _check(url, query)
    with Client(url, strict=strict) as solr:
        return solr.mlt(query, mlt_query)


def update(url, docs, commit=True, strict=False):
    """Add documents (a dict or a list of dicts), or post a raw update body string."""
    _check(url, docs)
    with Client(url, strict=strict) as solr:
        return solr.update(docs, commit)


def delete(url, ids, commit=True, strict=False):
    _check(url, ids)
    with Client(url, strict=strict) as solr:
        return solr.delete(ids, commit)


def delete_by_query(url, queries, commit=True, strict=False):
    _check(url, queries)
    with Client(url, strict=strict) as solr:
        return solr.delete_by_query(queries, commit)


def commit(url, wait_searcher=True, strict=False):
    if is_empty(url):
        raise URLNotConfiguredError()
    with Client(url, strict=strict) as solr:
        return solr.commit(wait_searcher)
