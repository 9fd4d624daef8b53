from unittest import mock

import pytest
import requests

import solrquery
from solrquery import Endpoint, Query, Facet, Suggest
from solrquery.encoding import encode_query
from solrquery.errors import InvalidQueryError, ResponseError, URLNotConfiguredError

from conftest import SOLR_URL, make_response, requested_url


@pytest.fixture
def default_endpoint():
    solrquery.configure(default={'url': SOLR_URL, 'handler': 'select'},
                        updater={'url': SOLR_URL, 'handler': 'update',
                                 'headers': {'Content-Type': 'application/json'}})


def test_missing_url():
    with pytest.raises(URLNotConfiguredError) as excinfo:
        solrquery.search(None, None)
    assert str(excinfo.value) == 'URL not configured'
    with pytest.raises(URLNotConfiguredError):
        solrquery.search('', 'loch')
    with pytest.raises(URLNotConfiguredError):
        solrquery.commit(None)


def test_malformed_query_checked_before_configuration():
    with pytest.raises(InvalidQueryError) as excinfo:
        solrquery.q(None)
    assert str(excinfo.value) == 'malformed query or URL'
    with pytest.raises(InvalidQueryError):
        solrquery.search('default', None)
    with pytest.raises(InvalidQueryError):
        solrquery.q('')
    with pytest.raises(InvalidQueryError):
        solrquery.suggest('autocomplete', '')


def test_unconfigured_key():
    with pytest.raises(URLNotConfiguredError):
        solrquery.q('loch')


def test_q_uses_default_endpoint(default_endpoint, solr_request):
    solrquery.q(Query(q='loch', fq=['type:illustration', 'format:image/jpeg']))
    assert requested_url(solr_request) == (
        SOLR_URL + '/select?fq=type%3Aillustration&fq=format%3Aimage%2Fjpeg&q=loch')

    solrquery.q('loch', 10, 20)
    assert requested_url(solr_request) == SOLR_URL + '/select?q=loch&rows=10&start=20&facet=true'

    solrquery.q([Query(q='author:I*', rows=5), Facet(field=['cat', 'author_str'], mincount=1)])
    assert requested_url(solr_request) == (
        SOLR_URL + '/select?q=author%3AI%2A&rows=5&facet=true&facet.field=cat&facet.field=author_str'
        '&facet.mincount=1')


def test_search_with_endpoint(solr_request):
    url = Endpoint(SOLR_URL, handler='suggest')
    params = {'suggest': True, 'suggest.dictionary': 'mySuggester', 'suggest.q': 'el'}
    solrquery.search(url, params)
    assert requested_url(solr_request) == str(url) + '?' + encode_query(params)


def test_strict(default_endpoint, solr_request):
    solr_request.return_value = make_response(500, 'Server Error', content_type='text/html')
    assert solrquery.search('default', Query(q='*')).status_code == 500
    with pytest.raises(ResponseError):
        solrquery.search('default', Query(q='*'), strict=True)
    with pytest.raises(ResponseError):
        solrquery.q('*', strict=True)


def test_suggest_and_spellcheck(solr_request):
    solrquery.suggest(SOLR_URL, Suggest(q='ha', count=10, dictionary='name_infix'))
    assert requested_url(solr_request) == (
        SOLR_URL + '?suggest.count=10&suggest.dictionary=name_infix&suggest.q=ha&suggest=true')

    solrquery.spellcheck(SOLR_URL, solrquery.SpellCheck(q='delll ultra sharp'))
    assert requested_url(solr_request) == SOLR_URL + '?spellcheck.q=delll+ultra+sharp&spellcheck=true'


def test_mlt(solr_request):
    solrquery.mlt(SOLR_URL, Query(q='apache'), solrquery.MoreLikeThis(fl='manu'))
    assert requested_url(solr_request) == SOLR_URL + '?q=apache&mlt.fl=manu&mlt=true'


def test_updates(default_endpoint, solr_request):
    solrquery.update('updater', {'id': 'tt0083658', 'name': 'Blade Runner'})
    assert solr_request.call_args[0] == ('POST', SOLR_URL + '/update')
    assert solr_request.call_args[1]['data'] == (
        b'{"add":{"doc":{"id":"tt0083658","name":"Blade Runner"}},"commit":{}}')

    solrquery.delete('updater', ['tt2358891', 'tt1602620'], False)
    assert solr_request.call_args[1]['data'] == b'{"delete":["tt2358891","tt1602620"]}'

    solrquery.delete_by_query('updater', 'name:Persona')
    assert solr_request.call_args[1]['data'] == b'{"delete":{"query":"name:Persona"},"commit":{}}'

    solrquery.commit('updater', wait_searcher=False)
    assert solr_request.call_args[1]['data'] == b'{"commit":{"waitSearcher":false}}'

    with pytest.raises(InvalidQueryError):
        solrquery.update('updater', [])


def test_shortcuts_close_their_client(default_endpoint, solr_request):
    with mock.patch.object(requests.Session, 'close') as session_close:
        solrquery.q('loch')
        solrquery.update('updater', {'id': 'tt0083658'})
        assert session_close.call_count == 2

        solr_request.return_value = make_response(500, 'Server Error', content_type='text/html')
        with pytest.raises(ResponseError):
            solrquery.commit('updater', strict=True)
        assert session_close.call_count == 3
