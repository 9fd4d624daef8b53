import json

import pytest
import requests
from unittest import mock

from solrquery import conf


SOLR_URL = 'http://localhost:8983/solr/collection'

SEARCH_RESPONSE = {
    'responseHeader': {'status': 0, 'QTime': 3, 'params': {'q': '*', 'rows': '10'}},
    'response': {'numFound': 2, 'start': 0, 'docs': [
        {'id': 'tt0077711', 'name': 'Autumn Sonata'},
        {'id': 'tt0060827', 'name': 'Persona'},
    ]},
}


def make_response(status=200, body=None, content_type='application/json', url=SOLR_URL):
    if body is None:
        body = SEARCH_RESPONSE
    if isinstance(body, dict):
        body = json.dumps(body)
    response = requests.Response()
    response.status_code = status
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    response.headers['Content-Type'] = content_type
    response.url = url
    return response


@pytest.fixture(autouse=True)
def clean_conf():
    conf.reset()
    yield
    conf.reset()


@pytest.fixture
def solr_request():
    """Patches requests.Session.request; the mock records (method, url) and kwargs."""
    with mock.patch.object(requests.Session, 'request') as request:
        request.return_value = make_response()
        yield request


def requested_url(request_mock):
    return request_mock.call_args[0][1]
