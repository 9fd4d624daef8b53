import json

import pytest

from solrquery import conf
from solrquery.errors import URLNotConfiguredError
from solrquery.url import Endpoint, configured_url, resolve_endpoint


def test_endpoint_string():
    assert str(Endpoint('http://localhost:8983/solr/collection')) == 'http://localhost:8983/solr/collection'
    assert str(Endpoint('http://localhost:8983/solr/collection/')) == 'http://localhost:8983/solr/collection/'
    assert str(Endpoint('http://localhost:8983/solr/collection/', handler='select')) == (
        'http://localhost:8983/solr/collection/select')


def test_endpoint_headers():
    endpoint = Endpoint('http://localhost:8983/solr', headers=[('Content-type', 'application/json')])
    assert endpoint.headers == {'Content-type': 'application/json'}
    assert endpoint.has_header('content-type')
    assert not endpoint.has_header('accept')


@pytest.mark.parametrize('option', ['data', 'method', 'url'])
def test_endpoint_rejects_request_arguments(option):
    with pytest.raises(ValueError) as excinfo:
        Endpoint('http://localhost:8983/solr', options={option: 'x', 'timeout': 5})
    assert option in str(excinfo.value)

    with pytest.raises(ValueError):
        conf.configure(library={'url': 'http://localhost:8984/solr/library', 'options': {option: 'x'}})
        configured_url('library')


def test_configured_url():
    conf.configure(library={'url': 'http://localhost:8984/solr/library', 'handler': 'select',
                            'headers': {'accept': 'application/json'},
                            'options': {'timeout': 10}})
    endpoint = configured_url('library')
    assert str(endpoint) == 'http://localhost:8984/solr/library/select'
    assert endpoint.headers == {'accept': 'application/json'}
    assert endpoint.options == {'timeout': 10}


def test_configured_endpoint_instance_is_copied():
    original = Endpoint('http://localhost:8983/solr/collection', 'suggest')
    conf.configure({'autocomplete': original})
    endpoint = configured_url('autocomplete')
    assert endpoint == original
    endpoint.headers['accept'] = 'text/xml'
    assert original.headers == {}


def test_missing_configuration():
    with pytest.raises(URLNotConfiguredError) as excinfo:
        configured_url('nowhere')
    assert excinfo.value.reason == 'nxdomain'

    conf.configure(broken={'handler': 'select'})
    with pytest.raises(URLNotConfiguredError):
        configured_url('broken')


def test_resolve_endpoint():
    endpoint = Endpoint('http://localhost:8983/solr/collection')
    assert resolve_endpoint(endpoint) is endpoint
    assert resolve_endpoint('http://localhost:8983/solr/collection') == endpoint

    conf.configure(default={'url': 'http://localhost:8983/solr/default'})
    assert str(resolve_endpoint('default')) == 'http://localhost:8983/solr/default'

    for url in (None, ''):
        with pytest.raises(URLNotConfiguredError):
            resolve_endpoint(url)


def test_configure_rejects_bad_values():
    with pytest.raises(ValueError):
        conf.configure(default='http://localhost:8983/solr')


def test_load_file_and_reset(tmp_path):
    path = tmp_path / 'solr.json'
    path.write_text(json.dumps({'default': {'url': 'http://localhost:8983/solr/a'},
                                'updater': {'url': 'http://localhost:8983/solr/a', 'handler': 'update'}}))
    conf.load_file(str(path))
    assert conf.keys() == ['default', 'updater']
    assert str(configured_url('updater')) == 'http://localhost:8983/solr/a/update'

    conf.reset()
    assert conf.keys() == []
