"""
Endpoint configuration from Django settings.

    SOLRQUERY = {
        'default': {'url': 'http://localhost:8983/solr/gettingstarted', 'handler': 'select'},
        'updater': {'url': 'http://localhost:8983/solr/gettingstarted', 'handler': 'update',
                    'headers': {'Content-Type': 'application/json'}},
    }

Settings are read when a function is called, never at import time, so the
module can be imported before Django settings are configured.
"""

import solrquery.client
from solrquery import conf

__all__ = ['Client', 'configure_from_django']


def _settings():
    from django.conf import settings
    return settings


def configure_from_django(setting='SOLRQUERY'):
    """
    Copies the endpoints in django.conf.settings.SOLRQUERY (or `setting`) into
    the solrquery configuration registry so they can be used by key.
    """
    settings = _settings()
    assert hasattr(settings, setting), "You must configure the Django {0} setting.".format(setting)
    conf.configure(getattr(settings, setting))
    return conf.keys()


class Client(solrquery.client.Client):
    def __init__(self, confkey='default', *args, **kwargs):
        settings = _settings()
        assert hasattr(settings, 'SOLRQUERY'), "You must configure the Django solrquery client."
        assert confkey in settings.SOLRQUERY, "You must configure the '{0}' Django solrquery endpoint.".format(confkey)

        conf_value = settings.SOLRQUERY[confkey]

        def copy_setting(key):
            if key not in kwargs and key in conf_value:
                kwargs[key] = conf_value[key]

        copy_setting('strict')
        copy_setting('timeout')

        conf.configure({confkey: conf_value})
        super(Client, self).__init__(confkey, *args, **kwargs)
