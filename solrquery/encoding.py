"""
Renders parameter records into Solr's query string dialect and update
records into JSON command bodies.

Records are rendered parameter by parameter in code-point order of the Solr
names, each prefixed with the record's feature prefix:

>>> encode_query(Facet(field=['type', 'year'], query=['type:image']))
'facet=true&facet.field=type&facet.field=year&facet.query=type%3Aimage'
>>> encode_query(Query(q='*', rows=10, fq=['cat:electronics', 'popularity:[0 TO *]']))
'fq=cat%3Aelectronics&fq=popularity%3A%5B0+TO+%2A%5D&q=%2A&rows=10'

Several records, or plain key/value pairs, are concatenated in order:

>>> encode_query([Query(q='features:photo', rows=1), Highlight(fl='features', fragsize=250, snippets=3)])
'q=features%3Aphoto&rows=1&hl.fl=features&hl.fragsize=250&hl=true&hl.snippets=3'
>>> encode_query([('q', 'edinburgh'), ('rows', 10), ('fq', ['a:1', 'b:2'])])
'q=edinburgh&rows=10&fq=a%3A1&fq=b%3A2'

Per-field sub-records move their options under f.<field>:

>>> interval = FacetInterval(interval='price', set=['[0,10]', '(10,100]'], per_field=True)
>>> encode_query(Facet(field='type', interval=interval))
'facet=true&facet.field=type&facet.interval=price&f.price.facet.interval.set=%5B0%2C10%5D&f.price.facet.interval.set=%2810%2C100%5D'
"""

import json
import logging
from functools import partial
from urllib.parse import urlencode

from .params import Params, Update, Query, Facet, FacetInterval, Highlight
from .util import ensure_sequence, is_empty


log = logging.getLogger(__name__)

__all__ = ['encode_query', 'encode_update', 'flatten', 'render']


_dumps = partial(json.dumps, ensure_ascii=False, separators=(',', ':'))


def render(value):
    """
    >>> [render(v) for v in (True, False, 10, 2.5, 'title')]
    ['true', 'false', '10', '2.5', 'title']
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def param_key(record, name):
    prefix = record.param_prefix
    if prefix is None:
        return name
    if name == record.switch:
        return prefix
    return '{0}.{1}'.format(prefix, name)


def is_record_value(value):
    if isinstance(value, Params):
        return True
    return (isinstance(value, (list, tuple))
            and all(isinstance(v, Params) for v in value))


def _pairs(key, value):
    return [(key, render(v)) for v in ensure_sequence(value) if not is_empty(v)]


def _per_field_target(record):
    if not record.get('per_field') or record.per_field_key is None:
        return None
    target = record.get(record.per_field_key)
    if is_empty(target):
        return None
    if isinstance(target, (list, tuple)):
        if len(target) != 1:
            raise ValueError('per_field {0} requires a single {1!r}, got {2!r}'.format(
                record.__class__.__name__, record.per_field_key, target))
        target = target[0]
    if hasattr(target, 'strip') and ',' in target:
        raise ValueError('per_field {0} requires a single {1!r}, got {2!r}'.format(
            record.__class__.__name__, record.per_field_key, target))
    return target


def _flatten_record(record):
    if isinstance(record, Update):
        raise TypeError('Update records render as a JSON body, use encode_update()')

    target = _per_field_target(record)
    exempt = (record.switch, record.per_field_key)
    pairs = []
    for (name, value) in record.items():
        if is_empty(value):
            continue
        if is_record_value(value):
            for subrecord in ensure_sequence(value):
                pairs.extend(_flatten_record(subrecord))
            continue
        key = param_key(record, name)
        if target is not None and name not in exempt:
            key = 'f.{0}.{1}'.format(target, key)
        pairs.extend(_pairs(key, value))
    return pairs


def flatten(params):
    """
    Flatten records, a mapping or (key, value) pairs into a list of
    (key, rendered value) pairs, repeating keys for list values.

    >>> flatten({'q': 'loch', 'facet': True, 'facet.field': ['cat', 'year'], 'fl': None})
    [('q', 'loch'), ('facet', 'true'), ('facet.field', 'cat'), ('facet.field', 'year')]
    """
    if isinstance(params, Params):
        return _flatten_record(params)
    if hasattr(params, 'strip'):
        raise TypeError('Expected parameter records or key/value pairs, got a string: {0!r}'.format(params))
    if hasattr(params, 'keys'):
        params = list(params.items())

    pairs = []
    for item in params:
        if isinstance(item, Params):
            pairs.extend(_flatten_record(item))
        else:
            (key, value) = item
            if not is_empty(value):
                pairs.extend(_pairs(key, value))
    return pairs


def encode_query(params):
    """Render parameters into a www-form encoded query string."""
    return urlencode(flatten(params))


def _object(members):
    body = ','.join('{0}:{1}'.format(_dumps(k), _dumps(v))
                    for (k, v) in members if v is not None)
    return '{' + body + '}'


def encode_update(update):
    """
    Render an `Update` record as a Solr JSON update command body. Solr
    accepts repeated command keys, e.g. several "add" commands.

    >>> encode_update(Update(doc={'id': 'tt0083658', 'name': 'Blade Runner'}, commit=True))
    '{"add":{"doc":{"id":"tt0083658","name":"Blade Runner"}},"commit":{}}'
    >>> encode_update(Update(delete_id=['tt2358891', 'tt1602620'], commit=True, waitSearcher=False))
    '{"delete":["tt2358891","tt1602620"],"commit":{"waitSearcher":false}}'
    """
    commands = []

    if not is_empty(update.doc):
        for doc in ensure_sequence(update.doc):
            add = _object([('commitWithin', update.commitWithin),
                           ('overwrite', update.overwrite),
                           ('doc', doc)])
            commands.append('"add":' + add)

    if not is_empty(update.delete_id):
        if isinstance(update.delete_id, (list, tuple)):
            commands.append('"delete":' + _dumps(list(update.delete_id)))
        else:
            commands.append('"delete":' + _object([('id', update.delete_id)]))

    if not is_empty(update.delete_query):
        for query in ensure_sequence(update.delete_query):
            commands.append('"delete":' + _object([('query', query)]))

    if update.commit:
        commands.append('"commit":' + _object([('expungeDeletes', update.expungeDeletes),
                                               ('waitSearcher', update.waitSearcher)]))

    if update.optimize:
        commands.append('"optimize":' + _object([('maxSegments', update.maxSegments),
                                                 ('waitSearcher', update.waitSearcher)]))

    if update.rollback:
        commands.append('"rollback":{}')

    log.debug('Encoded {0} update command(s)'.format(len(commands)))
    return '{' + ','.join(commands) + '}'


if __name__ == "__main__":
    import doctest
    doctest.testmod()
