"""
Structured Solr request parameters.

Each class here describes one Solr feature area. A record holds plain values
keyed by their Solr parameter names; `solrquery.encoding` renders records into
a query string.

Solr names containing dots are exposed as attributes with underscores:

>>> q = Query(q='loch', rows=5, q_op='AND')
>>> q.q_op
'AND'
>>> q == Query(**{'q': 'loch', 'rows': 5, 'q.op': 'AND'})
True
>>> Facet(field='year').facet
True
>>> Query(colour='red')
Traceback (most recent call last):
    ...
TypeError: Query() got an unexpected parameter 'colour'
"""

from copy import deepcopy


def attrname(name):
    return name.replace('.', '_')


class Params(object):
    """
    Base class for parameter records.

    `fields`: Solr parameter names accepted by the record.
    `options`: names that steer encoding but are not Solr parameters.
    `defaults`: default values keyed by Solr or option name.
    `param_prefix`: the feature prefix prepended to each parameter, e.g. 'facet'.
    `per_field_key`: the parameter naming the target field of f.<field>.* keys.
    """

    param_prefix = None
    fields = ()
    options = ()
    defaults = {}
    per_field_key = None

    def __init__(self, **kwargs):
        names = dict((attrname(n), n) for n in self.fields + self.options)
        for name in names.values():
            setattr(self, attrname(name), deepcopy(self.defaults.get(name)))
        for (key, value) in kwargs.items():
            if attrname(key) not in names:
                raise TypeError("{clsname}() got an unexpected parameter {key!r}".format(
                    clsname=self.__class__.__name__, key=key))
            setattr(self, attrname(key), value)

    def __repr__(self):
        values = ["{0}={1!r}".format(attrname(name), value)
                  for (name, value) in self.items() if value is not None]
        return u"{clsname}({values})".format(clsname=self.__class__.__name__,
                                             values=", ".join(values))

    def __eq__(self, other):
        return (self.__class__ is other.__class__
                and self.__dict__ == other.__dict__)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @property
    def switch(self):
        """The parameter rendered as the bare prefix, e.g. `facet=true`."""
        if self.param_prefix is None:
            return None
        return self.param_prefix.split('.')[-1]

    def items(self):
        """(solr name, value) pairs in code-point order of the Solr names."""
        return [(name, getattr(self, attrname(name))) for name in sorted(self.fields)]

    def get(self, name, default=None):
        return getattr(self, attrname(name), default)


class Query(Params):
    """Common query parameters, including the SolrCloud ones."""

    fields = ('NOW', 'TZ', 'cache', 'collection', 'cursorMark', 'debug',
              'debug.explain.structured', 'debugQuery', 'defType', 'df',
              'distrib', 'echoParams', 'explainOther', 'fl', 'fq',
              'json.nl', 'json.wrf', 'logParamsList', 'omitHeader', 'q',
              'q.op', 'rows', 'segmentTerminateEarly', 'shards',
              'shards.info', 'shards.preference', 'shards.tolerant', 'sort',
              'sow', 'start', 'timeAllowed', 'tr', 'wt')


class DisMax(Params):
    """DisMax and extended DisMax (edismax) query parameters."""

    fields = ('bf', 'boost', 'bq', 'lowercaseOperators', 'mm',
              'mm.autoRelax', 'pf', 'pf2', 'pf3', 'ps', 'ps2', 'ps3', 'q',
              'q.alt', 'qf', 'qs', 'stopwords', 'tie', 'uf')


class FacetRange(Params):
    """
    Range faceting on one field, used via `Facet.range`.

    With `per_field` set, everything but the field name is rendered as
    f.<field>.facet.range.* so several ranges can differ in start/end/gap.
    """

    param_prefix = 'facet.range'
    fields = ('end', 'gap', 'hardend', 'include', 'method', 'other', 'range',
              'start')
    options = ('per_field',)
    defaults = {'per_field': False}
    per_field_key = 'range'


class FacetInterval(Params):
    """Interval faceting on one field, used via `Facet.interval`."""

    param_prefix = 'facet.interval'
    fields = ('interval', 'set')
    options = ('per_field',)
    defaults = {'set': [], 'per_field': False}
    per_field_key = 'interval'


class Facet(Params):
    """
    Field, query, pivot, range and interval faceting.

    `range` and `interval` take a `FacetRange`/`FacetInterval` or a list of
    them.
    """

    param_prefix = 'facet'
    fields = ('contains', 'contains.ignoreCase', 'enum.cache.minDf',
              'excludeTerms', 'exists', 'facet', 'field', 'interval', 'limit',
              'matches', 'method', 'mincount', 'missing', 'offset',
              'overrequest.count', 'overrequest.ratio', 'pivot',
              'pivot.mincount', 'prefix', 'query', 'range', 'sort', 'threads')
    defaults = {'facet': True, 'pivot': [], 'query': []}


class Highlight(Params):
    """Results highlighting. With `per_field`, options apply to `fl` only."""

    param_prefix = 'hl'
    fields = ('alternateField', 'boundaryScanner', 'bs.chars',
              'bs.country', 'bs.language', 'bs.maxScan', 'bs.type',
              'defaultSummary', 'encoder', 'fl', 'fragListBuilder',
              'fragmenter', 'fragmentsBuilder', 'fragsize',
              'fragsizeIsMinimum', 'highlightMultiTerm', 'hl',
              'maxAlternateFieldLength', 'maxAnalyzedChars', 'maxMultiValuedToExamine',
              'maxMultiValuedToMatch', 'mergeContiguous', 'method',
              'multiTermQuery', 'offsetSource', 'preserveMulti', 'q',
              'qparser', 'queryFieldPattern', 'regex.maxAnalyzedChars',
              'regex.pattern', 'regex.slop', 'requireFieldMatch',
              'score.b', 'score.k1', 'score.pivot', 'snippets', 'tag.ellipsis',
              'tag.post', 'tag.pre', 'usePhraseHighlighter')
    options = ('per_field',)
    defaults = {'hl': True, 'per_field': False}
    per_field_key = 'fl'


class MoreLikeThis(Params):
    param_prefix = 'mlt'
    fields = ('boost', 'count', 'fl', 'interestingTerms', 'match.include',
              'match.offset', 'maxdf', 'maxdfpct', 'maxntp', 'maxqt',
              'maxwl', 'mindf', 'mintf', 'minwl', 'mlt', 'qf')
    defaults = {'mlt': True}


class SpellCheck(Params):
    param_prefix = 'spellcheck'
    fields = ('accuracy', 'alternativeTermCount', 'build', 'collate',
              'collateExtendedResults', 'collateMaxCollectDocs',
              'collateParam.mm', 'collateParam.q.op', 'count', 'dictionary',
              'extendedResults', 'maxCollationEvaluations',
              'maxCollationTries', 'maxCollations', 'maxResultsForSuggest',
              'onlyMorePopular', 'q', 'reload', 'spellcheck')
    defaults = {'spellcheck': True}


class Suggest(Params):
    """
    Suggester query.

    >>> Suggest(q='ha', count=10, dictionary=['name_infix', 'ln_prefix'])
    Suggest(count=10, dictionary=['name_infix', 'ln_prefix'], q='ha', suggest=True)
    """

    param_prefix = 'suggest'
    fields = ('build', 'buildAll', 'cfq', 'count', 'dictionary', 'q',
              'reload', 'reloadAll', 'suggest')
    defaults = {'suggest': True}


class Update(Params):
    """
    Update, delete, commit, optimize and rollback commands.

    Rendered as a JSON command body by `solrquery.encoding.encode_update`
    rather than as a query string.
    """

    fields = ('commit', 'commitWithin', 'delete_id', 'delete_query', 'doc',
              'expungeDeletes', 'maxSegments', 'optimize', 'overwrite',
              'rollback', 'waitSearcher')
    defaults = {'commit': False, 'optimize': False, 'rollback': False}


if __name__ == "__main__":
    import doctest
    doctest.testmod()
