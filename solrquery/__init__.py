from .client import Client, SolrResponse
from .errors import (SolrError, InvalidQueryError, URLNotConfiguredError,
                     TransportError, ResponseError)
from .params import (Query, DisMax, Facet, FacetRange, FacetInterval, Highlight,
                     MoreLikeThis, SpellCheck, Suggest, Update)
from .encoding import encode_query, encode_update
from .url import Endpoint, configured_url
from .conf import configure
from .api import (q, search, spellcheck, suggest, mlt, update, delete,
                  delete_by_query, commit)
