class SolrError(Exception):
    """ Base exception for solrquery errors """
    def __init__(self, msg, reason=None, *args, **kwargs):
        super(SolrError, self).__init__(msg, *args, **kwargs)
        self.reason = reason


class InvalidQueryError(SolrError):
    """ Raised for a missing or empty query, keywords or endpoint """
    def __init__(self, msg="malformed query or URL", *args, **kwargs):
        super(InvalidQueryError, self).__init__(msg, 'einval', *args, **kwargs)


class URLNotConfiguredError(SolrError):
    """ Raised when an endpoint key has no configured URL """
    def __init__(self, msg="URL not configured", *args, **kwargs):
        super(URLNotConfiguredError, self).__init__(msg, 'nxdomain', *args, **kwargs)


class TransportError(SolrError):
    """ Raised when the HTTP request could not be completed. `reason` holds
    the underlying requests exception. """


class ResponseError(SolrError):
    """ Raised in strict mode for an unexpected HTTP status """
    def __init__(self, msg, status, expected_status, response, *args, **kwargs):
        super(ResponseError, self).__init__(msg, status, *args, **kwargs)
        self.status = status
        self.expected_status = expected_status
        self.response = response
