def ensure_sequence(arg):
    """
    >>> ensure_sequence('cat')
    ['cat']
    >>> ensure_sequence(['cat', 'year'])
    ['cat', 'year']
    >>> ensure_sequence(x for x in (1, 2))
    [1, 2]
    >>> ensure_sequence(7)
    [7]
    """
    if hasattr(arg, 'strip'):
        return [arg]
    if hasattr(arg, '__getitem__') and not hasattr(arg, 'keys'):
        return arg
    elif hasattr(arg, '__iter__') and not hasattr(arg, 'keys'):
        return list(arg)
    else:
        return [arg]


def is_empty(value):
    """
    Values that Solr parameter encoding leaves out. False and 0 are kept.

    >>> [is_empty(v) for v in (None, '', [], (), False, 0, 'x')]
    [True, True, True, True, False, False, False]
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


if __name__ == "__main__":
    import doctest
    doctest.testmod()
