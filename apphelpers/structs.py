from collections.abc import Mapping


_CONTAINERS = (list, tuple, Mapping)


def is_associative(value):
    """Mapping with keys other than sequential integers starting from 0"""
    if not isinstance(value, Mapping) or not value:
        return False
    return list(value.keys()) != list(range(len(value)))


def _iter_leaves(value):
    if isinstance(value, Mapping):
        keep_keys = is_associative(value)
        items = value.items()
    else:
        keep_keys = False
        items = enumerate(value)
    for key, item in items:
        if isinstance(item, _CONTAINERS):
            for leaf in _iter_leaves(item):
                yield leaf
        else:
            yield (key if keep_keys else None), item


def flatten(value):
    """Flattens nested lists and mappings.

    Lists are flattened into a list of leaf values. Associative mappings are
    flattened into a dict, where leaves keep their keys and values from
    lists get sequential integer keys.
    """
    if not is_associative(value):
        return [item for _, item in _iter_leaves(value)]

    result = {}
    index = 0
    for key, item in _iter_leaves(value):
        if key is None:
            result[index] = item
            index += 1
        else:
            result[key] = item
    return result


def change_key(value, old_key, new_key):
    """Returns a copy of ``value`` with ``old_key`` renamed at any depth"""
    if isinstance(value, Mapping):
        return {(new_key if key == old_key else key):
                change_key(item, old_key, new_key)
                for key, item in value.items()}
    elif isinstance(value, (list, tuple)):
        return [change_key(item, old_key, new_key) for item in value]
    return value
