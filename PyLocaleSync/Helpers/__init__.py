def FormatKeyList(keys : list[str], limit : int = 10) -> str:
    """
    Comma separated list of keys, truncated if there are too many to show
    """
    if not keys:
        return ''

    if len(keys) <= limit:
        return ', '.join(keys)

    return ', '.join(keys[:limit]) + f" (+{len(keys) - limit} more)"
