def format_scalar(value):
    # 6 significant digits, same as a default float stream
    return format(float(value), "g")


def format_components(values):
    """
    Bracketed, comma separated text form, e.g. "[    1,    2]".
    Every field is right aligned to the longest formatted component + 3.
    """
    texts = [format_scalar(v) for v in values]
    width = max(len(t) for t in texts) + 3
    return "[" + ",".join(t.rjust(width) for t in texts) + "]"
