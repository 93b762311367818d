import re
from func_prototypes import typed, returned
from fpkit.cursor import values


def slugify(separator="-"):
    """
    Lowercases and collapses every run of characters outside [a-z0-9] into a
    single separator, trimming separators from both ends.
    """
    def slugged(s):
        slug = re.sub(r"[^a-z0-9]+", separator, s.lower())
        return slug.strip(separator)
    return slugged


@returned(list)
@typed(str)
def words(s):
    return s.split()


@returned(list)
@typed(str)
def lines(s):
    return re.split(r"\r\n|\r|\n", s)


def _padding(s, length, fill):
    needed = length - len(s)
    if needed <= 0 or not fill:
        return ""
    return (fill * (needed // len(fill) + 1))[:needed]


def padLeft(length, fill=" "):
    return lambda s: _padding(s, length, fill) + s


def padRight(length, fill=" "):
    return lambda s: s + _padding(s, length, fill)


def trim(chars=None):
    return lambda s: s.strip(chars)


def ltrim(chars=None):
    return lambda s: s.lstrip(chars)


def rtrim(chars=None):
    return lambda s: s.rstrip(chars)


def replace(find, replacement):
    """
    find and replacement may be strings or lists. With a list of finds and a
    single replacement string, every find is replaced by it. With two lists,
    finds are paired with replacements in order and missing replacements are
    empty. Replacements are applied one after another, left to right.
    """
    finds = [find] if isinstance(find, str) else list(find)
    if isinstance(replacement, str):
        replacements = [replacement] * len(finds)
    else:
        replacements = list(replacement)
        replacements += [""] * (len(finds) - len(replacements))

    def replaced(s):
        for f, r in zip(finds, replacements):
            s = s.replace(f, r)
        return s
    return replaced


def explode(delimiter):
    return lambda s: s.split(delimiter)


def implode(glue):
    return lambda collection: glue.join(values(collection))


join = implode


def split(pattern, limit=0):
    """Regex split; limit caps the number of splits (0 means unlimited)."""
    compiled = re.compile(pattern)
    return lambda s: compiled.split(s, maxsplit=limit)


def matchAll(pattern):
    """Every non-overlapping full match of pattern, in order."""
    compiled = re.compile(pattern)
    return lambda s: [m.group(0) for m in compiled.finditer(s)]


def match(pattern, flags=0, offset=0):
    """
    First match of pattern searched from offset, as a list of the full match
    followed by every group (None for groups which did not take part).
    None when nothing matches.
    """
    compiled = re.compile(pattern, flags)

    def matched(s):
        m = compiled.search(s, offset)
        if m is None:
            return None
        return [m.group(0)] + list(m.groups())
    return matched


pregMatch = match
