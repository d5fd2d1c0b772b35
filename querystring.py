# decodes CGI query strings (QUERY_STRING or a form body) into ordered pairs
# note: '+' is left as is, only %XX escapes are resolved

import collections
import re

Pair = collections.namedtuple('Pair', ['key', 'value'])

hexdigits = b'0123456789abcdefABCDEF'

delimiters = re.compile('[&;]')

class QueryDecodeError(ValueError):
    pass

def is_escape(string, i):
    digits = string[i + 1: i + 3]
    return len(digits) == 2 and all(ch in hexdigits for ch in digits)

def unquote_bytes(string):
    if isinstance(string, str):
        string = string.encode('utf8')

    i = 0
    ret = bytearray()
    while i < len(string):
        if string[i] == ord(b'%') and is_escape(string, i):
            ch = int(string[i + 1: i + 3], 16)
            i += 3
        else:
            ch = string[i]
            i += 1

        ret.append(ch)

    return bytes(ret)

def unquote(string):
    data = unquote_bytes(string)
    try:
        return data.decode('utf8')
    except UnicodeDecodeError as exc:
        raise QueryDecodeError('query is not valid UTF-8 after unquoting: %r' % data) from exc

def split_pair(part):
    key, _, value = part.partition('=')
    return Pair(key, value)

def parse(string):
    """Decode `string` and split it into a list of Pairs.

    The whole string is unquoted first, then split on '&' and ';'.
    Empty slots and keys without '=' come back with an empty value,
    so the result has one Pair per slot, in input order.
    """
    if not string:
        return []

    return [split_pair(part) for part in delimiters.split(unquote(string))]

def group(pairs):
    ret = {}
    for key, value in pairs:
        ret.setdefault(key, []).append(value)
    return ret
