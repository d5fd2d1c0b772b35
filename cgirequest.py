import collections

import ioutil
import querystring

class RequestError(ValueError):
    pass

class RequestSource(collections.namedtuple('RequestSource',
                                           ['query_string', 'content_length', 'stream'])):
    # Raw inputs of a single request. Any field may be None.

    @classmethod
    def from_environ(cls, environ, stream=None):
        return cls(query_string=environ.get('QUERY_STRING'),
                   content_length=environ.get('CONTENT_LENGTH'),
                   stream=stream)

def content_length(value):
    # CONTENT_LENGTH = 1*digit
    text = str(value)
    if not (text.isascii() and text.isdigit()):
        raise RequestError('invalid CONTENT_LENGTH %r' % (value, ))
    return int(text)

class Request(object):
    def __init__(self, source):
        self.source = source
        self.GET = []
        self.POST = []

        if source.query_string is not None:
            self.GET = querystring.parse(source.query_string)

        # no body: CONTENT_LENGTH is either unset or empty
        if source.content_length not in (None, ''):
            self.POST = querystring.parse(self.read_body())

    def read_body(self):
        length = content_length(self.source.content_length)
        if length == 0:
            return b''
        if self.source.stream is None:
            raise RequestError('CONTENT_LENGTH is %d but there is no body' % length)
        return ioutil.read_exactly(self.source.stream, length)

    def as_dict(self):
        return {
            'GET': [list(pair) for pair in self.GET],
            'POST': [list(pair) for pair in self.POST],
        }

def header(mimetype):
    return 'Content-Type: %s \n\n' % mimetype

def status_line(code, reason):
    return 'Status: %d %s\n' % (code, reason)
