#!/usr/bin/env python3
# CGI script: prints the decoded GET and POST pairs of the request as JSON
import json
import logging
import os
import sys

import cgirequest
import querystring

logger = logging.getLogger(__name__)

def main(environ=os.environ, stdin=None, stdout=None):
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout

    source = cgirequest.RequestSource.from_environ(environ, stdin)
    try:
        request = cgirequest.Request(source)
    except (cgirequest.RequestError, querystring.QueryDecodeError, EOFError) as exc:
        logger.error('bad request: %s', exc)
        stdout.write(cgirequest.status_line(400, 'Bad Request'))
        stdout.write(cgirequest.header('text/plain'))
        stdout.write('%s\n' % exc)
        return 1

    stdout.write(cgirequest.header('application/json'))
    stdout.write(json.dumps(request.as_dict()))
    stdout.write('\n')
    return 0

if __name__ == '__main__':
    # stderr ends up in the web server's error log
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
