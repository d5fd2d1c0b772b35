import io
import logging
import sys

from flask import Flask, request, jsonify

import cgirequest
import querystring

app = Flask(__name__)

def request_source():
    body = request.get_data(cache=True)
    return cgirequest.RequestSource(query_string=request.query_string,
                                    content_length=request.content_length,
                                    stream=io.BytesIO(body))

@app.route('/echo', methods=['GET', 'POST'])
def echo():
    parsed = cgirequest.Request(request_source())
    app.logger.info('echo GET=%d POST=%d pairs', len(parsed.GET), len(parsed.POST))

    ret = parsed.as_dict()
    ret['fields'] = querystring.group(parsed.GET + parsed.POST)
    return jsonify(ret)

@app.errorhandler(querystring.QueryDecodeError)
@app.errorhandler(cgirequest.RequestError)
@app.errorhandler(EOFError)
def bad_request(exc):
    app.logger.warning('bad request: %s', exc)
    return jsonify({'error': str(exc)}), 400

def setup_logging(app):
    if not app.debug:
        # In production mode, add log handler to sys.stderr.
        app.logger.addHandler(logging.StreamHandler())
        app.logger.setLevel(logging.INFO)

if __name__ == '__main__':
    setup_logging(app)
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8080
    app.run(port=port)
