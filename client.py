import requests

import querystring

form_content_type = 'application/x-www-form-urlencoded'

def submit(url, query, *, method='GET'):
    # the query is sent as is, it's up to the caller to escape it
    if method == 'GET':
        resp = requests.get(url, params=query)
    elif method == 'POST':
        resp = requests.post(url, data=query,
                             headers={'Content-Type': form_content_type})
    else:
        raise ValueError('unsupported method %r' % method)

    resp.raise_for_status()

    data = resp.json()
    return [querystring.Pair(key, value) for key, value in data[method]]

if __name__ == '__main__':
    import sys

    method = 'POST' if sys.argv[3:] == ['post'] else 'GET'
    for key, value in submit(sys.argv[1], sys.argv[2], method=method):
        print('%s = %s' % (key, value))
