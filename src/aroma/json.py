''' Wrapper module for the equivalent of :func:`json.loads` and
    :func:`json.dumps`. Both directions work with bytes.
'''

import orjson


dumps = orjson.dumps
loads = orjson.loads
JSONDecodeError = orjson.JSONDecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
