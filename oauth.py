import base64
import hmac
import random
import string
import time
import urllib.parse

# https://developer.twitter.com/en/docs/authentication/oauth-1-0a/authorizing-a-request
# https://datatracker.ietf.org/doc/html/rfc5849#section-3.4

NONCE_LEN = 20
NONCE_CHARS = string.ascii_letters + string.digits
SIGNATURE_METHOD = 'HMAC-SHA1'
VERSION = '1.0'

rng = random.SystemRandom()

class ClockError(Exception):
	pass

def percent_encode(s):
	# only ALPHA, DIGIT, '-', '.', '_', '~' pass through. unlike quote_plus and urlencode,
	# space is %20 and !*'() are escaped
	return urllib.parse.quote(s, safe='')

def urlencode(params):
	'''Similar to urllib.parse.urlencode, but using %20 rather than + for a space
	to conform to the OAuth specification.'''
	return '&'.join('%s=%s' % (percent_encode(k), percent_encode(v)) for k, v in params)

def gen_nonce(rng=rng):
	return ''.join(rng.choice(NONCE_CHARS) for _ in range(NONCE_LEN))

def gen_timestamp(clock=time.time):
	now = clock()
	if now < 0:
		raise ClockError('system clock reports %r, which is before the unix epoch' % now)
	return str(int(now))

def protocol_params(consumer_key, token, timestamp, nonce):
	return (
		('oauth_consumer_key', consumer_key),
		('oauth_nonce', nonce),
		('oauth_signature_method', SIGNATURE_METHOD),
		('oauth_timestamp', timestamp),
		('oauth_token', token),
		('oauth_version', VERSION),
	)

def encode_params(params):
	return tuple((percent_encode(k), percent_encode(v)) for k, v in params)

def parameter_string(encoded_params):
	# everything is ASCII after encoding, so str ordering is byte ordering
	return '&'.join(sorted('%s=%s' % (k, v) for k, v in encoded_params))

def base_string(method, url, encoded_params):
	# that's right! the already-encoded parameter string is quoted once more
	parts = (method.upper(), url, parameter_string(encoded_params))
	return '&'.join(percent_encode(part) for part in parts)

def signing_key(consumer_secret, token_secret):
	return '%s&%s' % (percent_encode(consumer_secret), percent_encode(token_secret))

def sign(key, base):
	mac = hmac.HMAC(key.encode('ascii'), base.encode('ascii'), 'sha1')
	return percent_encode(base64.b64encode(mac.digest()).decode('ascii'))

def authorization_header(encoded_protocol_params, signature):
	pairs = encoded_protocol_params + (('oauth_signature', signature),)
	return 'OAuth ' + ', '.join(sorted('%s="%s"' % (k, v) for k, v in pairs))

def authorize(credentials, method, url, request_params, clock=time.time, nonce_source=gen_nonce):
	'''Build the Authorization header value for one request.

	request_params are the raw (key, value) pairs sent with the request, e.g. status. They
	are signed but not included in the header. clock and nonce_source are called exactly once.
	'''
	timestamp = gen_timestamp(clock)
	protocol = encode_params(protocol_params(credentials.consumer_key, credentials.access_token,
			timestamp, nonce_source()))
	base = base_string(method, url, protocol + encode_params(request_params))
	key = signing_key(credentials.consumer_secret, credentials.access_token_secret)
	return authorization_header(protocol, sign(key, base))
