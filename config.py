import collections
import os

FIELDS = ('consumer_key', 'consumer_secret', 'access_token', 'access_token_secret')

class ConfigError(Exception):
	pass

class Credentials(collections.namedtuple('Credentials', FIELDS)):
	__slots__ = ()

	def __repr__(self):
		return 'Credentials(<redacted>)'

	__str__ = __repr__

def load(environ=None):
	if environ is None:
		environ = os.environ

	missing = []
	values = {}
	for field in FIELDS:
		name = field.upper()
		value = environ.get(name)
		if value is None or not value.strip():
			missing.append(name)
		else:
			values[field] = value
	if missing:
		raise ConfigError('missing or empty environment variables: ' + ', '.join(missing))
	return Credentials(**values)

def log_path(environ=None):
	if environ is None:
		environ = os.environ
	return environ.get('TWEET_LOG') or None
