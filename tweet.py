#!/usr/bin/env python3

import sys
import traceback

import requests

import config
import log
import oauth
import twitter

def main(argv=None):
	if argv is None:
		argv = sys.argv

	try:
		return post(argv)
	finally:
		log.close()

def post(argv):
	try:
		credentials = config.load()
	except config.ConfigError as e:
		log.write('configuration error: %s' % e)
		return 1

	status = ' '.join(argv[1:])
	if not status:
		# refuse to post an empty status
		print('usage: %s status text...' % argv[0], file=sys.stderr)
		return 1

	try:
		response = twitter.update_status(credentials, status)
	except requests.HTTPError as e:
		log.write('response: %d %s' % (e.response.status_code, e.response.text))
		return 1
	except (requests.RequestException, oauth.ClockError, UnicodeError):
		# UnicodeError: argv that wasn't valid UTF-8 arrives as surrogates
		log.write(traceback.format_exc())
		return 1

	print('response: %d %s' % (response.status_code, response.text))
	return 0

if __name__ == '__main__':
	sys.exit(main())
