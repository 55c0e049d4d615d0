import time

import requests

import log
import oauth

UPDATE_URL = 'https://api.twitter.com/1.1/statuses/update.json'

rs = requests.Session()
rs.headers['User-Agent'] = 'tweet/0.1 (python-requests)'

def update_status(credentials, status, clock=time.time, nonce_source=oauth.gen_nonce):
	params = (('status', status),)
	auth = oauth.authorize(credentials, 'POST', UPDATE_URL, params,
			clock=clock, nonce_source=nonce_source)
	# build the query ourselves; requests would send space as +
	url = '%s?%s' % (UPDATE_URL, oauth.urlencode(params))
	log.write('posting status (%d characters)' % len(status))
	response = rs.post(url, headers={'Authorization': auth})
	response.raise_for_status()
	return response
