import unittest
from unittest import mock

import requests

import config
import oauth
import twitter

unittest.TestCase.assert_equal = unittest.TestCase.assertEqual

CREDENTIALS = config.Credentials('consumer-key', 'consumer-secret', 'access-token', 'token-secret')

class TestTwitter(unittest.TestCase):
	def setUp(self):
		patcher = mock.patch('twitter.rs')
		self.rs = patcher.start()
		self.addCleanup(patcher.stop)
		patcher = mock.patch('log.write')
		self.log_write = patcher.start()
		self.addCleanup(patcher.stop)

	def test_update_status(self):
		response = self.rs.post.return_value
		result = twitter.update_status(CREDENTIALS, 'Ladies + Gentlemen!',
				clock=lambda: 1600000000, nonce_source=lambda: 'a' * 20)
		self.assertIs(result, response)
		response.raise_for_status.assert_called_once_with()

		[call] = self.rs.post.call_args_list
		url = call[0][0]
		self.assert_equal(url, 'https://api.twitter.com/1.1/statuses/update.json?status=Ladies%20%2B%20Gentlemen%21')
		expected = oauth.authorize(CREDENTIALS, 'POST', twitter.UPDATE_URL,
				(('status', 'Ladies + Gentlemen!'),),
				clock=lambda: 1600000000, nonce_source=lambda: 'a' * 20)
		self.assert_equal(call[1]['headers'], {'Authorization': expected})
		self.assertNotIn('Gentlemen', expected)

	def test_nothing_logged_secret(self):
		twitter.update_status(CREDENTIALS, 'hello')
		for call in self.log_write.call_args_list:
			text = call[0][0]
			self.assertNotIn('OAuth', text)
			self.assertNotIn('consumer-secret', text)
			self.assertNotIn('token-secret', text)

	def test_http_error(self):
		response = self.rs.post.return_value
		response.raise_for_status.side_effect = requests.HTTPError('403 Client Error', response=response)
		with self.assertRaises(requests.HTTPError):
			twitter.update_status(CREDENTIALS, 'hello')
		self.assert_equal(self.rs.post.call_count, 1)

	def test_clock_error(self):
		with self.assertRaises(oauth.ClockError):
			twitter.update_status(CREDENTIALS, 'hello', clock=lambda: -5)
		self.rs.post.assert_not_called()
