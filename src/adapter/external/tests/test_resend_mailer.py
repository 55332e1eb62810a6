"""Tests for ResendMailer."""

import unittest
from unittest.mock import patch

from adapter.external.resend_mailer import ResendMailer
from domain.model.errors import MailDeliveryError
from port.mailer import EmailMessage

MESSAGE = EmailMessage(to='frank@repospector.io', subject='Password Reset Request', html='<p>hi</p>')


class TestResendMailer(unittest.TestCase):

    @patch('adapter.external.resend_mailer.resend.Emails.send')
    def test_send_passes_message_to_sdk(self, mock_send):
        mock_send.return_value = {'id': 'email-1'}
        mailer = ResendMailer(api_key='re_test', sender='Repospector <no-reply@repospector.io>')

        mailer.send(MESSAGE)

        mock_send.assert_called_once_with({
            'from': 'Repospector <no-reply@repospector.io>',
            'to': ['frank@repospector.io'],
            'subject': 'Password Reset Request',
            'html': '<p>hi</p>',
        })

    @patch('adapter.external.resend_mailer.resend.Emails.send')
    def test_sdk_failure_becomes_mail_delivery_error(self, mock_send):
        mock_send.side_effect = RuntimeError('503 from provider')

        with self.assertRaises(MailDeliveryError):
            ResendMailer(api_key='re_test').send(MESSAGE)

    @patch('adapter.external.resend_mailer.resend.Emails.send')
    def test_missing_api_key_fails_without_calling_sdk(self, mock_send):
        with self.assertRaises(MailDeliveryError):
            ResendMailer(api_key='').send(MESSAGE)
        mock_send.assert_not_called()

    @patch.dict('os.environ', {'RESEND_API_KEY': 're_env', 'MAIL_FROM': 'ops@repospector.io'})
    def test_reads_configuration_from_environment(self):
        mailer = ResendMailer()
        self.assertEqual(mailer.api_key, 're_env')
        self.assertEqual(mailer.sender, 'ops@repospector.io')


if __name__ == '__main__':
    unittest.main()
