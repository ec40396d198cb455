from unittest import TestCase

from alertsink.s3_copy.report import report


class ReportTestCase(TestCase):
    def test_token_passes_through(self):
        token = "d41d8cd98f00b204e9800998ecf8427e"
        self.assertEqual(report(token), token)
