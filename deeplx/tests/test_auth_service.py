import unittest

from deeplx.errors import Unauthorized
from deeplx.services.auth_service import verify_api_key


class TestAuthGate(unittest.TestCase):
    def test_no_key_configured_passes(self):
        verify_api_key(None, None)
        verify_api_key("anything", None)

    def test_matching_token_passes(self):
        verify_api_key("s3cret", "s3cret")

    def test_mismatch_and_absence_rejected(self):
        for token in (None, "", "S3CRET", "s3cret ", "s3c", "s3cretX"):
            with self.assertRaises(Unauthorized) as ctx:
                verify_api_key(token, "s3cret")
            self.assertEqual(ctx.exception.status_code, 401)

    def test_non_ascii_key(self):
        verify_api_key("ключ", "ключ")
        with self.assertRaises(Unauthorized):
            verify_api_key("ключ2", "ключ")


if __name__ == "__main__":
    unittest.main()
