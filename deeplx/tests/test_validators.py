import unittest

from pydantic import ValidationError

from deeplx.models import TranslateRequest
from deeplx.utils import is_valid_proxy_url, split_csv


class TestProxyValidation(unittest.TestCase):
    def test_valid(self):
        for value in ("http://127.0.0.1:8080", "https://user:pw@proxy.example:443", "socks5://10.0.0.1:1080"):
            self.assertTrue(is_valid_proxy_url(value), value)

    def test_invalid(self):
        for value in ("", "nonsense", "ftp://host:21", "http://", "http://host:99999", "http://host:port"):
            self.assertFalse(is_valid_proxy_url(value), value)

    def test_split_csv(self):
        self.assertEqual(split_csv(" a, ,b ,"), ["a", "b"])
        self.assertEqual(split_csv(""), [])


class TestTranslateRequestModel(unittest.TestCase):
    def test_lone_surrogate_rejected(self):
        for kwargs in ({"text": "a\ud800b"}, {"text": "ok", "target_lang": "\udfff"}):
            with self.assertRaises(ValidationError):
                TranslateRequest(**kwargs)

    def test_non_ascii_text_accepted(self):
        self.assertEqual(TranslateRequest(text="日本語 😀").text, "日本語 😀")


if __name__ == "__main__":
    unittest.main()
