"""
/**
 * @file deeplx/tests/test_settings.py
 * @description 配置合并单元测试。
 */
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from deeplx.config.settings import Settings, reload_settings
from deeplx.models import ServerState


class TestSettingsMerge(unittest.TestCase):
    def _write(self, path, value):
        with open(path, "w") as f:
            if isinstance(value, str):
                f.write(value)
            else:
                json.dump(value, f)

    def test_merge_example_base_and_local(self):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = os.path.join(tmp, "config.json")
            local_path = os.path.join(tmp, "config.local.json")
            example_path = os.path.join(tmp, "config.example.json")

            self._write(example_path, {"port": 1188, "dl_session": ""})
            self._write(base_path, {"api_key": "a", "dl_session": "s1", "proxies": ["http://p1:80"]})
            self._write(local_path, {"api_key": "b"})

            s = reload_settings(base_path=base_path, local_path=local_path, example_path=example_path, use_env=False)
            self.assertEqual(s.api_key, "b")
            self.assertEqual(s.dl_session, "s1")
            self.assertEqual(s.proxies, ["http://p1:80"])
            self.assertEqual(s.port, 1188)

    def test_env_overrides_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = os.path.join(tmp, "config.json")
            self._write(base_path, {"api_key": "file", "port": 1000})
            env = {"DEEPLX_API_KEY": "env", "DEEPLX_PROXIES": "http://a:1, http://b:2", "DEEPLX_PORT": "9000"}
            with patch.dict(os.environ, env):
                s = reload_settings(
                    base_path=base_path,
                    local_path=os.path.join(tmp, "missing.json"),
                    example_path=os.path.join(tmp, "missing2.json"),
                )
            self.assertEqual(s.api_key, "env")
            self.assertEqual(s.proxies, ["http://a:1", "http://b:2"])
            self.assertEqual(s.port, 9000)

    def test_corrupted_file_is_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            self._write(path, "{invalid json")
            s = reload_settings(base_path=path, local_path=path, example_path=path, use_env=False)
            self.assertEqual(s.raw, {})


class TestSettingsProperties(unittest.TestCase):
    def test_defaults(self):
        s = Settings(raw={})
        self.assertIsNone(s.api_key)
        self.assertEqual(s.dl_session, "")
        self.assertEqual(s.proxies, [])
        self.assertEqual(s.host, "0.0.0.0")
        self.assertEqual(s.port, 1188)
        self.assertIsNone(s.tls_cert)
        self.assertEqual(s.log_level, "INFO")

    def test_mistyped_values_fall_back(self):
        s = Settings(raw={"api_key": "", "dl_session": 5, "proxies": ["", 3, " http://x:1 "], "port": "abc", "log_level": "loud"})
        self.assertIsNone(s.api_key)
        self.assertEqual(s.dl_session, "")
        self.assertEqual(s.proxies, ["http://x:1"])
        self.assertEqual(s.port, 1188)
        self.assertEqual(s.log_level, "INFO")

    def test_with_overrides_skips_empty(self):
        s = Settings(raw={"api_key": "a", "proxies": ["http://p:1"]})
        o = s.with_overrides({"api_key": None, "proxies": [], "port": 8080, "dl_session": "x"})
        self.assertEqual(o.api_key, "a")
        self.assertEqual(o.proxies, ["http://p:1"])
        self.assertEqual(o.port, 8080)
        self.assertEqual(o.dl_session, "x")
        self.assertNotIn("port", s.raw)

    def test_server_state(self):
        state = ServerState.from_settings(Settings(raw={"api_key": "k", "dl_session": "d"}))
        self.assertEqual(state.api_key, "k")
        self.assertEqual(state.dl_session, "d")
        self.assertTrue(state.auth_required)
        self.assertFalse(ServerState.from_settings(Settings(raw={})).auth_required)


if __name__ == "__main__":
    unittest.main()
