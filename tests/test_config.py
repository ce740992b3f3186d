from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from appxdg.config import (
    DEFAULT_DATA_DIRS,
    ENV_XDG_CONFIG_HOME,
    ENV_XDG_DATA_DIRS,
    env_dir,
    env_dirs,
    split_dirs,
)


class EnvDirTests(unittest.TestCase):
    def test_unset_variable_uses_fallback(self) -> None:
        self.assertEqual(env_dir(ENV_XDG_CONFIG_HOME, "/fallback", environ={}), "/fallback")

    def test_empty_variable_uses_fallback(self) -> None:
        environ = {ENV_XDG_CONFIG_HOME: ""}
        self.assertEqual(env_dir(ENV_XDG_CONFIG_HOME, "/fallback", environ=environ), "/fallback")

    def test_value_is_returned_verbatim(self) -> None:
        environ = {ENV_XDG_CONFIG_HOME: "/tmp/cfg//"}
        self.assertEqual(env_dir(ENV_XDG_CONFIG_HOME, "/fallback", environ=environ), "/tmp/cfg//")

    def test_reads_process_environment_by_default(self) -> None:
        with patch.dict(os.environ, {ENV_XDG_CONFIG_HOME: "/from/env"}, clear=True):
            self.assertEqual(env_dir(ENV_XDG_CONFIG_HOME, "/fallback"), "/from/env")
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(env_dir(ENV_XDG_CONFIG_HOME, "/fallback"), "/fallback")


class EnvDirsTests(unittest.TestCase):
    def test_unset_variable_returns_copy_of_fallback(self) -> None:
        result = env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={})
        self.assertEqual(result, ["/usr/local/share", "/usr/share"])
        result.append("/mutated")
        self.assertEqual(env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={}), ["/usr/local/share", "/usr/share"])

    def test_list_fallback_is_not_aliased(self) -> None:
        fallback = ["/a"]
        result = env_dirs(ENV_XDG_DATA_DIRS, fallback, environ={})
        self.assertIsNot(result, fallback)

    def test_empty_variable_returns_fallback(self) -> None:
        result = env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={ENV_XDG_DATA_DIRS: ""})
        self.assertEqual(result, list(DEFAULT_DATA_DIRS))

    def test_trailing_separator_is_dropped(self) -> None:
        result = env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={ENV_XDG_DATA_DIRS: "/a:/b:"})
        self.assertEqual(result, ["/a", "/b"])

    def test_only_separators_yield_empty_list(self) -> None:
        self.assertEqual(env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={ENV_XDG_DATA_DIRS: ":"}), [])
        self.assertEqual(env_dirs(ENV_XDG_DATA_DIRS, DEFAULT_DATA_DIRS, environ={ENV_XDG_DATA_DIRS: ":::"}), [])

    def test_split_dirs_drops_consecutive_separators(self) -> None:
        self.assertEqual(split_dirs("::/a::/b:::/c"), ["/a", "/b", "/c"])
