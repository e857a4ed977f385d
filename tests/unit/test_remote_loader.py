from __future__ import annotations

import types
import unittest
from unittest.mock import Mock, patch

from client.remote import RemoteExecutor, RemoteSetupError, close_executor, load_executor
from protocol.envelope import outcome_ok


class _StubExecutor:
    def configure(self, location, config_file):  # noqa: ANN001
        return None

    def set_max_content_length(self, nbytes):  # noqa: ANN001
        return None

    def execute(self, location, op):  # noqa: ANN001
        return outcome_ok()

    def decode_error(self, status):  # noqa: ANN001
        return str(status)


class RemoteLoaderTests(unittest.TestCase):
    def test_loads_factory_by_dotted_path(self) -> None:
        module = types.SimpleNamespace(make=_StubExecutor)
        with patch("client.remote.importlib.import_module", return_value=module) as import_mock:
            executor = load_executor("site_backends.kfs:make")
        import_mock.assert_called_once_with("site_backends.kfs")
        self.assertIsInstance(executor, _StubExecutor)
        self.assertIsInstance(executor, RemoteExecutor)

    def test_missing_backend_is_setup_error(self) -> None:
        for target in (None, "", "   "):
            with self.subTest(target=target):
                with self.assertRaises(RemoteSetupError) as exc:
                    load_executor(target)
                self.assertIn("no remote backend", exc.exception.message)

    def test_malformed_target(self) -> None:
        with self.assertRaises(RemoteSetupError):
            load_executor("no_colon_here")

    def test_import_failure_is_setup_error(self) -> None:
        with patch("client.remote.importlib.import_module", side_effect=ImportError("nope")):
            with self.assertRaises(RemoteSetupError) as exc:
                load_executor("missing.module:make")
        self.assertIn("missing.module", exc.exception.message)

    def test_factory_failure_is_setup_error(self) -> None:
        module = types.SimpleNamespace(make=Mock(side_effect=OSError("refused")))
        with patch("client.remote.importlib.import_module", return_value=module):
            with self.assertRaises(RemoteSetupError) as exc:
                load_executor("backend:make")
        self.assertIn("OSError", exc.exception.message)

    def test_factory_must_return_executor(self) -> None:
        module = types.SimpleNamespace(make=lambda: object())
        with patch("client.remote.importlib.import_module", return_value=module):
            with self.assertRaises(RemoteSetupError):
                load_executor("backend:make")

    def test_close_executor_is_optional(self) -> None:
        close_executor(None)
        close_executor(_StubExecutor())
        executor = Mock()
        close_executor(executor)
        executor.close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
