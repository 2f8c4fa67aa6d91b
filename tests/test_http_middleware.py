import os
import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from quote_api.main import create_app


class RequestLoggingTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(create_app(session_factory=MagicMock()))

    def tearDown(self):
        self.client.close()

    def test_request_id_is_generated(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertRegex(str(response.headers.get("x-request-id")), r"^[A-Za-z0-9._-]{1,128}$")
        self.assertEqual(response.headers.get("cache-control"), "no-store")

    def test_valid_request_id_is_preserved(self):
        response = self.client.get("/", headers={"X-Request-ID": "deploy-check_2026.10"})
        self.assertEqual(response.headers.get("x-request-id"), "deploy-check_2026.10")

    def test_invalid_request_id_is_replaced(self):
        response = self.client.get("/", headers={"X-Request-ID": "bad id with spaces"})
        request_id = response.headers.get("x-request-id")
        self.assertNotEqual(request_id, "bad id with spaces")
        self.assertRegex(str(request_id), r"^[A-Za-z0-9._-]{1,128}$")

    def test_access_line_is_logged(self):
        with self.assertLogs("quote_api.http", level="INFO") as logs:
            self.client.get("/", headers={"X-Request-ID": "trace-1"})
        self.assertTrue(any("GET / status=200" in line and "request_id=trace-1" in line for line in logs.output))
