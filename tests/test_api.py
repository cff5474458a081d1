"""
HTTP tests for the transcode endpoints.
Run from project root: python -m pytest tests/test_api.py -v
"""
import unittest

from fastapi.testclient import TestClient

from main import app


class TestTranscodeApi(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        res = self.client.get("/health")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"status": "ok"})

    def test_keys_snake_to_camel(self):
        res = self.client.post(
            "/api/transcode/keys",
            json={
                "direction": "snake_to_camel",
                "payload": {"session_token": "t", "user_info": {"is_sys_admin": True}, "tags": ["first_name"]},
            },
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {
            "direction": "snake_to_camel",
            "payload": {"sessionToken": "t", "userInfo": {"isSysAdmin": True}, "tags": ["first_name"]},
        })

    def test_keys_camel_to_snake(self):
        res = self.client.post(
            "/api/transcode/keys",
            json={"direction": "camel_to_snake", "payload": {"requestBody": {"tableName": "x"}, "otherField": 1}},
        )
        self.assertEqual(res.json()["payload"], {"requestBody": {"tableName": "x"}, "other_field": 1})

    def test_keys_scalar_payload(self):
        res = self.client.post("/api/transcode/keys", json={"direction": "camel_to_snake", "payload": "userName"})
        self.assertEqual(res.json()["payload"], "userName")

    def test_string(self):
        res = self.client.post("/api/transcode/string", json={"direction": "camel_to_snake", "value": "HTTPSConnection"})
        self.assertEqual(res.json(), {"direction": "camel_to_snake", "value": "https_connection"})
        res = self.client.post("/api/transcode/string", json={"direction": "snake_to_camel", "value": "sp_name_id_format"})
        self.assertEqual(res.json()["value"], "spNameIDFormat")

    def test_invalid_direction(self):
        res = self.client.post("/api/transcode/string", json={"direction": "sideways", "value": "x"})
        self.assertEqual(res.status_code, 422)

    def test_special_cases_listing(self):
        res = self.client.get("/api/transcode/special-cases")
        self.assertEqual(res.status_code, 200)
        self.assertIn({"camel": "spNameIDFormat", "snake": "sp_name_id_format"}, res.json())


if __name__ == "__main__":
    unittest.main()
