import unittest

from gdrivepath.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid(self) -> None:
        info = AuthInfo(
            client_secrets_file="/tmp/client_secrets.json",
            token_file="/tmp/token.json",
        )
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_blank_value(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="x", token_file="  ")


if __name__ == "__main__":
    unittest.main()
