import argparse
import io
import os
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from gdrivepath import AuthInfo, GoogleDrivePath, is_object_not_found, modified_date
from gdrivepath.util.ids import new_temp_name
from gdrivepath.util.path import join_path


DEFAULT_SCOPES = ("https://www.googleapis.com/auth/drive",)


def _env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise unittest.SkipTest(f"Missing env var: {name}")
    return value


class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive.

    Required env vars:
        - GDRIVEPATH_CLIENT_SECRETS: path to OAuth client secrets json
        - GDRIVEPATH_TOKEN_FILE: path to token json (will be created/updated)
        - GDRIVEPATH_TEST_ROOT: existing Drive folder path used as a sandbox

    Optional:
        - GDRIVEPATH_SCOPES: comma-separated scopes (default: full drive)

    Everything is created below a fresh folder in the sandbox, which is moved
    into the sandbox "tmp" folder at the end.
    """

    @classmethod
    def setUpClass(cls) -> None:
        client_secrets = _env("GDRIVEPATH_CLIENT_SECRETS")
        token_file = _env("GDRIVEPATH_TOKEN_FILE")
        cls.root = _env("GDRIVEPATH_TEST_ROOT")

        scopes_raw = os.environ.get("GDRIVEPATH_SCOPES", "").strip()
        if scopes_raw:
            cls.scopes = tuple(s.strip() for s in scopes_raw.split(",") if s.strip())
        else:
            cls.scopes = DEFAULT_SCOPES

        cls.auth_info = AuthInfo(client_secrets_file=client_secrets, token_file=token_file)

    def setUp(self) -> None:
        self.drive = GoogleDrivePath(
            self.auth_info,
            scopes=self.scopes,
            tmp_folder=join_path(self.root, "tmp"),
        )
        self.base = join_path(self.root, f"it-{new_temp_name()}")

    def test_path_operations_smoke(self) -> None:
        folder = self.drive.mkdir(self.base)
        self.assertTrue(folder.is_dir)
        self.assertEqual(self.drive.mkdir(self.base).file_id, folder.file_id)

        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)

            uploaded = self.drive.insert(join_path(self.base, "hello.txt"), io.BytesIO(b"hello\n"))
            self.assertEqual(uploaded.name, "hello.txt")

            src_file = tmp_path / "local.txt"
            src_file.write_text("from disk\n", encoding="utf-8")
            self.drive.insert_file(join_path(self.base, "local.txt"), str(src_file), in_place=True)

            moved = self.drive.move(
                join_path(self.base, "hello.txt"),
                join_path(self.base, "renamed.txt"),
            )
            self.assertEqual(moved.file_id, uploaded.file_id)

            with self.assertRaises(Exception) as ctx:
                self.drive.stat(join_path(self.base, "hello.txt"))
            self.assertTrue(is_object_not_found(ctx.exception))

            names = sorted(f.name for f in self.drive.list_dir(self.base))
            self.assertEqual(names, ["local.txt", "renamed.txt"])

            when = datetime(2020, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc)
            info = self.drive.set_modified_date(join_path(self.base, "renamed.txt"), when)
            self.assertEqual(modified_date(info), when.replace(microsecond=0))

            self.assertEqual(self.drive.download(join_path(self.base, "renamed.txt")).read(), b"hello\n")

            dst_file = tmp_path / "downloaded.txt"
            size = self.drive.download_to_file(join_path(self.base, "local.txt"), str(dst_file))
            self.assertEqual(size, len(b"from disk\n"))
            self.assertEqual(dst_file.read_bytes(), b"from disk\n")

        # Park the sandbox folder in the temporary folder for later cleanup.
        self.drive.move(self.base, join_path(join_path(self.root, "tmp"), Path(self.base).name))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose unittest output",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    unittest.main(verbosity=2 if args.verbose else 1)
