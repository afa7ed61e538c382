"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
import shutil
import tempfile
from datetime import datetime
from typing import Any, BinaryIO, Callable, Optional, Sequence, TypeVar

from gdrivepath.auth import AuthInfo, OAuthClient
from gdrivepath.errors import (
    ApiError,
    AuthError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    map_http_error,
)
from gdrivepath.models import ChildRef, FileInfo
from gdrivepath.util.mime import DEFAULT_UPLOAD_MIME, FOLDER_MIME
from gdrivepath.util.query import parent_query
from gdrivepath.util.time import parse_rfc3339, to_drive_modified_time

from .fields import FILE_FIELDS, LIST_FIELDS
from .retry import RetryPolicy, execute_with_retry

T = TypeVar("T")

# Drive alias for the "My Drive" root folder.
ROOT_ID: str = "root"

# Non-seekable upload bodies are buffered in memory up to this size, then on disk.
SPOOL_MAX_BYTES: int = 8 * 1024 * 1024

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Thin Drive API v3 adapter (internal only).

    Every request goes through `execute_with_retry`, so callers never see a
    transient failure unless the retry budget is exhausted.

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
    """

    DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._supports_all_drives = supports_all_drives
        self._retry_policy = retry_policy or RetryPolicy()

        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        self._service = client.build_drive_service(use_scopes)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._retry_policy = retry_policy or RetryPolicy()
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> FileInfo:
        def call() -> dict[str, Any]:
            return self._service.files().get(
                fileId=file_id,
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            ).execute()

        return _file_dict_to_file_info(self._execute(call))

    def list_children(self, parent_id: str, query: Optional[str] = None) -> list[ChildRef]:
        """
        List the children of `parent_id` matching the Drive query `query`.

        Only id, name and mimeType are fetched. All result pages are read.
        """
        q = parent_query(parent_id, query)
        children: list[ChildRef] = []
        page_token: Optional[str] = None

        while True:
            token = page_token

            def call() -> dict[str, Any]:
                return self._service.files().list(
                    q=q,
                    fields=LIST_FIELDS,
                    pageToken=token,
                    **self._common_list_kwargs(),
                ).execute()

            data = self._execute(call)
            for f in data.get("files", []) or []:
                children.append(_file_dict_to_child_ref(f))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return children

    def insert(
        self,
        reader: Optional[BinaryIO],
        name: str,
        parent_id: str,
        *,
        mime_type: Optional[str] = None,
    ) -> FileInfo:
        """
        Create an object named `name` under `parent_id`.

        With `reader=None` an empty object is created (this is how folders are
        made); otherwise the reader's content is uploaded.
        """
        if not name:
            raise InvalidArgumentError("name must be a non-empty string")

        body: dict[str, Any] = {"name": name, "parents": [parent_id]}
        if mime_type:
            body["mimeType"] = mime_type
        spool: Optional[BinaryIO] = None

        if reader is None:

            def call() -> dict[str, Any]:
                return self._service.files().create(
                    body=body,
                    fields=FILE_FIELDS,
                    **self._common_kwargs(),
                ).execute()

        else:
            try:
                from googleapiclient.http import MediaIoBaseUpload
            except Exception as exc:  # pragma: no cover
                raise AuthError(
                    "google-api-python-client is not available",
                    cause=exc,
                ) from exc

            if not reader.seekable():
                # MediaIoBaseUpload seeks; pipes and sockets are spooled first.
                spool = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_BYTES)
                shutil.copyfileobj(reader, spool)
                spool.seek(0)
            body_reader = spool if spool is not None else reader
            start = body_reader.tell()

            def call() -> dict[str, Any]:
                # A retried upload must send the whole body again.
                body_reader.seek(start)
                media = MediaIoBaseUpload(
                    body_reader,
                    mimetype=mime_type or DEFAULT_UPLOAD_MIME,
                    resumable=True,
                )
                return self._service.files().create(
                    body=body,
                    media_body=media,
                    fields=FILE_FIELDS,
                    **self._common_kwargs(),
                ).execute()

        try:
            data = self._execute(call)
        finally:
            if spool is not None:
                spool.close()
        logger.info("Inserted %r under parent %s", name, parent_id)
        return _file_dict_to_file_info(data)

    def create_folder(self, name: str, parent_id: str) -> FileInfo:
        return self.insert(None, name, parent_id, mime_type=FOLDER_MIME)

    def patch(
        self,
        file_id: str,
        *,
        name: Optional[str] = None,
        modified_time: Optional[datetime] = None,
        add_parents: Optional[Sequence[str]] = None,
        remove_parents: Optional[Sequence[str]] = None,
    ) -> FileInfo:
        """
        Update metadata of `file_id` in a single request.

        Only the given attributes change. Parents are added/removed through
        the addParents/removeParents parameters.
        """
        body: dict[str, Any] = {}
        if name:
            body["name"] = name
        if modified_time is not None:
            body["modifiedTime"] = to_drive_modified_time(modified_time)

        kwargs: dict[str, Any] = {}
        if add_parents:
            kwargs["addParents"] = ",".join(add_parents)
        if remove_parents:
            kwargs["removeParents"] = ",".join(remove_parents)

        if not body and not kwargs:
            raise InvalidArgumentError(
                "patch requires at least one attribute to change",
                details={"file_id": file_id},
            )

        def call() -> dict[str, Any]:
            return self._service.files().update(
                fileId=file_id,
                body=body,
                fields=FILE_FIELDS,
                **kwargs,
                **self._common_kwargs(),
            ).execute()

        return _file_dict_to_file_info(self._execute(call))

    def trash(self, file_id: str) -> FileInfo:
        def call() -> dict[str, Any]:
            return self._service.files().update(
                fileId=file_id,
                body={"trashed": True},
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            ).execute()

        data = self._execute(call)
        logger.info("Trashed %s", file_id)
        return _file_dict_to_file_info(data)

    def download(self, file_id: str, writer: BinaryIO) -> int:
        """Write the content of `file_id` to `writer`. Returns bytes written."""
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        req = self._service.files().get_media(
            fileId=file_id,
            **self._common_kwargs(),
        )
        start = writer.tell()
        downloader = MediaIoBaseDownload(writer, req)
        done = False
        while not done:
            _, done = self._execute(downloader.next_chunk)
        return writer.tell() - start

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _execute(self, func: Callable[[], T]) -> T:
        return execute_with_retry(
            func,
            policy=self._retry_policy,
            map_exception=_map_exception,
        )


def _map_exception(exc: Exception) -> Exception:
    try:
        from googleapiclient.errors import HttpError
    except Exception:  # pragma: no cover
        HttpError = None  # type: ignore[assignment]

    if HttpError is not None and isinstance(exc, HttpError):
        info = _http_error_to_info(exc)
        return map_http_error(info, cause=exc)

    if isinstance(exc, (OSError, TimeoutError)):
        return NetworkError("Network error", cause=exc)

    return ApiError("Drive API error", cause=exc)


def _file_dict_to_child_ref(data: dict[str, Any]) -> ChildRef:
    return ChildRef(
        file_id=str(data.get("id", "")),
        name=data.get("name", "") or "",
        mime_type=data.get("mimeType", "") or "",
    )


def _file_dict_to_file_info(data: dict[str, Any]) -> FileInfo:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []

    modified_time = None
    created_time = None

    if isinstance(data.get("modifiedTime"), str):
        try:
            modified_time = parse_rfc3339(data["modifiedTime"])
        except ValueError:
            modified_time = None

    if isinstance(data.get("createdTime"), str):
        try:
            created_time = parse_rfc3339(data["createdTime"])
        except ValueError:
            created_time = None

    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    md5 = data.get("md5Checksum")

    if not isinstance(file_id, str) or not file_id:
        raise ApiError("Drive response has no file id", details={"fields": sorted(data)})

    return FileInfo(
        file_id=file_id,
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=tuple(parents) if isinstance(parents, list) else (),
        trashed=bool(data.get("trashed", False)),
        modified_time=modified_time,
        created_time=created_time,
        size=size,
        md5_checksum=md5 if isinstance(md5, str) else None,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except (TypeError, ValueError):
            status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
