"""Source line streams for ingestion.

This module opens HTTP(S) URLs, S3 objects and local files as
context-managed iterators of decoded text lines. Every transport reads raw
bytes and shares one strict UTF-8 decoder that breaks lines only on
``\\n``, ``\\r`` and ``\\r\\n``.
"""

from __future__ import annotations

import codecs
import re
from contextlib import contextmanager
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Any, Iterable, Iterator
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from core.config import NpdConfig
from core.constants import READ_CHUNK_SIZE, SOURCE_ENCODING
from core.errors import NpdDependencyError, NpdSourceError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 object location."""

    bucket: str
    key: str


@contextmanager
def open_source_lines(source_uri: str, config: NpdConfig) -> Iterator[Iterator[str]]:
    """Open a source and yield its lines without terminators.

    Args:
        source_uri: ``http(s)://`` URL, ``s3://bucket/key``, ``file://`` URL
            or local path.
        config: Runtime configuration for HTTP and S3 sessions.

    Yields:
        Iterator over decoded lines. The stream is released on exit.

    Raises:
        NpdSourceError: If the source cannot be opened or read.
    """
    scheme = urlparse(source_uri).scheme.lower()
    _LOGGER.info("source_opened", source_uri=source_uri)
    if scheme in ("http", "https"):
        with _open_http_lines(source_uri, config) as lines:
            yield lines
    elif scheme == "s3":
        with _open_s3_lines(source_uri, config) as lines:
            yield lines
    elif scheme == "file":
        with _open_local_lines(Path(url2pathname(urlparse(source_uri).path))) as lines:
            yield lines
    elif scheme == "" or len(scheme) == 1:
        # single-letter schemes are Windows drive letters
        with _open_local_lines(Path(source_uri).expanduser()) as lines:
            yield lines
    else:
        raise NpdSourceError(
            f"Unsupported source '{source_uri}': expected http(s)://, s3://, "
            "file:// or a local path."
        )


@contextmanager
def _open_http_lines(source_uri: str, config: NpdConfig) -> Iterator[Iterator[str]]:
    """Stream lines of an HTTP response body.

    Raises:
        NpdSourceError: On transport failures, error status codes and
            bodies that are not UTF-8.
    """
    client = _create_http_client(config)
    try:
        with client.stream("GET", source_uri) as response:
            response.raise_for_status()
            yield iter_text_lines(response.iter_bytes())
    except (httpx.HTTPError, UnicodeDecodeError) as error:
        raise NpdSourceError(f"Failed to read {source_uri}: {error}") from error
    finally:
        client.close()


def _create_http_client(config: NpdConfig) -> httpx.Client:
    """Create an httpx client honoring the configured timeout."""
    return httpx.Client(timeout=config.http_timeout, follow_redirects=True)


@contextmanager
def _open_s3_lines(source_uri: str, config: NpdConfig) -> Iterator[Iterator[str]]:
    """Stream lines of an S3 object body.

    Raises:
        NpdSourceError: If the object cannot be fetched, read or decoded.
        NpdDependencyError: If boto3 is missing.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    from botocore.exceptions import BotoCoreError, ClientError

    try:
        body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"]
        try:
            yield iter_text_lines(body.iter_chunks(chunk_size=READ_CHUNK_SIZE))
        finally:
            body.close()
    except (BotoCoreError, ClientError, UnicodeDecodeError) as error:
        raise NpdSourceError(f"Failed to read {source_uri}: {error}") from error


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 object URI.

    Args:
        uri: URI in format ``s3://bucket/key``.

    Returns:
        Parsed bucket and key pair.

    Raises:
        NpdSourceError: If bucket or key is missing.
    """
    stripped_uri = uri.removeprefix("s3://")
    bucket, _, key = stripped_uri.partition("/")
    if not bucket or not key:
        raise NpdSourceError(
            f"Invalid S3 URI '{uri}': expected s3://bucket/key. "
            "Provide both bucket and object key."
        )
    return S3Location(bucket=bucket, key=key)


def _create_s3_client(config: NpdConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        NpdDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise NpdDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install boto3 to read s3:// sources."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def iter_text_lines(chunks: Iterable[bytes]) -> Iterator[str]:
    """Decode UTF-8 byte chunks into lines without terminators.

    Lines end at ``\\n``, ``\\r`` or ``\\r\\n`` only, so other Unicode
    separators such as U+0085 stay inside their field. Chunks may split a
    multi-byte character or a ``\\r\\n`` pair. A leading byte order mark
    is dropped.

    Args:
        chunks: Raw byte chunks in stream order.

    Yields:
        Decoded lines. A final line without terminator is kept.

    Raises:
        UnicodeDecodeError: If the bytes are not valid UTF-8.
    """
    decoder = codecs.getincrementaldecoder(SOURCE_ENCODING)(errors="strict")
    pending = ""
    for chunk in chunks:
        text = pending + decoder.decode(chunk)
        # a trailing \r may be the first half of \r\n
        held_back = "\r" if text.endswith("\r") else ""
        lines = _LINE_BREAK.split(text[: len(text) - len(held_back)])
        pending = lines.pop() + held_back
        yield from lines
    lines = _LINE_BREAK.split(pending + decoder.decode(b"", final=True))
    last_line = lines.pop()
    yield from lines
    if last_line:
        yield last_line


@contextmanager
def _open_local_lines(source_path: Path) -> Iterator[Iterator[str]]:
    """Stream lines of a local UTF-8 file.

    Raises:
        NpdSourceError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        with source_path.open("rb") as handle:
            yield iter_text_lines(iter(partial(handle.read, READ_CHUNK_SIZE), b""))
    except (OSError, UnicodeDecodeError) as error:
        raise NpdSourceError(
            f"Failed to read source at {source_path}: {error}. "
            "Provide an existing UTF-8 file."
        ) from error
