import logging
import zlib

from spineapi.client.transport import Timeout, default_headers, session_scope
from spineapi.constants import DEFAULT_TIMEOUT, IMAGE_HEADER_SIZE
from spineapi.errors import MalformedCompressedStreamError, TruncatedImageBufferError
from spineapi.types import SessionLike

log = logging.getLogger(__name__)


def _strip_header(raw: bytes) -> memoryview:
    """
    Return a view of ``raw`` without its fixed-size prefix.

    The prefix is a marker written by the upstream compressor which a raw
    inflater cannot parse; it is dropped without being interpreted.
    """
    if len(raw) < IMAGE_HEADER_SIZE:
        raise TruncatedImageBufferError(
            f"Image buffer has {len(raw)} byte(s), expected at least {IMAGE_HEADER_SIZE}"
        )
    return memoryview(raw)[IMAGE_HEADER_SIZE:]


def _inflate_raw(stream: memoryview) -> bytes:
    """Decompress a headerless DEFLATE stream in one pass."""
    try:
        return zlib.decompress(stream, -zlib.MAX_WBITS)
    except zlib.error as exc:
        raise MalformedCompressedStreamError(f"Invalid raw DEFLATE stream: {exc}") from exc


def decode_image(raw: bytes) -> bytes:
    """
    Recover the original image bytes from a fetched preview payload.

    Parameters:
        raw (bytes): Payload exactly as received from the server.

    Returns:
        bytes: The decompressed image, not validated as any image format.

    Raises:
        TruncatedImageBufferError: If ``raw`` is shorter than the fixed header.
        MalformedCompressedStreamError: If the remainder is not raw DEFLATE data.
    """
    return _inflate_raw(_strip_header(raw))


def load_image(
    url: str,
    *,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> bytes:
    """
    Fetch a preview image from an absolute URL and decode it.

    No credentials are sent. HTTP errors propagate from ``requests``.
    """
    log.debug("GET %s", url)
    with session_scope(session) as active:
        response = active.get(url, headers=default_headers(), timeout=timeout)
        response.raise_for_status()
        raw = response.content
    return decode_image(raw)
