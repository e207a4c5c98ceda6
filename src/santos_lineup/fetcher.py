import asyncio
import codecs

import aiohttp
from bs4.dammit import EncodingDetector

from . import config
from .assembler import build_records
from .extractor import iter_tables
from .logger import get_logger

logger = get_logger(__name__)


class UpstreamError(Exception):
    """The source page could not be fetched (network failure or non-2xx status)."""

    def __init__(self, url, status=None, reason=""):
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"upstream {status}" if status is not None else "upstream unreachable"
        super().__init__(f"{detail}: {reason}" if reason else detail)


def _decoder_for(first_chunk: bytes, charset=None):
    encoding = (
        charset
        or EncodingDetector.find_declared_encoding(first_chunk, is_html=True)
        or config.DEFAULT_ENCODING
    )
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning(f"Unknown encoding {encoding!r}, falling back to {config.DEFAULT_ENCODING}")
        encoding = config.DEFAULT_ENCODING
    return codecs.getincrementaldecoder(encoding)(errors="replace")


async def decode_stream(chunks, charset=None):
    """Decode an async stream of bytes incrementally, sniffing <meta charset> if needed."""
    decoder = None
    async for chunk in chunks:
        if decoder is None:
            decoder = _decoder_for(chunk, charset)
        text = decoder.decode(chunk)
        if text:
            yield text
    if decoder is not None:
        tail = decoder.decode(b"", final=True)
        if tail:
            yield tail


async def fetch_tables(url=None, session=None) -> list:
    """
    Stream the source page and return every table on it.

    Raises UpstreamError for connection problems, timeouts and non-2xx responses.
    """
    url = url or config.SOURCE_URL
    owns_session = session is None
    if owns_session:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.TIMEOUT))

    try:
        logger.info(f"Fetching {url}")
        async with session.get(url, headers={"User-Agent": config.USER_AGENT}) as response:
            if not 200 <= response.status < 300:
                logger.error(f"Upstream returned {response.status} for {url}")
                raise UpstreamError(url, response.status, response.reason or "")
            chunks = decode_stream(response.content.iter_chunked(config.CHUNK_SIZE), response.charset)
            tables = [table async for table in iter_tables(chunks)]
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Error fetching {url}: {e}")
        raise UpstreamError(url, reason=str(e) or type(e).__name__) from e
    finally:
        if owns_session:
            await session.close()

    logger.info(f"Found {len(tables)} tables on the page")
    return tables


async def fetch_records(url=None, session=None, fallback=config.FALLBACK_LAYOUT, now=None) -> list:
    tables = await fetch_tables(url, session)
    return build_records(tables, fallback=fallback, now=now)
