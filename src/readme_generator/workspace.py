import asyncio
import logging
import shutil
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

WORKDIR_PREFIX = "readme-gen-"


@asynccontextmanager
async def working_directory(prefix: str = WORKDIR_PREFIX) -> AsyncIterator[Path]:
    """Yield a fresh, empty temporary directory and remove it on exit.

    Creation and removal run in a worker thread so a large clone does not
    stall the event loop. The directory is removed on every exit path; a
    failed removal is logged and swallowed so it never masks the error that
    ended the block.
    """
    path = Path(await asyncio.to_thread(tempfile.mkdtemp, prefix=prefix))
    logger.info(f"Created working directory {path}")
    try:
        yield path
    finally:
        logger.info(f"Cleaning up working directory {path}")
        try:
            await asyncio.to_thread(shutil.rmtree, path)
        except OSError as exc:
            logger.error(f"Failed to remove working directory {path}: {exc}")
