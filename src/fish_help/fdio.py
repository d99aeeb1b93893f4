"""Raw file-descriptor output that survives short writes."""

import errno
import os
from typing import Union

from .logger import get_logger

logger = get_logger(__name__)

# errno values that mean "try the same write again"
_RETRY_ERRNOS = {errno.EINTR, errno.EAGAIN, errno.EWOULDBLOCK}


def write_loop(fd: int, data: Union[bytes, str]) -> int:
    """
    Write all of ``data`` to ``fd``, looping over partial writes.

    Returns the number of bytes written. EINTR/EAGAIN are retried; any other
    OSError propagates to the caller.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    view = memoryview(data)
    total = 0
    while total < len(data):
        try:
            written = os.write(fd, view[total:])
        except OSError as e:
            if e.errno in _RETRY_ERRNOS:
                logger.debug("write to fd %d interrupted (%s), retrying", fd, e)
                continue
            raise
        total += written
    return total
