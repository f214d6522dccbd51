# util/timing.py
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Any) -> Iterator[Dict[str, Any]]:
    """
    Usage:
      with timed(logger, "sweep", claims=12) as fields:
          ...
          fields["changed"] = 3
    Emits one INFO on exit: "<name>.done ms=<int> key=val ..."
    Keys added to the yielded dict inside the block are logged too.
    """
    t0 = time.perf_counter()
    try:
        yield kv
    finally:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        logger.info("%s.done ms=%d%s", name, dt_ms, suffix)
