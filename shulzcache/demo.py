"""Demonstration: concurrent calls to a slow function share cached results."""

from __future__ import annotations

import argparse
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .cache import new_cached_function

log = logging.getLogger(__name__)


def fetch_data_from_remote(id_: int) -> str:
    """Simulate a slow remote lookup."""
    time.sleep(2)
    log.info("running the actual func for id %d", id_)
    return f"Result for ID {id_}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run ten concurrent lookups over two ids and log the results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    cached_fetch = new_cached_function(fetch_data_from_remote)

    def worker(i: int) -> None:
        try:
            result = cached_fetch(100 + i % 2)
        except Exception:
            return
        log.info("Got: %s", result)

    with ThreadPoolExecutor(max_workers=10) as pool:
        list(pool.map(worker, range(10)))
    return 0