"""Browser process bookkeeping."""

import uuid
from typing import List

import psutil

import logging
logger = logging.getLogger(__name__)


def make_session_id() -> str:
    """Create a unique session identifier."""
    return f"session:{uuid.uuid4().hex}"


def browser_processes(driver) -> List[psutil.Process]:
    """
    Return the chromedriver process and every process it spawned (Chrome and helpers).

    Returns an empty list for drivers without a local service process.
    """
    service = getattr(driver, "service", None)
    proc = getattr(service, "process", None)
    pid = getattr(proc, "pid", None)
    if not pid:
        return []
    try:
        root = psutil.Process(pid)
        return [root] + root.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return []


def reap_processes(processes: List[psutil.Process], timeout: float = 3.0) -> List[int]:
    """
    Kill any of `processes` still alive after `driver.quit()`.

    Returns the PIDs that had to be killed.
    """
    alive = []
    for p in processes:
        try:
            if p.is_running() and p.status() != psutil.STATUS_ZOMBIE:
                alive.append(p)
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    if not alive:
        return []

    _, alive = psutil.wait_procs(alive, timeout=timeout)
    killed = []
    for p in alive:
        try:
            p.kill()
            killed.append(p.pid)
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.debug(f"Could not kill browser process {p.pid}: {e}")
    if killed:
        logger.info(f"Killed {len(killed)} orphaned browser process(es): {killed}")
    return killed


__all__ = [
    "make_session_id",
    "browser_processes",
    "reap_processes",
]
