"""
Browser session state and lifecycle.

Exactly one browser and one page exist per process. The `SessionManager` owns
that singleton explicitly and is passed to the dispatcher, instead of living in
module-level globals.

Lifecycle:
    absent --acquire()--> present --release()--> absent

Usage:
    from mcp_browser_automation.session import SessionManager

    sessions = SessionManager(config)
    session = sessions.acquire()      # launches Chrome on first use
    session.driver.get("https://example.com")
    sessions.release()                # quits Chrome
"""

import time
import threading
import contextlib
from dataclasses import dataclass, field
from typing import Callable, Optional

from .browser.driver import create_webdriver
from .browser.process import browser_processes, make_session_id, reap_processes
from .errors import BrowserStartupError, describe_exception
from .utils.diagnostics import collect_diagnostics

import logging
logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One browser process and its single page.

    Attributes:
        session_id: Unique identifier, new for every launched browser
        driver: Selenium WebDriver instance (the browser handle)
        page: Window handle of the page all operations act on
        config: Environment configuration dictionary
        created_at: Launch time (epoch seconds)
    """

    session_id: str
    driver: object
    page: str
    config: dict = field(default_factory=dict)
    created_at: float = field(default_factory=time.time)

    def is_alive(self) -> bool:
        """Check that the browser still answers and the page still exists."""
        try:
            return self.page in self.driver.window_handles
        except Exception:
            return False

    def focus_page(self) -> None:
        """Make the session page the target of subsequent driver calls."""
        if self.driver.current_window_handle != self.page:
            self.driver.switch_to.window(self.page)


class SessionManager:
    """
    Owns at most one `Session`, created lazily and shared by every request.

    This is deliberately not a pool: callers are serialized by the dispatcher.
    """

    def __init__(self, config: Optional[dict] = None, driver_factory: Optional[Callable] = None):
        if config is None:
            from .config import get_env_config
            config = get_env_config()
        self.config = config
        self._driver_factory = driver_factory or create_webdriver
        self._session: Optional[Session] = None
        self._lock = threading.RLock()
        self.acquisitions = 0

    @property
    def current(self) -> Optional[Session]:
        """The live session, or None. Never starts a browser."""
        return self._session

    def acquire(self) -> Session:
        """
        Return the existing session, or launch a browser and open its page.

        Raises:
            BrowserStartupError: if the browser cannot be started. No partial
                session is retained.
        """
        with self._lock:
            self.acquisitions += 1
            if self._session is not None:
                if self._session.is_alive():
                    return self._session
                logger.warning(f"Browser session {self._session.session_id} is gone; starting a new one")
                self._teardown(self._session)
                self._session = None

            self._session = self._start()
            return self._session

    def release(self) -> bool:
        """
        Quit the browser and clear the session.

        Safe to call when no session exists. Returns True if a session was closed.
        """
        with self._lock:
            session, self._session = self._session, None
        if session is None:
            return False
        self._teardown(session)
        logger.info(f"Browser session {session.session_id} released")
        return True

    def _start(self) -> Session:
        try:
            driver = self._driver_factory(self.config)
        except Exception as e:
            logger.error(f"Browser startup failed:\n{collect_diagnostics(None, e, self.config)}")
            raise BrowserStartupError(f"Failed to start browser: {describe_exception(e)}") from e

        try:
            driver.set_page_load_timeout(self.config.get("page_load_timeout", 30))
            driver.set_script_timeout(self.config.get("script_timeout", 30))
            page = driver.current_window_handle
            if not page:
                raise RuntimeError("browser reported no open page")
        except Exception as e:
            with contextlib.suppress(Exception):
                driver.quit()
            logger.error(f"Browser page setup failed:\n{collect_diagnostics(None, e, self.config)}")
            raise BrowserStartupError(f"Failed to open browser page: {describe_exception(e)}") from e

        session = Session(
            session_id=make_session_id(),
            driver=driver,
            page=page,
            config=self.config,
        )
        logger.info(f"Browser session {session.session_id} started")
        return session

    def _teardown(self, session: Session) -> None:
        processes = browser_processes(session.driver)
        try:
            session.driver.quit()
        except Exception as e:
            logger.warning(f"Driver quit failed for {session.session_id}: {describe_exception(e)}")
        reap_processes(processes)


__all__ = [
    "Session",
    "SessionManager",
]
