"""
Unified Tree Logger
===================

Custom logging system with tree-style formatting and EST timezone support.
Provides structured logging for API events with visual formatting
and file output for debugging and monitoring.

Features:
- Unique run ID generation for tracking server sessions
- EST/EDT timezone timestamp formatting (auto-adjusts)
- Tree-style log formatting for structured data
- Console and file output simultaneously
- Daily log folders with separate log and error files
- Automatic cleanup of old logs (7+ days)
- Error-only logs streamed to a webhook in tree format
- Persistent aiohttp session for efficient webhook delivery

Log Structure:
    logs/
    ├── 2025-12-06/
    │   ├── AvatarAPI-2025-12-06.log
    │   └── AvatarAPI-Errors-2025-12-06.log
    └── ...

Environment Variables:
    AVATAR_LOGS_DIR          - Base logs directory (default: <root>/logs)
    AVATAR_ERROR_WEBHOOK_URL - Webhook URL for error-only logs
    DEBUG                    - Enable debug logging (1/true/yes)
"""

import os
import re
import shutil
import uuid
import traceback
import asyncio
import aiohttp
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Tuple, Optional, Any

from src.core.config import LOGS_DIR, config
from src.core.constants import TIMEZONE_EST, WEBHOOK_TIMEOUT


# =============================================================================
# Constants
# =============================================================================

# Log retention period in days
LOG_RETENTION_DAYS = 7

# Name used for log files and webhook usernames
APP_NAME = "AvatarAPI"

# Regex to match emojis (for stripping from file logs)
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map symbols
    "\U00002702-\U000027B0"  # dingbats
    "\U0001F900-\U0001F9FF"  # supplemental symbols
    "\U00002600-\U000026FF"  # misc symbols
    "\U00002300-\U000023FF"  # misc technical
    "]+",
    flags=re.UNICODE
)


# =============================================================================
# Tree Symbols
# =============================================================================

class TreeSymbols:
    """Box-drawing characters for tree formatting."""
    BRANCH = "├─"      # Middle item connector
    LAST = "└─"        # Last item connector


# =============================================================================
# Logger
# =============================================================================

class Logger:
    """Custom logger with tree-style formatting and error webhook streaming."""

    # Error emojis that should route to the error log
    ERROR_EMOJIS = {"❌", "⚠️", "🚨", "💥"}

    def __init__(self, logs_dir: Optional[Path] = None, error_webhook_url: str = "") -> None:
        """Initialize the logger with unique run ID and daily log folder rotation."""
        # Unique run ID for this session
        self.run_id: str = str(uuid.uuid4())[:8]

        # Track last log type for spacing between trees
        self._last_was_tree: bool = False

        # Error webhook
        self._error_webhook_url: str = error_webhook_url

        # Persistent aiohttp session for webhooks (lazy initialized)
        self._webhook_session: Optional[aiohttp.ClientSession] = None
        self._session_lock: Optional[asyncio.Lock] = None

        # Base logs directory
        self.logs_base_dir = Path(logs_dir or LOGS_DIR)
        self.logs_base_dir.mkdir(parents=True, exist_ok=True)

        # Create daily folder (e.g., logs/2025-12-06/)
        self.current_date = datetime.now(TIMEZONE_EST).strftime("%Y-%m-%d")
        self._set_log_files()

        # Clean up old log folders (older than 7 days)
        self._cleanup_old_logs()

        # Write session header
        self._write_header(f"NEW SESSION - RUN ID: {self.run_id}")

    # =========================================================================
    # Private Methods - Setup
    # =========================================================================

    def _set_log_files(self) -> None:
        """Point log files at the folder for the current date."""
        self.log_dir = self.logs_base_dir / self.current_date
        self.log_dir.mkdir(exist_ok=True)
        self.log_file: Path = self.log_dir / f"{APP_NAME}-{self.current_date}.log"
        self.error_file: Path = self.log_dir / f"{APP_NAME}-Errors-{self.current_date}.log"

    def _cleanup_old_logs(self) -> None:
        """Clean up log folders older than retention period (7 days)."""
        try:
            cutoff_date = datetime.now(TIMEZONE_EST) - timedelta(days=LOG_RETENTION_DAYS)
            deleted_count = 0

            # Only match date-formatted folders (YYYY-MM-DD)
            for folder in self.logs_base_dir.glob("????-??-??"):
                if not folder.is_dir():
                    continue

                try:
                    folder_date = datetime.strptime(folder.name, "%Y-%m-%d")
                    folder_date = folder_date.replace(tzinfo=TIMEZONE_EST)
                except ValueError:
                    continue

                if folder_date < cutoff_date:
                    shutil.rmtree(folder)
                    deleted_count += 1

            if deleted_count > 0:
                print(f"[LOG CLEANUP] Deleted {deleted_count} old log folders (>{LOG_RETENTION_DAYS} days)")
        except OSError as e:
            print(f"[LOG CLEANUP ERROR] {type(e).__name__}: {e}")

    def _check_date_rotation(self) -> None:
        """Check if date has changed and rotate to new log folder if needed."""
        current_date = datetime.now(TIMEZONE_EST).strftime("%Y-%m-%d")

        if current_date != self.current_date:
            self.current_date = current_date
            self._set_log_files()
            self._write_header(f"LOG ROTATION - Continuing session {self.run_id}")

    def _write_header(self, title: str) -> None:
        """Write a session header to both log file and error log file."""
        header = (
            f"\n{'='*60}\n"
            f"{title}\n"
            f"{self._get_timestamp()}\n"
            f"{'='*60}\n\n"
        )
        self._append(self.log_file, header)
        self._append(self.error_file, header)

    # =========================================================================
    # Private Methods - Formatting
    # =========================================================================

    def _get_timestamp(self) -> str:
        """Get current timestamp in Eastern timezone (auto EST/EDT)."""
        current_time = datetime.now(TIMEZONE_EST)
        return f"[{current_time.strftime('%I:%M:%S %p')} {current_time.strftime('%Z')}]"

    def _strip_emojis(self, text: str) -> str:
        """Remove emojis from text to avoid duplicate emojis in output."""
        return EMOJI_PATTERN.sub("", text).strip()

    def _format_tree(self, title: str, items: List[Tuple[str, Any]], emoji: str) -> str:
        """Format a tree log as a single block of text."""
        lines = [f"{self._get_timestamp()} {emoji} {self._strip_emojis(title)}"]

        for i, (key, value) in enumerate(items):
            prefix = TreeSymbols.LAST if i == len(items) - 1 else TreeSymbols.BRANCH
            lines.append(f"  {prefix} {key}: {value}")

        return "\n".join(lines)

    # =========================================================================
    # Private Methods - File Writing
    # =========================================================================

    def _append(self, path: Path, text: str) -> None:
        """Append text to a log file, ignoring filesystem errors."""
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError:
            pass

    def _write(self, message: str, emoji: str = "", error: bool = False) -> None:
        """Write log message to console and file (and error file if needed)."""
        self._check_date_rotation()

        clean_message = self._strip_emojis(message)
        timestamp = self._get_timestamp()
        full_message = f"{timestamp} {emoji} {clean_message}" if emoji else f"{timestamp} {clean_message}"

        print(full_message)
        self._append(self.log_file, f"{full_message}\n")
        if error:
            self._append(self.error_file, f"{full_message}\n")

    def _write_raw(self, message: str, error: bool = False) -> None:
        """Write raw message without timestamp (for tree branches)."""
        print(message)
        self._append(self.log_file, f"{message}\n")
        if error:
            self._append(self.error_file, f"{message}\n")

    # =========================================================================
    # Error Webhook
    # =========================================================================

    def _send_error_webhook(self, title: str, items: List[Tuple[str, Any]], emoji: str) -> None:
        """Send error to the error webhook as tree format."""
        if not self._error_webhook_url:
            return

        payload = {
            "content": f"```\n{self._format_tree(title, items, emoji)}\n```",
            "username": f"{APP_NAME} Errors",
        }

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running (startup or worker supervisor)
            return

        task = loop.create_task(self._async_send_webhook(payload))
        task.add_done_callback(self._handle_webhook_task_exception)

    def _handle_webhook_task_exception(self, task: asyncio.Task) -> None:
        """Consume exceptions from webhook tasks (already logged to file)."""
        if not task.cancelled():
            task.exception()

    async def _get_webhook_session(self) -> aiohttp.ClientSession:
        """Get or create persistent webhook session."""
        if self._session_lock is None:
            self._session_lock = asyncio.Lock()

        async with self._session_lock:
            if self._webhook_session is None or self._webhook_session.closed:
                self._webhook_session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=WEBHOOK_TIMEOUT)
                )
            return self._webhook_session

    async def _async_send_webhook(self, payload: dict) -> None:
        """Send webhook payload using the persistent session."""
        try:
            session = await self._get_webhook_session()
            async with session.post(self._error_webhook_url, json=payload) as response:
                if response.status >= 400:
                    # File only, avoids recursion
                    self._append(self.log_file, f"[WEBHOOK] HTTP {response.status} sending to webhook\n")
        except asyncio.TimeoutError:
            self._append(self.log_file, "[WEBHOOK] Timeout sending to webhook\n")
        except aiohttp.ClientError as e:
            self._append(self.log_file, f"[WEBHOOK] Client error: {type(e).__name__}\n")

    async def close_webhook_session(self) -> None:
        """Close the persistent webhook session (call on shutdown)."""
        if self._webhook_session and not self._webhook_session.closed:
            await self._webhook_session.close()
            self._webhook_session = None

    # =========================================================================
    # Public Methods - Log Levels
    # =========================================================================

    def info(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log an informational message."""
        self._log(message, details, "ℹ️")

    def success(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log a success message."""
        self._log(message, details, "✅")

    def error(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log an error message (also writes to error log and webhook)."""
        self._log(message, details, "❌")

    def warning(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log a warning message (also writes to error log and webhook)."""
        self._log(message, details, "⚠️")

    def debug(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log a debug message (only if DEBUG env var is set)."""
        if os.getenv("DEBUG", "").lower() in ("1", "true", "yes"):
            self._log(message, details, "🔍")

    def exception(self, message: str, details: Optional[List[Tuple[str, Any]]] = None) -> None:
        """Log an exception with full traceback (also writes to error log)."""
        self._log(message, details, "💥")
        tb = traceback.format_exc()
        self._append(self.log_file, f"{tb}\n")
        self._append(self.error_file, f"{tb}\n")

    def _log(self, message: str, details: Optional[List[Tuple[str, Any]]], emoji: str) -> None:
        if details:
            self.tree(message, details, emoji=emoji)
            return

        is_error = emoji in self.ERROR_EMOJIS
        self._write(message, emoji, error=is_error)
        self._last_was_tree = False
        if is_error:
            self._send_error_webhook(message, [], emoji)

    # =========================================================================
    # Public Methods - Tree Formatting
    # =========================================================================

    def tree(
        self,
        title: str,
        items: List[Tuple[str, Any]],
        emoji: str = "📦"
    ) -> None:
        """
        Log structured data in tree format.

        Example output:

            [12:00:00 PM EST] 🌐 Server Listening
              ├─ Host: 0.0.0.0
              ├─ Port: 3000
              └─ Workers: 4

        Args:
            title: Tree title/header
            items: List of (key, value) tuples
            emoji: Emoji prefix for title
        """
        is_error = emoji in self.ERROR_EMOJIS

        if not self._last_was_tree:
            self._write_raw("", error=is_error)

        self._write(title, emoji, error=is_error)

        for i, (key, value) in enumerate(items):
            prefix = TreeSymbols.LAST if i == len(items) - 1 else TreeSymbols.BRANCH
            self._write_raw(f"  {prefix} {key}: {value}", error=is_error)

        self._write_raw("", error=is_error)
        self._last_was_tree = True

        if is_error:
            self._send_error_webhook(title, items, emoji)


# =============================================================================
# Module Export
# =============================================================================

# Create singleton instance
logger = Logger(error_webhook_url=config.ERROR_WEBHOOK_URL)

# Backwards compatibility alias
log = logger

__all__ = [
    "logger",
    "log",
    "Logger",
    "TreeSymbols",
]
