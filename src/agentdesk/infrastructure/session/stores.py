"""Session sinks and stores for the console's token pair.

- `InMemorySessionStore` keeps the pair for the lifetime of the process.
- `FileSessionStore` persists it as JSON so a restarted console resumes the
  session. The file is rewritten through a temporary file and `os.replace`,
  so readers only ever see the old pair or the new one.
- `CallbackSessionSink` adapts a plain ``async (access, refresh) -> None``
  callback to the sink interface.
"""

import asyncio
import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Awaitable, Callable, Optional

from structlog import get_logger

from agentdesk.domain.interfaces.token_management import ISessionSink, ISessionStore
from agentdesk.domain.value_objects.token_pair import TokenPair

logger = get_logger(__name__)

TokenUpdateCallback = Callable[[str, str], Awaitable[None]]


class CallbackSessionSink(ISessionSink):
    """Forwards new pairs to an async callback."""

    def __init__(self, callback: TokenUpdateCallback):
        self.callback = callback

    async def update(self, access_token: str, refresh_token: str) -> None:
        await self.callback(access_token, refresh_token)


class InMemorySessionStore(ISessionStore):
    def __init__(self, tokens: Optional[TokenPair] = None):
        self._tokens = tokens

    async def load(self) -> Optional[TokenPair]:
        return self._tokens

    async def update(self, access_token: str, refresh_token: str) -> None:
        self._tokens = TokenPair(access=access_token, refresh=refresh_token)

    async def clear(self) -> None:
        self._tokens = None


class FileSessionStore(ISessionStore):
    """Stores the pair in a JSON file readable only by its owner.

    File access runs in a worker thread; `update` is awaited inside the shared
    refresh, so disk latency must not block the event loop.

    Attributes:
        path (Path): Location of the session file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    async def load(self) -> Optional[TokenPair]:
        return await asyncio.to_thread(self._read)

    async def update(self, access_token: str, refresh_token: str) -> None:
        tokens = TokenPair(access=access_token, refresh=refresh_token)
        await asyncio.to_thread(self._write, tokens)
        logger.debug("session_file_written", path=str(self.path))

    async def clear(self) -> None:
        await asyncio.to_thread(self.path.unlink, missing_ok=True)

    def _read(self) -> Optional[TokenPair]:
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                data = json.load(fp)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning("session_file_unreadable", path=str(self.path), error=str(e))
            return None

        try:
            return TokenPair.from_payload(data)
        except ValueError as e:
            logger.warning("session_file_invalid", path=str(self.path), error=str(e))
            return None

    def _write(self, tokens: TokenPair) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(prefix=".session-", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                if hasattr(os, "fchmod"):
                    os.fchmod(fp.fileno(), 0o600)
                json.dump(
                    {
                        "access": tokens.access,
                        "refresh": tokens.refresh,
                        "updated_at": datetime.now(timezone.utc).isoformat(),
                    },
                    fp,
                    indent=2,
                )
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
