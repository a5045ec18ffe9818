# smartnotes/client/app.py
import logging
from typing import Literal, Optional

import httpx

from smartnotes.client.auth_screen import AuthScreen
from smartnotes.client.backend import NotesBackend
from smartnotes.client.dashboard import Dashboard
from smartnotes.client.models import AuthUser
from smartnotes.client.notify import Notifier

logger = logging.getLogger(__name__)

View = Literal["auth", "dashboard"]

class App:
    """Top-level gate: the dashboard only exists while someone is signed in."""

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None):
        self.notifier = Notifier()
        self.backend = NotesBackend(base_url, transport=transport)
        self.auth = AuthScreen(self.backend, self.notifier, on_signed_in=self._mount_dashboard)
        self.dashboard: Optional[Dashboard] = None

    @property
    def user(self) -> Optional[AuthUser]:
        return self.backend.user

    @property
    def view(self) -> View:
        return "dashboard" if self.user and self.dashboard else "auth"

    async def _mount_dashboard(self, user: AuthUser) -> None:
        self.dashboard = Dashboard(self.backend, user, self.notifier)
        await self.dashboard.fetch_notes()

    async def sign_out(self) -> None:
        if self.dashboard:
            await self.dashboard.drain()
        self.backend.sign_out()
        self.dashboard = None
        self.auth.switch_mode(True)
        logger.info("signed out")

    async def aclose(self) -> None:
        await self.backend.aclose()
