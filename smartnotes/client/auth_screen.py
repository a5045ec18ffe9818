# smartnotes/client/auth_screen.py
import logging
from typing import Awaitable, Callable, Optional

from smartnotes.auth.service import INVALID_CREDENTIALS, PASSWORD_TOO_SHORT, USER_EXISTS
from smartnotes.client.backend import BackendError, NotesBackend
from smartnotes.client.models import AuthUser
from smartnotes.client.notify import Notifier
from smartnotes.shared.config import settings

logger = logging.getLogger(__name__)

# provider message fragment -> what the user is shown
_FRIENDLY = [
    (INVALID_CREDENTIALS, "Invalid email or password. Please try again."),
    (USER_EXISTS, "An account with this email already exists. Please sign in instead."),
    (PASSWORD_TOO_SHORT, f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long."),
]

def friendly_error(message: str) -> str:
    for fragment, text in _FRIENDLY:
        if fragment in message:
            return text
    return message or "An error occurred. Please try again."

class AuthScreen:
    """Sign-in / sign-up form. Calls `on_signed_in` once a session exists."""

    def __init__(
        self,
        backend: NotesBackend,
        notifier: Notifier,
        on_signed_in: Callable[[AuthUser], Awaitable[None]],
    ):
        self.backend = backend
        self.notifier = notifier
        self.on_signed_in = on_signed_in
        self.is_login = True
        self.email = ""
        self.password = ""
        self.loading = False
        self.error = ""

    def switch_mode(self, login: bool) -> None:
        self.is_login = login
        self.error = ""

    @property
    def heading(self) -> str:
        return "Welcome back!" if self.is_login else "Create your account"

    @property
    def submit_label(self) -> str:
        if self.loading:
            return "Signing in..." if self.is_login else "Creating account..."
        return "Sign In" if self.is_login else "Create Account"

    async def submit(self) -> Optional[AuthUser]:
        if not self.email or not self.password:
            self.error = "Please fill in all fields"
            return None

        self.loading = True
        self.error = ""
        try:
            if not self.is_login:
                await self.backend.sign_up(self.email, self.password)
                self.notifier.notify("Account created successfully!", "You can now sign in with your new account.")
                self.is_login = True
                return None
            user = await self.backend.sign_in(self.email, self.password)
            self.password = ""
            await self.on_signed_in(user)
            return user
        except BackendError as e:
            self.error = friendly_error(e.message)
        except Exception:
            logger.exception("Auth error")
            self.error = "An unexpected error occurred. Please try again."
        finally:
            self.loading = False
        return None
