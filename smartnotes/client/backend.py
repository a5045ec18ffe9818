# smartnotes/client/backend.py
import logging
from typing import Any

import httpx

from smartnotes.client.models import AuthUser, Note

logger = logging.getLogger(__name__)

SUMMARIZE_PATH = "/functions/v1/summarize-note"

class BackendError(Exception):
    """A non-2xx answer from the notes backend, carrying its message."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

def _message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(body, dict):
        detail = body.get("error") or body.get("detail")
        if isinstance(detail, str):
            return detail
        if detail:
            return str(detail)
    return f"HTTP {resp.status_code}"

class NotesBackend:
    """Async client for the auth, notes and summarize-note endpoints."""

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None, timeout: float = 30.0):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.token: str | None = None
        self.user: AuthUser | None = None

    async def aclose(self) -> None:
        await self._http.aclose()

    def _auth(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def _call(self, method: str, url: str, **kw) -> Any:
        resp = await self._http.request(method, url, headers=self._auth(), **kw)
        if resp.is_error:
            raise BackendError(_message(resp), status=resp.status_code)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ---- auth ----
    async def sign_up(self, email: str, password: str) -> AuthUser:
        data = await self._call("POST", "/auth/register", json={"email": email, "password": password})
        u = data["user"]
        return AuthUser(id=u["id"], email=u.get("email"))

    async def sign_in(self, email: str, password: str) -> AuthUser:
        data = await self._call("POST", "/auth/token", data={"username": email, "password": password})
        self.token = data["access_token"]
        u = data["user"]
        self.user = AuthUser(id=u["id"], email=u.get("email"))
        logger.info("signed in as %s", self.user.id)
        return self.user

    def sign_out(self) -> None:
        self.token = None
        self.user = None

    # ---- notes ----
    async def list_notes(self) -> list[Note]:
        data = await self._call("GET", "/notes")
        return [Note.model_validate(n) for n in data["items"]]

    async def insert_note(self, title: str, content: str) -> Note:
        data = await self._call("POST", "/notes", json={"title": title, "content": content})
        return Note.model_validate(data)

    async def update_note(self, note_id: str, title: str, content: str) -> Note:
        data = await self._call("PATCH", f"/notes/{note_id}", json={"title": title, "content": content})
        return Note.model_validate(data)

    async def set_summary(self, note_id: str, summary: str) -> Note:
        data = await self._call("PUT", f"/notes/{note_id}/summary", json={"summary": summary})
        return Note.model_validate(data)

    async def delete_note(self, note_id: str) -> None:
        await self._call("DELETE", f"/notes/{note_id}")

    # ---- functions ----
    async def summarize(self, title: str, content: str) -> dict:
        return await self._call("POST", SUMMARIZE_PATH, json={"title": title, "content": content}) or {}
