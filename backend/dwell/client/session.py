"""Per-session collaborators shared by the client views."""

from dwell.client.api import DwellAPI
from dwell.client.background import BackgroundDispatcher
from dwell.client.toasts import Toaster


class SessionContext:
    """Who is signed in, where they are, and the services views depend on.

    Views receive this object instead of reaching for globals so tests can
    assemble one with fakes.
    """

    def __init__(
        self,
        api: DwellAPI,
        user_id: int | None = None,
        user_label: str = "A user",
        toaster: Toaster | None = None,
        dispatcher: BackgroundDispatcher | None = None,
        location: str = "/",
        auth_path: str = "/auth",
    ):
        self.api = api
        self.user_id = user_id
        self.user_label = user_label
        self.toaster = toaster or Toaster()
        self.dispatcher = dispatcher or BackgroundDispatcher()
        self.location = location
        self.auth_path = auth_path
        self._return_to: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def remember_return_to(self, path: str) -> None:
        self._return_to = path

    def pop_return_to(self) -> str | None:
        path, self._return_to = self._return_to, None
        return path

    def sign_in_redirect(self) -> str:
        """Remember the current location and return the sign-in path."""
        self.remember_return_to(self.location)
        return self.auth_path

    def complete_sign_in(self, user_id: int, user_label: str, token: str) -> str:
        """Adopt the new identity and return where the viewer should go next."""
        self.user_id = user_id
        self.user_label = user_label
        self.api.token = token
        return self.pop_return_to() or self.location

    def sign_out(self) -> None:
        self.user_id = None
        self.user_label = "A user"
        self.api.token = None
