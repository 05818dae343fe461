from collections.abc import Generator
from contextlib import contextmanager

from shepredicts.assessment.models import AssessmentResult, UserProfile
from shepredicts.logging.logger import Log
from shepredicts.session.exceptions import SessionError


class SessionContext:
    """Signed-in user and their in-memory assessment history.

    Owned by the entry point and passed explicitly to whatever needs it.
    History is newest first, append-only and lost when the session closes.
    """

    def __init__(self) -> None:
        self._user: UserProfile | None = None
        self._history: list[AssessmentResult] = []

    @property
    def user(self) -> UserProfile | None:
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    @property
    def history(self) -> tuple[AssessmentResult, ...]:
        return tuple(self._history)

    def require_user(self) -> UserProfile:
        if self._user is None:
            raise SessionError("No user is signed in")
        return self._user

    def login(self, user: UserProfile) -> None:
        self._user = user
        Log.info(f"User signed in: {user.email}")

    def logout(self) -> None:
        """Sign the user out. History stays until the session closes."""
        if self._user is not None:
            Log.info(f"User signed out: {self._user.email}")
        self._user = None

    def add_assessment_result(self, result: AssessmentResult) -> None:
        self.require_user()
        self._history.insert(0, result)
        Log.info(f"Stored assessment {result.id} ({len(self._history)} in history)")

    def close(self) -> None:
        self._user = None
        self._history.clear()


@contextmanager
def open_session() -> Generator[SessionContext, None, None]:
    """Yield a fresh session and discard it on exit."""
    session = SessionContext()
    Log.debug("Session started")
    try:
        yield session
    finally:
        session.close()
        Log.debug("Session closed")
