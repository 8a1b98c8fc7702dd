"""Delegation - an object hands lifecycle callbacks to a single delegate."""

from typing import Callable, List, Optional, Tuple

from pattern_catalog.infrastructure.narration import narrate, section


class FileDownloadDelegate:
    """Receives download lifecycle callbacks. All hooks default to no-ops."""

    def download_did_start(self, file_name: str) -> None:
        pass

    def download_did_progress(self, file_name: str, progress: float) -> None:
        pass

    def download_did_complete(self, file_name: str, success: bool) -> None:
        pass

    def download_did_fail(self, file_name: str, error: str) -> None:
        pass


class UserValidationDelegate:

    def validation_did_start(self, field: str) -> None:
        pass

    def validation_did_succeed(self, field: str) -> None:
        pass

    def validation_did_fail(self, field: str, error: str) -> None:
        pass


class FileDownloader:
    """
    Simulated downloader reporting progress in 0.2 increments.

    A download can run to completion in one call or be stepped with advance();
    while one is active any further request fails immediately. The final
    outcome comes from the injected callable.
    """

    STEP = 0.2
    STEPS = 5

    def __init__(self, delegate: Optional[FileDownloadDelegate] = None,
                 outcome: Optional[Callable[[str], bool]] = None):
        self.delegate = delegate
        self._outcome = outcome or (lambda file_name: True)
        self._active: Optional[str] = None
        self._step = 0

    @property
    def is_downloading(self) -> bool:
        return self._active is not None

    def download_file(self, file_name: str, run_to_completion: bool = True) -> bool:
        """Start a download. Returns False when another one is in progress."""
        if self._active is not None:
            if self.delegate:
                self.delegate.download_did_fail(file_name, "Another download in progress")
            return False

        self._active = file_name
        self._step = 0
        if self.delegate:
            self.delegate.download_did_start(file_name)
        if run_to_completion:
            while self._active is not None:
                self.advance()
        return True

    def advance(self) -> Optional[float]:
        """Report the next progress step; finishes the download on the last one."""
        if self._active is None:
            return None
        file_name = self._active
        self._step += 1
        progress = round(self._step * self.STEP, 1)
        if self.delegate:
            self.delegate.download_did_progress(file_name, progress)
        if self._step >= self.STEPS:
            self._active = None
            success = self._outcome(file_name)
            if self.delegate:
                if success:
                    self.delegate.download_did_complete(file_name, True)
                else:
                    self.delegate.download_did_fail(file_name, "Network timeout")
        return progress


class UserValidator:

    def __init__(self, delegate: Optional[UserValidationDelegate] = None):
        self.delegate = delegate

    def validate_email(self, email: str) -> bool:
        self._started("email")
        valid = "@" in email and "." in email
        return self._finish("email", valid, "Invalid email format")

    def validate_password(self, password: str) -> bool:
        self._started("password")
        valid = len(password) >= 8
        return self._finish("password", valid, "Password must be at least 8 characters")

    def _started(self, field: str) -> None:
        if self.delegate:
            self.delegate.validation_did_start(field)

    def _finish(self, field: str, valid: bool, error: str) -> bool:
        if self.delegate:
            if valid:
                self.delegate.validation_did_succeed(field)
            else:
                self.delegate.validation_did_fail(field, error)
        return valid


class DownloadView(FileDownloadDelegate):

    def __init__(self, view_name: str):
        self.view_name = view_name
        self.events: List[Tuple[str, str]] = []

    def download_did_start(self, file_name: str) -> None:
        self.events.append(("start", file_name))
        narrate(self.view_name, f"Download started: {file_name}")
        narrate(self.view_name, "Showing loading spinner...")

    def download_did_progress(self, file_name: str, progress: float) -> None:
        percentage = int(round(progress * 100))
        self.events.append(("progress", f"{percentage}%"))
        narrate(self.view_name, f"Download progress: {file_name} - {percentage}%")

    def download_did_complete(self, file_name: str, success: bool) -> None:
        self.events.append(("complete", file_name))
        narrate(self.view_name, f"Download completed: {file_name}")
        narrate(self.view_name, "Hiding loading spinner")

    def download_did_fail(self, file_name: str, error: str) -> None:
        self.events.append(("fail", error))
        narrate(self.view_name, f"Download failed: {file_name}")
        narrate(self.view_name, f"Error: {error}")


class ValidationView(UserValidationDelegate):

    def __init__(self, view_name: str):
        self.view_name = view_name
        self.passed: List[str] = []
        self.failed: List[Tuple[str, str]] = []

    def validation_did_start(self, field: str) -> None:
        narrate(self.view_name, f"Validating {field}...")

    def validation_did_succeed(self, field: str) -> None:
        self.passed.append(field)
        narrate(self.view_name, f"{field} validation passed")

    def validation_did_fail(self, field: str, error: str) -> None:
        self.failed.append((field, error))
        narrate(self.view_name, f"{field} validation failed")
        narrate(self.view_name, f"Error: {error}")


def run_demo() -> None:
    section("File Download")
    FileDownloader(DownloadView("MainView")).download_file("document.pdf")
    FileDownloader(DownloadView("DetailView"), outcome=lambda name: False).download_file("image.jpg")

    section("User Validation")
    login = UserValidator(ValidationView("LoginView"))
    login.validate_email("user@example.com")
    login.validate_password("securepass123")
    signup = UserValidator(ValidationView("SignupView"))
    signup.validate_email("invalid-email")
    signup.validate_password("weak")

    section("Switching Delegates")
    shared = FileDownloader(DownloadView("NotificationView"))
    shared.download_file("update.zip", run_to_completion=False)
    shared.advance()
    shared.download_file("data.json")
    while shared.is_downloading:
        shared.advance()
    shared.delegate = DownloadView("ProgressView")
    shared.download_file("data.json")
