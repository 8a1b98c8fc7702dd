"""Multicast Delegate - one source notifying many weakly held delegates."""

import time
import weakref
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from pattern_catalog.infrastructure.narration import narrate, section

T = TypeVar("T")


class MulticastDelegate(Generic[T]):
    """
    Weak collection of delegates invoked in insertion order.

    Delegates are not kept alive by the collection; once garbage collected
    they silently drop out.
    """

    def __init__(self):
        self._delegates: "weakref.WeakKeyDictionary[T, None]" = weakref.WeakKeyDictionary()

    def add(self, delegate: T) -> None:
        self._delegates[delegate] = None

    def remove(self, delegate: T) -> None:
        self._delegates.pop(delegate, None)

    def remove_all(self) -> None:
        self._delegates.clear()

    def invoke(self, invocation: Callable[[T], Any]) -> None:
        for delegate in list(self._delegates.keys()):
            invocation(delegate)

    @property
    def count(self) -> int:
        return len(self._delegates)

    def __len__(self) -> int:
        return len(self._delegates)


# =============================================================================
# NETWORK MANAGER
# =============================================================================

class NetworkStatus(Enum):
    CONNECTED = "Connected"
    DISCONNECTED = "Disconnected"
    CONNECTING = "Connecting"
    WEAK = "Weak Signal"


class NetworkStatusDelegate:
    """Delegate interface; every callback is optional."""

    def network_did_connect(self) -> None:
        pass

    def network_did_disconnect(self) -> None:
        pass

    def network_did_change_status(self, status: NetworkStatus) -> None:
        pass

    def network_did_receive_data(self, data: str) -> None:
        pass


class NetworkManager:

    def __init__(self):
        self._delegates: MulticastDelegate[NetworkStatusDelegate] = MulticastDelegate()
        self.status = NetworkStatus.DISCONNECTED

    @property
    def delegate_count(self) -> int:
        return self._delegates.count

    def add_delegate(self, delegate: NetworkStatusDelegate) -> None:
        self._delegates.add(delegate)

    def remove_delegate(self, delegate: NetworkStatusDelegate) -> None:
        self._delegates.remove(delegate)

    def connect(self, immediate: bool = False) -> bool:
        """
        Begin connecting.

        The connection completes on finish_connecting(); pass immediate=True to
        do both steps at once.
        """
        if self.status == NetworkStatus.CONNECTED:
            narrate("NetworkManager", "Already connected")
            return False
        narrate("NetworkManager", "Connecting to network")
        self._set_status(NetworkStatus.CONNECTING)
        if immediate:
            self.finish_connecting()
        return True

    def finish_connecting(self) -> bool:
        if self.status != NetworkStatus.CONNECTING:
            narrate("NetworkManager", "No connection in progress")
            return False
        self._set_status(NetworkStatus.CONNECTED)
        self._delegates.invoke(lambda d: d.network_did_connect())
        return True

    def disconnect(self) -> bool:
        if self.status == NetworkStatus.DISCONNECTED:
            narrate("NetworkManager", "Already disconnected")
            return False
        narrate("NetworkManager", "Disconnecting from network")
        self._set_status(NetworkStatus.DISCONNECTED)
        self._delegates.invoke(lambda d: d.network_did_disconnect())
        return True

    def simulate_weak_signal(self) -> None:
        self._set_status(NetworkStatus.WEAK)

    def send_data(self, data: str) -> bool:
        if self.status != NetworkStatus.CONNECTED:
            narrate("NetworkManager", "Cannot send data - not connected")
            return False
        narrate("NetworkManager", f"Sending data: {data}")
        self._delegates.invoke(lambda d: d.network_did_receive_data(data))
        return True

    def _set_status(self, status: NetworkStatus) -> None:
        self.status = status
        narrate("NetworkManager", f"Network status changed to: {status.value}")
        self._delegates.invoke(lambda d: d.network_did_change_status(status))


class UIStatusIndicator(NetworkStatusDelegate):

    def __init__(self, name: str):
        self.name = name
        self.indicator = "grey"
        self.displayed_status: Optional[str] = None

    def network_did_connect(self) -> None:
        self.indicator = "green"
        narrate(self.name, "UI: Showing green connection indicator")

    def network_did_disconnect(self) -> None:
        self.indicator = "red"
        narrate(self.name, "UI: Showing red disconnection indicator")

    def network_did_change_status(self, status: NetworkStatus) -> None:
        self.displayed_status = status.value
        narrate(self.name, f"UI: Updating status to {status.value}")

    def network_did_receive_data(self, data: str) -> None:
        narrate(self.name, "UI: Displaying received data notification")


class LoggingService(NetworkStatusDelegate):

    def __init__(self, log_level: str = "INFO"):
        self.log_level = log_level
        self.messages: List[str] = []

    def _log(self, message: str) -> None:
        self.messages.append(message)
        narrate(f"LoggingService[{self.log_level}]", message)

    def network_did_connect(self) -> None:
        self._log("Network connection established")

    def network_did_disconnect(self) -> None:
        self._log("Network connection lost")

    def network_did_change_status(self, status: NetworkStatus) -> None:
        self._log(f"Network status changed to: {status.value}")

    def network_did_receive_data(self, data: str) -> None:
        self._log(f"Data received: {data}")


class CacheManager(NetworkStatusDelegate):

    def __init__(self):
        self.is_online_mode = False
        self.aggressive_caching = False
        self.stored: List[str] = []

    def network_did_connect(self) -> None:
        self.is_online_mode = True
        narrate("Cache", "Switching to online mode")
        narrate("Cache", "Syncing pending offline data")

    def network_did_disconnect(self) -> None:
        self.is_online_mode = False
        narrate("Cache", "Switching to offline mode")

    def network_did_change_status(self, status: NetworkStatus) -> None:
        if status == NetworkStatus.WEAK:
            self.aggressive_caching = True
            narrate("Cache", "Enabling aggressive caching due to weak signal")
        elif status == NetworkStatus.CONNECTING:
            narrate("Cache", "Preparing for connection")

    def network_did_receive_data(self, data: str) -> None:
        self.stored.append(data)
        narrate("Cache", f"Data '{data}' stored successfully")


# =============================================================================
# PROGRESS TRACKING
# =============================================================================

class ProgressDelegate:

    def progress_did_start(self, task_name: str) -> None:
        pass

    def progress_did_update(self, progress: float, task_name: str) -> None:
        pass

    def progress_did_complete(self, task_name: str) -> None:
        pass

    def progress_did_fail(self, task_name: str, error: str) -> None:
        pass


class TaskProgressManager:

    def __init__(self):
        self._delegates: MulticastDelegate[ProgressDelegate] = MulticastDelegate()
        self.current_task = ""
        self.current_progress = 0.0

    @property
    def delegate_count(self) -> int:
        return self._delegates.count

    def add_delegate(self, delegate: ProgressDelegate) -> None:
        self._delegates.add(delegate)

    def remove_delegate(self, delegate: ProgressDelegate) -> None:
        self._delegates.remove(delegate)

    def start_task(self, task_name: str) -> None:
        self.current_task = task_name
        self.current_progress = 0.0
        narrate("TaskProgressManager", f"Starting task: {task_name}")
        self._delegates.invoke(lambda d: d.progress_did_start(task_name))

    def update_progress(self, progress: float) -> None:
        self.current_progress = max(0.0, min(1.0, progress))
        task, value = self.current_task, self.current_progress
        self._delegates.invoke(lambda d: d.progress_did_update(value, task))
        if self.current_progress >= 1.0:
            narrate("TaskProgressManager", f"Task completed: {task}")
            self._delegates.invoke(lambda d: d.progress_did_complete(task))

    def fail_task(self, error: str) -> None:
        task = self.current_task
        narrate("TaskProgressManager", f"Task failed: {task} - {error}")
        self._delegates.invoke(lambda d: d.progress_did_fail(task, error))


class ProgressBarDisplay(ProgressDelegate):
    BAR_LENGTH = 20

    def __init__(self, display_name: str):
        self.display_name = display_name
        self.visible = False
        self.last_render = ""

    def progress_did_start(self, task_name: str) -> None:
        self.visible = True
        narrate(self.display_name, f"Started: {task_name}")

    def progress_did_update(self, progress: float, task_name: str) -> None:
        filled = int(self.BAR_LENGTH * progress)
        bar = "#" * filled + "-" * (self.BAR_LENGTH - filled)
        self.last_render = f"{task_name}: [{bar}] {int(round(progress * 100))}%"
        narrate(self.display_name, self.last_render)

    def progress_did_complete(self, task_name: str) -> None:
        self.visible = False
        narrate(self.display_name, f"Completed: {task_name}")

    def progress_did_fail(self, task_name: str, error: str) -> None:
        self.visible = False
        narrate(self.display_name, f"Failed: {task_name} - {error}")


class ProgressNotificationCenter(ProgressDelegate):

    def __init__(self):
        self.notifications: List[str] = []

    def _send(self, message: str) -> None:
        self.notifications.append(message)
        narrate("Notification", message)

    def progress_did_start(self, task_name: str) -> None:
        self._send(f"Started: {task_name}")

    def progress_did_update(self, progress: float, task_name: str) -> None:
        percentage = int(round(progress * 100))
        if percentage > 0 and percentage % 25 == 0:
            self._send(f"{task_name}: {percentage}% complete")

    def progress_did_complete(self, task_name: str) -> None:
        self._send(f"{task_name} completed successfully")

    def progress_did_fail(self, task_name: str, error: str) -> None:
        self._send(f"{task_name} failed: {error}")


class ProgressAnalytics(ProgressDelegate):

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._start_times: Dict[str, float] = {}
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def _track(self, event: str, **parameters: Any) -> None:
        self.events.append((event, parameters))
        narrate("Analytics", f"{event} - {parameters}")

    def progress_did_start(self, task_name: str) -> None:
        self._start_times[task_name] = self._clock()
        self._track("task_started", task=task_name)

    def progress_did_update(self, progress: float, task_name: str) -> None:
        self._track("task_progress", task=task_name, progress=progress)

    def progress_did_complete(self, task_name: str) -> None:
        started = self._start_times.pop(task_name, None)
        if started is not None:
            self._track("task_completed", task=task_name, duration=self._clock() - started)

    def progress_did_fail(self, task_name: str, error: str) -> None:
        started = self._start_times.pop(task_name, None)
        if started is not None:
            self._track("task_failed", task=task_name, duration=self._clock() - started, error=error)


def run_demo() -> None:
    section("Network Manager with Multiple Delegates")
    network = NetworkManager()
    main_view = UIStatusIndicator("MainView")
    settings_view = UIStatusIndicator("SettingsView")
    logger = LoggingService("DEBUG")
    cache = CacheManager()
    for delegate in (main_view, settings_view, logger, cache):
        network.add_delegate(delegate)
    narrate("Demo", f"Active delegates: {network.delegate_count}")

    network.connect()
    network.finish_connecting()
    network.send_data("User data sync")
    network.send_data("Configuration update")
    network.simulate_weak_signal()
    network.disconnect()

    section("Progress Tracking with Multiple Observers")
    progress = TaskProgressManager()
    main_bar = ProgressBarDisplay("MainProgressBar")
    popup_bar = ProgressBarDisplay("PopupProgress")
    notifications = ProgressNotificationCenter()
    analytics = ProgressAnalytics()
    for delegate in (main_bar, popup_bar, notifications, analytics):
        progress.add_delegate(delegate)
    narrate("Demo", f"Progress observers: {progress.delegate_count}")

    progress.start_task("File Download")
    for step in range(1, 11):
        progress.update_progress(step / 10.0)

    section("Delegate Removal")
    network.remove_delegate(main_view)
    progress.remove_delegate(main_bar)
    narrate("Demo", f"Network delegates after removal: {network.delegate_count}")
    narrate("Demo", f"Progress delegates after removal: {progress.delegate_count}")
    network.connect(immediate=True)
    progress.start_task("Data Processing")
    progress.update_progress(0.5)
    progress.update_progress(1.0)

    section("Automatic Cleanup")
    transient = UIStatusIndicator("TransientView")
    network.add_delegate(transient)
    narrate("Demo", f"Network delegates with transient view: {network.delegate_count}")
    del transient
    narrate("Demo", f"Network delegates after transient view is released: {network.delegate_count}")
