"""Observer - subjects notify registered observers of changes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pattern_catalog.infrastructure.narration import narrate, section


class Observer(ABC):

    @abstractmethod
    def update(self) -> None:
        pass


class NewsObserver(ABC):

    @abstractmethod
    def news_updated(self, news: str, category: str) -> None:
        pass


# =============================================================================
# NEWS AGENCY
# =============================================================================

class NewsAgency:
    """Subject with a pull-style and a push-style observer list."""

    def __init__(self):
        self._observers: List[Observer] = []
        self._news_observers: List[NewsObserver] = []
        self.latest_news = ""
        self.category = ""

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    @property
    def news_observer_count(self) -> int:
        return len(self._news_observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def add_news_observer(self, observer: NewsObserver) -> None:
        self._news_observers.append(observer)

    def remove_news_observer(self, observer: NewsObserver) -> None:
        self._news_observers = [o for o in self._news_observers if o is not observer]

    def publish_news(self, news: str, category: str) -> None:
        self.latest_news = news
        self.category = category
        narrate("NewsAgency", f"News published: [{category}] {news}")
        for observer in list(self._observers):
            observer.update()
        for observer in list(self._news_observers):
            observer.news_updated(news, category)


class NewsChannel(Observer, NewsObserver):
    """Registers itself with both observer lists of the agency."""

    def __init__(self, channel_name: str, agency: NewsAgency):
        self.channel_name = channel_name
        self.agency = agency
        self.broadcasts: List[str] = []
        self.notifications: List[str] = []
        agency.add_observer(self)
        agency.add_news_observer(self)

    def update(self) -> None:
        message = f"[{self.agency.category}] {self.agency.latest_news}"
        self.broadcasts.append(message)
        narrate(self.channel_name, f"Breaking news received - {message}")

    def news_updated(self, news: str, category: str) -> None:
        message = f"[{category}] {news}"
        self.notifications.append(message)
        narrate(f"{self.channel_name} App", f"Push notification - {message}")

    def detach(self) -> None:
        self.agency.remove_observer(self)
        self.agency.remove_news_observer(self)


# =============================================================================
# STOCK MARKET
# =============================================================================

class StockObserver(ABC):

    @abstractmethod
    def stock_price_changed(self, symbol: str, old_price: float, new_price: float) -> None:
        pass


class Stock:

    def __init__(self, symbol: str, initial_price: float):
        self.symbol = symbol
        self.price = initial_price
        self._observers: List[StockObserver] = []

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def add_observer(self, observer: StockObserver) -> None:
        self._observers.append(observer)
        narrate(self.symbol, f"Observer added. Total observers: {len(self._observers)}")

    def remove_observer(self, observer: StockObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]
        narrate(self.symbol, f"Observer removed. Total observers: {len(self._observers)}")

    def set_price(self, new_price: float) -> None:
        old_price = self.price
        self.price = new_price
        narrate(self.symbol, f"Price changed from ${old_price:.2f} to ${new_price:.2f}")
        for observer in list(self._observers):
            observer.stock_price_changed(self.symbol, old_price, new_price)


class StockTrader(StockObserver):

    def __init__(self, name: str):
        self.name = name
        self.portfolio: Dict[str, int] = {}
        self.considerations: List[Tuple[str, str]] = []

    def stock_price_changed(self, symbol: str, old_price: float, new_price: float) -> None:
        change = new_price - old_price
        percent = (change / old_price) * 100 if old_price else 0.0
        if change > 0:
            narrate(self.name, f"{symbol} is up ${change:.2f} (+{percent:.1f}%)")
            if percent > 5:
                self.considerations.append(("sell", symbol))
                narrate(self.name, f"Considering selling {symbol}")
        elif change < 0:
            narrate(self.name, f"{symbol} is down ${abs(change):.2f} ({percent:.1f}%)")
            if percent < -5:
                self.considerations.append(("buy", symbol))
                narrate(self.name, f"Considering buying {symbol}")

    def buy(self, symbol: str, shares: int) -> None:
        self.portfolio[symbol] = self.portfolio.get(symbol, 0) + shares
        narrate(self.name, f"Bought {shares} shares of {symbol}")

    def sell(self, symbol: str, shares: int) -> int:
        current = self.portfolio.get(symbol, 0)
        sold = min(shares, current)
        self.portfolio[symbol] = current - sold
        narrate(self.name, f"Sold {sold} shares of {symbol}")
        return sold


# =============================================================================
# PROGRESS TRACKING
# =============================================================================

class ProgressObserver(ABC):

    @abstractmethod
    def progress_updated(self, progress: float, task: str) -> None:
        pass

    @abstractmethod
    def task_completed(self, task: str) -> None:
        pass


class TaskManager:

    def __init__(self):
        self._observers: List[ProgressObserver] = []
        self.current_task = ""
        self.progress = 0.0

    def add_observer(self, observer: ProgressObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: ProgressObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def start_task(self, task_name: str) -> None:
        self.current_task = task_name
        self.progress = 0.0
        narrate("TaskManager", f"Starting task: {task_name}")
        self._notify_progress()

    def update_progress(self, progress: float) -> None:
        self.progress = min(1.0, max(0.0, progress))
        self._notify_progress()
        if self.progress >= 1.0:
            for observer in list(self._observers):
                observer.task_completed(self.current_task)

    def _notify_progress(self) -> None:
        for observer in list(self._observers):
            observer.progress_updated(self.progress, self.current_task)


class ProgressBar(ProgressObserver):
    BAR_LENGTH = 20

    def __init__(self, name: str):
        self.name = name
        self.last_render = ""
        self.completed: List[str] = []

    @classmethod
    def render(cls, progress: float) -> str:
        filled = int(cls.BAR_LENGTH * progress)
        return "#" * filled + "-" * (cls.BAR_LENGTH - filled)

    def progress_updated(self, progress: float, task: str) -> None:
        self.last_render = f"{task}: [{self.render(progress)}] {int(round(progress * 100))}%"
        narrate(self.name, self.last_render)

    def task_completed(self, task: str) -> None:
        self.completed.append(task)
        narrate(self.name, f"Task completed: {task}")


class ProgressLogger(ProgressObserver):

    def __init__(self):
        self.entries: List[str] = []

    def progress_updated(self, progress: float, task: str) -> None:
        entry = f"{task} progress: {progress * 100:.1f}%"
        self.entries.append(entry)
        narrate("ProgressLogger", entry)

    def task_completed(self, task: str) -> None:
        entry = f"COMPLETED: {task}"
        self.entries.append(entry)
        narrate("ProgressLogger", entry)


# =============================================================================
# EVENT SYSTEM
# =============================================================================

@dataclass(frozen=True)
class Event:
    type: str
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class EventObserver(ABC):

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        pass


class EventManager:
    """Per-type subscription lists."""

    def __init__(self):
        self._observers: Dict[str, List[EventObserver]] = {}

    def subscriber_count(self, event_type: str) -> int:
        return len(self._observers.get(event_type, []))

    def subscribe(self, event_type: str, observer: EventObserver) -> None:
        self._observers.setdefault(event_type, []).append(observer)
        narrate("EventManager", f"Subscribed to '{event_type}' events. Subscribers: {self.subscriber_count(event_type)}")

    def unsubscribe(self, event_type: str, observer: EventObserver) -> None:
        if event_type in self._observers:
            self._observers[event_type] = [o for o in self._observers[event_type] if o is not observer]
        narrate("EventManager", f"Unsubscribed from '{event_type}' events. Subscribers: {self.subscriber_count(event_type)}")

    def publish(self, event: Event) -> None:
        narrate("EventManager", f"Publishing event: {event.type}")
        for observer in list(self._observers.get(event.type, [])):
            observer.handle_event(event)


class UserActivityLogger(EventObserver):

    def __init__(self, logger_name: str):
        self.logger_name = logger_name
        self.logged: List[str] = []

    def handle_event(self, event: Event) -> None:
        self.logged.append(event.type)
        narrate(self.logger_name, f"Event logged: {event.type} at {event.timestamp.isoformat()}")


class SecurityMonitor(EventObserver):
    WATCHED = ("user_login", "user_logout")

    def __init__(self):
        self.monitored: List[Tuple[str, Optional[str]]] = []

    def handle_event(self, event: Event) -> None:
        if event.type not in self.WATCHED:
            return
        username = event.data.get("username")
        self.monitored.append((event.type, username))
        narrate("SecurityMonitor", f"Monitoring {event.type} event")
        if isinstance(username, str):
            narrate("SecurityMonitor", f"User {username} performed {event.type}")


def run_demo() -> None:
    section("News Agency")
    agency = NewsAgency()
    for name in ("CNN", "BBC", "Reuters"):
        NewsChannel(name, agency)
    agency.publish_news("Breaking: New technology breakthrough!", "Technology")
    agency.publish_news("Market closes with record highs", "Finance")

    section("Stock Market")
    apple = Stock("AAPL", 150.00)
    google = Stock("GOOGL", 2800.00)
    alice = StockTrader("Alice")
    bob = StockTrader("Bob")
    apple.add_observer(alice)
    apple.add_observer(bob)
    google.add_observer(alice)
    alice.buy("AAPL", 100)
    bob.buy("AAPL", 50)
    apple.set_price(158.50)
    google.set_price(2650.00)
    apple.set_price(142.25)

    section("Progress Tracking")
    tasks = TaskManager()
    bar = ProgressBar("UI")
    tasks.add_observer(bar)
    tasks.add_observer(ProgressLogger())
    tasks.start_task("File Upload")
    for step in range(1, 11):
        tasks.update_progress(step / 10.0)

    section("Event System")
    events = EventManager()
    activity = UserActivityLogger("ActivityLog")
    security = SecurityMonitor()
    events.subscribe("user_login", activity)
    events.subscribe("user_login", security)
    events.subscribe("user_logout", security)
    events.subscribe("page_view", activity)
    events.publish(Event("user_login", {"username": "alice", "ip": "192.168.1.100"}))
    events.publish(Event("page_view", {"page": "/dashboard", "user": "alice"}))
    events.publish(Event("user_logout", {"username": "alice"}))

    section("Observer Cleanup")
    apple.remove_observer(alice)
    google.remove_observer(alice)
    tasks.remove_observer(bar)
    events.unsubscribe("user_login", activity)
    narrate("Demo", "All observers cleaned up")
