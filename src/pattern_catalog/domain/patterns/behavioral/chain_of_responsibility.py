"""Chain of Responsibility - requests travel along a chain until a handler takes them.

Three chains are modelled:
- support tickets escalated from level 1 to a manager
- log records fanned out to every destination whose threshold is met
- authentication requests checked step by step until one step rejects
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


class Handler(ABC):
    """Base link of a chain."""

    def __init__(self):
        self._next: Optional["Handler"] = None

    @property
    def next_handler(self) -> Optional["Handler"]:
        return self._next

    def set_next(self, handler: "Handler") -> "Handler":
        """Link the next handler and return it so links can be chained."""
        self._next = handler
        return handler

    def pass_to_next(self, request):
        if self._next is not None:
            return self._next.handle(request)
        return self.unhandled(request)

    def unhandled(self, request):
        """Result when the request falls off the end of the chain."""
        return None

    @abstractmethod
    def handle(self, request):
        """Handle the request or pass it along."""


# =============================================================================
# SUPPORT TICKETS
# =============================================================================

class TicketPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CustomerLevel(str, Enum):
    BASIC = "Basic"
    PREMIUM = "Premium"
    ENTERPRISE = "Enterprise"


@dataclass(frozen=True)
class SupportTicket:
    ticket_id: int
    priority: TicketPriority
    category: str
    description: str
    customer_level: CustomerLevel = CustomerLevel.BASIC


class SupportHandler(Handler):
    """Support level that either resolves a ticket or escalates it."""

    level_name = "Support"

    def handle(self, request: SupportTicket) -> Optional[str]:
        if self.can_handle(request):
            narrate(self.level_name, f"Handling {request.priority.value} priority {request.category} ticket")
            narrate(self.level_name, request.description)
            return self.level_name
        narrate(self.level_name, f"Escalating {request.priority.value} priority ticket")
        return self.pass_to_next(request)

    @abstractmethod
    def can_handle(self, ticket: SupportTicket) -> bool:
        """Whether this level resolves the ticket."""


class Level1SupportHandler(SupportHandler):
    level_name = "Level 1"

    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.priority == TicketPriority.LOW and ticket.category in ("General", "FAQ")


class Level2SupportHandler(SupportHandler):
    level_name = "Level 2"

    def can_handle(self, ticket: SupportTicket) -> bool:
        return ticket.priority == TicketPriority.MEDIUM or ticket.category == "Technical"


class Level3SupportHandler(SupportHandler):
    level_name = "Level 3"

    def can_handle(self, ticket: SupportTicket) -> bool:
        return (
            ticket.priority == TicketPriority.HIGH
            or ticket.customer_level == CustomerLevel.ENTERPRISE
            or ticket.category == "Complex"
        )


class ManagerHandler(SupportHandler):
    level_name = "Manager"

    def can_handle(self, ticket: SupportTicket) -> bool:
        return True

    def handle(self, request: SupportTicket) -> Optional[str]:
        narrate(self.level_name, f"Handling escalated {request.priority.value} priority ticket")
        narrate(self.level_name, f"Immediate attention required for: {request.description}")
        return self.level_name


# =============================================================================
# LOGGING
# =============================================================================

class LogLevel(IntEnum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


@dataclass(frozen=True)
class LogRequest:
    level: LogLevel
    message: str
    source: str = "App"

    @property
    def description(self) -> str:
        return f"[{self.level.name}] [{self.source}] {self.message}"


class LogHandler(Handler):
    """Writes records at or above its threshold, then always forwards them."""

    def __init__(self, destination: str, min_level: LogLevel):
        super().__init__()
        self.destination = destination
        self.min_level = min_level

    def handle(self, request: LogRequest) -> List[str]:
        written = []
        if request.level >= self.min_level:
            self.write(request)
            written.append(self.destination)
        return written + self.pass_to_next(request)

    def unhandled(self, request) -> List[str]:
        return []

    def write(self, request: LogRequest) -> None:
        narrate(self.destination, request.description)


class ConsoleLogHandler(LogHandler):
    def __init__(self, min_level: LogLevel = LogLevel.DEBUG):
        super().__init__("Console", min_level)


class FileLogHandler(LogHandler):
    def __init__(self, file_name: str = "app.log", min_level: LogLevel = LogLevel.INFO):
        super().__init__(f"File({file_name})", min_level)
        self.file_name = file_name


class EmailLogHandler(LogHandler):
    def __init__(self, email_address: str = "admin@company.com", min_level: LogLevel = LogLevel.ERROR):
        super().__init__(f"Email({email_address})", min_level)
        self.email_address = email_address

    def write(self, request: LogRequest) -> None:
        narrate(self.destination, f"ALERT - {request.description}")


class DatabaseLogHandler(LogHandler):
    def __init__(self, min_level: LogLevel = LogLevel.WARNING):
        super().__init__("Database", min_level)

    def write(self, request: LogRequest) -> None:
        narrate(self.destination, f"Storing log entry - {request.level.name}")


# =============================================================================
# AUTHENTICATION
# =============================================================================

@dataclass(frozen=True)
class AuthRequest:
    username: str
    password: str
    ip_address: str
    user_agent: str
    token: Optional[str] = None


@dataclass(frozen=True)
class AuthResult:
    success: bool
    message: str


class AuthHandler(Handler):

    def unhandled(self, request) -> AuthResult:
        return AuthResult(False, "No handler completed authentication")

    def reject(self, message: str) -> AuthResult:
        narrate(type(self).__name__, message)
        return AuthResult(False, message)


class RateLimitHandler(AuthHandler):
    """Allows a fixed number of attempts per IP address."""

    def __init__(self, max_requests: int = 5):
        super().__init__()
        self.max_requests = max_requests
        self._request_counts: Dict[str, int] = {}

    def handle(self, request: AuthRequest) -> AuthResult:
        count = self._request_counts.get(request.ip_address, 0)
        if count >= self.max_requests:
            return self.reject(f"Rate limit exceeded for {request.ip_address}")

        self._request_counts[request.ip_address] = count + 1
        narrate("RateLimit", f"Request allowed ({count + 1}/{self.max_requests})")
        return self.pass_to_next(request)


class BasicAuthHandler(AuthHandler):
    VALID_CREDENTIALS = {
        "admin": "admin123",
        "user": "password",
        "guest": "guest123",
    }

    def handle(self, request: AuthRequest) -> AuthResult:
        if self.VALID_CREDENTIALS.get(request.username) != request.password:
            return self.reject(f"Invalid credentials for {request.username}")
        narrate("BasicAuth", f"Valid credentials for {request.username}")
        return self.pass_to_next(request)


class TwoFactorAuthHandler(AuthHandler):
    REQUIRES_TWO_FACTOR = ("admin",)

    def handle(self, request: AuthRequest) -> AuthResult:
        if request.username not in self.REQUIRES_TWO_FACTOR:
            narrate("TwoFactor", f"Not required for {request.username}")
            return self.pass_to_next(request)
        if request.token is None or not self.is_valid_token(request.token):
            return self.reject(f"Missing or invalid token for {request.username}")
        narrate("TwoFactor", f"Valid token for {request.username}")
        return self.pass_to_next(request)

    @staticmethod
    def is_valid_token(token: str) -> bool:
        return len(token) == 6 and token.isdigit()


class SecurityCheckHandler(AuthHandler):
    SUSPICIOUS_IPS = ("192.168.1.100", "10.0.0.50")

    def handle(self, request: AuthRequest) -> AuthResult:
        if request.ip_address in self.SUSPICIOUS_IPS:
            return self.reject(f"Suspicious IP detected: {request.ip_address}")
        if "bot" in request.user_agent.lower():
            return self.reject("Bot detected in user agent")
        narrate("SecurityCheck", "No threats detected")
        return self.pass_to_next(request)


class AuthSuccessHandler(AuthHandler):

    def handle(self, request: AuthRequest) -> AuthResult:
        message = f"Authentication successful for {request.username}"
        narrate("AuthSuccess", message)
        return AuthResult(True, message)


def build_support_chain() -> Level1SupportHandler:
    level1 = Level1SupportHandler()
    level1.set_next(Level2SupportHandler()).set_next(Level3SupportHandler()).set_next(ManagerHandler())
    return level1


def build_logging_chain() -> ConsoleLogHandler:
    console = ConsoleLogHandler()
    console.set_next(FileLogHandler()).set_next(EmailLogHandler()).set_next(DatabaseLogHandler())
    return console


def build_auth_chain(max_requests: int = 5) -> RateLimitHandler:
    rate_limiter = RateLimitHandler(max_requests)
    (rate_limiter.set_next(BasicAuthHandler())
     .set_next(TwoFactorAuthHandler())
     .set_next(SecurityCheckHandler())
     .set_next(AuthSuccessHandler()))
    return rate_limiter


def run_demo(auth_rate_limit: int = 5) -> None:
    section("Support Ticket System")
    level1 = Level1SupportHandler()
    level2 = Level2SupportHandler()
    level3 = Level3SupportHandler()
    level1.set_next(level2).set_next(level3).set_next(ManagerHandler())

    tickets = [
        SupportTicket(1, TicketPriority.LOW, "FAQ", "How do I reset my password?"),
        SupportTicket(2, TicketPriority.MEDIUM, "Technical", "Database connection issues"),
        SupportTicket(3, TicketPriority.HIGH, "Bug", "Application crashes on startup"),
        SupportTicket(4, TicketPriority.CRITICAL, "Security", "Potential data breach detected"),
        SupportTicket(5, TicketPriority.MEDIUM, "Feature", "Need custom integration", CustomerLevel.ENTERPRISE),
    ]
    for ticket in tickets:
        handled_by = level1.handle(ticket)
        narrate("Demo", f"Ticket {ticket.ticket_id} handled by {handled_by}")

    section("Logging System")
    logger_chain = build_logging_chain()
    for record in [
        LogRequest(LogLevel.DEBUG, "Debug information", "UserService"),
        LogRequest(LogLevel.INFO, "User logged in successfully", "AuthService"),
        LogRequest(LogLevel.WARNING, "Disk space running low", "SystemMonitor"),
        LogRequest(LogLevel.ERROR, "Failed to connect to database", "DatabaseService"),
        LogRequest(LogLevel.CRITICAL, "Server is down!", "HealthCheck"),
    ]:
        destinations = logger_chain.handle(record)
        narrate("Demo", f"{record.level.name} written to {', '.join(destinations)}")

    section("Authentication System")
    auth_chain = build_auth_chain(auth_rate_limit)
    for request in [
        AuthRequest("user", "password", "192.168.1.1", "Mozilla/5.0"),
        AuthRequest("admin", "admin123", "192.168.1.2", "Chrome", token="123456"),
        AuthRequest("hacker", "wrong", "192.168.1.100", "bot"),
        AuthRequest("admin", "admin123", "192.168.1.3", "Firefox"),
    ]:
        result = auth_chain.handle(request)
        narrate("Demo", f"Authentication result: {'SUCCESS' if result.success else 'FAILED'}")

    section("Dynamic Chain")
    narrate("Demo", "Modified chain: Level1 -> Level3 -> Manager")
    level1.set_next(level3)
    handled_by = level1.handle(SupportTicket(6, TicketPriority.MEDIUM, "Technical", "Test bypassing Level2"))
    narrate("Demo", f"Ticket 6 handled by {handled_by}")
