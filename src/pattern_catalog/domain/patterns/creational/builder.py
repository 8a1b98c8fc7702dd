"""Builder - assemble complex immutable products step by step.

Builders are fluent: every setter returns the builder. build() validates the
accumulated state and raises ValidationError when a required part is missing.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.domain.core.exceptions import ValidationError
from pattern_catalog.infrastructure.narration import narrate, section


# =============================================================================
# HTTP REQUEST
# =============================================================================

class HTTPRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    method: str = "GET"
    headers: Dict[str, str] = Field(default_factory=dict)
    query_parameters: Dict[str, str] = Field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: float = 30.0
    retry_count: int = 0

    def describe(self) -> str:
        return "\n".join([
            f"URL: {self.url}",
            f"Method: {self.method}",
            f"Headers: {self.headers}",
            f"Query Parameters: {self.query_parameters}",
            f"Body: {len(self.body or b'')} bytes",
            f"Timeout: {self.timeout}s",
            f"Retry Count: {self.retry_count}",
        ])


class HTTPRequestBuilder:

    def __init__(self):
        self.reset()

    def reset(self) -> "HTTPRequestBuilder":
        self._url = ""
        self._method = "GET"
        self._headers: Dict[str, str] = {}
        self._query: Dict[str, str] = {}
        self._body: Optional[bytes] = None
        self._timeout = 30.0
        self._retry_count = 0
        return self

    def set_url(self, url: str) -> "HTTPRequestBuilder":
        self._url = url
        return self

    def set_method(self, method: str) -> "HTTPRequestBuilder":
        self._method = method.upper()
        return self

    def add_header(self, key: str, value: str) -> "HTTPRequestBuilder":
        self._headers[key] = value
        return self

    def add_query_parameter(self, key: str, value: str) -> "HTTPRequestBuilder":
        self._query[key] = value
        return self

    def set_body(self, data: bytes) -> "HTTPRequestBuilder":
        self._body = data
        return self

    def set_json_body(self, payload: Any) -> "HTTPRequestBuilder":
        self._body = json.dumps(payload).encode("utf-8")
        return self.add_header("Content-Type", "application/json")

    def set_timeout(self, timeout: float) -> "HTTPRequestBuilder":
        self._timeout = timeout
        return self

    def set_retry_count(self, count: int) -> "HTTPRequestBuilder":
        self._retry_count = count
        return self

    def build(self) -> HTTPRequest:
        if not self._url:
            raise ValidationError("HTTP request requires a URL", {"missing": ["url"]})
        return HTTPRequest(
            url=self._url,
            method=self._method,
            headers=dict(self._headers),
            query_parameters=dict(self._query),
            body=self._body,
            timeout=self._timeout,
            retry_count=self._retry_count,
        )


class HTTPRequestDirector:
    """Canned request recipes over a shared builder."""

    def __init__(self, builder: Optional[HTTPRequestBuilder] = None):
        self.builder = builder or HTTPRequestBuilder()

    def build_get_request(self, url: str) -> HTTPRequest:
        return (self.builder.reset()
                .set_url(url)
                .set_method("GET")
                .add_header("Accept", "application/json")
                .set_timeout(30.0)
                .build())

    def build_post_request(self, url: str, body: bytes) -> HTTPRequest:
        return (self.builder.reset()
                .set_url(url)
                .set_method("POST")
                .add_header("Content-Type", "application/json")
                .add_header("Accept", "application/json")
                .set_body(body)
                .set_timeout(60.0)
                .set_retry_count(3)
                .build())

    def build_authenticated_request(self, url: str, token: str) -> HTTPRequest:
        return (self.builder.reset()
                .set_url(url)
                .set_method("GET")
                .add_header("Authorization", f"Bearer {token}")
                .add_header("Accept", "application/json")
                .set_timeout(45.0)
                .build())


# =============================================================================
# SQL SELECT
# =============================================================================

class SQLQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    parameters: Tuple[Any, ...] = ()


class SQLSelectBuilder:

    def __init__(self):
        self._columns: List[str] = []
        self._table = ""
        self._joins: List[str] = []
        self._where: List[str] = []
        self._group_by: List[str] = []
        self._having: List[str] = []
        self._order_by: List[str] = []
        self._limit: Optional[int] = None
        self._parameters: List[Any] = []

    def select(self, *columns: str) -> "SQLSelectBuilder":
        self._columns.extend(columns)
        return self

    def from_table(self, table: str) -> "SQLSelectBuilder":
        self._table = table
        return self

    def join(self, table: str, on: str) -> "SQLSelectBuilder":
        self._joins.append(f"JOIN {table} ON {on}")
        return self

    def left_join(self, table: str, on: str) -> "SQLSelectBuilder":
        self._joins.append(f"LEFT JOIN {table} ON {on}")
        return self

    def where(self, condition: str, *parameters: Any) -> "SQLSelectBuilder":
        self._where.append(condition)
        self._parameters.extend(parameters)
        return self

    def group_by(self, *columns: str) -> "SQLSelectBuilder":
        self._group_by.extend(columns)
        return self

    def having(self, condition: str) -> "SQLSelectBuilder":
        self._having.append(condition)
        return self

    def order_by(self, column: str, ascending: bool = True) -> "SQLSelectBuilder":
        self._order_by.append(f"{column} {'ASC' if ascending else 'DESC'}")
        return self

    def limit(self, count: int) -> "SQLSelectBuilder":
        self._limit = count
        return self

    def build(self) -> SQLQuery:
        if not self._table:
            raise ValidationError("SELECT query requires a table", {"missing": ["from"]})
        parts = [f"SELECT {', '.join(self._columns) if self._columns else '*'}", f"FROM {self._table}"]
        parts.extend(self._joins)
        if self._where:
            parts.append("WHERE " + " AND ".join(self._where))
        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))
        if self._having:
            parts.append("HAVING " + " AND ".join(self._having))
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        return SQLQuery(query=" ".join(parts), parameters=tuple(self._parameters))


# =============================================================================
# EMAIL
# =============================================================================

class EmailPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Email(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: str
    to: Tuple[str, ...]
    cc: Tuple[str, ...] = ()
    bcc: Tuple[str, ...] = ()
    subject: str
    body: str = ""
    is_html: bool = False
    attachments: Tuple[str, ...] = ()
    priority: EmailPriority = EmailPriority.NORMAL

    def describe(self) -> str:
        return "\n".join([
            f"From: {self.sender}",
            f"To: {', '.join(self.to)}",
            f"CC: {', '.join(self.cc)}",
            f"BCC: {', '.join(self.bcc)}",
            f"Subject: {self.subject}",
            f"Body: {self.body[:100]}",
            f"HTML: {self.is_html}",
            f"Attachments: {len(self.attachments)}",
            f"Priority: {self.priority.value}",
        ])


class EmailBuilder:

    def __init__(self):
        self._sender = ""
        self._to: List[str] = []
        self._cc: List[str] = []
        self._bcc: List[str] = []
        self._subject = ""
        self._body = ""
        self._is_html = False
        self._attachments: List[str] = []
        self._priority = EmailPriority.NORMAL

    def set_sender(self, sender: str) -> "EmailBuilder":
        self._sender = sender
        return self

    def add_to(self, *recipients: str) -> "EmailBuilder":
        self._to.extend(recipients)
        return self

    def add_cc(self, *recipients: str) -> "EmailBuilder":
        self._cc.extend(recipients)
        return self

    def add_bcc(self, *recipients: str) -> "EmailBuilder":
        self._bcc.extend(recipients)
        return self

    def set_subject(self, subject: str) -> "EmailBuilder":
        self._subject = subject
        return self

    def set_body(self, body: str, is_html: bool = False) -> "EmailBuilder":
        self._body = body
        self._is_html = is_html
        return self

    def add_attachment(self, file_path: str) -> "EmailBuilder":
        self._attachments.append(file_path)
        return self

    def set_priority(self, priority: EmailPriority) -> "EmailBuilder":
        self._priority = EmailPriority(priority)
        return self

    def build(self) -> Email:
        missing = []
        if not self._sender:
            missing.append("sender")
        if not self._to:
            missing.append("to")
        if not self._subject:
            missing.append("subject")
        if missing:
            raise ValidationError(f"Email is missing required fields: {', '.join(missing)}",
                                  {"missing": missing})
        return Email(
            sender=self._sender,
            to=tuple(self._to),
            cc=tuple(self._cc),
            bcc=tuple(self._bcc),
            subject=self._subject,
            body=self._body,
            is_html=self._is_html,
            attachments=tuple(self._attachments),
            priority=self._priority,
        )


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "localhost"
    port: int = 5432
    database: str
    username: str
    password: str = ""
    ssl: bool = False
    connection_timeout: float = 30.0
    max_connections: int = 10
    retry_attempts: int = 3
    connection_pooling: bool = True

    def describe(self) -> str:
        return "\n".join([
            f"Host: {self.host}:{self.port}",
            f"Database: {self.database}",
            f"Username: {self.username}",
            f"SSL: {self.ssl}",
            f"Connection Timeout: {self.connection_timeout}s",
            f"Max Connections: {self.max_connections}",
            f"Retry Attempts: {self.retry_attempts}",
            f"Connection Pooling: {self.connection_pooling}",
        ])


class DatabaseConfigurationBuilder:

    def __init__(self):
        self._values: Dict[str, Any] = {}

    def set_host(self, host: str) -> "DatabaseConfigurationBuilder":
        self._values["host"] = host
        return self

    def set_port(self, port: int) -> "DatabaseConfigurationBuilder":
        self._values["port"] = port
        return self

    def set_database(self, database: str) -> "DatabaseConfigurationBuilder":
        self._values["database"] = database
        return self

    def set_credentials(self, username: str, password: str) -> "DatabaseConfigurationBuilder":
        self._values["username"] = username
        self._values["password"] = password
        return self

    def enable_ssl(self, enabled: bool = True) -> "DatabaseConfigurationBuilder":
        self._values["ssl"] = enabled
        return self

    def set_connection_timeout(self, timeout: float) -> "DatabaseConfigurationBuilder":
        self._values["connection_timeout"] = timeout
        return self

    def set_max_connections(self, maximum: int) -> "DatabaseConfigurationBuilder":
        self._values["max_connections"] = maximum
        return self

    def set_retry_attempts(self, attempts: int) -> "DatabaseConfigurationBuilder":
        self._values["retry_attempts"] = attempts
        return self

    def enable_connection_pooling(self, enabled: bool = True) -> "DatabaseConfigurationBuilder":
        self._values["connection_pooling"] = enabled
        return self

    def build(self) -> DatabaseConfiguration:
        missing = [name for name in ("database", "username") if not self._values.get(name)]
        if missing:
            raise ValidationError(
                f"Database configuration is missing required fields: {', '.join(missing)}",
                {"missing": missing},
            )
        return DatabaseConfiguration(**self._values)


def run_demo() -> None:
    section("HTTP Request Builder")
    builder = HTTPRequestBuilder()
    request = (builder
               .set_url("https://api.example.com/users")
               .set_method("POST")
               .add_header("Authorization", "Bearer token123")
               .add_query_parameter("limit", "10")
               .add_query_parameter("offset", "0")
               .set_json_body({"name": "Alice"})
               .set_timeout(60.0)
               .set_retry_count(3)
               .build())
    narrate("Demo", f"HTTP Request:\n{request.describe()}")
    try:
        HTTPRequestBuilder().build()
    except ValidationError as e:
        narrate("Demo", f"Build rejected: {e}")

    section("SQL Query Builder")
    query = (SQLSelectBuilder()
             .select("u.id", "u.name", "p.title")
             .from_table("users u")
             .left_join("posts p", on="u.id = p.user_id")
             .where("u.age > ?", 18)
             .where("u.active = ?", True)
             .group_by("u.id", "u.name")
             .having("COUNT(p.id) > 0")
             .order_by("u.name")
             .limit(50)
             .build())
    narrate("Demo", f"SQL: {query.query}")
    narrate("Demo", f"Parameters: {list(query.parameters)}")

    section("Email Builder")
    email = (EmailBuilder()
             .set_sender("noreply@example.com")
             .add_to("user@example.com")
             .add_to("admin@example.com", "support@example.com")
             .add_cc("manager@example.com")
             .set_subject("Important Update")
             .set_body("<h1>Hello</h1><p>This is an important update.</p>", is_html=True)
             .add_attachment("/path/to/document.pdf")
             .add_attachment("/path/to/image.jpg")
             .set_priority(EmailPriority.HIGH)
             .build())
    narrate("Demo", f"Email:\n{email.describe()}")

    section("Database Configuration Builder")
    db_config = (DatabaseConfigurationBuilder()
                 .set_host("production-db.example.com")
                 .set_port(5432)
                 .set_database("myapp_production")
                 .set_credentials("app_user", "secure_password")
                 .enable_ssl()
                 .set_connection_timeout(45.0)
                 .set_max_connections(20)
                 .set_retry_attempts(5)
                 .build())
    narrate("Demo", f"Database Configuration:\n{db_config.describe()}")

    section("Director")
    director = HTTPRequestDirector()
    narrate("Demo", f"GET Request:\n{director.build_get_request('https://api.example.com/data').describe()}")
    post = director.build_post_request("https://api.example.com/create", b"{}")
    narrate("Demo", f"POST Request:\n{post.describe()}")
    auth = director.build_authenticated_request("https://api.example.com/profile", "abc123")
    narrate("Demo", f"Authenticated Request:\n{auth.describe()}")

    section("Builder Reuse")
    first = builder.reset().set_url("https://api.example.com/endpoint1").add_header("Accept", "application/json").build()
    second = builder.reset().set_url("https://api.example.com/endpoint2").set_method("PUT").build()
    narrate("Demo", f"Request 1: {first.url} ({first.method})")
    narrate("Demo", f"Request 2: {second.url} ({second.method})")
