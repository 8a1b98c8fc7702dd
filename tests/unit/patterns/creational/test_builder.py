"""Tests for the builder pattern."""

import json

import pytest

from pattern_catalog.domain.core.exceptions import ValidationError
from pattern_catalog.domain.patterns.creational.builder import (
    DatabaseConfigurationBuilder,
    EmailBuilder,
    EmailPriority,
    HTTPRequestBuilder,
    HTTPRequestDirector,
    SQLSelectBuilder,
)


class TestHTTPRequestBuilder:
    """Test fluent request construction."""

    def test_builds_request(self):
        """Test every setter reaches the product."""
        request = (HTTPRequestBuilder()
                   .set_url("https://api.example.com/users")
                   .set_method("post")
                   .add_header("Authorization", "Bearer t")
                   .add_query_parameter("limit", "10")
                   .set_json_body({"name": "Alice"})
                   .set_retry_count(3)
                   .build())

        assert request.method == "POST"
        assert request.headers == {"Authorization": "Bearer t", "Content-Type": "application/json"}
        assert request.query_parameters == {"limit": "10"}
        assert json.loads(request.body) == {"name": "Alice"}
        assert request.retry_count == 3

    def test_missing_url_raises(self):
        """Test build validates the URL."""
        with pytest.raises(ValidationError) as exc_info:
            HTTPRequestBuilder().build()

        assert exc_info.value.details == {"missing": ["url"]}

    def test_product_is_immutable(self):
        """Test built requests cannot be modified."""
        request = HTTPRequestBuilder().set_url("https://x").build()

        with pytest.raises(Exception):
            request.url = "https://y"

    def test_reset_between_builds(self):
        """Test a reset builder carries nothing over."""
        builder = HTTPRequestBuilder()
        first = builder.set_url("https://a").add_header("Accept", "json").build()
        second = builder.reset().set_url("https://b").set_method("PUT").build()

        assert first.headers == {"Accept": "json"}
        assert second.headers == {}
        assert second.method == "PUT"


class TestHTTPRequestDirector:
    """Test canned recipes."""

    def test_recipes(self):
        """Test GET, POST and authenticated recipes."""
        director = HTTPRequestDirector()

        get = director.build_get_request("https://api/data")
        post = director.build_post_request("https://api/create", b"{}")
        auth = director.build_authenticated_request("https://api/me", "abc")

        assert (get.method, get.timeout) == ("GET", 30.0)
        assert (post.method, post.timeout, post.retry_count) == ("POST", 60.0, 3)
        assert post.body == b"{}"
        assert auth.headers["Authorization"] == "Bearer abc"
        assert "Authorization" not in get.headers


class TestSQLSelectBuilder:
    """Test SQL assembly."""

    def test_full_query(self):
        """Test clauses appear in SQL order with collected parameters."""
        query = (SQLSelectBuilder()
                 .select("u.id", "u.name")
                 .from_table("users u")
                 .left_join("posts p", on="u.id = p.user_id")
                 .where("u.age > ?", 18)
                 .where("u.active = ?", True)
                 .group_by("u.id")
                 .having("COUNT(p.id) > 0")
                 .order_by("u.name", ascending=False)
                 .limit(5)
                 .build())

        assert query.query == (
            "SELECT u.id, u.name FROM users u LEFT JOIN posts p ON u.id = p.user_id "
            "WHERE u.age > ? AND u.active = ? GROUP BY u.id HAVING COUNT(p.id) > 0 "
            "ORDER BY u.name DESC LIMIT 5"
        )
        assert query.parameters == (18, True)

    def test_defaults_to_star(self):
        """Test a query with no columns selects everything."""
        assert SQLSelectBuilder().from_table("t").build().query == "SELECT * FROM t"

    def test_missing_table_raises(self):
        """Test a table is required."""
        with pytest.raises(ValidationError):
            SQLSelectBuilder().select("id").build()


class TestEmailBuilder:
    """Test email assembly."""

    def test_builds_email(self):
        """Test recipients accumulate."""
        email = (EmailBuilder()
                 .set_sender("noreply@example.com")
                 .add_to("a@example.com")
                 .add_to("b@example.com", "c@example.com")
                 .add_cc("m@example.com")
                 .set_subject("Update")
                 .set_body("<p>Hi</p>", is_html=True)
                 .add_attachment("doc.pdf")
                 .set_priority(EmailPriority.HIGH)
                 .build())

        assert email.to == ("a@example.com", "b@example.com", "c@example.com")
        assert email.is_html
        assert email.priority == EmailPriority.HIGH
        assert "Attachments: 1" in email.describe()

    def test_reports_every_missing_field(self):
        """Test all required fields are listed."""
        with pytest.raises(ValidationError) as exc_info:
            EmailBuilder().set_body("orphan").build()

        assert exc_info.value.details == {"missing": ["sender", "to", "subject"]}


class TestDatabaseConfigurationBuilder:
    """Test database configuration assembly."""

    def test_defaults_and_overrides(self):
        """Test unset fields keep their defaults."""
        config = (DatabaseConfigurationBuilder()
                  .set_database("app")
                  .set_credentials("user", "secret")
                  .enable_ssl()
                  .set_max_connections(20)
                  .build())

        assert config.host == "localhost"
        assert config.port == 5432
        assert config.ssl
        assert config.max_connections == 20
        assert config.connection_pooling

    def test_missing_credentials(self):
        """Test database and username are required."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseConfigurationBuilder().set_database("app").build()

        assert exc_info.value.details == {"missing": ["username"]}
