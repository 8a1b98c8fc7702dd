"""Tests for the chain of responsibility pattern."""

from pattern_catalog.domain.patterns.behavioral.chain_of_responsibility import (
    AuthRequest,
    CustomerLevel,
    Level1SupportHandler,
    Level3SupportHandler,
    LogLevel,
    LogRequest,
    ManagerHandler,
    SupportTicket,
    TicketPriority,
    build_auth_chain,
    build_logging_chain,
    build_support_chain,
)


class TestSupportChain:
    """Test ticket escalation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.chain = build_support_chain()

    def test_level1_handles_low_priority_faq(self, transcript):
        """Test the first link resolves what it can."""
        ticket = SupportTicket(1, TicketPriority.LOW, "FAQ", "Reset password")

        assert self.chain.handle(ticket) == "Level 1"
        assert not transcript.contains("Escalating")

    def test_unmatched_ticket_is_delegated(self, transcript):
        """Test a handler that does not match passes to the next one."""
        ticket = SupportTicket(2, TicketPriority.MEDIUM, "Technical", "Database issues")

        assert self.chain.handle(ticket) == "Level 2"
        assert transcript.messages("Level 1") == ["Escalating Medium priority ticket"]

    def test_enterprise_customer_reaches_level3(self):
        """Test enterprise tickets are handled by level 3."""
        ticket = SupportTicket(3, TicketPriority.LOW, "Billing", "Invoice", CustomerLevel.ENTERPRISE)

        assert self.chain.handle(ticket) == "Level 3"

    def test_critical_ticket_reaches_manager(self):
        """Test the end of the chain always handles."""
        ticket = SupportTicket(4, TicketPriority.CRITICAL, "Security", "Breach")

        assert self.chain.handle(ticket) == "Manager"

    def test_chain_can_be_relinked(self):
        """Test skipping a level by relinking."""
        level1 = Level1SupportHandler()
        level1.set_next(Level3SupportHandler()).set_next(ManagerHandler())

        ticket = SupportTicket(6, TicketPriority.MEDIUM, "Technical", "Bypass level 2")

        assert level1.handle(ticket) == "Manager"

    def test_chain_without_terminal_returns_none(self):
        """Test a request that falls off the chain is unhandled."""
        ticket = SupportTicket(7, TicketPriority.CRITICAL, "Security", "Nobody home")

        assert Level1SupportHandler().handle(ticket) is None


class TestLoggingChain:
    """Test log fan-out by threshold."""

    def test_debug_goes_to_console_only(self):
        """Test thresholds filter destinations."""
        chain = build_logging_chain()

        assert chain.handle(LogRequest(LogLevel.DEBUG, "debug")) == ["Console"]

    def test_critical_goes_everywhere(self, transcript):
        """Test a critical record reaches every destination."""
        chain = build_logging_chain()

        destinations = chain.handle(LogRequest(LogLevel.CRITICAL, "down", "HealthCheck"))

        assert destinations == ["Console", "File(app.log)", "Email(admin@company.com)", "Database"]
        assert transcript.contains("ALERT - [CRITICAL] [HealthCheck] down")


class TestAuthChain:
    """Test authentication checks."""

    def test_valid_user_is_authenticated(self):
        """Test the full chain succeeds for valid input."""
        result = build_auth_chain().handle(AuthRequest("user", "password", "1.2.3.4", "Mozilla"))

        assert result.success
        assert result.message == "Authentication successful for user"

    def test_admin_requires_six_digit_token(self):
        """Test two-factor is enforced for admins."""
        chain = build_auth_chain()

        missing = chain.handle(AuthRequest("admin", "admin123", "1.2.3.4", "Firefox"))
        valid = chain.handle(AuthRequest("admin", "admin123", "1.2.3.5", "Chrome", token="123456"))

        assert not missing.success
        assert valid.success

    def test_bad_credentials_stop_the_chain(self, transcript):
        """Test later checks do not run after a rejection."""
        result = build_auth_chain().handle(AuthRequest("hacker", "wrong", "192.168.1.100", "bot"))

        assert result.message == "Invalid credentials for hacker"
        assert not transcript.contains("Suspicious IP")

    def test_suspicious_ip_is_rejected(self):
        """Test the security check."""
        result = build_auth_chain().handle(AuthRequest("user", "password", "10.0.0.50", "Safari"))

        assert result.message == "Suspicious IP detected: 10.0.0.50"

    def test_rate_limit_per_ip(self):
        """Test attempts beyond the limit are rejected."""
        chain = build_auth_chain(max_requests=2)
        request = AuthRequest("user", "password", "5.5.5.5", "Mozilla")

        results = [chain.handle(request) for _ in range(3)]

        assert [r.success for r in results] == [True, True, False]
        assert results[2].message == "Rate limit exceeded for 5.5.5.5"
