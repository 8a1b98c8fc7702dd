"""Tests for the coordinator and router patterns."""

from pattern_catalog.domain.patterns.architectural.coordinator_router import (
    AppFlowManager,
    ApplicationCoordinator,
    AuthenticationCoordinator,
    HomeCoordinator,
    MainTabCoordinator,
    MockRouter,
    ProfileCoordinator,
    Screen,
    URLRoute,
    UserSession,
)


class TestMockRouter:
    """Test navigation and presentation stacks."""

    def setup_method(self):
        """Set up test fixtures."""
        self.router = MockRouter()

    def test_push_and_pop(self):
        """Test the navigation stack order and lifecycle."""
        root, detail = Screen("Root"), Screen("Detail")
        self.router.set_root(root)
        self.router.push(detail)

        popped = self.router.pop()

        assert popped is detail
        assert detail.lifecycle == ["loaded", "will appear", "did disappear"]
        assert self.router.stack_titles == ["Root"]

    def test_pop_empty_stack(self, transcript):
        """Test popping an empty stack reports and returns None."""
        assert self.router.pop() is None
        assert transcript.contains("Cannot pop - navigation stack is empty")

    def test_pop_to_root(self):
        """Test every screen above the root is popped."""
        profile = ProfileCoordinator(self.router)
        profile.start()
        profile.show_edit_profile()
        profile.show_orders()

        popped = self.router.pop_to_root()

        assert [s.title for s in popped] == ["Edit Profile", "Orders"]
        assert self.router.stack_titles == ["Profile"]

    def test_present_and_dismiss_are_separate(self, transcript):
        """Test modal screens do not touch the navigation stack."""
        home = HomeCoordinator(self.router)
        home.start()
        home.show_search()

        assert self.router.stack_count == 1
        assert self.router.presented.title == "Search"
        assert self.router.dismiss().title == "Search"
        assert self.router.dismiss() is None
        assert transcript.contains("Cannot dismiss - no presented screens")


class TestURLRoute:
    """Test deep link parsing."""

    def test_host_is_first_segment(self):
        """Test the URL host becomes the first path segment."""
        route = URLRoute("myapp://profile/orders?orderId=12345")

        assert route.path == "/profile/orders"
        assert route.parameters == {"orderId": "12345"}

    def test_host_only(self):
        """Test a bare host maps to a one-segment path."""
        assert URLRoute("myapp://settings").path == "/settings"


class TestApplicationCoordinator:
    """Test the top-level flow."""

    def test_unauthenticated_start_shows_login(self):
        """Test the auth flow starts when logged out."""
        router = MockRouter()
        app = ApplicationCoordinator(router, UserSession())

        app.start()

        assert router.stack_titles == ["Login"]
        assert isinstance(app.child_coordinators[0], AuthenticationCoordinator)

    def test_login_success_switches_to_main_flow(self):
        """Test completing auth replaces the auth child with the main flow."""
        session = UserSession()
        app = ApplicationCoordinator(MockRouter(), session)
        app.start()

        app.child_coordinators[0].handle_login_success()

        assert session.is_authenticated
        assert len(app.child_coordinators) == 1
        assert isinstance(app.main_flow, MainTabCoordinator)

    def test_deep_links(self, transcript):
        """Test handlers are chosen by path prefix."""
        app = ApplicationCoordinator(MockRouter(), UserSession())

        assert app.handle_deep_link("myapp://profile/orders?orderId=12345")
        assert app.handle_deep_link("myapp://settings/privacy")
        assert app.handle_deep_link("myapp://auth/reset?token=abc123")
        assert not app.handle_deep_link("myapp://invalid/path")
        assert not app.handle_deep_link("myapp://settings/unknown")

        assert transcript.contains("Navigating to order details: 12345")
        assert transcript.contains("Navigating to password reset with token: abc123")
        assert transcript.contains("No handler found for deep link")


class TestMainTabCoordinator:
    """Test tab setup and selection."""

    def test_start_creates_and_selects_tabs(self):
        """Test each tab gets its own router and Home is selected."""
        tabs = MainTabCoordinator(MockRouter())

        tabs.start()

        assert list(tabs.tab_router.tab_routers) == ["Home", "Profile", "Settings"]
        assert tabs.tab_router.current_tab == "Home"
        assert tabs.tab_router.tab_routers["Profile"].stack_titles == ["Profile"]
        assert len(tabs.child_coordinators) == 3

    def test_unknown_tab(self, transcript):
        """Test selecting an unknown tab keeps the current one."""
        tabs = MainTabCoordinator(MockRouter())
        tabs.start()

        assert not tabs.select_tab("Cart")
        assert tabs.tab_router.current_tab == "Home"
        assert transcript.contains("Tab 'Cart' not found")


class TestAppFlowManager:
    """Test user actions and URL validation."""

    def test_login_then_show_profile(self):
        """Test login starts the main flow and tab actions select tabs."""
        app = AppFlowManager()
        app.start()

        assert app.handle_user_action("login")
        assert app.handle_user_action("showProfile")

        assert app.coordinator.main_flow.tab_router.current_tab == "Profile"

    def test_logout_returns_to_login(self):
        """Test logout restarts the auth flow."""
        session = UserSession()
        session.login("user", "password")
        app = AppFlowManager(session=session)
        app.start()

        app.handle_user_action("logout")

        assert not session.is_authenticated
        assert app.coordinator.main_flow is None
        assert app.router.stack_titles == ["Login"]

    def test_unknown_action(self, transcript):
        """Test unknown actions are reported."""
        assert not AppFlowManager().handle_user_action("dance")
        assert transcript.contains("Unknown action: dance")

    def test_invalid_url(self, transcript):
        """Test URLs without a scheme are rejected."""
        assert not AppFlowManager().handle_deep_link("not a url")
        assert transcript.contains("Invalid URL: not a url")

    def test_failed_login(self):
        """Test a wrong password leaves the session logged out."""
        assert not UserSession().login("user", "wrong")
