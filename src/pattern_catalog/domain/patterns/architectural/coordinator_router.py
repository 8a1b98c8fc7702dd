"""Coordinator with router - navigation flows owned by coordinators, not screens."""

import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

from pattern_catalog.infrastructure.narration import narrate, section


class Screen:
    """Stand-in view controller that records its lifecycle."""

    def __init__(self, title: str, identifier: Optional[str] = None):
        self.title = title
        self.identifier = identifier or str(uuid.uuid4())
        self.lifecycle: List[str] = []

    def _record(self, stage: str) -> None:
        self.lifecycle.append(stage)
        narrate("Screen", f"'{self.title}' {stage}")

    def view_did_load(self) -> None:
        self._record("loaded")

    def view_will_appear(self) -> None:
        self._record("will appear")

    def view_did_disappear(self) -> None:
        self._record("did disappear")


class Router(ABC):

    @abstractmethod
    def present(self, screen: Screen, animated: bool = True) -> None:
        pass

    @abstractmethod
    def push(self, screen: Screen, animated: bool = True) -> None:
        pass

    @abstractmethod
    def pop(self, animated: bool = True) -> Optional[Screen]:
        pass

    @abstractmethod
    def pop_to_root(self, animated: bool = True) -> List[Screen]:
        pass

    @abstractmethod
    def dismiss(self, animated: bool = True) -> Optional[Screen]:
        pass

    @abstractmethod
    def set_root(self, screen: Screen) -> None:
        pass


def _animation(animated: bool) -> str:
    return "with animation" if animated else "without animation"


class MockRouter(Router):
    """In-memory router keeping a navigation stack and a presented stack."""

    def __init__(self):
        self._navigation_stack: List[Screen] = []
        self._presented: List[Screen] = []

    def present(self, screen: Screen, animated: bool = True) -> None:
        self._presented.append(screen)
        screen.view_did_load()
        screen.view_will_appear()
        narrate("Router", f"Presented '{screen.title}' {_animation(animated)}")

    def push(self, screen: Screen, animated: bool = True) -> None:
        self._navigation_stack.append(screen)
        screen.view_did_load()
        screen.view_will_appear()
        narrate("Router", f"Pushed '{screen.title}' {_animation(animated)}")
        narrate("Router", f"Navigation Stack: {self.stack_titles}")

    def pop(self, animated: bool = True) -> Optional[Screen]:
        if not self._navigation_stack:
            narrate("Router", "Cannot pop - navigation stack is empty")
            return None
        popped = self._navigation_stack.pop()
        popped.view_did_disappear()
        narrate("Router", f"Popped '{popped.title}' {_animation(animated)}")
        narrate("Router", f"Navigation Stack: {self.stack_titles}")
        return popped

    def pop_to_root(self, animated: bool = True) -> List[Screen]:
        if not self._navigation_stack:
            narrate("Router", "Cannot pop to root - navigation stack is empty")
            return []
        popped = self._navigation_stack[1:]
        del self._navigation_stack[1:]
        for screen in popped:
            screen.view_did_disappear()
        narrate("Router", f"Popped to root {_animation(animated)}")
        narrate("Router", f"Navigation Stack: {self.stack_titles}")
        return popped

    def dismiss(self, animated: bool = True) -> Optional[Screen]:
        if not self._presented:
            narrate("Router", "Cannot dismiss - no presented screens")
            return None
        dismissed = self._presented.pop()
        dismissed.view_did_disappear()
        narrate("Router", f"Dismissed '{dismissed.title}' {_animation(animated)}")
        return dismissed

    def set_root(self, screen: Screen) -> None:
        self._navigation_stack = [screen]
        screen.view_did_load()
        screen.view_will_appear()
        narrate("Router", f"Set root screen '{screen.title}'")

    @property
    def current(self) -> Optional[Screen]:
        return self._navigation_stack[-1] if self._navigation_stack else None

    @property
    def presented(self) -> Optional[Screen]:
        return self._presented[-1] if self._presented else None

    @property
    def stack_titles(self) -> List[str]:
        return [screen.title for screen in self._navigation_stack]

    @property
    def stack_count(self) -> int:
        return len(self._navigation_stack)


class UserSession:
    """Authentication state for one running app."""

    def __init__(self):
        self.is_authenticated = False

    def login(self, username: str, password: str) -> bool:
        if username == "user" and password == "password":
            self.is_authenticated = True
            narrate("UserSession", "Login successful")
            return True
        narrate("UserSession", "Login failed")
        return False

    def logout(self) -> None:
        self.is_authenticated = False
        narrate("UserSession", "Logged out")


# =============================================================================
# COORDINATORS
# =============================================================================

class Coordinator(ABC):

    def __init__(self, router: Router):
        self.router = router
        self.child_coordinators: List["Coordinator"] = []

    @abstractmethod
    def start(self) -> None:
        pass

    def finish(self) -> None:
        self.child_coordinators.clear()

    def add_child(self, coordinator: "Coordinator") -> None:
        self.child_coordinators.append(coordinator)

    def remove_child(self, coordinator: "Coordinator") -> None:
        self.child_coordinators = [c for c in self.child_coordinators if c is not coordinator]


class AuthenticationCoordinatorDelegate:

    def authentication_did_complete(self, coordinator: "AuthenticationCoordinator") -> None:
        pass


class AuthenticationCoordinator(Coordinator):

    def __init__(self, router: Router, session: UserSession,
                 delegate: Optional[AuthenticationCoordinatorDelegate] = None):
        super().__init__(router)
        self.session = session
        self.delegate = delegate

    def start(self) -> None:
        narrate("AuthCoordinator", "Starting authentication flow")
        self.router.set_root(Screen("Login"))

    def finish(self) -> None:
        narrate("AuthCoordinator", "Finishing authentication flow")
        super().finish()
        if self.delegate:
            self.delegate.authentication_did_complete(self)

    def show_registration(self) -> None:
        self.router.push(Screen("Registration"))

    def show_forgot_password(self) -> None:
        self.router.present(Screen("Forgot Password"))

    def handle_login_success(self) -> None:
        self.session.is_authenticated = True
        self.finish()


class TabRouter:
    """Owns one router per tab and tracks the selected tab."""

    def __init__(self, main_router: Router):
        self.main_router = main_router
        self.tab_routers: Dict[str, Router] = {}
        self.current_tab: Optional[str] = None

    def create_tab_router(self, tab_name: str) -> Router:
        router = MockRouter()
        self.tab_routers[tab_name] = router
        narrate("TabRouter", f"Created router for tab '{tab_name}'")
        return router

    def select_tab(self, tab_name: str) -> bool:
        if tab_name not in self.tab_routers:
            narrate("TabRouter", f"Tab '{tab_name}' not found")
            return False
        if self.current_tab is None:
            narrate("TabRouter", f"Selecting initial tab '{tab_name}'")
        else:
            narrate("TabRouter", f"Switching from '{self.current_tab}' to '{tab_name}'")
        self.current_tab = tab_name
        return True


class HomeCoordinator(Coordinator):

    def start(self) -> None:
        narrate("HomeCoordinator", "Starting")
        self.router.set_root(Screen("Home"))

    def show_product_detail(self, product_id: str) -> None:
        self.router.push(Screen(f"Product Detail - {product_id}"))

    def show_search(self) -> None:
        self.router.present(Screen("Search"))


class ProfileCoordinator(Coordinator):

    def start(self) -> None:
        narrate("ProfileCoordinator", "Starting")
        self.router.set_root(Screen("Profile"))

    def show_edit_profile(self) -> None:
        self.router.push(Screen("Edit Profile"))

    def show_orders(self) -> None:
        self.router.push(Screen("Orders"))


class SettingsCoordinator(Coordinator):

    def start(self) -> None:
        narrate("SettingsCoordinator", "Starting")
        self.router.set_root(Screen("Settings"))

    def show_privacy_settings(self) -> None:
        self.router.push(Screen("Privacy Settings"))

    def show_about(self) -> None:
        self.router.push(Screen("About"))


class MainTabCoordinator(Coordinator):

    TABS = ("Home", "Profile", "Settings")

    def __init__(self, router: Router):
        super().__init__(router)
        self.tab_router = TabRouter(router)

    def start(self) -> None:
        narrate("MainTabCoordinator", "Starting main app flow")
        factories = {"Home": HomeCoordinator, "Profile": ProfileCoordinator, "Settings": SettingsCoordinator}
        tabs = [factories[name](self.tab_router.create_tab_router(name)) for name in self.TABS]
        for coordinator in tabs:
            self.add_child(coordinator)
        for coordinator in tabs:
            coordinator.start()
        self.tab_router.select_tab("Home")

    def select_tab(self, tab_name: str) -> bool:
        return self.tab_router.select_tab(tab_name)


# =============================================================================
# DEEP LINKS
# =============================================================================

class URLRoute:
    """
    Route extracted from a custom-scheme URL.

    In ``myapp://profile/orders`` the first segment is the URL host, so the
    route path is rebuilt as "/" + host + path.
    """

    def __init__(self, url: str):
        parts = urlsplit(url)
        self.path = "/" + parts.netloc + parts.path if parts.netloc else parts.path
        self.parameters: Dict[str, str] = {
            name: values[-1] for name, values in parse_qs(parts.query).items()
        }


class DeepLinkHandler(ABC):

    prefix = ""

    def can_handle(self, route: URLRoute) -> bool:
        return route.path.startswith(self.prefix)

    @abstractmethod
    def handle(self, route: URLRoute, coordinator: Coordinator) -> bool:
        pass


class AuthDeepLinkHandler(DeepLinkHandler):

    prefix = "/auth"

    def handle(self, route: URLRoute, coordinator: Coordinator) -> bool:
        narrate("AuthDeepLinkHandler", f"Processing {route.path}")
        if route.path == "/auth/login":
            narrate("DeepLink", "Navigating to login screen")
        elif route.path == "/auth/register":
            narrate("DeepLink", "Navigating to registration screen")
        elif route.path == "/auth/reset":
            token = route.parameters.get("token")
            if token:
                narrate("DeepLink", f"Navigating to password reset with token: {token}")
        else:
            return False
        return True


class ProfileDeepLinkHandler(DeepLinkHandler):

    prefix = "/profile"

    def handle(self, route: URLRoute, coordinator: Coordinator) -> bool:
        narrate("ProfileDeepLinkHandler", f"Processing {route.path}")
        if route.path == "/profile":
            narrate("DeepLink", "Navigating to profile screen")
        elif route.path == "/profile/edit":
            narrate("DeepLink", "Navigating to edit profile screen")
        elif route.path == "/profile/orders":
            order_id = route.parameters.get("orderId")
            if order_id:
                narrate("DeepLink", f"Navigating to order details: {order_id}")
            else:
                narrate("DeepLink", "Navigating to orders list")
        else:
            return False
        return True


class SettingsDeepLinkHandler(DeepLinkHandler):

    prefix = "/settings"

    SCREENS = {
        "/settings": "settings screen",
        "/settings/privacy": "privacy settings",
        "/settings/about": "about screen",
    }

    def handle(self, route: URLRoute, coordinator: Coordinator) -> bool:
        narrate("SettingsDeepLinkHandler", f"Processing {route.path}")
        destination = self.SCREENS.get(route.path)
        if destination is None:
            return False
        narrate("DeepLink", f"Navigating to {destination}")
        return True


class ApplicationCoordinator(Coordinator, AuthenticationCoordinatorDelegate):

    def __init__(self, router: Router, session: UserSession,
                 handlers: Optional[List[DeepLinkHandler]] = None):
        super().__init__(router)
        self.session = session
        self.deep_link_handlers = handlers if handlers is not None else [
            AuthDeepLinkHandler(),
            ProfileDeepLinkHandler(),
            SettingsDeepLinkHandler(),
        ]

    def start(self) -> None:
        narrate("ApplicationCoordinator", "Starting app")
        self.child_coordinators.clear()
        if self.session.is_authenticated:
            self._show_main_flow()
        else:
            self._show_auth_flow()

    def finish(self) -> None:
        narrate("ApplicationCoordinator", "Finishing")
        super().finish()

    @property
    def main_flow(self) -> Optional[MainTabCoordinator]:
        return next((c for c in self.child_coordinators if isinstance(c, MainTabCoordinator)), None)

    def handle_deep_link(self, url: str) -> bool:
        narrate("ApplicationCoordinator", f"Handling deep link: {url}")
        route = URLRoute(url)
        for handler in self.deep_link_handlers:
            if handler.can_handle(route):
                return handler.handle(route, self)
        narrate("ApplicationCoordinator", "No handler found for deep link")
        return False

    def authentication_did_complete(self, coordinator: AuthenticationCoordinator) -> None:
        self.remove_child(coordinator)
        self._show_main_flow()

    def _show_auth_flow(self) -> None:
        auth = AuthenticationCoordinator(self.router, self.session, delegate=self)
        self.add_child(auth)
        auth.start()

    def _show_main_flow(self) -> None:
        main = MainTabCoordinator(self.router)
        self.add_child(main)
        main.start()


class AppFlowManager:
    """Entry point wiring a router, a session and the application coordinator."""

    def __init__(self, session: Optional[UserSession] = None, router: Optional[Router] = None):
        self.session = session or UserSession()
        self.router = router or MockRouter()
        self.coordinator = ApplicationCoordinator(self.router, self.session)

    def start(self) -> None:
        narrate("AppFlowManager", "Starting application")
        self.coordinator.start()

    def handle_deep_link(self, url: str) -> bool:
        try:
            parts = urlsplit(url)
        except ValueError:
            parts = None
        if parts is None or not parts.scheme or not (parts.netloc or parts.path):
            narrate("AppFlowManager", f"Invalid URL: {url}")
            return False
        return self.coordinator.handle_deep_link(url)

    def handle_user_action(self, action: str) -> bool:
        narrate("AppFlowManager", f"Handling user action: {action}")
        if action == "login":
            if self.session.login("user", "password"):
                self.coordinator.start()
            return True
        if action == "logout":
            self.session.logout()
            self.coordinator.start()
            return True
        if action in ("showProfile", "showSettings"):
            tab = "Profile" if action == "showProfile" else "Settings"
            narrate("AppFlowManager", f"Navigating to {tab.lower()}")
            main = self.coordinator.main_flow
            if main is not None:
                main.select_tab(tab)
            return True
        narrate("AppFlowManager", f"Unknown action: {action}")
        return False


def run_demo() -> None:
    app = AppFlowManager()

    section("Starting Application (Unauthenticated)")
    app.start()

    section("Simulating User Login")
    app.handle_user_action("login")

    section("Testing Deep Links")
    for url in ("myapp://profile/orders?orderId=12345", "myapp://settings/privacy",
                "myapp://auth/reset?token=abc123", "myapp://invalid/path"):
        narrate("Demo", f"{url} handled: {app.handle_deep_link(url)}")

    section("Testing Navigation Flow")
    router = MockRouter()
    home = HomeCoordinator(router)
    home.start()
    home.show_product_detail("PRODUCT123")
    home.show_search()
    narrate("Demo", f"Navigation stack count: {router.stack_count}")
    router.pop()
    router.dismiss()
    router.pop()
    router.pop()

    section("Testing Tab Navigation")
    tabs = MainTabCoordinator(MockRouter())
    tabs.start()
    tabs.select_tab("Profile")
    tabs.select_tab("Settings")
    tabs.select_tab("Cart")

    section("Testing Complex Flow")
    profile_router = MockRouter()
    profile = ProfileCoordinator(profile_router)
    profile.start()
    profile.show_edit_profile()
    profile.show_orders()
    profile_router.pop_to_root()

    section("Testing Authentication Flow")
    auth = AuthenticationCoordinator(MockRouter(), UserSession())
    auth.start()
    auth.show_registration()
    auth.show_forgot_password()
    auth.handle_login_success()

    section("Simulating User Logout")
    app.handle_user_action("showProfile")
    app.handle_user_action("logout")
    app.handle_user_action("dance")
