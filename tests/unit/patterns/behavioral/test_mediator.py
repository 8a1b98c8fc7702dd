"""Tests for the mediator pattern."""

from pattern_catalog.domain.patterns.behavioral.mediator import (
    AdminUser,
    Aircraft,
    AircraftStatus,
    AirTrafficControl,
    ChatRoom,
    HomeLight,
    HomeSecurity,
    HomeThermostat,
    PremiumUser,
    RegularUser,
    SmartHomeHub,
)


class TestChatRoom:
    """Test messages routed through the room."""

    def setup_method(self):
        """Set up test fixtures."""
        self.room = ChatRoom("General")
        self.alice = RegularUser("Alice")
        self.bob = PremiumUser("Bob")
        self.admin = AdminUser("Admin")
        for user in (self.alice, self.bob, self.admin):
            self.room.add_user(user)

    def test_broadcast_skips_sender(self):
        """Test every other user receives a broadcast."""
        self.alice.send("Hi")

        assert self.alice.received == []
        assert self.bob.received == [("Alice", "Hi")]
        assert self.admin.received == [("Alice", "Hi")]

    def test_private_message(self):
        """Test a directed message reaches only its recipient."""
        self.alice.send("Psst", to=self.bob)

        assert self.bob.received == [("Alice", "Psst")]
        assert self.admin.received == []

    def test_premium_and_admin_prefixes(self):
        """Test message decoration by user type."""
        self.bob.send("Hello")
        self.admin.broadcast("Maintenance")

        assert ("Bob", "[PREMIUM] Hello") in self.alice.received
        assert ("Admin", "ADMIN: Maintenance") in self.alice.received

    def test_removed_user_cannot_send(self, transcript):
        """Test a user outside a room is told so."""
        self.room.remove_user(self.alice)

        self.alice.send("Anyone?")

        assert self.room.user_count == 2
        assert transcript.contains("Not in a chat room")
        assert transcript.contains("Alice left the chat")


class TestAirTrafficControl:
    """Test runway coordination."""

    def setup_method(self):
        """Set up test fixtures."""
        self.atc = AirTrafficControl("Tower")
        self.first = Aircraft("AA1", "737", "NYC-LAX")
        self.second = Aircraft("UA2", "A320", "LAX-SFO")
        self.atc.add_aircraft(self.first)
        self.atc.add_aircraft(self.second)

    def test_single_runway(self):
        """Test a second request holds while the runway is busy."""
        assert self.first.request_landing()
        assert not self.second.request_landing()

        assert self.first.status == AircraftStatus.LANDING
        assert self.first.altitude == 0
        assert self.second.status == AircraftStatus.HOLDING

    def test_runway_released(self):
        """Test completing an operation frees the runway."""
        self.first.request_landing()
        self.atc.complete_runway_operation()

        assert self.second.request_takeoff()
        assert self.second.altitude == 1000

    def test_route_conflict_gets_alternative(self):
        """Test conflicting routes are renamed."""
        self.second.change_route("NYC-LAX")

        assert self.second.route == "NYC-LAX-ALT"

    def test_position_report_advises_others(self):
        """Test traffic advisories go to other aircraft."""
        self.first.report_position()

        assert self.second.advisories == ["AA1 in your area"]
        assert self.first.advisories == []

    def test_aircraft_without_control(self):
        """Test requests without a controller are refused."""
        assert not Aircraft("X1", "Cessna", "A-B").request_landing()


class TestSmartHomeHub:
    """Test device reactions coordinated by the hub."""

    def setup_method(self):
        """Set up test fixtures."""
        self.hub = SmartHomeHub("Home")
        self.living = HomeLight("Living Room Light")
        self.entrance = HomeLight("Entrance Light")
        self.thermostat = HomeThermostat("Thermostat")
        self.security = HomeSecurity("Security")
        for device in (self.living, self.entrance, self.thermostat, self.security):
            self.hub.add_device(device)

    def test_arming_turns_off_lights(self):
        """Test security arming switches every light off."""
        self.living.turn_on()

        self.security.arm()

        assert not self.living.is_on
        assert self.thermostat.temperature == 68

    def test_disarming_lights_entrance(self):
        """Test only entrance lights come on when disarmed."""
        self.security.disarm()

        assert self.entrance.is_on
        assert not self.living.is_on

    def test_bedtime_scene(self):
        """Test the arm cascade overrides the bedtime temperature with 68."""
        self.living.turn_on()

        assert self.hub.trigger_scene("Bedtime")

        assert self.security.is_armed
        assert self.thermostat.temperature == 68
        assert not self.living.is_on

    def test_unknown_scene(self, transcript):
        """Test unknown scenes are rejected."""
        assert not self.hub.trigger_scene("Party")
        assert transcript.contains("Unknown scene: Party")
