"""Mediator - colleagues talk through a hub instead of to each other."""

from enum import Enum
from typing import List, Optional, Tuple

from pattern_catalog.infrastructure.narration import narrate, section


# =============================================================================
# CHAT ROOM
# =============================================================================

class User:
    """Chat participant; knows only its room."""

    def __init__(self, name: str):
        self.name = name
        self.room: Optional["ChatRoom"] = None
        self.received: List[Tuple[str, str]] = []

    def send(self, message: str, to: Optional["User"] = None) -> None:
        narrate(self.name, f"Sending: {message}")
        self._dispatch(message, to)

    def _dispatch(self, message: str, to: Optional["User"]) -> None:
        if self.room is None:
            narrate(self.name, "Not in a chat room")
            return
        self.room.send_message(message, self, to)

    def receive(self, message: str, sender: "User") -> None:
        self.received.append((sender.name, message))
        narrate(self.name, f"Received from {sender.name}: {message}")

    def notify_joined(self, user: "User") -> None:
        narrate(self.name, f"{user.name} joined the chat")

    def notify_left(self, user: "User") -> None:
        narrate(self.name, f"{user.name} left the chat")


class RegularUser(User):
    pass


class PremiumUser(User):

    def send(self, message: str, to: Optional[User] = None) -> None:
        premium = f"[PREMIUM] {message}"
        narrate(self.name, f"Sending premium message: {premium}")
        self._dispatch(premium, to)


class AdminUser(User):

    def broadcast(self, announcement: str) -> None:
        message = f"ADMIN: {announcement}"
        narrate(self.name, f"Broadcasting: {message}")
        self._dispatch(message, None)


class ChatRoom:

    def __init__(self, room_name: str):
        self.room_name = room_name
        self._users: List[User] = []

    @property
    def user_count(self) -> int:
        return len(self._users)

    def add_user(self, user: User) -> None:
        self._users.append(user)
        user.room = self
        narrate("ChatRoom", f"{user.name} joined '{self.room_name}'")
        for existing in self._users:
            if existing is not user:
                existing.notify_joined(user)

    def remove_user(self, user: User) -> None:
        self._users = [u for u in self._users if u is not user]
        user.room = None
        narrate("ChatRoom", f"{user.name} left '{self.room_name}'")
        for remaining in self._users:
            remaining.notify_left(user)

    def send_message(self, message: str, sender: User, to: Optional[User] = None) -> None:
        if to is not None:
            narrate("ChatRoom", f"Private message from {sender.name} to {to.name}")
            to.receive(message, sender)
            return

        recipients = [u for u in self._users if u is not sender]
        narrate("ChatRoom", f"Broadcasting message from {sender.name} to {len(recipients)} users")
        for user in recipients:
            user.receive(message, sender)


# =============================================================================
# AIR TRAFFIC CONTROL
# =============================================================================

class AircraftStatus(str, Enum):
    EN_ROUTE = "en_route"
    REQUESTING_LANDING = "requesting_landing"
    LANDING = "landing"
    HOLDING = "holding"
    REQUESTING_TAKEOFF = "requesting_takeoff"
    TAKING_OFF = "taking_off"


class Aircraft:

    def __init__(self, flight_number: str, aircraft_type: str, route: str):
        self.flight_number = flight_number
        self.aircraft_type = aircraft_type
        self.route = route
        self.status = AircraftStatus.EN_ROUTE
        self.altitude = 35000
        self.advisories: List[str] = []
        self.control: Optional["AirTrafficControl"] = None

    def request_landing(self) -> bool:
        narrate(self.flight_number, "Requesting permission to land")
        self.status = AircraftStatus.REQUESTING_LANDING
        return self.control.request_landing(self) if self.control else False

    def request_takeoff(self) -> bool:
        narrate(self.flight_number, "Requesting permission to take off")
        self.status = AircraftStatus.REQUESTING_TAKEOFF
        return self.control.request_takeoff(self) if self.control else False

    def change_route(self, new_route: str) -> None:
        narrate(self.flight_number, f"Requesting route change to {new_route}")
        if self.control:
            self.control.request_route_change(self, new_route)

    def report_position(self) -> None:
        if self.control:
            self.control.report_position(self)

    def receive_clearance(self, operation: str) -> None:
        narrate(self.flight_number, f"Received clearance for {operation}")
        if operation == "landing":
            self.status = AircraftStatus.LANDING
            self.altitude = 0
        elif operation == "takeoff":
            self.status = AircraftStatus.TAKING_OFF
            self.altitude = 1000

    def receive_route_approval(self, new_route: str) -> None:
        self.route = new_route
        narrate(self.flight_number, f"Route approved: {new_route}")

    def receive_holding_pattern(self) -> None:
        self.status = AircraftStatus.HOLDING
        narrate(self.flight_number, "Instructed to enter holding pattern")

    def receive_advisory(self, advisory: str) -> None:
        self.advisories.append(advisory)

    def info(self) -> str:
        return (f"{self.flight_number} ({self.aircraft_type}) - Status: {self.status.value}, "
                f"Altitude: {self.altitude}ft, Route: {self.route}")


class AirTrafficControl:
    """Mediator owning the single runway."""

    def __init__(self, controller_name: str):
        self.controller_name = controller_name
        self._aircraft: List[Aircraft] = []
        self.runway_available = True

    def add_aircraft(self, aircraft: Aircraft) -> None:
        self._aircraft.append(aircraft)
        aircraft.control = self
        narrate("ATC", f"{aircraft.flight_number} under ATC control")

    def remove_aircraft(self, aircraft: Aircraft) -> None:
        self._aircraft = [a for a in self._aircraft if a is not aircraft]
        aircraft.control = None
        narrate("ATC", f"{aircraft.flight_number} left ATC control")

    def request_landing(self, aircraft: Aircraft) -> bool:
        narrate("ATC", f"Processing landing request from {aircraft.flight_number}")
        if self.runway_available:
            self.runway_available = False
            aircraft.receive_clearance("landing")
            return True
        aircraft.receive_holding_pattern()
        narrate("ATC", f"Runway busy, {aircraft.flight_number} in holding pattern")
        return False

    def request_takeoff(self, aircraft: Aircraft) -> bool:
        narrate("ATC", f"Processing takeoff request from {aircraft.flight_number}")
        if self.runway_available:
            self.runway_available = False
            aircraft.receive_clearance("takeoff")
            return True
        narrate("ATC", f"Runway busy, {aircraft.flight_number} wait for clearance")
        return False

    def complete_runway_operation(self) -> None:
        """Free the runway once the current landing or takeoff is finished."""
        self.runway_available = True
        narrate("ATC", "Runway clear, available for next operation")

    def request_route_change(self, aircraft: Aircraft, new_route: str) -> str:
        narrate("ATC", f"Processing route change for {aircraft.flight_number} to {new_route}")
        conflict = any(other is not aircraft and other.route == new_route for other in self._aircraft)
        if conflict:
            narrate("ATC", "Route conflict detected, alternative route assigned")
            new_route = f"{new_route}-ALT"
        aircraft.receive_route_approval(new_route)
        return new_route

    def report_position(self, aircraft: Aircraft) -> None:
        narrate("ATC", f"Position report from {aircraft.flight_number}: {aircraft.info()}")
        for other in self._aircraft:
            if other is not aircraft:
                advisory = f"{aircraft.flight_number} in your area"
                other.receive_advisory(advisory)
                narrate("ATC", f"Traffic advisory: {other.flight_number} - {advisory}")

    def status(self) -> str:
        runway = "available" if self.runway_available else "busy"
        return f"ATC {self.controller_name}: {len(self._aircraft)} aircraft, runway {runway}"


# =============================================================================
# SMART HOME HUB
# =============================================================================

class HomeDevice:
    device_type = "device"

    def __init__(self, name: str):
        self.name = name
        self.is_on = False
        self.hub: Optional["SmartHomeHub"] = None

    def _changed(self, new_state: str) -> None:
        if self.hub is not None:
            self.hub.device_state_changed(self, new_state)

    def turn_on(self) -> None:
        self.is_on = True
        narrate(self.name, "Turned ON")
        self._changed("ON")

    def turn_off(self) -> None:
        self.is_on = False
        narrate(self.name, "Turned OFF")
        self._changed("OFF")

    def status(self) -> str:
        return f"{self.name} ({self.device_type}): {'ON' if self.is_on else 'OFF'}"


class HomeLight(HomeDevice):
    device_type = "light"

    def __init__(self, name: str):
        super().__init__(name)
        self.brightness = 100

    def turn_on(self) -> None:
        self.brightness = 100
        super().turn_on()

    def set_brightness(self, level: int) -> None:
        self.brightness = max(0, min(100, level))
        narrate(self.name, f"Brightness set to {self.brightness}%")
        self._changed(f"BRIGHTNESS_{self.brightness}")


class HomeThermostat(HomeDevice):
    device_type = "thermostat"

    def __init__(self, name: str):
        super().__init__(name)
        self.temperature = 72

    def set_temperature(self, temperature: int) -> None:
        self.temperature = temperature
        narrate(self.name, f"Temperature set to {temperature}F")
        self._changed(f"TEMP_{temperature}")


class HomeSecurity(HomeDevice):
    device_type = "security"

    def __init__(self, name: str):
        super().__init__(name)
        self.is_armed = False

    def arm(self) -> None:
        self.is_armed = True
        narrate(self.name, "Security system ARMED")
        self._changed("ARMED")

    def disarm(self) -> None:
        self.is_armed = False
        narrate(self.name, "Security system DISARMED")
        self._changed("DISARMED")


class SmartHomeHub:
    """Coordinates devices that never reference each other."""

    SCENES = ("Movie Night", "Bedtime", "Welcome Home")

    def __init__(self, hub_name: str):
        self.hub_name = hub_name
        self._devices: List[HomeDevice] = []

    @property
    def devices(self) -> List[HomeDevice]:
        return list(self._devices)

    def add_device(self, device: HomeDevice) -> None:
        self._devices.append(device)
        device.hub = self
        narrate("Hub", f"Device '{device.name}' added to hub")

    def _of_type(self, cls):
        return [d for d in self._devices if isinstance(d, cls)]

    def device_state_changed(self, device: HomeDevice, new_state: str) -> None:
        narrate("Hub", f"Device state change: {device.name} -> {new_state}")

        if isinstance(device, HomeSecurity) and new_state == "ARMED":
            for light in self._of_type(HomeLight):
                light.turn_off()
        elif isinstance(device, HomeSecurity) and new_state == "DISARMED":
            for light in self._of_type(HomeLight):
                if "Entrance" in light.name:
                    light.turn_on()
        elif isinstance(device, HomeLight) and new_state == "OFF":
            if all(not light.is_on for light in self._of_type(HomeLight)):
                for thermostat in self._of_type(HomeThermostat):
                    thermostat.set_temperature(68)

    def trigger_scene(self, scene_name: str) -> bool:
        if scene_name not in self.SCENES:
            narrate("Hub", f"Unknown scene: {scene_name}")
            return False

        narrate("Hub", f"Activating scene: {scene_name}")
        for device in list(self._devices):
            if scene_name == "Movie Night":
                if isinstance(device, HomeLight):
                    device.turn_on()
                    device.set_brightness(20)
                elif isinstance(device, HomeThermostat):
                    device.set_temperature(70)
            elif scene_name == "Bedtime":
                if isinstance(device, HomeLight):
                    device.turn_off()
                elif isinstance(device, HomeThermostat):
                    device.set_temperature(65)
                elif isinstance(device, HomeSecurity):
                    device.arm()
            elif scene_name == "Welcome Home":
                if isinstance(device, HomeLight):
                    device.turn_on()
                elif isinstance(device, HomeThermostat):
                    device.set_temperature(72)
                elif isinstance(device, HomeSecurity):
                    device.disarm()
        return True

    def system_status(self) -> str:
        statuses = ", ".join(d.status() for d in self._devices)
        return f"Smart Home '{self.hub_name}': {len(self._devices)} devices - {statuses}"


def run_demo() -> None:
    section("Chat Room Mediator")
    room = ChatRoom("Tech Discussion")
    alice = RegularUser("Alice")
    bob = PremiumUser("Bob")
    charlie = RegularUser("Charlie")
    admin = AdminUser("Admin")
    for user in (alice, bob, charlie, admin):
        room.add_user(user)

    alice.send("Hello everyone!")
    bob.send("Hey there! Great to be here!")
    charlie.send("Hi Alice!", to=alice)
    admin.broadcast("Welcome to the tech discussion room!")
    room.remove_user(charlie)

    section("Air Traffic Control Mediator")
    atc = AirTrafficControl("Tower1")
    flight1 = Aircraft("AA123", "Boeing 737", "NYC-LAX")
    flight2 = Aircraft("UA456", "Airbus A320", "LAX-SFO")
    flight3 = Aircraft("DL789", "Boeing 767", "NYC-MIA")
    for aircraft in (flight1, flight2, flight3):
        atc.add_aircraft(aircraft)

    flight1.request_landing()
    flight2.request_takeoff()
    flight3.change_route("NYC-MIA-VIA-ATL")
    flight3.report_position()
    narrate("Demo", f"ATC Status: {atc.status()}")
    atc.complete_runway_operation()
    flight2.request_takeoff()
    narrate("Demo", f"ATC Status: {atc.status()}")

    section("Smart Home Mediator")
    hub = SmartHomeHub("MyHome")
    living_room = HomeLight("Living Room Light")
    entrance = HomeLight("Entrance Light")
    thermostat = HomeThermostat("Main Thermostat")
    security = HomeSecurity("Home Security")
    for device in (living_room, entrance, thermostat, security):
        hub.add_device(device)

    living_room.turn_on()
    living_room.set_brightness(75)
    thermostat.set_temperature(74)

    for scene in SmartHomeHub.SCENES:
        section(f"Scene: {scene}")
        hub.trigger_scene(scene)
    narrate("Demo", f"Final Status: {hub.system_status()}")
