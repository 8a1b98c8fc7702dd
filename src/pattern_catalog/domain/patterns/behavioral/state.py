"""State - behaviour changes with the object's internal state.

Each context delegates its actions to the current state object. Transitions
are validated against the context's transition table, recorded in its state
history and, when a publisher is attached, published as StatusChangeEvents.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional

from pattern_catalog.domain.base.events import StatusChangeEvent
from pattern_catalog.domain.core.exceptions import InvalidStateTransitionError
from pattern_catalog.infrastructure.event import EventPublisher
from pattern_catalog.infrastructure.narration import narrate, section


class State:
    name = "State"


class StatefulContext:
    """Base context holding the current state and enforcing transitions."""

    aggregate_type = "Context"
    valid_transitions: Dict[str, FrozenSet[str]] = {}

    def __init__(self, aggregate_id: str, initial_state: State, publisher: Optional[EventPublisher] = None):
        self.aggregate_id = aggregate_id
        self._state = initial_state
        self.publisher = publisher
        self.state_history: List[str] = [initial_state.name]

    @property
    def state(self) -> State:
        return self._state

    @property
    def state_name(self) -> str:
        return self._state.name

    def set_state(self, new_state: State, reason: Optional[str] = None) -> None:
        """Move to a new state; raises InvalidStateTransitionError on an illegal move."""
        old_name = self._state.name
        if new_state.name not in self.valid_transitions.get(old_name, frozenset()):
            raise InvalidStateTransitionError(old_name, new_state.name)

        self._state = new_state
        self.state_history.append(new_state.name)
        narrate(self.aggregate_id, f"State changed to: {new_state.name}")

        if self.publisher is not None:
            self.publisher.publish(StatusChangeEvent(
                aggregate_id=self.aggregate_id,
                aggregate_type=self.aggregate_type,
                old_status=old_name,
                new_status=new_state.name,
                reason=reason,
            ))


# =============================================================================
# MEDIA PLAYER
# =============================================================================

class MediaPlayerState(State, ABC):

    @abstractmethod
    def play(self, player: "MediaPlayer") -> None:
        pass

    @abstractmethod
    def pause(self, player: "MediaPlayer") -> None:
        pass

    @abstractmethod
    def stop(self, player: "MediaPlayer") -> None:
        pass

    def next(self, player: "MediaPlayer") -> None:
        if player.has_next_track():
            player.load_track(player.current_index + 1)
            narrate(player.aggregate_id, f"Next track: {player.current_track}")
        else:
            narrate(player.aggregate_id, "No next track available")

    def previous(self, player: "MediaPlayer") -> None:
        if player.has_previous_track():
            player.load_track(player.current_index - 1)
            narrate(player.aggregate_id, f"Previous track: {player.current_track}")
        else:
            narrate(player.aggregate_id, "No previous track available")


class StoppedState(MediaPlayerState):
    name = "Stopped"

    def play(self, player: "MediaPlayer") -> None:
        player.load_track(0)
        narrate(player.aggregate_id, f"Starting playback: {player.current_track}")
        player.set_state(PlayingState(), "play")

    def pause(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, "Cannot pause when stopped")

    def stop(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, "Already stopped")


class PlayingState(MediaPlayerState):
    name = "Playing"

    def play(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, f"Already playing: {player.current_track}")

    def pause(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, f"Pausing: {player.current_track}")
        player.set_state(PausedState(), "pause")

    def stop(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, f"Stopping: {player.current_track}")
        player.set_state(StoppedState(), "stop")


class PausedState(MediaPlayerState):
    name = "Paused"

    def play(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, f"Resuming: {player.current_track}")
        player.set_state(PlayingState(), "resume")

    def pause(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, "Already paused")

    def stop(self, player: "MediaPlayer") -> None:
        narrate(player.aggregate_id, "Stopping from pause")
        player.set_state(StoppedState(), "stop")


class MediaPlayer(StatefulContext):
    aggregate_type = "MediaPlayer"
    valid_transitions = {
        "Stopped": frozenset({"Playing"}),
        "Playing": frozenset({"Paused", "Stopped"}),
        "Paused": frozenset({"Playing", "Stopped"}),
    }

    def __init__(self, tracks: Optional[List[str]] = None, publisher: Optional[EventPublisher] = None):
        super().__init__("MediaPlayer", StoppedState(), publisher)
        self.tracks = list(tracks) if tracks is not None else [f"Song {i}" for i in range(1, 6)]
        self.current_index = 0
        self.current_track = "No Track"

    def play(self) -> None:
        self.state.play(self)

    def pause(self) -> None:
        self.state.pause(self)

    def stop(self) -> None:
        self.state.stop(self)

    def next(self) -> None:
        self.state.next(self)

    def previous(self) -> None:
        self.state.previous(self)

    def load_track(self, index: int) -> bool:
        if not 0 <= index < len(self.tracks):
            return False
        self.current_index = index
        self.current_track = self.tracks[index]
        narrate(self.aggregate_id, f"Loaded track: {self.current_track}")
        return True

    def has_next_track(self) -> bool:
        return self.current_index < len(self.tracks) - 1

    def has_previous_track(self) -> bool:
        return self.current_index > 0


# =============================================================================
# ORDER PROCESSING
# =============================================================================

class OrderState(State):
    allowed_actions: List[str] = []

    def process(self, order: "Order") -> None:
        narrate(order.aggregate_id, f"Cannot process {self.name.lower()} order")

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, f"Cannot cancel {self.name.lower()} order")

    def ship(self, order: "Order") -> None:
        narrate(order.aggregate_id, f"Cannot ship {self.name.lower()} order")

    def deliver(self, order: "Order") -> None:
        narrate(order.aggregate_id, f"Cannot deliver {self.name.lower()} order")


class PendingOrderState(OrderState):
    name = "Pending"
    allowed_actions = ["process", "cancel"]

    def process(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Processing order payment and inventory check")
        order.set_state(ConfirmedOrderState(), "process")

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cancelling pending order")
        order.set_state(CancelledOrderState(), "cancel")

    def ship(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cannot ship pending order - must be confirmed first")


class ConfirmedOrderState(OrderState):
    name = "Confirmed"
    allowed_actions = ["cancel", "ship"]

    def process(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Order already confirmed")

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cancelling confirmed order (refund will be processed)")
        order.set_state(CancelledOrderState(), "cancel")

    def ship(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Shipping confirmed order")
        order.set_state(ShippedOrderState(), "ship")

    def deliver(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cannot deliver unshipped order")


class ShippedOrderState(OrderState):
    name = "Shipped"
    allowed_actions = ["deliver"]

    def process(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Order already processed")

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cannot cancel shipped order - contact customer service")

    def ship(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Order already shipped")

    def deliver(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Delivering order to customer")
        order.set_state(DeliveredOrderState(), "deliver")


class DeliveredOrderState(OrderState):
    name = "Delivered"

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Cannot cancel delivered order - contact customer service for returns")


class CancelledOrderState(OrderState):
    name = "Cancelled"

    def cancel(self, order: "Order") -> None:
        narrate(order.aggregate_id, "Order already cancelled")


class Order(StatefulContext):
    aggregate_type = "Order"
    valid_transitions = {
        "Pending": frozenset({"Confirmed", "Cancelled"}),
        "Confirmed": frozenset({"Shipped", "Cancelled"}),
        "Shipped": frozenset({"Delivered"}),
        "Delivered": frozenset(),
        "Cancelled": frozenset(),
    }

    def __init__(self, order_id: str, customer_name: str, items: List[str], total_amount: float,
                 publisher: Optional[EventPublisher] = None):
        super().__init__(order_id, PendingOrderState(), publisher)
        self.order_id = order_id
        self.customer_name = customer_name
        self.items = list(items)
        self.total_amount = total_amount
        narrate(order_id, f"Order created for {customer_name}")

    @property
    def allowed_actions(self) -> List[str]:
        return list(self.state.allowed_actions)

    def process(self) -> None:
        self.state.process(self)

    def cancel(self) -> None:
        self.state.cancel(self)

    def ship(self) -> None:
        self.state.ship(self)

    def deliver(self) -> None:
        self.state.deliver(self)

    def order_info(self) -> str:
        return (
            f"Order ID: {self.order_id}\n"
            f"Customer: {self.customer_name}\n"
            f"Items: {', '.join(self.items)}\n"
            f"Total: ${self.total_amount:.2f}\n"
            f"Status: {self.state_name}\n"
            f"Allowed Actions: {', '.join(self.allowed_actions)}"
        )


# =============================================================================
# GAME CHARACTER
# =============================================================================

MOVE_COST = 10
TIRED_MOVE_COST = 5
ATTACK_COST = 25
TIRED_THRESHOLD = 20
RECOVERED_THRESHOLD = 50


class CharacterState(State, ABC):

    @abstractmethod
    def move(self, character: "GameCharacter") -> None:
        pass

    @abstractmethod
    def attack(self, character: "GameCharacter") -> None:
        pass

    @abstractmethod
    def defend(self, character: "GameCharacter") -> None:
        pass

    @abstractmethod
    def rest(self, character: "GameCharacter") -> None:
        pass

    @abstractmethod
    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        pass


class IdleState(CharacterState):
    name = "Idle"

    def move(self, character: "GameCharacter") -> None:
        if not character.has_energy(MOVE_COST):
            narrate(character.name, "Too tired to move")
            return
        narrate(character.name, "Moving")
        character.reduce_energy(MOVE_COST)

    def attack(self, character: "GameCharacter") -> None:
        if not character.has_energy(ATTACK_COST):
            narrate(character.name, "Too tired to attack")
            return
        narrate(character.name, "Attacks with full power")
        character.set_state(AttackingState(), "attack")
        character.reduce_energy(ATTACK_COST)

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Enters defensive stance")
        character.set_state(DefendingState(), "defend")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Resting")
        character.set_state(RestingState(), "rest")

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        narrate(character.name, f"Takes {damage} damage")
        character.reduce_health(damage)


class AttackingState(CharacterState):
    name = "Attacking"

    def move(self, character: "GameCharacter") -> None:
        narrate(character.name, "Cannot move while attacking")

    def attack(self, character: "GameCharacter") -> None:
        if character.has_energy(ATTACK_COST):
            narrate(character.name, "Continues attacking")
            character.reduce_energy(ATTACK_COST)
        else:
            narrate(character.name, "Too tired to continue attacking")
            character.set_state(IdleState(), "exhausted")

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Switching from attack to defense")
        character.set_state(DefendingState(), "defend")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Stopping attack to rest")
        character.set_state(RestingState(), "rest")

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        actual = int(damage * 1.5)
        narrate(character.name, f"Takes {actual} damage while attacking")
        character.reduce_health(actual)


class DefendingState(CharacterState):
    name = "Defending"

    def move(self, character: "GameCharacter") -> None:
        narrate(character.name, "Lowering defense to move")
        character.set_state(IdleState(), "move")
        character.move()

    def attack(self, character: "GameCharacter") -> None:
        narrate(character.name, "Lowering defense to attack")
        character.set_state(IdleState(), "attack")
        character.attack()

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Already defending")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Lowering defense to rest")
        character.set_state(RestingState(), "rest")

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        reduced = max(1, damage // 2)
        narrate(character.name, f"Blocks most damage, takes only {reduced} damage")
        character.reduce_health(reduced)
        if character.is_alive():
            character.set_state(IdleState(), "defense broken")


class RestingState(CharacterState):
    name = "Resting"

    def move(self, character: "GameCharacter") -> None:
        narrate(character.name, "Stopping rest to move")
        character.set_state(IdleState(), "move")
        character.move()

    def attack(self, character: "GameCharacter") -> None:
        narrate(character.name, "Stopping rest to attack")
        character.set_state(IdleState(), "attack")
        character.attack()

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Stopping rest to defend")
        character.set_state(DefendingState(), "defend")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Continuing to rest")
        character.restore_energy(20)
        character.restore_health(5)

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        extra = int(damage * 1.2)
        narrate(character.name, f"Caught off guard! Takes {extra} damage")
        character.reduce_health(extra)
        if character.is_alive():
            character.set_state(IdleState(), "interrupted")


class TiredState(CharacterState):
    name = "Tired"

    def move(self, character: "GameCharacter") -> None:
        narrate(character.name, "Moves slowly due to tiredness")
        character.reduce_energy(TIRED_MOVE_COST)

    def attack(self, character: "GameCharacter") -> None:
        narrate(character.name, "Too tired to attack effectively")

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Weak defensive stance due to tiredness")
        character.set_state(DefendingState(), "defend")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Desperately needs rest")
        character.set_state(RestingState(), "rest")

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        narrate(character.name, f"Takes {damage} damage while tired")
        character.reduce_health(damage)


class DefeatedState(CharacterState):
    name = "Defeated"

    def move(self, character: "GameCharacter") -> None:
        narrate(character.name, "Defeated and cannot move")

    def attack(self, character: "GameCharacter") -> None:
        narrate(character.name, "Defeated and cannot attack")

    def defend(self, character: "GameCharacter") -> None:
        narrate(character.name, "Defeated and cannot defend")

    def rest(self, character: "GameCharacter") -> None:
        narrate(character.name, "Defeated and needs revival")

    def take_damage(self, character: "GameCharacter", damage: int) -> None:
        narrate(character.name, "Already defeated")


class GameCharacter(StatefulContext):
    aggregate_type = "GameCharacter"
    valid_transitions = {
        "Idle": frozenset({"Attacking", "Defending", "Resting", "Tired", "Defeated"}),
        "Attacking": frozenset({"Idle", "Defending", "Resting", "Tired", "Defeated"}),
        "Defending": frozenset({"Idle", "Resting", "Defeated"}),
        "Resting": frozenset({"Idle", "Defending", "Defeated"}),
        "Tired": frozenset({"Idle", "Defending", "Resting", "Defeated"}),
        "Defeated": frozenset(),
    }

    def __init__(self, name: str, max_health: int = 100, max_energy: int = 100,
                 publisher: Optional[EventPublisher] = None):
        super().__init__(name, IdleState(), publisher)
        self.name = name
        self.max_health = max_health
        self.max_energy = max_energy
        self.health = max_health
        self.energy = max_energy

    def move(self) -> None:
        self.state.move(self)

    def attack(self) -> None:
        self.state.attack(self)

    def defend(self) -> None:
        self.state.defend(self)

    def rest(self) -> None:
        self.state.rest(self)

    def take_damage(self, damage: int) -> None:
        self.state.take_damage(self, damage)

    def reduce_health(self, amount: int) -> None:
        self.health = max(0, self.health - amount)
        narrate(self.name, f"Health: {self.health}/{self.max_health}")
        if self.health == 0:
            self.set_state(DefeatedState(), "health depleted")

    def reduce_energy(self, amount: int) -> None:
        self.energy = max(0, self.energy - amount)
        narrate(self.name, f"Energy: {self.energy}/{self.max_energy}")
        if self.energy < TIRED_THRESHOLD and self.state_name not in ("Tired", "Defeated"):
            self.set_state(TiredState(), "low energy")

    def restore_energy(self, amount: int) -> None:
        self.energy = min(self.max_energy, self.energy + amount)
        narrate(self.name, f"Restored energy: {self.energy}/{self.max_energy}")
        if self.energy >= RECOVERED_THRESHOLD and self.state_name == "Tired":
            self.set_state(IdleState(), "recovered")

    def restore_health(self, amount: int) -> None:
        self.health = min(self.max_health, self.health + amount)
        narrate(self.name, f"Restored health: {self.health}/{self.max_health}")

    def is_alive(self) -> bool:
        return self.health > 0

    def has_energy(self, amount: int) -> bool:
        return self.energy >= amount

    def status(self) -> str:
        return (
            f"Character: {self.name}\n"
            f"State: {self.state_name}\n"
            f"Health: {self.health}/{self.max_health}\n"
            f"Energy: {self.energy}/{self.max_energy}"
        )


def run_demo(publisher: Optional[EventPublisher] = None) -> None:
    section("Media Player State Machine")
    player = MediaPlayer(publisher=publisher)
    narrate("Demo", f"Current state: {player.state_name}")
    player.play()
    player.pause()
    player.play()
    player.next()
    player.stop()
    player.pause()

    section("Order Processing State Machine")
    order = Order("ORD-12345", "John Doe", ["Laptop", "Mouse", "Keyboard"], 1299.99, publisher)
    narrate("Demo", order.order_info())
    order.process()
    order.ship()
    order.deliver()
    order.cancel()
    narrate("Demo", f"Final order status:\n{order.order_info()}")

    section("Order Cancellation")
    order2 = Order("ORD-12346", "Jane Smith", ["Phone Case"], 29.99, publisher)
    order2.process()
    order2.cancel()
    order2.ship()

    section("Game Character State Machine")
    warrior = GameCharacter("Warrior", publisher=publisher)
    narrate("Demo", warrior.status())
    for _ in range(4):
        warrior.attack()
    narrate("Demo", f"After multiple attacks:\n{warrior.status()}")

    for _ in range(3):
        warrior.rest()
    narrate("Demo", f"After resting:\n{warrior.status()}")

    warrior.defend()
    warrior.take_damage(30)
    narrate("Demo", f"After taking damage:\n{warrior.status()}")

    warrior.take_damage(50)
    warrior.take_damage(30)
    warrior.take_damage(30)
    narrate("Demo", f"After heavy damage:\n{warrior.status()}")
    warrior.attack()
    narrate("Demo", f"State history: {' -> '.join(warrior.state_history)}")
