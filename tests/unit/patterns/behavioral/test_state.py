"""Tests for the state pattern."""

import pytest

from pattern_catalog.domain.core.exceptions import InvalidStateTransitionError
from pattern_catalog.domain.patterns.behavioral.state import (
    CharacterState,
    GameCharacter,
    MediaPlayer,
    MediaPlayerState,
    Order,
    PendingOrderState,
    PlayingState,
)


class TestMediaPlayer:
    """Test player state transitions."""

    def setup_method(self):
        """Set up test fixtures."""
        self.player = MediaPlayer(["A", "B"])

    def test_play_pause_resume_stop(self):
        """Test the normal playback cycle."""
        self.player.play()
        self.player.pause()
        self.player.play()
        self.player.stop()

        assert self.player.state_history == ["Stopped", "Playing", "Paused", "Playing", "Stopped"]

    def test_pause_when_stopped_is_ignored(self, transcript):
        """Test actions invalid in a state only narrate."""
        self.player.pause()

        assert self.player.state_name == "Stopped"
        assert transcript.contains("Cannot pause when stopped")

    def test_track_navigation_is_bounded(self, transcript):
        """Test next and previous stop at the ends."""
        self.player.play()
        self.player.next()
        self.player.next()

        assert self.player.current_track == "B"
        assert transcript.contains("No next track available")

    def test_illegal_transition_raises(self):
        """Test the transition table is enforced."""
        self.player.play()

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            self.player.set_state(PlayingState())

        assert exc_info.value.current_state == "Playing"


class TestOrder:
    """Test order lifecycle."""

    def test_full_lifecycle_publishes_events(self, publisher, recorded_events):
        """Test each transition is published."""
        order = Order("ORD-1", "Ann", ["Book"], 10.0, publisher)

        order.process()
        order.ship()
        order.deliver()

        assert order.state_name == "Delivered"
        assert [(e.old_status, e.new_status) for e in recorded_events] == [
            ("Pending", "Confirmed"), ("Confirmed", "Shipped"), ("Shipped", "Delivered"),
        ]
        assert recorded_events[0].aggregate_type == "Order"
        assert recorded_events[0].reason == "process"

    def test_shipped_order_cannot_be_cancelled(self, transcript):
        """Test cancellation is refused after shipping."""
        order = Order("ORD-2", "Ben", ["Pen"], 2.0)
        order.process()
        order.ship()

        order.cancel()

        assert order.state_name == "Shipped"
        assert transcript.contains("Cannot cancel shipped order - contact customer service")

    def test_cancelled_order_is_terminal(self):
        """Test nothing leaves the cancelled state."""
        order = Order("ORD-3", "Cid", ["Cup"], 5.0)
        order.cancel()
        order.process()
        order.ship()

        assert order.state_name == "Cancelled"
        assert order.allowed_actions == []
        with pytest.raises(InvalidStateTransitionError):
            order.set_state(PendingOrderState())

    def test_allowed_actions_follow_state(self):
        """Test the allowed actions reflect the current state."""
        order = Order("ORD-4", "Dee", ["Hat"], 15.0)

        assert order.allowed_actions == ["process", "cancel"]
        order.process()
        assert order.allowed_actions == ["cancel", "ship"]


class TestGameCharacter:
    """Test character behaviour per state."""

    def test_repeated_attacks_exhaust_character(self):
        """Test energy below the threshold moves to Tired."""
        warrior = GameCharacter("Warrior")

        for _ in range(4):
            warrior.attack()

        assert warrior.energy == 0
        assert warrior.state_name == "Tired"

    def test_resting_recovers(self):
        """Test resting restores energy."""
        warrior = GameCharacter("Warrior")
        for _ in range(4):
            warrior.attack()

        for _ in range(3):
            warrior.rest()

        assert warrior.state_name == "Resting"
        assert warrior.energy == 40

    def test_defending_halves_damage(self):
        """Test the defensive stance absorbs damage and then breaks."""
        warrior = GameCharacter("Warrior")
        warrior.defend()

        warrior.take_damage(30)

        assert warrior.health == 85
        assert warrior.state_name == "Idle"

    def test_attacking_takes_extra_damage(self):
        """Test damage is amplified while attacking."""
        warrior = GameCharacter("Warrior")
        warrior.attack()

        warrior.take_damage(20)

        assert warrior.health == 70

    def test_defeat_is_terminal(self, transcript):
        """Test a defeated character ignores further actions."""
        warrior = GameCharacter("Warrior", max_health=10)

        warrior.take_damage(50)
        warrior.attack()

        assert warrior.state_name == "Defeated"
        assert not warrior.is_alive()
        assert transcript.contains("Defeated and cannot attack")


class TestStateInterfaces:
    """Test the state base classes."""

    @pytest.mark.parametrize("state_class", [MediaPlayerState, CharacterState])
    def test_base_states_are_abstract(self, state_class):
        """Test a state base cannot be instantiated directly."""
        with pytest.raises(TypeError):
            state_class()

    def test_partial_state_is_rejected(self):
        """Test a state missing an action cannot be created."""
        class SilentState(MediaPlayerState):
            def play(self, player):
                pass

        with pytest.raises(TypeError):
            SilentState()
