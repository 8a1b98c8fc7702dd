"""Tests for the MVC pattern."""

from pattern_catalog.domain.patterns.architectural.mvc import (
    User,
    UserController,
    UserModel,
    UserView,
)


class TestUserController:
    """Test the controller mediating model and view."""

    def setup_method(self):
        """Set up test fixtures."""
        self.model = UserModel()
        self.controller = UserController(self.model, UserView())

    def test_add_valid_user(self, transcript):
        """Test a valid user reaches the model and the view reports success."""
        assert self.controller.add_user("John Doe", "john@example.com", 30)

        assert self.model.count() == 1
        assert transcript.lines() == [
            "[Model] User John Doe added",
            "[View] User successfully added!",
        ]

    def test_invalid_user_is_rejected(self, transcript):
        """Test validation keeps bad data out of the model."""
        assert not self.controller.add_user("", "x@example.com", 20)
        assert not self.controller.add_user("Zero", "z@example.com", 0)

        assert self.model.count() == 0
        assert transcript.messages("View") == ["Error: Invalid user data"] * 2

    def test_update_user(self):
        """Test updating an existing index."""
        self.controller.add_user("John", "john@example.com", 30)

        assert self.controller.update_user(0, "John Updated", "john@new.com", 31)

        assert self.model.get(0) == User("John Updated", "john@new.com", 31)

    def test_update_out_of_range(self, transcript):
        """Test an out-of-range update changes nothing."""
        assert not self.controller.update_user(10, "Ghost", "ghost@example.com", 40)
        assert transcript.contains("Error: No user at index 10")

    def test_show_user(self, transcript):
        """Test a single user is displayed field by field."""
        self.controller.add_user("Jane", "jane@example.com", 25)

        assert self.controller.show_user(0)
        assert not self.controller.show_user(1)
        assert transcript.contains("Age: 25")

    def test_listing(self, transcript):
        """Test the list view numbers users and handles an empty model."""
        self.controller.show_all_users()
        self.controller.add_user("Jane", "jane@example.com", 25)
        self.controller.show_all_users()
        self.controller.show_user_count()

        assert transcript.contains("No users found.")
        assert transcript.contains("1. Jane (jane@example.com) - Age: 25")
        assert transcript.contains("Total users: 1")
