"""MVC - a controller mediates between a user model and its view."""

from dataclasses import dataclass
from typing import List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


@dataclass
class User:
    name: str
    email: str
    age: int

    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.email) and self.age > 0


class UserModel:

    def __init__(self):
        self._users: List[User] = []

    def add(self, user: User) -> None:
        self._users.append(user)
        narrate("Model", f"User {user.name} added")

    def get(self, index: int) -> Optional[User]:
        if 0 <= index < len(self._users):
            return self._users[index]
        return None

    def count(self) -> int:
        return len(self._users)

    def all(self) -> List[User]:
        return list(self._users)

    def update(self, index: int, user: User) -> bool:
        """Replace the user at index; out-of-range indexes are ignored."""
        if not 0 <= index < len(self._users):
            return False
        self._users[index] = user
        narrate("Model", f"User at index {index} updated")
        return True


class UserView:

    def show_welcome(self) -> None:
        narrate("View", "Welcome to User Management System")
        narrate("View", "Available actions: add, list, show, update, count")

    def display_users(self, users: List[User]) -> None:
        narrate("View", "=== User List ===")
        if not users:
            narrate("View", "No users found.")
        for position, user in enumerate(users, start=1):
            narrate("View", f"{position}. {user.name} ({user.email}) - Age: {user.age}")

    def display_user(self, user: User) -> None:
        narrate("View", f"Name: {user.name}")
        narrate("View", f"Email: {user.email}")
        narrate("View", f"Age: {user.age}")

    def display_count(self, count: int) -> None:
        narrate("View", f"Total users: {count}")

    def show_success(self, message: str) -> None:
        narrate("View", message)

    def show_error(self, message: str) -> None:
        narrate("View", f"Error: {message}")


class UserController:

    def __init__(self, model: UserModel, view: UserView):
        self.model = model
        self.view = view

    def start(self) -> None:
        self.view.show_welcome()

    def add_user(self, name: str, email: str, age: int) -> bool:
        user = User(name, email, age)
        if not user.is_valid():
            self.view.show_error("Invalid user data")
            return False
        self.model.add(user)
        self.view.show_success("User successfully added!")
        return True

    def show_all_users(self) -> None:
        self.view.display_users(self.model.all())

    def show_user(self, index: int) -> bool:
        user = self.model.get(index)
        if user is None:
            self.view.show_error(f"No user at index {index}")
            return False
        self.view.display_user(user)
        return True

    def show_user_count(self) -> None:
        self.view.display_count(self.model.count())

    def update_user(self, index: int, name: str, email: str, age: int) -> bool:
        user = User(name, email, age)
        if not user.is_valid():
            self.view.show_error("Invalid user data")
            return False
        if not self.model.update(index, user):
            self.view.show_error(f"No user at index {index}")
            return False
        self.view.show_success("User successfully updated!")
        return True


def run_demo() -> None:
    model = UserModel()
    controller = UserController(model, UserView())
    controller.start()

    section("Adding Users")
    controller.add_user("John Doe", "john@example.com", 30)
    controller.add_user("Jane Smith", "jane@example.com", 25)
    controller.add_user("Bob Johnson", "bob@example.com", 35)

    section("Listing Users")
    controller.show_all_users()
    controller.show_user_count()

    section("Updating User")
    controller.update_user(0, "John Updated", "john.updated@example.com", 31)
    controller.show_user(0)

    section("Error Handling")
    controller.add_user("", "invalid@example.com", 20)
    controller.update_user(10, "Ghost", "ghost@example.com", 40)
