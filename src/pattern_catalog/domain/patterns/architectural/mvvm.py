"""MVVM - view models expose view-ready state and notify a bound delegate."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


class ViewModelDelegate:
    """Binding target for view models. Hooks default to no-ops."""

    def data_did_change(self) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_success(self, message: str) -> None:
        pass


# =============================================================================
# USER LIST
# =============================================================================

@dataclass(frozen=True)
class User:
    name: str
    email: str
    age: int
    is_active: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class UserRepository:
    """In-memory user store seeded with three users."""

    def __init__(self, users: Optional[List[User]] = None):
        if users is None:
            users = [
                User("John Doe", "john@example.com", 30),
                User("Jane Smith", "jane@example.com", 25),
                User("Bob Johnson", "bob@example.com", 35, is_active=False),
            ]
        self._users = list(users)

    def fetch_users(self) -> List[User]:
        narrate("Repository", "Fetching users from database")
        return list(self._users)

    def save_user(self, user: User) -> bool:
        self._users.append(user)
        narrate("Repository", f"Saved user {user.name}")
        return True

    def update_user(self, user: User) -> bool:
        for index, existing in enumerate(self._users):
            if existing.id == user.id:
                self._users[index] = user
                narrate("Repository", f"Updated user {user.name}")
                return True
        return False

    def delete_user(self, user_id: str) -> bool:
        for index, existing in enumerate(self._users):
            if existing.id == user_id:
                del self._users[index]
                narrate("Repository", f"Deleted user {existing.name}")
                return True
        return False


class UserListViewModel:
    """
    Presentation state for a user list.

    The visible list is recomputed from the loaded users whenever a filter
    changes: active-only first, then a case-insensitive search on name or
    email, then sorted by name.
    """

    def __init__(self, repository: Optional[UserRepository] = None,
                 delegate: Optional[ViewModelDelegate] = None):
        self.repository = repository or UserRepository()
        self.delegate = delegate
        self._all_users: List[User] = []
        self.users: List[User] = []
        self.is_loading = False
        self._search_text = ""
        self._show_active_only = False

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, text: str) -> None:
        self._search_text = text
        self._apply_filters()

    @property
    def show_active_only(self) -> bool:
        return self._show_active_only

    @show_active_only.setter
    def show_active_only(self, value: bool) -> None:
        self._show_active_only = value
        self._apply_filters()

    def set_search_text(self, text: str) -> None:
        self.search_text = text

    def set_show_active_only(self, value: bool) -> None:
        self.show_active_only = value

    @property
    def user_count(self) -> int:
        return len(self.users)

    @property
    def active_user_count(self) -> int:
        return sum(1 for user in self.users if user.is_active)

    def load_users(self) -> None:
        self._set_loading(True)
        self._all_users = self.repository.fetch_users()
        self._set_loading(False)
        self._apply_filters()
        self._success("Users loaded successfully")

    def add_user(self, name: str, email: str, age: int) -> bool:
        if not name or not email or age <= 0:
            self._error("Invalid user data")
            return False
        user = User(name, email, age)
        if not self.repository.save_user(user):
            self._error("Failed to add user")
            return False
        self._all_users.append(user)
        self._apply_filters()
        self._success("User added successfully")
        return True

    def update_user(self, user: User) -> bool:
        if not self.repository.update_user(user):
            self._error("Failed to update user")
            return False
        self._all_users = [user if u.id == user.id else u for u in self._all_users]
        self._apply_filters()
        self._success("User updated successfully")
        return True

    def delete_user(self, index: int) -> bool:
        if not 0 <= index < len(self.users):
            return False
        user = self.users[index]
        if not self.repository.delete_user(user.id):
            self._error("Failed to delete user")
            return False
        self._all_users = [u for u in self._all_users if u.id != user.id]
        self._apply_filters()
        self._success("User deleted successfully")
        return True

    def toggle_user_status(self, index: int) -> bool:
        if not 0 <= index < len(self.users):
            return False
        user = self.users[index]
        return self.update_user(replace(user, is_active=not user.is_active))

    @staticmethod
    def display_lines(user: User) -> List[str]:
        return [user.name, user.email, f"Age: {user.age}", "Active" if user.is_active else "Inactive"]

    def _apply_filters(self) -> None:
        filtered = self._all_users
        if self._show_active_only:
            filtered = [user for user in filtered if user.is_active]
        if self._search_text:
            term = self._search_text.lower()
            filtered = [user for user in filtered
                        if term in user.name.lower() or term in user.email.lower()]
        self.users = sorted(filtered, key=lambda user: user.name)
        self._changed()

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        self._changed()

    def _changed(self) -> None:
        if self.delegate:
            self.delegate.data_did_change()

    def _error(self, message: str) -> None:
        if self.delegate:
            self.delegate.show_error(message)

    def _success(self, message: str) -> None:
        if self.delegate:
            self.delegate.show_success(message)


class UserListView(ViewModelDelegate):

    def __init__(self, view_name: str, view_model: UserListViewModel):
        self.view_name = view_name
        self.view_model = view_model
        self.render_count = 0
        self.errors: List[str] = []
        self.successes: List[str] = []
        view_model.delegate = self
        narrate(view_name, "View initialized")

    def data_did_change(self) -> None:
        self.render_count += 1
        if self.view_model.is_loading:
            narrate(self.view_name, "Loading users...")

    def render(self) -> None:
        narrate(self.view_name, "=== User List ===")
        if not self.view_model.users:
            narrate(self.view_name, "No users found")
        for position, user in enumerate(self.view_model.users, start=1):
            narrate(self.view_name, f"{position}. {' | '.join(self.view_model.display_lines(user))}")
        narrate(self.view_name, f"Total: {self.view_model.user_count}, Active: {self.view_model.active_user_count}")

    def show_error(self, message: str) -> None:
        self.errors.append(message)
        narrate(self.view_name, f"Error Alert: {message}")

    def show_success(self, message: str) -> None:
        self.successes.append(message)
        narrate(self.view_name, f"Success: {message}")


# =============================================================================
# PRODUCT CATALOG
# =============================================================================

@dataclass(frozen=True)
class Product:
    name: str
    price: float
    category: str
    in_stock: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class SortOption(str, Enum):
    NAME = "name"
    PRICE = "price"
    CATEGORY = "category"


class ProductCatalogViewModel:
    ALL = "All"

    def __init__(self, delegate: Optional[ViewModelDelegate] = None,
                 products: Optional[List[Product]] = None):
        self.delegate = delegate
        self._all_products = list(products) if products is not None else [
            Product("iPhone 15", 999.0, "Electronics"),
            Product("MacBook Pro", 1999.0, "Electronics"),
            Product("Coffee Mug", 15.0, "Home", in_stock=False),
            Product("Wireless Headphones", 299.0, "Electronics"),
            Product("Desk Lamp", 89.0, "Home"),
        ]
        self.selected_category = self.ALL
        self.show_in_stock_only = False
        self.sort_by = SortOption.NAME
        self.products: List[Product] = []
        self._apply_filters()

    @property
    def categories(self) -> List[str]:
        return [self.ALL] + sorted({product.category for product in self._all_products})

    @property
    def total_products(self) -> int:
        return len(self.products)

    @property
    def total_value(self) -> float:
        return sum(product.price for product in self.products)

    def set_category(self, category: str) -> None:
        self.selected_category = category
        self._apply_filters()

    def set_show_in_stock_only(self, value: bool) -> None:
        self.show_in_stock_only = value
        self._apply_filters()

    def set_sort_option(self, option: SortOption) -> None:
        self.sort_by = SortOption(option)
        self._apply_filters()

    def add_to_cart(self, product: Product) -> bool:
        if not product.in_stock:
            if self.delegate:
                self.delegate.show_error(f"Product '{product.name}' is out of stock")
            return False
        if self.delegate:
            self.delegate.show_success(f"Added '{product.name}' to cart")
        return True

    def _apply_filters(self) -> None:
        filtered = self._all_products
        if self.selected_category != self.ALL:
            filtered = [p for p in filtered if p.category == self.selected_category]
        if self.show_in_stock_only:
            filtered = [p for p in filtered if p.in_stock]
        sort_keys: dict = {
            SortOption.NAME: lambda p: p.name,
            SortOption.PRICE: lambda p: p.price,
            SortOption.CATEGORY: lambda p: p.category,
        }
        self.products = sorted(filtered, key=sort_keys[self.sort_by])
        if self.delegate:
            self.delegate.data_did_change()


class ProductCatalogView(ViewModelDelegate):

    def __init__(self, view_model: Optional[ProductCatalogViewModel] = None):
        self.view_model = view_model or ProductCatalogViewModel()
        self.view_model.delegate = self

    def data_did_change(self) -> None:
        names = ", ".join(f"{p.name} ${p.price:.2f}" for p in self.view_model.products)
        narrate("ProductCatalog", f"[{self.view_model.selected_category}] {names}")
        narrate("ProductCatalog", f"Products: {self.view_model.total_products}, "
                                  f"Total Value: ${self.view_model.total_value:.2f}")

    def show_error(self, message: str) -> None:
        narrate("ProductCatalog", f"Error: {message}")

    def show_success(self, message: str) -> None:
        narrate("ProductCatalog", f"Success: {message}")


# =============================================================================
# PLANT COLLECTION
# =============================================================================

@dataclass
class Plant:
    name: str
    watering_frequency: int
    last_watered: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class PlantCollectionViewModel:

    def __init__(self, clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)):
        self.plants: List[Plant] = []
        self._clock = clock

    def add_plant(self, plant: Plant) -> None:
        self.plants.append(plant)

    def remove_plant(self, plant_id: str) -> bool:
        before = len(self.plants)
        self.plants = [plant for plant in self.plants if plant.id != plant_id]
        return len(self.plants) != before

    def update_watering(self, plant_id: str) -> Optional[datetime]:
        for plant in self.plants:
            if plant.id == plant_id:
                plant.last_watered = self._clock()
                return plant.last_watered
        return None


def run_demo() -> None:
    section("User List MVVM")
    view_model = UserListViewModel(UserRepository())
    view = UserListView("UserList", view_model)
    view_model.load_users()
    view.render()
    view_model.search_text = "john"
    view.render()
    view_model.show_active_only = True
    view.render()
    view_model.search_text = ""
    view_model.add_user("Alice Cooper", "alice@example.com", 28)
    view_model.add_user("", "nobody@example.com", 0)
    view_model.toggle_user_status(0)
    view.render()
    second = UserListView("UserList2", view_model)
    second.render()

    section("Product Catalog MVVM")
    catalog = ProductCatalogView()
    narrate("Demo", f"Categories: {catalog.view_model.categories}")
    catalog.view_model.set_category("Electronics")
    catalog.view_model.set_show_in_stock_only(True)
    catalog.view_model.set_sort_option(SortOption.PRICE)
    if catalog.view_model.products:
        catalog.view_model.add_to_cart(catalog.view_model.products[0])
    catalog.view_model.set_category(ProductCatalogViewModel.ALL)
    catalog.view_model.set_show_in_stock_only(False)
    mug = next(p for p in catalog.view_model.products if p.name == "Coffee Mug")
    catalog.view_model.add_to_cart(mug)

    section("Plant Collection MVVM")
    plants = PlantCollectionViewModel()
    fern = Plant("Fern", 3)
    plants.add_plant(fern)
    plants.add_plant(Plant("Cactus", 14))
    for plant in plants.plants:
        narrate("Plants", f"{plant.name}: water every {plant.watering_frequency} days")
    watered = plants.update_watering(fern.id)
    narrate("Plants", f"Watered {fern.name} at {watered.isoformat() if watered else 'never'}")
    plants.remove_plant(fern.id)
    narrate("Plants", f"Remaining plants: {[plant.name for plant in plants.plants]}")
