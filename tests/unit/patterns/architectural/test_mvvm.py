"""Tests for the MVVM pattern."""

from datetime import datetime, timezone

from pattern_catalog.domain.patterns.architectural.mvvm import (
    Plant,
    PlantCollectionViewModel,
    Product,
    ProductCatalogViewModel,
    SortOption,
    User,
    UserListView,
    UserListViewModel,
    UserRepository,
)


class TestUserListViewModel:
    """Test filtering and mutations exposed to the view."""

    def setup_method(self):
        """Set up test fixtures."""
        self.view_model = UserListViewModel(UserRepository())
        self.view = UserListView("Users", self.view_model)
        self.view_model.load_users()

    def test_load_sorts_by_name(self):
        """Test loaded users are sorted and loading is reset."""
        assert [u.name for u in self.view_model.users] == ["Bob Johnson", "Jane Smith", "John Doe"]
        assert not self.view_model.is_loading
        assert self.view.successes == ["Users loaded successfully"]

    def test_search_matches_name_or_email(self):
        """Test search is case-insensitive over name and email."""
        self.view_model.search_text = "JOHN"

        assert [u.name for u in self.view_model.users] == ["Bob Johnson", "John Doe"]

    def test_filters_compose(self):
        """Test active-only is applied together with search."""
        self.view_model.set_search_text("john")
        self.view_model.set_show_active_only(True)

        assert [u.name for u in self.view_model.users] == ["John Doe"]
        assert self.view_model.active_user_count == 1

    def test_filter_change_notifies_view(self):
        """Test every filter change triggers a re-render."""
        before = self.view.render_count

        self.view_model.search_text = "jane"

        assert self.view.render_count == before + 1

    def test_add_user(self):
        """Test a valid user is added and an invalid one reported."""
        assert self.view_model.add_user("Alice", "alice@example.com", 28)
        assert not self.view_model.add_user("", "x@example.com", 0)

        assert self.view_model.user_count == 4
        assert self.view.errors == ["Invalid user data"]

    def test_toggle_and_delete(self):
        """Test index-based mutations operate on the visible list."""
        assert self.view_model.toggle_user_status(0)
        assert self.view_model.users[0].is_active

        assert self.view_model.delete_user(0)
        assert "Bob Johnson" not in [u.name for u in self.view_model.users]

    def test_bad_index_is_ignored(self):
        """Test out-of-range indexes return False."""
        assert not self.view_model.delete_user(99)
        assert not self.view_model.toggle_user_status(-1)

    def test_update_unknown_user_fails(self):
        """Test updating a user the repository does not know."""
        assert not self.view_model.update_user(User("Ghost", "g@example.com", 40))
        assert self.view.errors == ["Failed to update user"]

    def test_display_lines(self):
        """Test view-ready text for a user."""
        user = User("Bob", "bob@example.com", 35, is_active=False)

        assert UserListViewModel.display_lines(user) == ["Bob", "bob@example.com", "Age: 35", "Inactive"]


class TestProductCatalogViewModel:
    """Test catalog filtering and sorting."""

    def setup_method(self):
        """Set up test fixtures."""
        self.view_model = ProductCatalogViewModel()

    def test_categories(self):
        """Test the category list starts with All."""
        assert self.view_model.categories == ["All", "Electronics", "Home"]

    def test_category_stock_and_price_sort(self):
        """Test filters and sort combine."""
        self.view_model.set_category("Electronics")
        self.view_model.set_show_in_stock_only(True)
        self.view_model.set_sort_option(SortOption.PRICE)

        assert [p.name for p in self.view_model.products] == ["Wireless Headphones", "iPhone 15", "MacBook Pro"]
        assert self.view_model.total_value == 3297.0

    def test_out_of_stock_cannot_be_added(self):
        """Test add to cart refuses out-of-stock products."""
        assert not self.view_model.add_to_cart(Product("Mug", 15.0, "Home", in_stock=False))
        assert self.view_model.add_to_cart(Product("Lamp", 89.0, "Home"))


class TestPlantCollectionViewModel:
    """Test plant bookkeeping."""

    def test_watering_uses_clock(self):
        """Test the injected clock stamps the watering."""
        moment = datetime(2024, 5, 1, tzinfo=timezone.utc)
        view_model = PlantCollectionViewModel(clock=lambda: moment)
        fern = Plant("Fern", 3)
        view_model.add_plant(fern)

        assert view_model.update_watering(fern.id) == moment
        assert fern.last_watered == moment
        assert view_model.update_watering("missing") is None

    def test_remove_plant(self):
        """Test removal by id."""
        view_model = PlantCollectionViewModel()
        cactus = Plant("Cactus", 14)
        view_model.add_plant(cactus)

        assert view_model.remove_plant(cactus.id)
        assert not view_model.remove_plant(cactus.id)
