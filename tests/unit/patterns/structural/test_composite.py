"""Tests for the composite pattern."""

import math

from pattern_catalog.domain.patterns.structural.composite import (
    Department,
    Directory,
    Employee,
    File,
    Menu,
    MenuItem,
    Number,
    Operation,
    Operator,
    Variable,
)


class TestFileSystem:
    """Test files and directories treated uniformly."""

    def setup_method(self):
        """Set up test fixtures."""
        self.root = Directory("root")
        self.pictures = Directory("Pictures")
        self.root.add(File("README.md", 100))
        self.root.add(self.pictures)
        self.pictures.add(File("vacation.jpg", 300))
        self.pictures.add(File("family.png", 200))

    def test_size_is_recursive(self):
        """Test a directory sums its descendants."""
        assert self.root.size() == 600
        assert Directory("empty").size() == 0

    def test_display_indents_children(self):
        """Test the tree rendering."""
        assert self.root.display() == [
            "root/ (600 bytes total)",
            "  README.md (100 bytes)",
            "  Pictures/ (500 bytes total)",
            "    vacation.jpg (300 bytes)",
            "    family.png (200 bytes)",
        ]

    def test_search_is_case_insensitive(self):
        """Test search matches directories and files."""
        names = [c.name for c in self.root.search("PIC")]

        assert names == ["Pictures"]
        assert [c.name for c in self.root.search(".png")] == ["family.png"]

    def test_copy_is_deep(self):
        """Test copies are renamed and independent."""
        duplicate = self.pictures.copy()
        duplicate.remove("Copy of vacation.jpg")

        assert duplicate.name == "Copy of Pictures"
        assert self.pictures.size() == 500
        assert duplicate.size() == 200

    def test_remove_missing(self):
        """Test removing an unknown name reports False."""
        assert not self.root.remove("nothing")
        assert self.root.remove("README.md")


class TestOrganization:
    """Test aggregated budgets and head counts."""

    def setup_method(self):
        """Set up test fixtures."""
        self.company = Department("Corp")
        engineering = Department("Engineering", Employee("Bob", "VP", 150000))
        engineering.add(Employee("David", "Developer", 100000))
        self.company.add(Employee("Alice", "CEO", 200000))
        self.company.add(engineering)

    def test_manager_counts_toward_totals(self):
        """Test budget and head count include managers."""
        assert self.company.salary_budget() == 450000
        assert self.company.head_count() == 3

    def test_find_employee_searches_managers(self):
        """Test managers and members are both searched."""
        assert [e.name for e in self.company.find_employee("bob")] == ["Bob"]
        assert self.company.find_employee("Zed") == []

    def test_remove_member(self):
        """Test removing a member shrinks the totals."""
        self.company.remove("Alice")

        assert self.company.head_count() == 2


class TestMathExpressions:
    """Test expression trees."""

    def test_nested_expression(self):
        """Test ((2 + 3) * 4) + (10 / 2)."""
        expression = Operation(
            Operation(Operation(Number(2), Operator.ADD, Number(3)), Operator.MULTIPLY, Number(4)),
            Operator.ADD,
            Operation(Number(10), Operator.DIVIDE, Number(2)),
        )

        assert expression.evaluate() == 25.0
        assert expression.to_string() == "(((2.0 + 3.0) * 4.0) + (10.0 / 2.0))"

    def test_variables_are_reevaluated(self):
        """Test changing a variable changes the result."""
        x = Variable("x", 5)
        expression = Operation(x, Operator.POWER, Number(2))

        assert expression.evaluate() == 25.0
        x.set_value(3)
        assert expression.evaluate() == 9.0
        assert expression.to_string() == "(x ^ 2.0)"

    def test_division_by_zero_is_infinite(self):
        """Test dividing by zero yields infinity."""
        assert math.isinf(Operation(Number(1), Operator.DIVIDE, Number(0)).evaluate())


class TestMenu:
    """Test nested menus."""

    def test_count_find_and_execute(self):
        """Test leaf counting, nested lookup and action execution."""
        calls = []
        main = Menu("Main")
        file_menu = Menu("File")
        file_menu.add(MenuItem("Save", lambda: calls.append("save"), "Ctrl+S"))
        file_menu.add(MenuItem("Open", lambda: calls.append("open")))
        main.add(file_menu)
        main.add(MenuItem("Quit", lambda: calls.append("quit")))

        assert main.item_count() == 3
        main.find("Save").execute()
        assert calls == ["save"]
        assert main.find("Missing") is None
        assert main.display() == ["Main", "  File", "    Save (Ctrl+S)", "    Open", "  Quit"]
