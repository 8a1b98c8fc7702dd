"""Composite - treat single objects and trees of objects uniformly."""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


# =============================================================================
# FILE SYSTEM
# =============================================================================

class FileSystemComponent(ABC):

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def display(self, indent: str = "") -> List[str]:
        pass

    @abstractmethod
    def search(self, term: str) -> List["FileSystemComponent"]:
        pass

    @abstractmethod
    def copy(self) -> "FileSystemComponent":
        pass

    def _matches(self, term: str) -> bool:
        return term.lower() in self.name.lower()


class File(FileSystemComponent):

    def __init__(self, name: str, size: int, content: str = ""):
        super().__init__(name)
        self._size = size
        self.content = content

    def size(self) -> int:
        return self._size

    def display(self, indent: str = "") -> List[str]:
        return [f"{indent}{self.name} ({self._size} bytes)"]

    def search(self, term: str) -> List[FileSystemComponent]:
        return [self] if self._matches(term) else []

    def copy(self) -> "File":
        return File(f"Copy of {self.name}", self._size, self.content)


class Directory(FileSystemComponent):

    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[FileSystemComponent] = []

    def add(self, component: FileSystemComponent) -> None:
        self.children.append(component)

    def remove(self, name: str) -> bool:
        before = len(self.children)
        self.children = [child for child in self.children if child.name != name]
        return len(self.children) != before

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def display(self, indent: str = "") -> List[str]:
        lines = [f"{indent}{self.name}/ ({self.size()} bytes total)"]
        for child in self.children:
            lines.extend(child.display(indent + "  "))
        return lines

    def search(self, term: str) -> List[FileSystemComponent]:
        results: List[FileSystemComponent] = [self] if self._matches(term) else []
        for child in self.children:
            results.extend(child.search(term))
        return results

    def copy(self) -> "Directory":
        duplicate = Directory(f"Copy of {self.name}")
        for child in self.children:
            duplicate.add(child.copy())
        return duplicate


# =============================================================================
# ORGANIZATION
# =============================================================================

class OrganizationComponent(ABC):

    def __init__(self, name: str, position: str):
        self.name = name
        self.position = position

    @abstractmethod
    def salary_budget(self) -> float:
        pass

    @abstractmethod
    def head_count(self) -> int:
        pass

    @abstractmethod
    def hierarchy(self, indent: str = "") -> List[str]:
        pass

    @abstractmethod
    def find_employee(self, term: str) -> List["Employee"]:
        pass


class Employee(OrganizationComponent):

    def __init__(self, name: str, position: str, salary: float, department: str = ""):
        super().__init__(name, position)
        self.salary = salary
        self.department = department

    def salary_budget(self) -> float:
        return self.salary

    def head_count(self) -> int:
        return 1

    def hierarchy(self, indent: str = "") -> List[str]:
        return [f"{indent}{self.name} - {self.position} (${self.salary:.0f})"]

    def find_employee(self, term: str) -> List["Employee"]:
        return [self] if term.lower() in self.name.lower() else []


class Department(OrganizationComponent):
    """A unit whose optional manager counts toward budget and head count."""

    def __init__(self, name: str, manager: Optional[Employee] = None):
        super().__init__(name, "Department")
        self.manager = manager
        self.members: List[OrganizationComponent] = []

    def add(self, member: OrganizationComponent) -> None:
        self.members.append(member)

    def remove(self, name: str) -> None:
        self.members = [member for member in self.members if member.name != name]

    def salary_budget(self) -> float:
        managed = self.manager.salary_budget() if self.manager else 0.0
        return managed + sum(member.salary_budget() for member in self.members)

    def head_count(self) -> int:
        managed = 1 if self.manager else 0
        return managed + sum(member.head_count() for member in self.members)

    def hierarchy(self, indent: str = "") -> List[str]:
        lines = [f"{indent}{self.name} - Budget: ${self.salary_budget():.0f}, People: {self.head_count()}"]
        if self.manager:
            lines.append(f"{indent}  Manager:")
            lines.extend(self.manager.hierarchy(indent + "    "))
        if self.members:
            lines.append(f"{indent}  Members:")
            for member in self.members:
                lines.extend(member.hierarchy(indent + "    "))
        return lines

    def find_employee(self, term: str) -> List[Employee]:
        results = self.manager.find_employee(term) if self.manager else []
        for member in self.members:
            results.extend(member.find_employee(term))
        return results


# =============================================================================
# MATH EXPRESSIONS
# =============================================================================

class MathExpression(ABC):

    @abstractmethod
    def evaluate(self) -> float:
        pass

    @abstractmethod
    def to_string(self) -> str:
        pass


class Number(MathExpression):

    def __init__(self, value: float):
        self.value = float(value)

    def evaluate(self) -> float:
        return self.value

    def to_string(self) -> str:
        return f"{self.value:.1f}"


class Variable(MathExpression):

    def __init__(self, name: str, value: float = 0.0):
        self.name = name
        self.value = float(value)

    def set_value(self, value: float) -> None:
        self.value = float(value)

    def evaluate(self) -> float:
        return self.value

    def to_string(self) -> str:
        return self.name


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


class Operation(MathExpression):

    def __init__(self, left: MathExpression, operator: Operator, right: MathExpression):
        self.left = left
        self.operator = Operator(operator)
        self.right = right

    def evaluate(self) -> float:
        left = self.left.evaluate()
        right = self.right.evaluate()
        if self.operator is Operator.ADD:
            return left + right
        if self.operator is Operator.SUBTRACT:
            return left - right
        if self.operator is Operator.MULTIPLY:
            return left * right
        if self.operator is Operator.DIVIDE:
            return left / right if right != 0 else math.inf
        return math.pow(left, right)

    def to_string(self) -> str:
        return f"({self.left.to_string()} {self.operator.value} {self.right.to_string()})"


# =============================================================================
# MENU
# =============================================================================

class MenuComponent(ABC):

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def display(self, indent: str = "") -> List[str]:
        pass

    @abstractmethod
    def item_count(self) -> int:
        pass


class MenuItem(MenuComponent):

    def __init__(self, name: str, action: Callable[[], None], shortcut: Optional[str] = None):
        super().__init__(name)
        self.action = action
        self.shortcut = shortcut

    def execute(self) -> None:
        narrate("Menu", f"Executing: {self.name}")
        self.action()

    def display(self, indent: str = "") -> List[str]:
        shortcut = f" ({self.shortcut})" if self.shortcut else ""
        return [f"{indent}{self.name}{shortcut}"]

    def item_count(self) -> int:
        return 1


class Menu(MenuComponent):

    def __init__(self, name: str):
        super().__init__(name)
        self.items: List[MenuComponent] = []

    def add(self, item: MenuComponent) -> None:
        self.items.append(item)

    def remove(self, name: str) -> None:
        self.items = [item for item in self.items if item.name != name]

    def find(self, name: str) -> Optional[MenuComponent]:
        for item in self.items:
            if item.name == name:
                return item
            if isinstance(item, Menu):
                found = item.find(name)
                if found is not None:
                    return found
        return None

    def execute(self) -> None:
        narrate("Menu", f"Opening menu: {self.name}")
        for line in self.display():
            narrate("Menu", line)

    def display(self, indent: str = "") -> List[str]:
        lines = [f"{indent}{self.name}"]
        for item in self.items:
            lines.extend(item.display(indent + "  "))
        return lines

    def item_count(self) -> int:
        return sum(item.item_count() for item in self.items)


def _narrate_lines(lines: List[str]) -> None:
    for line in lines:
        narrate("Demo", line)


def run_demo() -> None:
    section("File System")
    root = Directory("root")
    documents = Directory("Documents")
    pictures = Directory("Pictures")
    work = Directory("Work")
    root.add(documents)
    root.add(pictures)
    documents.add(work)
    documents.add(File("README.md", 1024, "# Project Description"))
    pictures.add(File("vacation.jpg", 2048000))
    pictures.add(File("family.png", 1536000))
    work.add(File("report.docx", 45000))
    work.add(File("presentation.pptx", 8500000))
    _narrate_lines(root.display())
    narrate("Demo", f"Total size: {root.size()} bytes")
    for found in root.search("pic"):
        narrate("Demo", f"Found: {found.name}")
    backup = work.copy()
    narrate("Demo", f"Copied {work.name} to '{backup.name}' with {len(backup.children)} entries")
    pictures.remove("family.png")
    narrate("Demo", f"Pictures after removal: {pictures.size()} bytes")

    section("Organization")
    company = Department("TechCorp")
    engineering = Department("Engineering", Employee("Bob Smith", "VP Engineering", 150000, "Engineering"))
    marketing = Department("Marketing", Employee("Carol Davis", "VP Marketing", 140000, "Marketing"))
    engineering.add(Employee("David Wilson", "Senior Developer", 120000, "Engineering"))
    engineering.add(Employee("Eva Brown", "Developer", 95000, "Engineering"))
    engineering.add(Employee("Frank Miller", "QA Engineer", 85000, "Engineering"))
    marketing.add(Employee("Grace Lee", "Marketing Manager", 90000, "Marketing"))
    marketing.add(Employee("Henry Chen", "Content Creator", 65000, "Marketing"))
    company.add(Employee("Alice Johnson", "CEO", 200000, "Executive"))
    company.add(engineering)
    company.add(marketing)
    _narrate_lines(company.hierarchy())
    for employee in company.find_employee("David"):
        narrate("Demo", f"Found: {employee.name} - {employee.position}")

    section("Math Expressions")
    expression = Operation(
        Operation(Operation(Number(2), Operator.ADD, Number(3)), Operator.MULTIPLY, Number(4)),
        Operator.ADD,
        Operation(Number(10), Operator.DIVIDE, Number(2)),
    )
    narrate("Demo", f"Expression: {expression.to_string()}")
    narrate("Demo", f"Result: {expression.evaluate()}")
    x, y = Variable("x", 5), Variable("y", 3)
    variable_expression = Operation(
        Operation(x, Operator.MULTIPLY, Number(2)),
        Operator.ADD,
        Operation(y, Operator.SUBTRACT, Number(1)),
    )
    narrate("Demo", f"Variable Expression: {variable_expression.to_string()}")
    narrate("Demo", f"With x=5, y=3: {variable_expression.evaluate()}")
    x.set_value(10)
    y.set_value(7)
    narrate("Demo", f"With x=10, y=7: {variable_expression.evaluate()}")
    narrate("Demo", f"Division by zero: {Operation(Number(1), Operator.DIVIDE, Number(0)).evaluate()}")

    section("Menu System")
    main_menu = Menu("Main Menu")
    file_menu = Menu("File")
    edit_menu = Menu("Edit")
    help_menu = Menu("Help")
    for name, shortcut in (("New", "Ctrl+N"), ("Open", "Ctrl+O"), ("Save", "Ctrl+S")):
        file_menu.add(MenuItem(name, lambda n=name: narrate("File", f"{n} file..."), shortcut))
    for name, shortcut in (("Cut", "Ctrl+X"), ("Copy", "Ctrl+C"), ("Paste", "Ctrl+V")):
        edit_menu.add(MenuItem(name, lambda n=name: narrate("Edit", f"{n} selection..."), shortcut))
    help_menu.add(MenuItem("About", lambda: narrate("Help", "Showing about dialog...")))
    help_menu.add(MenuItem("User Guide", lambda: narrate("Help", "Opening user guide...")))
    main_menu.add(file_menu)
    main_menu.add(edit_menu)
    main_menu.add(help_menu)
    _narrate_lines(main_menu.display())
    narrate("Demo", f"Total menu items: {main_menu.item_count()}")
    save = main_menu.find("Save")
    if save is not None:
        save.execute()
