"""Memento - capture and restore object state without exposing internals.

Mementos are frozen pydantic models stamped with their creation time.
Caretakers (histories, save managers, backup managers) only store and hand
them back; only the originator reads their contents.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.infrastructure.narration import narrate, section


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Memento(BaseModel):
    """Immutable snapshot base."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=_now)


# =============================================================================
# TEXT EDITOR
# =============================================================================

class TextMemento(Memento):
    content: str
    cursor_position: int


class TextEditor:
    """Originator: text with a cursor."""

    def __init__(self):
        self._content = ""
        self._cursor = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def write(self, text: str) -> None:
        position = self._cursor
        self._content = self._content[:position] + text + self._content[position:]
        self._cursor += len(text)
        narrate("TextEditor", f"Written: '{text}' at position {position}")

    def delete(self, length: int) -> int:
        """Delete up to length characters before the cursor."""
        actual = max(0, min(length, self._cursor))
        self._content = self._content[:self._cursor - actual] + self._content[self._cursor:]
        self._cursor -= actual
        narrate("TextEditor", f"Deleted {actual} characters")
        return actual

    def set_cursor(self, position: int) -> None:
        self._cursor = max(0, min(position, len(self._content)))
        narrate("TextEditor", f"Cursor moved to position {self._cursor}")

    def create_memento(self) -> TextMemento:
        return TextMemento(content=self._content, cursor_position=self._cursor)

    def restore(self, memento: TextMemento) -> None:
        self._content = memento.content
        self._cursor = memento.cursor_position
        narrate("TextEditor", f"Restored: content='{self._content}', cursor={self._cursor}")

    def current_state(self) -> str:
        return f"Content: '{self._content}', Cursor: {self._cursor}"


class TextEditorHistory:
    """Caretaker with bounded undo/redo over text snapshots."""

    def __init__(self, max_size: int = 10):
        self.max_size = max_size
        self._mementos: List[TextMemento] = []
        self._current_index = -1

    def __len__(self) -> int:
        return len(self._mementos)

    @property
    def current_index(self) -> int:
        return self._current_index

    def save(self, memento: TextMemento) -> None:
        self._current_index += 1
        del self._mementos[self._current_index:]
        self._mementos.append(memento)

        if len(self._mementos) > self.max_size:
            self._mementos.pop(0)
            self._current_index = len(self._mementos) - 1

        narrate("History", f"Saved memento. History size: {len(self._mementos)}")

    def undo(self) -> Optional[TextMemento]:
        if not self.can_undo():
            narrate("History", "Cannot undo: at beginning of history")
            return None
        self._current_index -= 1
        return self._mementos[self._current_index]

    def redo(self) -> Optional[TextMemento]:
        if not self.can_redo():
            narrate("History", "Cannot redo: at end of history")
            return None
        self._current_index += 1
        return self._mementos[self._current_index]

    def can_undo(self) -> bool:
        return self._current_index > 0

    def can_redo(self) -> bool:
        return self._current_index < len(self._mementos) - 1


# =============================================================================
# GAME STATE
# =============================================================================

class GameMemento(Memento):
    player_name: str
    level: int
    score: int
    health: int
    position: Tuple[int, int]
    inventory: Tuple[str, ...]


class GameState:

    def __init__(self, player_name: str):
        self.player_name = player_name
        self.level = 1
        self.score = 0
        self.health = 100
        self.position: Tuple[int, int] = (0, 0)
        self.inventory: List[str] = []

    def level_up(self) -> None:
        self.level += 1
        self.score += 1000
        self.health = 100
        narrate("Game", f"Level up! Now at level {self.level}")

    def add_score(self, points: int) -> None:
        self.score += points
        narrate("Game", f"Added {points} points. Total score: {self.score}")

    def take_damage(self, damage: int) -> None:
        self.health = max(0, self.health - damage)
        narrate("Game", f"Took {damage} damage. Health: {self.health}")

    def move_to(self, x: int, y: int) -> None:
        self.position = (x, y)
        narrate("Game", f"Moved to position ({x}, {y})")

    def add_item(self, item: str) -> None:
        self.inventory.append(item)
        narrate("Game", f"Added {item} to inventory")

    def create_save_point(self) -> GameMemento:
        return GameMemento(
            player_name=self.player_name,
            level=self.level,
            score=self.score,
            health=self.health,
            position=self.position,
            inventory=tuple(self.inventory),
        )

    def load_save_point(self, memento: GameMemento) -> None:
        self.player_name = memento.player_name
        self.level = memento.level
        self.score = memento.score
        self.health = memento.health
        self.position = memento.position
        self.inventory = list(memento.inventory)
        narrate("Game", f"Loaded save point from {memento.timestamp.isoformat()}")

    def status(self) -> str:
        x, y = self.position
        return (
            f"Player: {self.player_name}\n"
            f"Level: {self.level}, Score: {self.score}, Health: {self.health}\n"
            f"Position: ({x}, {y})\n"
            f"Inventory: {', '.join(self.inventory)}"
        )


class SaveManager:
    """Named save slots plus a bounded auto-save queue."""

    def __init__(self, max_auto_saves: int = 5):
        self.max_auto_saves = max_auto_saves
        self._slots: Dict[str, GameMemento] = {}
        self._auto_saves: List[GameMemento] = []

    def save_game(self, memento: GameMemento, slot: str) -> None:
        self._slots[slot] = memento
        narrate("SaveManager", f"Game saved to slot '{slot}'")

    def load_game(self, slot: str) -> Optional[GameMemento]:
        memento = self._slots.get(slot)
        if memento is None:
            narrate("SaveManager", f"No save found in slot '{slot}'")
        return memento

    def auto_save(self, memento: GameMemento) -> None:
        self._auto_saves.append(memento)
        if len(self._auto_saves) > self.max_auto_saves:
            self._auto_saves.pop(0)
        narrate("SaveManager", f"Auto-saved. Auto-save count: {len(self._auto_saves)}")

    @property
    def auto_saves(self) -> List[GameMemento]:
        return list(self._auto_saves)

    def latest_auto_save(self) -> Optional[GameMemento]:
        return self._auto_saves[-1] if self._auto_saves else None

    def list_save_slots(self) -> List[str]:
        return sorted(self._slots)


# =============================================================================
# CONFIGURATION BACKUPS
# =============================================================================

class ConfigMemento(Memento):
    settings: Dict[str, Any]


class AppConfiguration:

    DEFAULTS = {
        "theme": "light",
        "font_size": 14,
        "notifications": True,
        "auto_save": True,
        "language": "en",
    }

    def __init__(self):
        self._settings: Dict[str, Any] = dict(self.DEFAULTS)

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        narrate("AppConfiguration", f"Set {key} = {value}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    @property
    def settings(self) -> Dict[str, Any]:
        return dict(self._settings)

    def create_backup(self) -> ConfigMemento:
        return ConfigMemento(settings=copy.deepcopy(self._settings))

    def restore_from_backup(self, memento: ConfigMemento) -> None:
        self._settings = copy.deepcopy(memento.settings)
        narrate("AppConfiguration", f"Restored configuration from backup created at {memento.timestamp.isoformat()}")


class BackupManager:

    def __init__(self):
        self._backups: Dict[str, ConfigMemento] = {}

    def create(self, memento: ConfigMemento, name: str) -> None:
        self._backups[name] = memento
        narrate("BackupManager", f"Configuration backup '{name}' created")

    def restore(self, name: str) -> Optional[ConfigMemento]:
        backup = self._backups.get(name)
        if backup is None:
            narrate("BackupManager", f"Backup '{name}' not found")
        return backup

    def list(self) -> List[str]:
        return sorted(self._backups)

    def delete(self, name: str) -> None:
        self._backups.pop(name, None)
        narrate("BackupManager", f"Deleted backup '{name}'")


def run_demo(text_history_limit: int = 10, auto_save_limit: int = 5) -> None:
    section("Text Editor with Undo/Redo")
    editor = TextEditor()
    history = TextEditorHistory(text_history_limit)
    history.save(editor.create_memento())
    editor.write("Hello")
    history.save(editor.create_memento())
    editor.write(" World")
    history.save(editor.create_memento())
    editor.write("!")
    narrate("Demo", f"Current state: {editor.current_state()}")

    for label, memento in (("undo", history.undo()), ("second undo", history.undo()), ("redo", history.redo())):
        if memento is not None:
            editor.restore(memento)
            narrate("Demo", f"After {label}: {editor.current_state()}")

    section("Game Save System")
    game = GameState("Player1")
    saves = SaveManager(auto_save_limit)
    game.add_score(500)
    game.move_to(10, 5)
    game.add_item("Sword")
    checkpoint = game.create_save_point()
    saves.save_game(checkpoint, "checkpoint1")
    saves.auto_save(checkpoint)

    game.level_up()
    game.add_item("Shield")
    game.move_to(20, 15)
    narrate("Demo", f"Before loading:\n{game.status()}")

    loaded = saves.load_game("checkpoint1")
    if loaded is not None:
        game.load_save_point(loaded)
        narrate("Demo", f"After loading checkpoint1:\n{game.status()}")

    section("Configuration Backup")
    config = AppConfiguration()
    backups = BackupManager()
    narrate("Demo", f"Default settings: {config.settings}")
    backups.create(config.create_backup(), "default")
    config.set("theme", "dark")
    config.set("font_size", 16)
    config.set("notifications", False)
    narrate("Demo", f"Modified settings: {config.settings}")
    backup = backups.restore("default")
    if backup is not None:
        config.restore_from_backup(backup)
        narrate("Demo", f"Restored settings: {config.settings}")

    section("Multiple Checkpoints")
    editor2 = TextEditor()
    history2 = TextEditorHistory(max_size=3)
    for step in range(1, 6):
        history2.save(editor2.create_memento())
        editor2.write(f"Step{step} ")
    narrate("Demo", f"Final state: {editor2.current_state()}")

    undo_count = 0
    while history2.can_undo() and undo_count < 3:
        memento = history2.undo()
        editor2.restore(memento)
        undo_count += 1
        narrate("Demo", f"Undo {undo_count}: {editor2.current_state()}")
