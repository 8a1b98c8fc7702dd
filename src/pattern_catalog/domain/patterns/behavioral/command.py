"""Command - encapsulate requests as objects with undo/redo support."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


class Command(ABC):
    """Undoable action."""

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


# =============================================================================
# TEXT EDITOR
# =============================================================================

class TextEditor:
    """Receiver holding text and a cursor."""

    def __init__(self):
        self.content = ""
        self.cursor = 0

    def insert(self, text: str, at: int) -> None:
        position = min(max(at, 0), len(self.content))
        self.content = self.content[:position] + text + self.content[position:]
        self.cursor = position + len(text)
        narrate("TextEditor", f"Inserted '{text}' at position {position}")

    def delete(self, start: int, length: int) -> str:
        """Delete up to length characters from start and return them."""
        actual_start = min(max(start, 0), len(self.content))
        actual_length = max(0, min(length, len(self.content) - actual_start))
        removed = self.content[actual_start:actual_start + actual_length]
        self.content = self.content[:actual_start] + self.content[actual_start + actual_length:]
        self.cursor = actual_start
        narrate("TextEditor", f"Deleted {actual_length} characters from position {actual_start}")
        return removed

    def replace(self, start: int, length: int, text: str) -> str:
        removed = self.delete(start, length)
        self.insert(text, start)
        return removed

    def set_cursor(self, position: int) -> None:
        self.cursor = max(0, min(position, len(self.content)))

    def clear(self) -> None:
        self.content = ""
        self.cursor = 0


class InsertTextCommand(Command):

    def __init__(self, editor: TextEditor, text: str, position: int):
        self.editor = editor
        self.text = text
        self.position = position

    def execute(self) -> None:
        self.editor.insert(self.text, self.position)

    def undo(self) -> None:
        self.editor.delete(self.position, len(self.text))

    def description(self) -> str:
        return f"Insert '{self.text}' at position {self.position}"


class DeleteTextCommand(Command):

    def __init__(self, editor: TextEditor, start: int, length: int):
        self.editor = editor
        self.start = start
        self.length = length
        self.deleted_text = ""

    def execute(self) -> None:
        self.deleted_text = self.editor.delete(self.start, self.length)

    def undo(self) -> None:
        self.editor.insert(self.deleted_text, self.start)

    def description(self) -> str:
        return f"Delete {self.length} characters from position {self.start}"


class ReplaceTextCommand(Command):

    def __init__(self, editor: TextEditor, start: int, length: int, new_text: str):
        self.editor = editor
        self.start = start
        self.length = length
        self.new_text = new_text
        self.original_text = ""

    def execute(self) -> None:
        self.original_text = self.editor.replace(self.start, self.length, self.new_text)

    def undo(self) -> None:
        self.editor.replace(self.start, len(self.new_text), self.original_text)

    def description(self) -> str:
        return f"Replace {self.length} characters at position {self.start} with '{self.new_text}'"


class MacroCommand(Command):
    """Composite command; undoes its parts in reverse order."""

    def __init__(self, name: str, commands: List[Command]):
        self.name = name
        self.commands = list(commands)

    def execute(self) -> None:
        narrate("Macro", f"Executing macro: {self.name}")
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        narrate("Macro", f"Undoing macro: {self.name}")
        for command in reversed(self.commands):
            command.undo()

    def description(self) -> str:
        return f"Macro: {self.name} ({len(self.commands)} commands)"


class CommandManager:
    """
    Invoker with a bounded undo/redo history.

    Executing a new command discards anything that could have been redone.
    """

    def __init__(self, max_history_size: int = 50):
        self.max_history_size = max_history_size
        self._history: List[Command] = []
        self._current_index = -1

    @property
    def history(self) -> List[Command]:
        return list(self._history)

    @property
    def current_index(self) -> int:
        return self._current_index

    def execute(self, command: Command) -> None:
        command.execute()

        del self._history[self._current_index + 1:]
        self._history.append(command)
        self._current_index += 1

        if len(self._history) > self.max_history_size:
            self._history.pop(0)
            self._current_index = len(self._history) - 1

        narrate("CommandManager", f"Executed: {command.description()}")

    def undo(self) -> bool:
        if not self.can_undo():
            narrate("CommandManager", "Cannot undo: no commands in history")
            return False

        command = self._history[self._current_index]
        command.undo()
        self._current_index -= 1
        narrate("CommandManager", f"Undid: {command.description()}")
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            narrate("CommandManager", "Cannot redo: at end of history")
            return False

        self._current_index += 1
        command = self._history[self._current_index]
        command.execute()
        narrate("CommandManager", f"Redid: {command.description()}")
        return True

    def can_undo(self) -> bool:
        return self._current_index >= 0

    def can_redo(self) -> bool:
        return self._current_index < len(self._history) - 1

    def history_description(self) -> str:
        lines = [f"Command History ({len(self._history)} commands):"]
        for index, command in enumerate(self._history):
            marker = "→ " if index == self._current_index else "  "
            lines.append(f"{marker}{index + 1}. {command.description()}")
        return "\n".join(lines)

    def clear_history(self) -> None:
        self._history.clear()
        self._current_index = -1
        narrate("CommandManager", "Command history cleared")


# =============================================================================
# SMART HOME
# =============================================================================

class SmartDevice(ABC):

    def __init__(self, name: str):
        self.name = name
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        narrate(self.name, "turned ON")

    def turn_off(self) -> None:
        self.is_on = False
        narrate(self.name, "turned OFF")

    @abstractmethod
    def status(self) -> str:
        pass


class Light(SmartDevice):

    def __init__(self, name: str, brightness: int = 100):
        super().__init__(name)
        self.brightness = brightness

    def set_brightness(self, level: int) -> None:
        self.brightness = max(0, min(100, level))
        narrate(self.name, f"brightness set to {self.brightness}%")

    def status(self) -> str:
        return f"{self.name}: {'ON' if self.is_on else 'OFF'}, Brightness: {self.brightness}%"


class Thermostat(SmartDevice):

    def __init__(self, name: str, temperature: int = 72):
        super().__init__(name)
        self.temperature = temperature

    def set_temperature(self, temperature: int) -> None:
        self.temperature = temperature
        narrate(self.name, f"temperature set to {temperature}F")

    def status(self) -> str:
        return f"{self.name}: {'ON' if self.is_on else 'OFF'}, Temperature: {self.temperature}F"


class TurnOnCommand(Command):

    def __init__(self, device: SmartDevice):
        self.device = device

    def execute(self) -> None:
        self.device.turn_on()

    def undo(self) -> None:
        self.device.turn_off()

    def description(self) -> str:
        return f"Turn ON {self.device.name}"


class TurnOffCommand(Command):

    def __init__(self, device: SmartDevice):
        self.device = device

    def execute(self) -> None:
        self.device.turn_off()

    def undo(self) -> None:
        self.device.turn_on()

    def description(self) -> str:
        return f"Turn OFF {self.device.name}"


class SetBrightnessCommand(Command):

    def __init__(self, light: Light, brightness: int):
        self.light = light
        self.new_brightness = brightness
        self.previous_brightness: Optional[int] = None

    def execute(self) -> None:
        self.previous_brightness = self.light.brightness
        self.light.set_brightness(self.new_brightness)

    def undo(self) -> None:
        if self.previous_brightness is not None:
            self.light.set_brightness(self.previous_brightness)

    def description(self) -> str:
        return f"Set {self.light.name} brightness to {self.new_brightness}%"


class RemoteControl:
    """Invoker with per-slot commands and whole-home scenes."""

    def __init__(self, command_manager: Optional[CommandManager] = None):
        self.command_manager = command_manager or CommandManager()
        self.devices: List[SmartDevice] = []
        self.slots: Dict[int, Command] = {}

    def add_device(self, device: SmartDevice) -> None:
        self.devices.append(device)
        narrate("Remote", f"Added device: {device.name}")

    def set_slot(self, slot: int, command: Command) -> None:
        self.slots[slot] = command

    def press(self, slot: int) -> bool:
        command = self.slots.get(slot)
        if command is None:
            narrate("Remote", f"Slot {slot} is empty")
            return False
        self.execute(command)
        return True

    def execute(self, command: Command) -> None:
        self.command_manager.execute(command)

    def undo(self) -> bool:
        return self.command_manager.undo()

    def redo(self) -> bool:
        return self.command_manager.redo()

    def good_morning_scene(self) -> MacroCommand:
        return MacroCommand("Good Morning", [TurnOnCommand(d) for d in self.devices])

    def good_night_scene(self) -> MacroCommand:
        return MacroCommand("Good Night", [TurnOffCommand(d) for d in self.devices])

    def device_status(self) -> List[str]:
        return [device.status() for device in self.devices]


# =============================================================================
# FILES
# =============================================================================

class FileSystem:
    """In-memory file store."""

    def __init__(self):
        self._files: Dict[str, str] = {}

    def create(self, name: str, content: str = "") -> None:
        self._files[name] = content
        narrate("FileSystem", f"Created file: {name}")

    def delete(self, name: str) -> Optional[str]:
        content = self._files.pop(name, None)
        narrate("FileSystem", f"Deleted file: {name}")
        return content

    def write(self, name: str, content: str) -> Optional[str]:
        previous = self._files.get(name)
        self._files[name] = content
        narrate("FileSystem", f"Wrote to file: {name}")
        return previous

    def rename(self, old_name: str, new_name: str) -> bool:
        if old_name not in self._files:
            return False
        self._files[new_name] = self._files.pop(old_name)
        narrate("FileSystem", f"Renamed file: {old_name} -> {new_name}")
        return True

    def read(self, name: str) -> Optional[str]:
        return self._files.get(name)

    def list(self) -> List[str]:
        return sorted(self._files)


class CreateFileCommand(Command):

    def __init__(self, file_system: FileSystem, file_name: str, content: str = ""):
        self.file_system = file_system
        self.file_name = file_name
        self.content = content

    def execute(self) -> None:
        self.file_system.create(self.file_name, self.content)

    def undo(self) -> None:
        self.file_system.delete(self.file_name)

    def description(self) -> str:
        return f"Create file: {self.file_name}"


class DeleteFileCommand(Command):

    def __init__(self, file_system: FileSystem, file_name: str):
        self.file_system = file_system
        self.file_name = file_name
        self.deleted_content: Optional[str] = None

    def execute(self) -> None:
        self.deleted_content = self.file_system.delete(self.file_name)

    def undo(self) -> None:
        if self.deleted_content is not None:
            self.file_system.create(self.file_name, self.deleted_content)

    def description(self) -> str:
        return f"Delete file: {self.file_name}"


def run_demo(max_history_size: int = 50) -> None:
    section("Text Editor with Undo/Redo")
    editor = TextEditor()
    manager = CommandManager(max_history_size)

    manager.execute(InsertTextCommand(editor, "Hello", 0))
    manager.execute(InsertTextCommand(editor, " World", 5))
    manager.execute(InsertTextCommand(editor, "!", 11))
    narrate("Demo", f"Current content: '{editor.content}'")

    manager.undo()
    narrate("Demo", f"After undo: '{editor.content}'")
    manager.undo()
    narrate("Demo", f"After second undo: '{editor.content}'")
    manager.redo()
    narrate("Demo", f"After redo: '{editor.content}'")

    manager.execute(ReplaceTextCommand(editor, 5, 6, " Python"))
    narrate("Demo", f"After replace: '{editor.content}'")

    section("Macro Command")
    editor.clear()
    macro = MacroCommand("Create Function Template", [
        InsertTextCommand(editor, "func", 0),
        InsertTextCommand(editor, " example() {\n", 4),
        InsertTextCommand(editor, "    print(\"Hello\")\n", 17),
        InsertTextCommand(editor, "}", 36),
    ])
    manager.execute(macro)
    narrate("Demo", f"After macro execution: {editor.content!r}")
    manager.undo()
    narrate("Demo", f"After macro undo: '{editor.content}'")

    section("Smart Home Remote Control")
    remote = RemoteControl(CommandManager(max_history_size))
    living_room = Light("Living Room Light")
    kitchen = Light("Kitchen Light")
    thermostat = Thermostat("Main Thermostat")
    for device in (living_room, kitchen, thermostat):
        remote.add_device(device)

    remote.execute(TurnOnCommand(living_room))
    remote.execute(SetBrightnessCommand(living_room, 75))
    remote.execute(TurnOnCommand(thermostat))
    for status in remote.device_status():
        narrate("Demo", status)

    remote.execute(remote.good_night_scene())
    for status in remote.device_status():
        narrate("Demo", status)
    remote.undo()
    for status in remote.device_status():
        narrate("Demo", status)

    section("File Operations")
    files = FileSystem()
    file_manager = CommandManager(max_history_size)
    file_manager.execute(CreateFileCommand(files, "test.txt", "Hello World"))
    file_manager.execute(CreateFileCommand(files, "data.json", "{}"))
    narrate("Demo", f"Files: {files.list()}")
    file_manager.execute(DeleteFileCommand(files, "test.txt"))
    narrate("Demo", f"After deletion: {files.list()}")
    file_manager.undo()
    narrate("Demo", f"After undo: {files.list()}")

    section("Command History")
    narrate("Demo", remote.command_manager.history_description())
