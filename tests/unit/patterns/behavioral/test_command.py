"""Tests for the command pattern."""

from pattern_catalog.domain.patterns.behavioral.command import (
    CommandManager,
    CreateFileCommand,
    DeleteFileCommand,
    DeleteTextCommand,
    FileSystem,
    InsertTextCommand,
    Light,
    MacroCommand,
    RemoteControl,
    ReplaceTextCommand,
    SetBrightnessCommand,
    TextEditor,
    Thermostat,
    TurnOnCommand,
)


class TestTextEditorCommands:
    """Test undoable text editing."""

    def setup_method(self):
        """Set up test fixtures."""
        self.editor = TextEditor()
        self.manager = CommandManager()

    def test_insert_undo_redo(self):
        """Test an insert can be undone and redone."""
        self.manager.execute(InsertTextCommand(self.editor, "Hello", 0))
        self.manager.execute(InsertTextCommand(self.editor, " World", 5))

        assert self.editor.content == "Hello World"
        assert self.manager.undo()
        assert self.editor.content == "Hello"
        assert self.manager.redo()
        assert self.editor.content == "Hello World"

    def test_delete_restores_removed_text(self):
        """Test delete remembers what it removed."""
        self.editor.insert("Hello World", 0)
        command = DeleteTextCommand(self.editor, 5, 6)

        self.manager.execute(command)
        assert self.editor.content == "Hello"
        self.manager.undo()

        assert self.editor.content == "Hello World"
        assert command.deleted_text == " World"

    def test_replace_undo(self):
        """Test replace restores the original text."""
        self.editor.insert("Hello World", 0)

        self.manager.execute(ReplaceTextCommand(self.editor, 6, 5, "Python"))
        assert self.editor.content == "Hello Python"
        self.manager.undo()

        assert self.editor.content == "Hello World"

    def test_new_command_discards_redo(self):
        """Test executing after undo truncates the redo branch."""
        self.manager.execute(InsertTextCommand(self.editor, "A", 0))
        self.manager.execute(InsertTextCommand(self.editor, "B", 1))
        self.manager.undo()

        self.manager.execute(InsertTextCommand(self.editor, "C", 1))

        assert self.editor.content == "AC"
        assert not self.manager.can_redo()
        assert len(self.manager.history) == 2

    def test_history_is_bounded(self):
        """Test the oldest commands drop out of a full history."""
        manager = CommandManager(max_history_size=2)
        for index, char in enumerate("abc"):
            manager.execute(InsertTextCommand(self.editor, char, index))

        assert len(manager.history) == 2
        assert manager.current_index == 1
        assert manager.history[0].description() == "Insert 'b' at position 1"

    def test_undo_and_redo_on_empty_history(self, transcript):
        """Test boundary undo/redo report and return False."""
        assert not self.manager.undo()
        assert not self.manager.redo()
        assert transcript.contains("Cannot undo")
        assert transcript.contains("Cannot redo")

    def test_macro_undoes_in_reverse(self):
        """Test a macro is a single undoable step."""
        macro = MacroCommand("Greeting", [
            InsertTextCommand(self.editor, "Hello", 0),
            InsertTextCommand(self.editor, "!", 5),
        ])

        self.manager.execute(macro)
        assert self.editor.content == "Hello!"
        self.manager.undo()

        assert self.editor.content == ""
        assert macro.description() == "Macro: Greeting (2 commands)"

    def test_history_description_marks_current(self):
        """Test the current position is marked."""
        self.manager.execute(InsertTextCommand(self.editor, "A", 0))

        description = self.manager.history_description()

        assert description.splitlines()[1].startswith("→ 1.")


class TestSmartHomeCommands:
    """Test device commands and scenes."""

    def test_brightness_undo_restores_previous(self):
        """Test brightness undo reads the light's previous level."""
        light = Light("Living Room Light", brightness=80)
        manager = CommandManager()

        manager.execute(SetBrightnessCommand(light, 30))
        manager.undo()

        assert light.brightness == 80

    def test_brightness_is_clamped(self):
        """Test brightness stays within 0-100."""
        light = Light("Lamp")

        light.set_brightness(150)

        assert light.brightness == 100

    def test_scenes_toggle_all_devices(self):
        """Test good morning and good night macros."""
        remote = RemoteControl()
        light, thermostat = Light("Light"), Thermostat("Thermostat")
        remote.add_device(light)
        remote.add_device(thermostat)

        remote.execute(remote.good_morning_scene())
        assert light.is_on and thermostat.is_on
        remote.execute(remote.good_night_scene())
        assert not light.is_on and not thermostat.is_on
        remote.undo()

        assert light.is_on and thermostat.is_on

    def test_empty_slot(self, transcript):
        """Test pressing an unassigned slot."""
        remote = RemoteControl()
        remote.set_slot(1, TurnOnCommand(Light("Porch")))

        assert remote.press(1)
        assert not remote.press(2)
        assert transcript.contains("Slot 2 is empty")


class TestFileCommands:
    """Test file system commands."""

    def test_delete_undo_recreates_file(self):
        """Test deleting then undoing restores content."""
        file_system = FileSystem()
        manager = CommandManager()
        manager.execute(CreateFileCommand(file_system, "notes.txt", "hi"))
        manager.execute(DeleteFileCommand(file_system, "notes.txt"))
        assert file_system.list() == []

        manager.undo()

        assert file_system.read("notes.txt") == "hi"

    def test_rename_missing_file(self):
        """Test renaming an unknown file fails."""
        assert not FileSystem().rename("a", "b")
