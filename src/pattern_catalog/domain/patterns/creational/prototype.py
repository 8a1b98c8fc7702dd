"""Prototype - create new objects by cloning configured instances."""

import copy
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


class Prototype(ABC):

    @abstractmethod
    def clone(self) -> "Prototype":
        pass


# =============================================================================
# GAME CHARACTER
# =============================================================================

class Equipment(Prototype):

    def __init__(self, items: Optional[List[str]] = None):
        self.items: List[str] = list(items or [])

    def add_item(self, item: str) -> None:
        self.items.append(item)

    def clone(self) -> "Equipment":
        return Equipment(self.items)


class GameCharacter(Prototype):

    def __init__(self, name: str, character_class: str, level: int = 1,
                 health: int = 100, mana: int = 50, announce: bool = True):
        self.name = name
        self.character_class = character_class
        self.level = level
        self.health = health
        self.mana = mana
        self.equipment = Equipment()
        self.skills: List[str] = []
        self.id = str(uuid.uuid4())
        if announce:
            narrate("GameCharacter", f"Creating new character: {name} ({character_class})")

    def clone(self) -> "GameCharacter":
        cloned = GameCharacter(self.name, self.character_class, self.level,
                               self.health, self.mana, announce=False)
        cloned.equipment = self.equipment.clone()
        cloned.skills = list(self.skills)
        narrate("GameCharacter", f"Cloned character: {self.name} ({self.character_class}) - New ID: {cloned.id}")
        return cloned

    def level_up(self) -> None:
        self.level += 1
        self.health += 20
        self.mana += 10
        narrate(self.name, f"{self.name} leveled up to {self.level}!")

    def add_skill(self, skill: str) -> None:
        self.skills.append(skill)
        narrate(self.name, f"{self.name} learned new skill: {skill}")

    def equip_item(self, item: str) -> None:
        self.equipment.add_item(item)
        narrate(self.name, f"{self.name} equipped: {item}")

    def info(self) -> str:
        return "\n".join([
            f"Character: {self.name} ({self.character_class})",
            f"ID: {self.id}",
            f"Level: {self.level}, Health: {self.health}, Mana: {self.mana}",
            f"Skills: {', '.join(self.skills)}",
            f"Equipment: {', '.join(self.equipment.items)}",
        ])


# =============================================================================
# DOCUMENT TEMPLATE
# =============================================================================

class DocumentFormatting(Prototype):

    def __init__(self):
        self.font_size = 12
        self.font_family = "Arial"
        self.line_spacing = 1.0
        self.margins: Dict[str, float] = {"top": 1.0, "bottom": 1.0, "left": 1.0, "right": 1.0}

    def clone(self) -> "DocumentFormatting":
        cloned = DocumentFormatting()
        cloned.font_size = self.font_size
        cloned.font_family = self.font_family
        cloned.line_spacing = self.line_spacing
        cloned.margins = dict(self.margins)
        return cloned


class DocumentTemplate(Prototype):

    def __init__(self, template_type: str, title: str, announce: bool = True):
        self.template_type = template_type
        self.title = title
        self.content: List[str] = []
        self.metadata: Dict[str, str] = {}
        self.formatting = DocumentFormatting()
        self.created_at = datetime.now(timezone.utc)
        if announce:
            narrate("DocumentTemplate", f"Created template: {template_type}")

    def clone(self) -> "DocumentTemplate":
        cloned = DocumentTemplate(self.template_type, self.title, announce=False)
        cloned.content = list(self.content)
        cloned.metadata = dict(self.metadata)
        cloned.formatting = self.formatting.clone()
        narrate("DocumentTemplate", f"Cloned template: {self.template_type}")
        return cloned

    def add_content(self, text: str) -> None:
        self.content.append(text)

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value

    def document(self) -> str:
        return "\n".join([
            f"Document Template: {self.template_type}",
            f"Title: {self.title}",
            f"Created: {self.created_at.isoformat()}",
            f"Font: {self.formatting.font_family}, Size: {self.formatting.font_size}",
            f"Metadata: {self.metadata}",
            f"Content: {' | '.join(self.content)}",
        ])


# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

class NetworkConfiguration(Prototype):

    def __init__(self, config_name: str, server_url: str, announce: bool = True):
        self.config_name = config_name
        self.server_url = server_url
        self.timeout = 30.0
        self.retry_count = 3
        self.headers: Dict[str, str] = {}
        self.parameters: Dict[str, Any] = {}
        self.configuration_id = str(uuid.uuid4())
        if announce:
            narrate("NetworkConfiguration", f"Created network config: {config_name}")

    def clone(self) -> "NetworkConfiguration":
        cloned = NetworkConfiguration(self.config_name, self.server_url, announce=False)
        cloned.timeout = self.timeout
        cloned.retry_count = self.retry_count
        cloned.headers = dict(self.headers)
        cloned.parameters = copy.deepcopy(self.parameters)
        narrate("NetworkConfiguration", f"Cloned network config: {self.config_name}")
        return cloned

    def add_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def set_parameter(self, key: str, value: Any) -> None:
        self.parameters[key] = value

    def configuration(self) -> str:
        return "\n".join([
            f"Network Configuration: {self.config_name}",
            f"ID: {self.configuration_id}",
            f"Server URL: {self.server_url}",
            f"Timeout: {self.timeout}s",
            f"Retry Count: {self.retry_count}",
            f"Headers: {self.headers}",
            f"Parameters: {self.parameters}",
        ])


# =============================================================================
# REGISTRY
# =============================================================================

class PrototypeRegistry:

    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, key: str, prototype: Prototype) -> None:
        self._prototypes[key] = prototype
        narrate("PrototypeRegistry", f"Registered prototype: {key}")

    def create(self, key: str) -> Optional[Prototype]:
        prototype = self._prototypes.get(key)
        if prototype is None:
            narrate("PrototypeRegistry", f"Prototype not found: {key}")
            return None
        narrate("PrototypeRegistry", f"Creating object from prototype: {key}")
        return prototype.clone()

    def list_registered(self) -> List[str]:
        return sorted(self._prototypes)


# =============================================================================
# DEEP COPY
# =============================================================================

class SimpleObject(Prototype):

    def __init__(self, object_id: int, data: str):
        self.object_id = object_id
        self.data = data

    def clone(self) -> "SimpleObject":
        return SimpleObject(self.object_id, self.data)

    def info(self) -> str:
        return f"{self.object_id}:{self.data}"


class NestedObject(Prototype):

    def __init__(self, value: str):
        self.value = value

    def clone(self) -> "NestedObject":
        return NestedObject(self.value)


class ComplexObject(Prototype):
    """Every nested part is cloned, so the copy shares no mutable state."""

    def __init__(self, name: str):
        self.name = name
        self.simple_property = 0
        self.nested = NestedObject("default")
        self.objects: List[SimpleObject] = []
        self.lookup: Dict[str, SimpleObject] = {}

    def clone(self) -> "ComplexObject":
        cloned = ComplexObject(self.name)
        cloned.simple_property = self.simple_property
        cloned.nested = self.nested.clone()
        cloned.objects = [item.clone() for item in self.objects]
        cloned.lookup = {key: item.clone() for key, item in self.lookup.items()}
        narrate("ComplexObject", f"Deep cloned complex object: {self.name}")
        return cloned

    def info(self) -> str:
        array_info = ", ".join(item.info() for item in self.objects)
        dict_info = ", ".join(f"{key}: {item.info()}" for key, item in self.lookup.items())
        return "\n".join([
            f"Complex Object: {self.name}",
            f"Simple Property: {self.simple_property}",
            f"Nested Object: {self.nested.value}",
            f"Array: [{array_info}]",
            f"Dictionary: {{{dict_info}}}",
        ])


def run_demo() -> None:
    section("Game Character Prototypes")
    warrior_template = GameCharacter("Warrior Template", "Warrior", level=5, health=150, mana=30)
    warrior_template.add_skill("Sword Fighting")
    warrior_template.add_skill("Shield Block")
    warrior_template.equip_item("Iron Sword")
    warrior_template.equip_item("Leather Armor")

    mage_template = GameCharacter("Mage Template", "Mage", level=5, health=80, mana=120)
    mage_template.add_skill("Fireball")
    mage_template.add_skill("Teleport")
    mage_template.equip_item("Magic Staff")
    mage_template.equip_item("Robe")

    warrior1 = warrior_template.clone()
    warrior1.level_up()
    warrior1.add_skill("Berserker Rage")
    warrior2 = warrior_template.clone()
    warrior2.equip_item("Steel Helmet")
    mage1 = mage_template.clone()
    mage1.add_skill("Ice Blast")

    narrate("Demo", f"Original Warrior:\n{warrior_template.info()}")
    narrate("Demo", f"Cloned Warrior 1:\n{warrior1.info()}")
    narrate("Demo", f"Cloned Warrior 2:\n{warrior2.info()}")

    section("Document Templates")
    letter_template = DocumentTemplate("Business Letter", "Template")
    letter_template.add_content("Dear [Recipient],")
    letter_template.add_content("[Content]")
    letter_template.add_content("Sincerely, [Sender]")
    letter_template.set_metadata("author", "Template System")
    letter_template.formatting.font_family = "Times New Roman"

    letter1 = letter_template.clone()
    letter1.title = "Job Application Letter"
    letter1.set_metadata("recipient", "HR Department")
    letter2 = letter_template.clone()
    letter2.title = "Follow-up Letter"
    letter2.formatting.font_size = 14

    narrate("Demo", f"Original Template:\n{letter_template.document()}")
    narrate("Demo", f"Cloned Letter 1:\n{letter1.document()}")
    narrate("Demo", f"Cloned Letter 2:\n{letter2.document()}")

    section("Prototype Registry")
    registry = PrototypeRegistry()
    registry.register("warrior", warrior_template)
    registry.register("mage", mage_template)
    base_config = NetworkConfiguration("API Config", "https://api.example.com")
    base_config.timeout = 60.0
    base_config.add_header("Content-Type", "application/json")
    base_config.set_parameter("version", "1.0")
    registry.register("network_config", base_config)
    narrate("Demo", f"Registered prototypes: {registry.list_registered()}")

    new_warrior = registry.create("warrior")
    if isinstance(new_warrior, GameCharacter):
        narrate("Demo", f"Created from registry:\n{new_warrior.info()}")
    new_config = registry.create("network_config")
    if isinstance(new_config, NetworkConfiguration):
        new_config.server_url = "https://staging.api.example.com"
        new_config.add_header("Authorization", "Bearer token")
        narrate("Demo", f"Network config from registry:\n{new_config.configuration()}")
    registry.create("archer")

    section("Deep Copy")
    original = ComplexObject("Original")
    original.simple_property = 42
    original.nested.value = "nested_value"
    original.objects.append(SimpleObject(1, "item1"))
    original.objects.append(SimpleObject(2, "item2"))
    original.lookup["key1"] = SimpleObject(3, "dict_item")

    deep_clone = original.clone()
    original.simple_property = 99
    original.nested.value = "modified_value"
    original.objects[0].data = "changed"

    narrate("Demo", f"Original after modification:\n{original.info()}")
    narrate("Demo", f"Deep clone (unchanged):\n{deep_clone.info()}")
