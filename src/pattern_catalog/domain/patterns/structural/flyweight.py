"""Flyweight - share intrinsic state between many fine-grained objects.

Randomness in the particle and forest examples comes from an injected
random.Random so a seeded run is reproducible.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple

from pattern_catalog.infrastructure.narration import narrate, section


class Position(NamedTuple):
    x: int
    y: int


# =============================================================================
# TEXT EDITOR
# =============================================================================

class CharacterFlyweight:
    """Intrinsic state of a glyph: character, font and style."""

    def __init__(self, char: str, font_family: str, font_style: str):
        self.char = char
        self.font_family = font_family
        self.font_style = font_style

    @property
    def key(self) -> str:
        return f"{self.char}-{self.font_family}-{self.font_style}"

    def render(self, position: Position, size: int, color: str) -> str:
        return (f"'{self.char}' at ({position.x},{position.y}) size:{size} "
                f"color:{color} font:{self.font_family}-{self.font_style}")


class CharacterFactory:

    def __init__(self):
        self._flyweights: Dict[str, CharacterFlyweight] = {}

    @property
    def created_count(self) -> int:
        return len(self._flyweights)

    def get_character(self, char: str, font_family: str, font_style: str) -> CharacterFlyweight:
        key = f"{char}-{font_family}-{font_style}"
        flyweight = self._flyweights.get(key)
        if flyweight is None:
            flyweight = CharacterFlyweight(char, font_family, font_style)
            self._flyweights[key] = flyweight
        return flyweight

    def inventory(self) -> List[str]:
        return sorted(self._flyweights)


@dataclass(frozen=True)
class DocumentCharacter:
    flyweight: CharacterFlyweight
    position: Position
    size: int
    color: str

    def render(self) -> str:
        return self.flyweight.render(self.position, self.size, self.color)


class TextDocument:

    def __init__(self, factory: Optional[CharacterFactory] = None):
        self.factory = factory or CharacterFactory()
        self.characters: List[DocumentCharacter] = []

    def add_character(self, char: str, position: Position, size: int, color: str,
                      font_family: str = "Arial", font_style: str = "Regular") -> None:
        flyweight = self.factory.get_character(char, font_family, font_style)
        self.characters.append(DocumentCharacter(flyweight, position, size, color))

    def render(self) -> List[str]:
        return [character.render() for character in self.characters]

    def statistics(self) -> Tuple[int, int]:
        """(total characters, unique flyweights)"""
        return len(self.characters), self.factory.created_count


# =============================================================================
# PARTICLE SYSTEM
# =============================================================================

class ParticleType:

    def __init__(self, name: str, color: str, shape: str, base_size: float):
        self.name = name
        self.color = color
        self.shape = shape
        self.base_size = base_size

    def render(self, position: Position, size: float, alpha: float) -> str:
        return (f"{self.name}: {self.shape} at ({position.x},{position.y}) "
                f"size:{self.base_size * size:.1f} alpha:{alpha:.1f} color:{self.color}")


class ParticleTypeFactory:

    def __init__(self):
        self._types: Dict[str, ParticleType] = {}

    @property
    def type_count(self) -> int:
        return len(self._types)

    def get_type(self, name: str, color: str, shape: str, base_size: float) -> ParticleType:
        key = f"{name}-{color}-{shape}"
        particle_type = self._types.get(key)
        if particle_type is None:
            particle_type = ParticleType(name, color, shape, base_size)
            self._types[key] = particle_type
            narrate("ParticleTypeFactory", f"Created particle type {key}. Total types: {len(self._types)}")
        return particle_type


@dataclass
class Particle:
    LIFETIME = 5.0

    type: ParticleType
    position: Position
    velocity: Tuple[float, float]
    age: float = 0.0
    size: float = 1.0
    alpha: float = 1.0

    def update(self, dt: float) -> None:
        dx, dy = self.velocity
        self.position = Position(self.position.x + int(dx * dt), self.position.y + int(dy * dt))
        self.age += dt
        self.alpha = max(0.0, 1.0 - self.age / self.LIFETIME)
        self.size = 1.0 + self.age * 0.2

    @property
    def is_alive(self) -> bool:
        return self.alpha > 0.0

    def render(self) -> str:
        return self.type.render(self.position, self.size, self.alpha)


class ParticleSystem:
    TYPES = ("fire", "smoke", "spark")
    COLORS = ("red", "orange", "yellow", "gray")

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.factory = ParticleTypeFactory()
        self.particles: List[Particle] = []

    def create_explosion(self, center: Position, count: int) -> None:
        narrate("ParticleSystem", f"Creating explosion with {count} particles")
        for _ in range(count):
            particle_type = self.factory.get_type(
                self.rng.choice(self.TYPES),
                self.rng.choice(self.COLORS),
                "circle",
                self.rng.uniform(1.0, 3.0),
            )
            velocity = (self.rng.uniform(-50, 50), self.rng.uniform(-50, 50))
            self.particles.append(Particle(particle_type, center, velocity))

    def update(self, dt: float) -> int:
        """Advance every particle and drop the dead ones; returns the live count."""
        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if p.is_alive]
        narrate("ParticleSystem", f"Active particles: {len(self.particles)}")
        return len(self.particles)

    def statistics(self) -> Tuple[int, int]:
        return len(self.particles), self.factory.type_count


# =============================================================================
# FOREST
# =============================================================================

class TreeType:

    def __init__(self, name: str, color: str, shape: str, texture: str):
        self.name = name
        self.color = color
        self.shape = shape
        self.texture = texture

    def info(self) -> str:
        return f"{self.name} ({self.color} {self.shape})"


class TreeTypeFactory:

    def __init__(self):
        self._types: Dict[str, TreeType] = {}

    @property
    def type_count(self) -> int:
        return len(self._types)

    def get_type(self, name: str, color: str, shape: str) -> TreeType:
        key = f"{name}-{color}-{shape}"
        tree_type = self._types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, shape, f"{name}_texture")
            self._types[key] = tree_type
        return tree_type

    def list_types(self) -> List[str]:
        return sorted(tree_type.info() for tree_type in self._types.values())


@dataclass(frozen=True)
class Tree:
    type: TreeType
    position: Position
    height: float
    width: float

    def render(self) -> str:
        return (f"{self.type.name} tree at ({self.position.x},{self.position.y}) - "
                f"H:{self.height:.1f} W:{self.width:.1f} Color:{self.type.color} Shape:{self.type.shape}")


@dataclass
class Forest:
    NAMES = ("Oak", "Pine", "Birch", "Maple")
    COLORS = ("Green", "Dark Green", "Light Green", "Yellow-Green")
    SHAPES = ("Round", "Tall", "Wide", "Irregular")

    rng: random.Random = field(default_factory=random.Random)
    factory: TreeTypeFactory = field(default_factory=TreeTypeFactory)
    trees: List[Tree] = field(default_factory=list)

    def plant_tree(self, x: int, y: int, name: str, color: str, shape: str) -> Tree:
        tree = Tree(
            self.factory.get_type(name, color, shape),
            Position(x, y),
            self.rng.uniform(10.0, 30.0),
            self.rng.uniform(3.0, 8.0),
        )
        self.trees.append(tree)
        return tree

    def plant_random_forest(self, count: int) -> None:
        narrate("Forest", f"Planting {count} trees...")
        for _ in range(count):
            self.plant_tree(
                self.rng.randint(0, 1000),
                self.rng.randint(0, 1000),
                self.rng.choice(self.NAMES),
                self.rng.choice(self.COLORS),
                self.rng.choice(self.SHAPES),
            )

    def statistics(self) -> Tuple[int, int]:
        return len(self.trees), self.factory.type_count


def run_demo(seed: int = 42) -> None:
    rng = random.Random(seed)

    section("Text Editor Flyweight")
    document = TextDocument()
    text = "Hello World! This is a demonstration of the Flyweight pattern."
    for index, char in enumerate(text):
        document.add_character(
            char,
            Position(index * 10, 0),
            12,
            "black" if index % 2 == 0 else "blue",
            font_family="Arial" if index % 3 == 0 else "Times",
            font_style="Bold" if index % 4 == 0 else "Regular",
        )
    total, unique = document.statistics()
    narrate("Demo", f"Total characters: {total}")
    narrate("Demo", f"Unique flyweights: {unique}")
    narrate("Demo", f"Memory saved: {(total - unique) * 100 // total}%")
    narrate("Demo", f"First glyph: {document.render()[0]}")

    section("Particle System Flyweight")
    particles = ParticleSystem(rng)
    particles.create_explosion(Position(100, 100), 50)
    particles.create_explosion(Position(200, 150), 30)
    total, types = particles.statistics()
    narrate("Demo", f"Total particles: {total}")
    narrate("Demo", f"Unique types: {types}")
    for _ in range(3):
        particles.update(1.0)
    if particles.particles:
        narrate("Demo", f"Sample particle: {particles.particles[0].render()}")
    for _ in range(2):
        particles.update(1.0)

    section("Forest Flyweight")
    forest = Forest(rng)
    forest.plant_random_forest(1000)
    trees, tree_types = forest.statistics()
    narrate("Demo", f"Total trees: {trees}")
    narrate("Demo", f"Unique tree types: {tree_types}")
    narrate("Demo", f"Each tree type shared across {trees // tree_types} trees on average")
    narrate("Demo", f"Sample tree: {forest.trees[0].render()}")
