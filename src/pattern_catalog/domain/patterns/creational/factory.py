"""Factory - simple factory, factory method and abstract factory variants."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from pattern_catalog.infrastructure.narration import narrate, section


# =============================================================================
# SIMPLE FACTORY
# =============================================================================

class Vehicle(ABC):
    type_name = "Vehicle"

    def start(self) -> str:
        return narrate(self.type_name, f"{self.type_name} engine started")

    def stop(self) -> str:
        return narrate(self.type_name, f"{self.type_name} engine stopped")

    @abstractmethod
    def info(self) -> str:
        pass


class Car(Vehicle):
    type_name = "Car"

    def __init__(self, brand: str, model: str):
        self.brand = brand
        self.model = model

    def info(self) -> str:
        return f"Car: {self.brand} {self.model}"


class Motorcycle(Vehicle):
    type_name = "Motorcycle"

    def __init__(self, brand: str, engine_size: str):
        self.brand = brand
        self.engine_size = engine_size

    def info(self) -> str:
        return f"Motorcycle: {self.brand} {self.engine_size}"


class Truck(Vehicle):
    type_name = "Truck"

    def __init__(self, brand: str, capacity: str):
        self.brand = brand
        self.capacity = capacity

    def info(self) -> str:
        return f"Truck: {self.brand} {self.capacity}"


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"


class VehicleFactory:
    """Creates vehicles from keyword attributes; returns None if a required one is missing."""

    _REQUIRED: Dict[VehicleType, tuple] = {
        VehicleType.CAR: (Car, ("brand", "model")),
        VehicleType.MOTORCYCLE: (Motorcycle, ("brand", "engine_size")),
        VehicleType.TRUCK: (Truck, ("brand", "capacity")),
    }

    @classmethod
    def create(cls, vehicle_type: Union[VehicleType, str], **specs: str) -> Optional[Vehicle]:
        try:
            vehicle_type = VehicleType(vehicle_type)
        except ValueError:
            return None
        vehicle_cls, required = cls._REQUIRED[vehicle_type]
        if any(specs.get(key) is None for key in required):
            return None
        return vehicle_cls(*(specs[key] for key in required))


# =============================================================================
# FACTORY METHOD
# =============================================================================

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Logger(ABC):

    @property
    @abstractmethod
    def logger_type(self) -> str:
        pass

    @abstractmethod
    def format(self, message: str, level: LogLevel) -> str:
        pass

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> str:
        return narrate(self.logger_type, self.format(message, level))


class FileLogger(Logger):
    logger_type = "FileLogger"

    def __init__(self, file_name: str):
        self.file_name = file_name

    def format(self, message: str, level: LogLevel) -> str:
        return f"{level.value}: {message} -> {self.file_name}"


class ConsoleLogger(Logger):
    logger_type = "ConsoleLogger"

    def format(self, message: str, level: LogLevel) -> str:
        return f"{level.value}: {message}"


class NetworkLogger(Logger):
    logger_type = "NetworkLogger"

    def __init__(self, endpoint: str):
        self.endpoint = endpoint

    def format(self, message: str, level: LogLevel) -> str:
        return f"{level.value}: {message} -> POST {self.endpoint}"


class LoggerCreator(ABC):
    """Factory method: subclasses decide which logger to instantiate."""

    @abstractmethod
    def create_logger(self) -> Logger:
        pass


class FileLoggerCreator(LoggerCreator):

    def __init__(self, file_name: str):
        self.file_name = file_name

    def create_logger(self) -> Logger:
        return FileLogger(self.file_name)


class ConsoleLoggerCreator(LoggerCreator):

    def create_logger(self) -> Logger:
        return ConsoleLogger()


class NetworkLoggerCreator(LoggerCreator):

    def __init__(self, endpoint: str):
        self.endpoint = endpoint

    def create_logger(self) -> Logger:
        return NetworkLogger(self.endpoint)


# =============================================================================
# ABSTRACT FACTORY
# =============================================================================

class Button(ABC):
    platform = ""
    appearance = ""
    feedback = ""

    def render(self) -> str:
        return f"{self.platform} Button with {self.appearance}"

    def click(self) -> str:
        return narrate(f"{self.platform} Button", f"{self.platform} Button clicked with {self.feedback}")


class TextField(ABC):
    platform = ""
    appearance = ""
    focus_effect = ""

    def render(self) -> str:
        return f"{self.platform} TextField with {self.appearance}"

    def focus(self) -> str:
        return narrate(f"{self.platform} TextField", f"{self.platform} TextField focused with {self.focus_effect}")


class IOSButton(Button):
    platform, appearance, feedback = "iOS", "rounded corners", "haptic feedback"


class IOSTextField(TextField):
    platform, appearance, focus_effect = "iOS", "system font", "keyboard animation"


class AndroidButton(Button):
    platform, appearance, feedback = "Android", "material design", "ripple effect"


class AndroidTextField(TextField):
    platform, appearance, focus_effect = "Android", "floating label", "elevation"


class WebButton(Button):
    platform, appearance, feedback = "Web", "CSS styling", "DOM event"


class WebTextField(TextField):
    platform, appearance, focus_effect = "Web", "HTML5 validation", "CSS transition"


class UIFactory(ABC):

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_text_field(self) -> TextField:
        pass


class IOSUIFactory(UIFactory):

    def create_button(self) -> Button:
        return IOSButton()

    def create_text_field(self) -> TextField:
        return IOSTextField()


class AndroidUIFactory(UIFactory):

    def create_button(self) -> Button:
        return AndroidButton()

    def create_text_field(self) -> TextField:
        return AndroidTextField()


class WebUIFactory(UIFactory):

    def create_button(self) -> Button:
        return WebButton()

    def create_text_field(self) -> TextField:
        return WebTextField()


class Platform(str, Enum):
    IOS = "iOS"
    ANDROID = "Android"
    WEB = "Web"


_UI_FACTORIES: Dict[Platform, Type[UIFactory]] = {
    Platform.IOS: IOSUIFactory,
    Platform.ANDROID: AndroidUIFactory,
    Platform.WEB: WebUIFactory,
}


def get_ui_factory(platform: Platform) -> UIFactory:
    return _UI_FACTORIES[Platform(platform)]()


# =============================================================================
# DATABASE CONNECTION FACTORY
# =============================================================================

class DatabaseConnection(ABC):
    engine = ""

    def __init__(self):
        self.is_connected = False

    def connect(self) -> bool:
        self.is_connected = True
        narrate(self.engine, f"Connected to {self.engine} database")
        return True

    def disconnect(self) -> None:
        self.is_connected = False
        narrate(self.engine, f"Disconnected from {self.engine} database")

    def execute_query(self, query: str) -> List[str]:
        if not self.is_connected:
            return []
        narrate(self.engine, f"Executing {self.engine} query: {query}")
        return [f"{self.engine} Result 1", f"{self.engine} Result 2"]

    @abstractmethod
    def info(self) -> str:
        pass


class MySQLConnection(DatabaseConnection):
    engine = "MySQL"

    def __init__(self, host: str, database: str):
        super().__init__()
        self.host = host
        self.database = database

    def info(self) -> str:
        return f"MySQL: {self.host}/{self.database}"


class PostgreSQLConnection(DatabaseConnection):
    engine = "PostgreSQL"

    def __init__(self, host: str, database: str):
        super().__init__()
        self.host = host
        self.database = database

    def info(self) -> str:
        return f"PostgreSQL: {self.host}/{self.database}"


class SQLiteConnection(DatabaseConnection):
    engine = "SQLite"

    def __init__(self, file_path: str):
        super().__init__()
        self.file_path = file_path

    def info(self) -> str:
        return f"SQLite: {self.file_path}"


class DatabaseType(str, Enum):
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"


class DatabaseConnectionFactory:

    _REQUIRED = {
        DatabaseType.MYSQL: (MySQLConnection, ("host", "database")),
        DatabaseType.POSTGRESQL: (PostgreSQLConnection, ("host", "database")),
        DatabaseType.SQLITE: (SQLiteConnection, ("file_path",)),
    }

    @classmethod
    def create(cls, db_type: Union[DatabaseType, str], **config: str) -> Optional[DatabaseConnection]:
        try:
            db_type = DatabaseType(db_type)
        except ValueError:
            return None
        connection_cls, required = cls._REQUIRED[db_type]
        if any(config.get(key) is None for key in required):
            return None
        return connection_cls(*(config[key] for key in required))


def run_demo() -> None:
    section("Simple Factory")
    orders = [
        (VehicleType.CAR, {"brand": "Toyota", "model": "Camry"}),
        (VehicleType.MOTORCYCLE, {"brand": "Honda", "engine_size": "600cc"}),
        (VehicleType.TRUCK, {"brand": "Ford", "capacity": "10 tons"}),
    ]
    for vehicle_type, attributes in orders:
        vehicle = VehicleFactory.create(vehicle_type, **attributes)
        if vehicle:
            narrate("Demo", f"Created: {vehicle.info()}")
            vehicle.start()
    if VehicleFactory.create(VehicleType.CAR, brand="Toyota") is None:
        narrate("Demo", "Car without a model was rejected")

    section("Factory Method")
    creators: List[LoggerCreator] = [
        ConsoleLoggerCreator(),
        FileLoggerCreator("app.log"),
        NetworkLoggerCreator("https://logs.example.com/api"),
    ]
    for creator in creators:
        logger = creator.create_logger()
        logger.log("Application started", LogLevel.INFO)
        logger.log("Debug information", LogLevel.DEBUG)
        logger.log("Warning occurred", LogLevel.WARNING)

    section("Abstract Factory")
    for platform in Platform:
        factory = get_ui_factory(platform)
        button = factory.create_button()
        text_field = factory.create_text_field()
        narrate("Demo", f"{platform.value} Button: {button.render()}")
        button.click()
        narrate("Demo", f"{platform.value} TextField: {text_field.render()}")
        text_field.focus()

    section("Database Connection Factory")
    configs = [
        (DatabaseType.MYSQL, {"host": "localhost", "database": "myapp"}),
        (DatabaseType.POSTGRESQL, {"host": "postgres.example.com", "database": "production"}),
        (DatabaseType.SQLITE, {"file_path": "/path/to/database.sqlite"}),
    ]
    for db_type, config in configs:
        connection = DatabaseConnectionFactory.create(db_type, **config)
        if connection is None:
            continue
        narrate("Demo", f"Testing: {connection.info()}")
        connection.connect()
        results = connection.execute_query("SELECT * FROM users")
        narrate("Demo", f"Results: {results}")
        connection.disconnect()
