"""Tests for the factory patterns."""

import pytest

from pattern_catalog.domain.patterns.creational.factory import (
    AndroidButton,
    ConsoleLoggerCreator,
    DatabaseConnectionFactory,
    DatabaseType,
    FileLoggerCreator,
    LogLevel,
    NetworkLoggerCreator,
    Platform,
    SQLiteConnection,
    Truck,
    VehicleFactory,
    VehicleType,
    get_ui_factory,
)


class TestVehicleFactory:
    """Test the simple factory."""

    def test_creates_each_type(self):
        """Test each vehicle type is built from its specs."""
        car = VehicleFactory.create(VehicleType.CAR, brand="Toyota", model="Camry")
        bike = VehicleFactory.create("motorcycle", brand="Honda", engine_size="600cc")
        truck = VehicleFactory.create(VehicleType.TRUCK, brand="Ford", capacity="10 tons")

        assert car.info() == "Car: Toyota Camry"
        assert bike.info() == "Motorcycle: Honda 600cc"
        assert isinstance(truck, Truck)

    def test_missing_spec_returns_none(self):
        """Test incomplete specs are rejected."""
        assert VehicleFactory.create(VehicleType.CAR, brand="Toyota") is None

    def test_unknown_type_returns_none(self):
        """Test unknown vehicle types are rejected."""
        assert VehicleFactory.create("spaceship", brand="Acme") is None

    def test_start_narrates(self, transcript):
        """Test vehicles report engine start."""
        VehicleFactory.create(VehicleType.TRUCK, brand="Ford", capacity="5 tons").start()

        assert transcript.lines() == ["[Truck] Truck engine started"]


class TestLoggerCreators:
    """Test the factory method."""

    @pytest.mark.parametrize("creator,expected", [
        (ConsoleLoggerCreator(), "INFO: hello"),
        (FileLoggerCreator("app.log"), "INFO: hello -> app.log"),
        (NetworkLoggerCreator("https://logs"), "INFO: hello -> POST https://logs"),
    ])
    def test_creators_decide_logger(self, creator, expected):
        """Test each creator yields its own logger format."""
        assert creator.create_logger().log("hello") == expected

    def test_level_is_rendered(self):
        """Test the level prefixes the message."""
        logger = ConsoleLoggerCreator().create_logger()

        assert logger.log("careful", LogLevel.WARNING) == "WARNING: careful"


class TestUIFactories:
    """Test the abstract factory."""

    @pytest.mark.parametrize("platform", list(Platform))
    def test_family_is_consistent(self, platform):
        """Test a factory only builds widgets for its own platform."""
        factory = get_ui_factory(platform)

        assert factory.create_button().platform == platform.value
        assert factory.create_text_field().platform == platform.value

    def test_android_widgets(self):
        """Test rendering and click feedback."""
        factory = get_ui_factory(Platform.ANDROID)
        button = factory.create_button()

        assert isinstance(button, AndroidButton)
        assert button.render() == "Android Button with material design"
        assert button.click() == "Android Button clicked with ripple effect"
        assert factory.create_text_field().render() == "Android TextField with floating label"


class TestDatabaseConnectionFactory:
    """Test database connection creation."""

    def test_sqlite_connection(self):
        """Test SQLite needs only a file path."""
        connection = DatabaseConnectionFactory.create(DatabaseType.SQLITE, file_path="/tmp/db.sqlite")

        assert isinstance(connection, SQLiteConnection)
        assert connection.info() == "SQLite: /tmp/db.sqlite"

    def test_query_requires_connection(self):
        """Test queries return nothing until connected."""
        connection = DatabaseConnectionFactory.create("mysql", host="localhost", database="app")

        assert connection.execute_query("SELECT 1") == []
        connection.connect()
        assert connection.execute_query("SELECT 1") == ["MySQL Result 1", "MySQL Result 2"]
        connection.disconnect()
        assert not connection.is_connected

    def test_missing_configuration(self):
        """Test incomplete configuration is rejected."""
        assert DatabaseConnectionFactory.create(DatabaseType.POSTGRESQL, host="db") is None
        assert DatabaseConnectionFactory.create("oracle", host="db") is None
