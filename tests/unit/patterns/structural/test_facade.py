"""Tests for the facade pattern."""

from pattern_catalog.domain.patterns.structural.facade import (
    BankingFacade,
    ComputerFacade,
    HomeTheaterFacade,
)


class TestHomeTheaterFacade:
    """Test the home theater entry points."""

    def test_watch_movie_orchestrates_subsystems(self, transcript):
        """Test one call drives every subsystem in order."""
        theater = HomeTheaterFacade()

        theater.watch_movie("The Matrix")

        assert theater.now_playing == "The Matrix"
        assert theater.lights.level == 10
        assert theater.amplifier.volume == 8
        sources = [line.split("]")[0].lstrip("[") for line in transcript.lines()]
        assert sources.index("Popcorn Maker") < sources.index("Projector") < sources.index("DVD Player")

    def test_pause_resume_and_end(self):
        """Test lights follow pause and resume, and end resets everything."""
        theater = HomeTheaterFacade()
        theater.watch_movie("Up")

        theater.pause_movie()
        assert theater.lights.level == 30
        theater.resume_movie()
        assert theater.lights.level == 10
        theater.end_movie()

        assert theater.now_playing is None
        assert theater.lights.level == 100


class TestComputerFacade:
    """Test the boot sequence."""

    def test_start_loads_boot_sector(self, transcript):
        """Test booting reads the disk into memory and jumps."""
        computer = ComputerFacade()

        computer.start()

        assert computer.is_running
        assert computer.memory.loaded == ["System Boot Files"]
        assert transcript.contains("Jumping to address 0x0000")

    def test_shutdown_clears_memory(self):
        """Test shutdown clears loaded programs."""
        computer = ComputerFacade()
        computer.start()
        computer.run_program("Editor")

        computer.shutdown()

        assert not computer.is_running
        assert computer.memory.loaded == []


class TestBankingFacade:
    """Test banking operations behind one interface."""

    def setup_method(self):
        """Set up test fixtures."""
        self.bank = BankingFacade()

    def test_transfer_moves_funds_and_notifies(self):
        """Test a successful transfer touches every subsystem."""
        assert self.bank.transfer("john", "password123", "checking", "savings", 200.0, "+1")

        assert self.bank.accounts.accounts["checking"] == 800.0
        assert self.bank.accounts.accounts["savings"] == 5200.0
        assert len(self.bank.transactions.transactions) == 1
        assert self.bank.transactions.transactions[0].startswith("TXN-")
        assert self.bank.notifications.emails[0].startswith("Transfer receipt TXN-")

    def test_insufficient_funds(self):
        """Test an overdraft leaves balances untouched."""
        assert not self.bank.transfer("john", "password123", "checking", "savings", 5000.0, "+1")

        assert self.bank.accounts.accounts["checking"] == 1000.0
        assert self.bank.notifications.sms == ["Transfer failed: Insufficient funds"]

    def test_bad_password(self):
        """Test authentication failure stops every operation."""
        assert not self.bank.transfer("john", "wrong", "checking", "savings", 1.0, "+1")
        assert not self.bank.deposit("john", "wrong", "checking", 1.0, "+1")
        assert self.bank.check_balance("john", "wrong", "checking") is None
        assert self.bank.notifications.sms == ["Failed login attempt detected"]

    def test_deposit_and_balance(self):
        """Test a deposit is reflected in the balance."""
        self.bank.deposit("john", "password123", "checking", 500.0, "+1")

        assert self.bank.check_balance("john", "password123", "checking") == 1500.0
        assert self.bank.security.audit[-1] == "Balance inquiry for checking"
