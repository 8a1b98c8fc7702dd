"""Facade - one simple entry point over a set of cooperating subsystems."""

import uuid
from typing import Dict, List, Optional

from pattern_catalog.infrastructure.narration import narrate, section


# =============================================================================
# HOME THEATER
# =============================================================================

class DVDPlayer:
    name = "DVD Player"

    def on(self) -> None:
        narrate(self.name, "Turning on")

    def off(self) -> None:
        narrate(self.name, "Turning off")

    def insert(self, movie: str) -> None:
        narrate(self.name, f"Inserting DVD '{movie}'")

    def play(self) -> None:
        narrate(self.name, "Playing movie")

    def pause(self) -> None:
        narrate(self.name, "Pausing movie")

    def stop(self) -> None:
        narrate(self.name, "Stopping movie")

    def eject(self) -> None:
        narrate(self.name, "Ejecting DVD")


class Amplifier:
    name = "Amplifier"

    def __init__(self):
        self.volume = 0

    def on(self) -> None:
        narrate(self.name, "Turning on")

    def off(self) -> None:
        narrate(self.name, "Turning off")

    def set_volume(self, level: int) -> None:
        self.volume = level
        narrate(self.name, f"Setting volume to {level}")

    def set_surround_sound(self) -> None:
        narrate(self.name, "Enabling surround sound")


class Projector:
    name = "Projector"

    def on(self) -> None:
        narrate(self.name, "Turning on")

    def off(self) -> None:
        narrate(self.name, "Turning off")

    def set_input(self, source: str) -> None:
        narrate(self.name, f"Setting input to {source}")

    def wide_screen_mode(self) -> None:
        narrate(self.name, "Setting to wide screen mode")


class Screen:
    name = "Screen"

    def down(self) -> None:
        narrate(self.name, "Lowering screen")

    def up(self) -> None:
        narrate(self.name, "Raising screen")


class TheaterLights:
    name = "Theater Lights"

    def __init__(self):
        self.level = 100

    def dim(self, level: int) -> None:
        self.level = level
        narrate(self.name, f"Dimming to {level}%")

    def on(self) -> None:
        self.level = 100
        narrate(self.name, "Turning on")


class PopcornMaker:
    name = "Popcorn Maker"

    def on(self) -> None:
        narrate(self.name, "Turning on")

    def off(self) -> None:
        narrate(self.name, "Turning off")

    def pop(self) -> None:
        narrate(self.name, "Making fresh popcorn")


class HomeTheaterFacade:

    def __init__(self):
        self.dvd = DVDPlayer()
        self.amplifier = Amplifier()
        self.projector = Projector()
        self.screen = Screen()
        self.lights = TheaterLights()
        self.popcorn = PopcornMaker()
        self.now_playing: Optional[str] = None
        narrate("HomeTheater", "Home Theater System initialized")

    def watch_movie(self, movie: str) -> None:
        narrate("HomeTheater", f"Starting movie experience for '{movie}'...")
        self.popcorn.on()
        self.popcorn.pop()
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.wide_screen_mode()
        self.projector.set_input("DVD")
        self.amplifier.on()
        self.amplifier.set_surround_sound()
        self.amplifier.set_volume(8)
        self.dvd.on()
        self.dvd.insert(movie)
        self.dvd.play()
        self.now_playing = movie
        narrate("HomeTheater", f"Movie '{movie}' is now playing. Enjoy!")

    def end_movie(self) -> None:
        narrate("HomeTheater", "Ending movie experience...")
        self.dvd.stop()
        self.dvd.eject()
        self.dvd.off()
        self.amplifier.off()
        self.projector.off()
        self.screen.up()
        self.lights.on()
        self.popcorn.off()
        self.now_playing = None
        narrate("HomeTheater", "Movie experience ended. All systems turned off.")

    def pause_movie(self) -> None:
        narrate("HomeTheater", "Pausing movie...")
        self.dvd.pause()
        self.lights.dim(30)

    def resume_movie(self) -> None:
        narrate("HomeTheater", "Resuming movie...")
        self.lights.dim(10)
        self.dvd.play()


# =============================================================================
# COMPUTER
# =============================================================================

class CPU:
    BOOT_ADDRESS = 0x0000

    def freeze(self) -> None:
        narrate("CPU", "Freezing processor")

    def jump(self, address: int) -> None:
        narrate("CPU", f"Jumping to address 0x{address:04X}")

    def execute(self, instruction: str = "boot code") -> None:
        narrate("CPU", f"Executing {instruction}")

    def shutdown(self) -> None:
        narrate("CPU", "Shutting down")


class Memory:

    def __init__(self):
        self.loaded: List[str] = []

    def load(self, address: int, data: str) -> None:
        self.loaded.append(data)
        narrate("Memory", f"Loaded {data} at 0x{address:04X}")

    def clear(self) -> None:
        self.loaded.clear()
        narrate("Memory", "Cleared all data")


class HardDrive:
    BOOT_SECTOR = "System Boot Files"

    def read(self) -> str:
        narrate("Hard Drive", "Reading boot sector")
        return self.BOOT_SECTOR


class ComputerFacade:

    def __init__(self):
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_drive = HardDrive()
        self.is_running = False

    def start(self) -> None:
        narrate("Computer", "Starting computer...")
        self.cpu.freeze()
        self.memory.load(CPU.BOOT_ADDRESS, self.hard_drive.read())
        self.cpu.jump(CPU.BOOT_ADDRESS)
        self.cpu.execute()
        self.is_running = True
        narrate("Computer", "Computer started successfully!")

    def run_program(self, program: str) -> None:
        narrate("Computer", f"Running program '{program}'...")
        self.memory.load(0x1000 + 0x100 * len(self.memory.loaded), program)
        self.cpu.execute(program)

    def shutdown(self) -> None:
        narrate("Computer", "Shutting down computer...")
        self.cpu.execute("Save State")
        self.memory.clear()
        self.cpu.shutdown()
        self.is_running = False
        narrate("Computer", "Computer shut down safely.")


# =============================================================================
# BANKING
# =============================================================================

class AccountManager:

    def __init__(self):
        self.accounts: Dict[str, float] = {"checking": 1000.0, "savings": 5000.0, "investment": 10000.0}

    def balance(self, account: str) -> float:
        amount = self.accounts.get(account, 0.0)
        narrate("AccountManager", f"{account} balance is ${amount:.2f}")
        return amount

    def debit(self, account: str, amount: float) -> bool:
        current = self.accounts.get(account)
        if current is None or current < amount:
            narrate("AccountManager", f"Insufficient funds in {account}")
            return False
        self.accounts[account] = current - amount
        narrate("AccountManager", f"Debited ${amount:.2f} from {account}")
        return True

    def credit(self, account: str, amount: float) -> None:
        self.accounts[account] = self.accounts.get(account, 0.0) + amount
        narrate("AccountManager", f"Credited ${amount:.2f} to {account}")


class SecurityManager:
    VALID_PASSWORD = "password123"

    def __init__(self):
        self.audit: List[str] = []

    def authenticate(self, username: str, password: str) -> bool:
        valid = password == self.VALID_PASSWORD
        narrate("SecurityManager", f"Authentication {'successful' if valid else 'failed'} for {username}")
        return valid

    def log(self, entry: str) -> None:
        self.audit.append(entry)
        narrate("SecurityManager", f"Logging transaction: {entry}")


class NotificationService:

    def __init__(self):
        self.sms: List[str] = []
        self.emails: List[str] = []

    def send_sms(self, phone: str, message: str) -> None:
        self.sms.append(message)
        narrate("NotificationService", f"SMS to {phone}: {message}")

    def send_email(self, address: str, subject: str) -> None:
        self.emails.append(subject)
        narrate("NotificationService", f"Email to {address} - {subject}")


class TransactionLogger:

    def __init__(self):
        self.transactions: List[str] = []

    def log(self, transaction_id: str, kind: str, amount: float, source: str, target: str) -> None:
        self.transactions.append(transaction_id)
        narrate("TransactionLogger", f"{transaction_id}: {kind} ${amount:.2f} from {source} to {target}")


def _transaction_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


class BankingFacade:

    def __init__(self, email: str = "customer@example.com"):
        self.accounts = AccountManager()
        self.security = SecurityManager()
        self.notifications = NotificationService()
        self.transactions = TransactionLogger()
        self.email = email

    def transfer(self, username: str, password: str, from_account: str, to_account: str,
                 amount: float, phone: str) -> bool:
        narrate("Bank", "Processing money transfer...")
        if not self.security.authenticate(username, password):
            self.notifications.send_sms(phone, "Failed login attempt detected")
            return False
        if not self.accounts.debit(from_account, amount):
            self.notifications.send_sms(phone, "Transfer failed: Insufficient funds")
            return False
        self.accounts.credit(to_account, amount)

        transaction_id = _transaction_id("TXN")
        self.transactions.log(transaction_id, "Transfer", amount, from_account, to_account)
        self.security.log(f"Transfer: ${amount:.2f} from {from_account} to {to_account}")
        self.notifications.send_sms(phone, f"Transfer successful: ${amount:.2f} from {from_account} to {to_account}")
        self.notifications.send_email(self.email, f"Transfer receipt {transaction_id}")
        narrate("Bank", "Transfer completed successfully!")
        return True

    def deposit(self, username: str, password: str, account: str, amount: float, phone: str) -> bool:
        narrate("Bank", "Processing deposit...")
        if not self.security.authenticate(username, password):
            return False
        self.accounts.credit(account, amount)
        transaction_id = _transaction_id("DEP")
        self.transactions.log(transaction_id, "Deposit", amount, "External", account)
        self.security.log(f"Deposit: ${amount:.2f} to {account}")
        self.notifications.send_sms(phone, f"Deposit successful: ${amount:.2f} to {account}")
        narrate("Bank", "Deposit completed successfully!")
        return True

    def check_balance(self, username: str, password: str, account: str) -> Optional[float]:
        narrate("Bank", "Checking account balance...")
        if not self.security.authenticate(username, password):
            return None
        balance = self.accounts.balance(account)
        self.security.log(f"Balance inquiry for {account}")
        return balance


def run_demo() -> None:
    section("Home Theater Facade")
    theater = HomeTheaterFacade()
    theater.watch_movie("The Matrix")
    theater.pause_movie()
    theater.resume_movie()
    theater.end_movie()

    section("Computer Facade")
    computer = ComputerFacade()
    computer.start()
    computer.run_program("Word Processor")
    computer.run_program("Web Browser")
    computer.shutdown()

    section("Banking Facade")
    bank = BankingFacade()
    phone = "+1234567890"
    balance = bank.check_balance("john_doe", "password123", "checking")
    narrate("Demo", f"Current balance: ${balance or 0:.2f}")
    bank.deposit("john_doe", "password123", "checking", 500.0, phone)
    bank.transfer("john_doe", "password123", "checking", "savings", 200.0, phone)
    bank.transfer("john_doe", "password123", "checking", "savings", 50000.0, phone)
    bank.transfer("john_doe", "wrong", "checking", "savings", 10.0, phone)
    new_balance = bank.check_balance("john_doe", "password123", "checking")
    narrate("Demo", f"New balance: ${new_balance or 0:.2f}")
