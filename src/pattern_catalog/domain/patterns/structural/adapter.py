"""Adapter - wrap incompatible interfaces behind the one clients expect."""

import uuid
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict

from pattern_catalog.infrastructure.narration import narrate, section


def _short_id() -> str:
    return uuid.uuid4().hex[:8].upper()


# =============================================================================
# MEDIA PLAYER
# =============================================================================

class MediaPlayer(ABC):

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> bool:
        pass


class AdvancedAudioPlayer:

    def play_mp3(self, file_name: str) -> None:
        narrate("AdvancedAudioPlayer", f"Playing MP3 file: {file_name}")

    def play_aac(self, file_name: str) -> None:
        narrate("AdvancedAudioPlayer", f"Playing AAC file: {file_name}")


class VideoPlayer:

    def play_mp4(self, file_name: str) -> None:
        narrate("VideoPlayer", f"Playing MP4 video: {file_name}")

    def play_avi(self, file_name: str) -> None:
        narrate("VideoPlayer", f"Playing AVI video: {file_name}")


class MediaAdapter(MediaPlayer):

    def __init__(self):
        audio = AdvancedAudioPlayer()
        video = VideoPlayer()
        self._players = {
            "mp3": audio.play_mp3,
            "aac": audio.play_aac,
            "mp4": video.play_mp4,
            "avi": video.play_avi,
        }

    @property
    def supported_formats(self) -> List[str]:
        return list(self._players)

    def play(self, audio_type: str, file_name: str) -> bool:
        player = self._players.get(audio_type.lower())
        if player is None:
            narrate("MediaAdapter", f"{audio_type} format not supported")
            return False
        player(file_name)
        return True


class AudioPlayer(MediaPlayer):
    """Plays mp3 natively and delegates every other format to the adapter."""

    def __init__(self, adapter: Optional[MediaAdapter] = None):
        self.adapter = adapter or MediaAdapter()

    def play(self, audio_type: str, file_name: str) -> bool:
        if audio_type.lower() == "mp3":
            narrate("AudioPlayer", f"Playing built-in MP3: {file_name}")
            return True
        return self.adapter.play(audio_type, file_name)


# =============================================================================
# PAYMENT GATEWAYS
# =============================================================================

class PaymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def succeeded(cls, transaction_id: str) -> "PaymentResult":
        return cls(success=True, transaction_id=transaction_id)

    @classmethod
    def failed(cls, error: str) -> "PaymentResult":
        return cls(success=False, error_message=error)


class PaymentGateway(ABC):

    @abstractmethod
    def process_payment(self, amount: float, currency: str) -> PaymentResult:
        pass

    @abstractmethod
    def refund_payment(self, transaction_id: str, amount: float) -> PaymentResult:
        pass


class LegacyPayPal:
    """Legacy API working in integer cents."""

    def make_payment(self, amount_in_cents: int, currency_code: str) -> Tuple[bool, Optional[str]]:
        narrate("PayPal", f"Processing {amount_in_cents} cents in {currency_code}")
        success = amount_in_cents > 0
        return success, (f"PP_{_short_id()}" if success else None)

    def process_refund(self, transaction_ref: str, refund_amount_cents: int) -> bool:
        narrate("PayPal", f"Refunding {refund_amount_cents} cents for transaction {transaction_ref}")
        return True


class StripeAPI:
    """Third-party API answering with loosely typed dicts."""

    def charge(self, dollars: float, currency: str) -> Dict[str, Any]:
        narrate("Stripe", f"Charging ${dollars:.2f} {currency}")
        return {
            "id": f"stripe_{_short_id()}",
            "status": "succeeded" if dollars > 0 else "failed",
            "amount": dollars,
        }

    def create_refund(self, charge_id: str, amount: float) -> Dict[str, Any]:
        narrate("Stripe", f"Creating refund of ${amount:.2f} for charge {charge_id}")
        return {"id": f"refund_{_short_id()}", "status": "succeeded"}


class PayPalAdapter(PaymentGateway):

    def __init__(self, api: Optional[LegacyPayPal] = None):
        self.api = api or LegacyPayPal()

    def process_payment(self, amount: float, currency: str) -> PaymentResult:
        success, transaction_id = self.api.make_payment(int(amount * 100), currency)
        if success and transaction_id:
            return PaymentResult.succeeded(transaction_id)
        return PaymentResult.failed("PayPal payment failed")

    def refund_payment(self, transaction_id: str, amount: float) -> PaymentResult:
        if self.api.process_refund(transaction_id, int(amount * 100)):
            return PaymentResult.succeeded(f"refund_{transaction_id}")
        return PaymentResult.failed("PayPal refund failed")


class StripeAdapter(PaymentGateway):

    def __init__(self, api: Optional[StripeAPI] = None):
        self.api = api or StripeAPI()

    def process_payment(self, amount: float, currency: str) -> PaymentResult:
        response = self.api.charge(amount, currency)
        if response.get("status") == "succeeded" and isinstance(response.get("id"), str):
            return PaymentResult.succeeded(response["id"])
        return PaymentResult.failed("Stripe payment failed")

    def refund_payment(self, transaction_id: str, amount: float) -> PaymentResult:
        response = self.api.create_refund(transaction_id, amount)
        if response.get("status") == "succeeded" and isinstance(response.get("id"), str):
            return PaymentResult.succeeded(response["id"])
        return PaymentResult.failed("Stripe refund failed")


# =============================================================================
# DATA FORMATS
# =============================================================================

class DataParser(ABC):

    @abstractmethod
    def parse(self, data: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    def serialize(self, data: Dict[str, Any]) -> str:
        pass


class XMLAdapter(DataParser):
    """Adapts xml.etree to the dict-based parser interface."""

    def parse(self, data: str) -> Dict[str, Any]:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            narrate("XMLAdapter", f"Malformed XML: {e}")
            return {}
        return {
            "tag": root.tag,
            "attributes": dict(root.attrib),
            "content": " ".join(text.strip() for text in root.itertext() if text.strip()),
            "format": "XML",
        }

    def serialize(self, data: Dict[str, Any]) -> str:
        tag = data.get("tag") or "data"
        attributes = data.get("attributes") or {}
        content = data.get("content") or ""
        rendered = "".join(f' {key}="{escape(str(value), {chr(34): "&quot;"})}"'
                           for key, value in attributes.items())
        return f"<{tag}{rendered}>{escape(str(content))}</{tag}>"


class CSVAdapter(DataParser):

    def parse(self, data: str) -> Dict[str, Any]:
        rows = [line.split(",") for line in data.split("\n")]
        return {
            "rows": rows,
            "row_count": len(rows),
            "column_count": len(rows[0]) if rows else 0,
            "format": "CSV",
        }

    def serialize(self, data: Dict[str, Any]) -> str:
        rows = data.get("rows")
        if not isinstance(rows, list):
            return ""
        return "\n".join(",".join(str(cell) for cell in row) for row in rows)


class DataProcessor:

    def __init__(self):
        self._parsers: Dict[str, DataParser] = {"xml": XMLAdapter(), "csv": CSVAdapter()}

    def _parser(self, data_format: str) -> Optional[DataParser]:
        parser = self._parsers.get(data_format.lower())
        if parser is None:
            narrate("DataProcessor", f"Unsupported format: {data_format}")
        return parser

    def process(self, data: str, data_format: str) -> Dict[str, Any]:
        parser = self._parser(data_format)
        return parser.parse(data) if parser else {}

    def export(self, data: Dict[str, Any], data_format: str) -> str:
        parser = self._parser(data_format)
        return parser.serialize(data) if parser else ""


def run_demo() -> None:
    section("Media Player Adapter")
    player = AudioPlayer()
    for audio_type, file_name in (("mp3", "song.mp3"), ("aac", "song.aac"), ("mp4", "video.mp4"),
                                  ("AVI", "movie.avi"), ("flac", "music.flac")):
        player.play(audio_type, file_name)

    section("Payment Gateway Adapters")
    gateways: Dict[str, PaymentGateway] = {"PayPal": PayPalAdapter(), "Stripe": StripeAdapter()}
    for name, gateway in gateways.items():
        narrate("Demo", f"Testing {name}")
        payment = gateway.process_payment(99.99, "USD")
        if not payment.success:
            narrate("Demo", f"Payment failed: {payment.error_message}")
            continue
        narrate("Demo", f"Payment successful: {payment.transaction_id}")
        refund = gateway.refund_payment(payment.transaction_id, 50.0)
        narrate("Demo", f"Refund {'successful' if refund.success else 'failed'}: "
                        f"{refund.transaction_id or refund.error_message}")
    failed = PayPalAdapter().process_payment(0.0, "USD")
    narrate("Demo", f"Zero amount via PayPal: {failed.error_message}")

    section("Data Format Adapters")
    processor = DataProcessor()
    xml_data = '<user id="123"><name>John Doe</name><email>john@example.com</email></user>'
    csv_data = "Name,Email,Age\nJohn Doe,john@example.com,30\nJane Smith,jane@example.com,25"
    narrate("Demo", f"Parsed XML: {processor.process(xml_data, 'XML')}")
    parsed_csv = processor.process(csv_data, "CSV")
    narrate("Demo", f"Parsed CSV: {parsed_csv['row_count']} rows, {parsed_csv['column_count']} columns")
    narrate("Demo", f"Parsed JSON: {processor.process('{}', 'JSON')}")

    section("Exporting Data")
    exported_xml = processor.export(
        {"tag": "export", "attributes": {"version": "1.0"}, "content": "Exported data"}, "XML")
    narrate("Demo", f"Exported XML: {exported_xml}")
    exported_csv = processor.export({"rows": [["Name", "Age"], ["Alice", "28"], ["Bob", "32"]]}, "csv")
    narrate("Demo", f"Exported CSV: {exported_csv}")
