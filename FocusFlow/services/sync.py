"""One-way snapshot export/import; importing replaces both collections wholesale."""
import base64
import binascii
import json
from dataclasses import dataclass
from urllib.parse import urlencode, urlsplit, parse_qs
from pydantic import ValidationError
from FocusFlow.core import settings
from FocusFlow.core.errors import MalformedSnapshotError, SnapshotTooLargeError
from FocusFlow.core.log import get_logger
from FocusFlow.models.schemas import HistoryRecord, SnapshotPayload, TimerRecord

logger = get_logger(__name__)

@dataclass(frozen=True)
class Snapshot:
	timers: list
	history: list
	exported_at: int

	def to_payload(self) -> SnapshotPayload:
		return SnapshotPayload(
			timers=[TimerRecord.from_timer(t) for t in self.timers],
			history=[HistoryRecord.from_item(h) for h in self.history],
			exported_at=self.exported_at,
		)

	def to_dict(self):
		"""Serialize using the camelCase snapshot field names."""
		return self.to_payload().model_dump(by_alias=True)

def build_snapshot(timers, history, now):
	return Snapshot(list(timers), list(history), now)

def encode_snapshot(snapshot) -> str:
	raw = json.dumps(snapshot.to_dict(), ensure_ascii=False, separators=(",", ":"))
	return base64.b64encode(raw.encode("utf-8")).decode("ascii")

def build_share_url(base_url, snapshot, max_length=settings.MAX_SHARE_URL_LENGTH):
	"""Embed an encoded snapshot in `base_url`. Raises SnapshotTooLargeError past max_length."""
	query = urlencode({settings.SHARE_QUERY_PARAM: encode_snapshot(snapshot)})
	url = f"{base_url}?{query}"
	if len(url) > max_length:
		raise SnapshotTooLargeError(len(url), max_length)
	return url

def extract_share_payload(url):
	"""Return the encoded snapshot carried by a share URL, or None."""
	values = parse_qs(urlsplit(url).query).get(settings.SHARE_QUERY_PARAM)
	return values[0] if values else None

def decode_snapshot(encoded: str) -> dict:
	"""Decode a transported snapshot back to its JSON payload."""
	try:
		raw = base64.b64decode(encoded, validate=True)
		return json.loads(raw.decode("utf-8"))
	except (binascii.Error, UnicodeDecodeError, ValueError) as e:
		raise MalformedSnapshotError(f"snapshot could not be decoded: {e}") from e

def parse_snapshot(payload) -> Snapshot:
	"""Validate a decoded payload; any bad record rejects the whole snapshot."""
	try:
		validated = SnapshotPayload.model_validate(payload)
	except ValidationError as e:
		raise MalformedSnapshotError(f"invalid snapshot: {e}") from e
	timers = [t.to_timer() for t in validated.timers]
	history = [h.to_item() for h in validated.history]
	logger.info("parsed snapshot: %d timers, %d history items", len(timers), len(history))
	return Snapshot(timers, history, validated.exported_at or 0)

def snapshot_from_url(url) -> Snapshot:
	encoded = extract_share_payload(url)
	if encoded is None:
		raise MalformedSnapshotError("URL carries no snapshot")
	return parse_snapshot(decode_snapshot(encoded))
