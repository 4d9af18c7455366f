class FocusFlowError(Exception):
	"""Base class for errors raised by the tracker engine."""

class MalformedSnapshotError(FocusFlowError):
	"""Import payload could not be decoded or is missing required arrays."""

class SnapshotTooLargeError(FocusFlowError):
	"""Encoded snapshot does not fit in a share URL."""

	def __init__(self, length, limit):
		super().__init__(f"share URL is {length} characters, limit is {limit}")
		self.length = length
		self.limit = limit

class PersistenceError(FocusFlowError):
	"""The backing store could not be written."""
