import uuid

def generate_id() -> str:
	"""Return a new random identifier for a timer."""
	return str(uuid.uuid4())
