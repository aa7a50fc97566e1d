import uuid
from datetime import datetime, timezone

def new_id() -> str:
    return str(uuid.uuid4())

def utcnow() -> datetime:
    # Python-side timestamps keep sub-second ordering on SQLite
    return datetime.now(timezone.utc)
