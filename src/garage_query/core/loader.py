import logging
from pathlib import Path

from pydantic import ValidationError

from garage_query.core.traversal import customers
from garage_query.models import Inventory

logger = logging.getLogger(__name__)


class InventoryLoadError(ValueError):
    """Raised when inventory text is not JSON or does not fit the record shape."""


def parse_inventory(text: str | bytes, source: str = "<string>") -> Inventory | None:
    """Decode an inventory document; a ``null`` or blank document yields ``None``."""
    stripped = text.strip()
    if not stripped or stripped in ("null", b"null"):
        return None
    try:
        return Inventory.model_validate_json(stripped)
    except ValidationError as exc:
        raise InventoryLoadError(f"Invalid inventory document {source}: {exc.error_count()} error(s)") from exc


def load_inventory(path: str | Path) -> Inventory | None:
    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"Inventory file not found: {path}") from None

    # pydantic decodes, invalid UTF-8 becomes a ValidationError
    inventory = parse_inventory(raw, source=str(file_path))
    logger.info("Loaded %d customer(s) from %s", sum(1 for _ in customers(inventory)), file_path)
    return inventory
