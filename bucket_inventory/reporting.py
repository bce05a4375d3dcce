"""
Reporting functions for the bucket inventory.
Prints one line per bucket plus a closing summary.
"""

from .config import ABSENT_KEY_MARKER
from .errors import InventoryError, RunCancelledError
from .models import InventoryRecord, InventoryReport


def print_header():
    """Print the report heading"""
    print("Buckets:")
    print()


def format_record(record: InventoryRecord) -> str:
    """Format a record as 'Bucket: <name>\\t KeyID: <key id or none>'."""
    key_id = record.kms_key_id if record.kms_key_id is not None else ABSENT_KEY_MARKER
    return f"Bucket: {record.name}\t KeyID: {key_id}"


def print_record(record: InventoryRecord):
    """Print a single inventory record"""
    print(format_record(record))


def print_summary(report: InventoryReport):
    """Print bucket and default-key totals"""
    print()
    print("=" * 60)
    print(f"Buckets inventoried: {len(report)}")
    print(f"Buckets with a default KMS key: {report.encrypted_count}")


def print_fatal(error: InventoryError):
    """Print an aborting error"""
    if isinstance(error, RunCancelledError):
        print(f"\n⚠️  Inventory interrupted: {error}")
        return
    print(f"\n❌ Inventory aborted: {error}")
