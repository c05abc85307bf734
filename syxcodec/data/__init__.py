"""Read-only reference data."""

from syxcodec.data.manufacturers import MANUFACTURERS

__all__ = ["MANUFACTURERS"]
