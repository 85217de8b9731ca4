from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep test runs from writing into ~/SheetLayout/logs.
os.environ.setdefault("SHEETLAYOUT_LOG_DIR", tempfile.mkdtemp(prefix="sheetlayout-logs-"))

from sheetlayout.config import build_config_table
from sheetlayout.schema import ConfigTable


def orders_payload() -> Dict[str, Any]:
    return {
        "orders": {
            "header_rows": 1,
            "variable_names": {
                "orderId": {"col": "B", "type": "string"},
                "orderDate": {"col": "C", "type": "date"},
            },
        },
        "inventory": {
            "variable_names": {
                "sku": {"col": "A", "type": "string"},
                "onHand": {"col": "AA", "type": "number"},
            },
        },
    }


@pytest.fixture
def payload() -> Dict[str, Any]:
    return orders_payload()


@pytest.fixture
def table(payload: Dict[str, Any]) -> ConfigTable:
    return build_config_table(payload)
