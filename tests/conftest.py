from __future__ import annotations

from decimal import Decimal

import pytest

from procure_datatable import ColumnDescriptor


@pytest.fixture()
def po_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor(key="id", header="ID", filterable=False),
        ColumnDescriptor(key="po_number", header="PO #"),
        ColumnDescriptor(key="vendor", header="Vendor"),
        ColumnDescriptor(key="status", header="Status"),
        ColumnDescriptor(key="amount", header="Amount", align="right"),
        ColumnDescriptor(key="notes", header="Notes", sortable=False, hideable=False),
    ]


@pytest.fixture()
def po_rows() -> list[dict]:
    vendors = ["Acme Supplies", "Globex", "Initech", "Umbrella Corp", "Stark Industrial"]
    statuses = ["DRAFT", "APPROVED", "RECEIVED"]
    return [
        {
            "id": index + 1,
            "po_number": f"PO-{index + 1:04d}",
            "vendor": vendors[index % len(vendors)],
            "status": statuses[index % len(statuses)],
            "amount": Decimal(100 * ((index * 7) % 11 + 1)),
            "notes": None if index % 4 else "urgent",
        }
        for index in range(23)
    ]


@pytest.fixture()
def name_columns() -> list[ColumnDescriptor]:
    return [ColumnDescriptor(key="id", header="ID"), ColumnDescriptor(key="name", header="Name")]
