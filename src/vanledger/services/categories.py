"""Per-view configuration: data source, columns, form fields and search scope."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .export import ExportColumn
from .filtering import SearchMode
from .sorting import SortConfig

Source = Literal["trips", "maintenance", "fuel", "advances"]
FieldKind = Literal["text", "date", "money", "number", "bool"]


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: FieldKind = "text"
    hint: str = ""


@dataclass(frozen=True)
class ViewSpec:
    """Everything the coordinator and the table need to know about a view."""

    key: str
    label: str
    source: Source
    date_field: str
    search_mode: SearchMode
    columns: tuple[ExportColumn, ...]
    form_fields: tuple[FormField, ...] = field(default_factory=tuple)
    export_prefix: str = ""

    @property
    def editable(self) -> bool:
        return bool(self.form_fields)

    @property
    def default_sort(self) -> SortConfig:
        return SortConfig(self.date_field, "desc")

    @property
    def sortable_fields(self) -> tuple[str, ...]:
        return tuple(c.field for c in self.columns)


DELIVERY = ViewSpec(
    key="delivery",
    label="Delivery",
    source="trips",
    date_field="delivery_date",
    search_mode=SearchMode.ALL_FIELDS,
    columns=(
        ExportColumn("delivery_date", "Date", "date"),
        ExportColumn("from_location", "From"),
        ExportColumn("to_location", "To"),
        ExportColumn("wayment", "Wayment", "number"),
        ExportColumn("number_of_bags", "Number of Bags", "number"),
        ExportColumn("rent_per_bag", "Rent per Bag", "money", summable=False),
        ExportColumn("total_rent", "Total Rent", "money"),
        ExportColumn("driver_name", "Driver Name"),
        ExportColumn("driver_rent", "Driver Rent", "money"),
        ExportColumn("misc_spends", "Misc Spends", "money"),
        ExportColumn("advance", "Advance", "money"),
    ),
    form_fields=(
        FormField("from_location", "From"),
        FormField("to_location", "To"),
        FormField("delivery_date", "Delivery date", "date", "YYYY-MM-DD"),
        FormField("wayment", "Wayment", "number"),
        FormField("rent_per_bag", "Rent per bag", "money"),
        FormField("driver_name", "Driver name"),
        FormField("driver_rent", "Driver rent", "money"),
        FormField("misc_spends", "Misc spends", "money"),
        FormField("advance", "Advance", "money"),
        FormField("van_no", "Van number"),
    ),
    export_prefix="deliveries",
)

MAINTENANCE = ViewSpec(
    key="maintenance",
    label="Maintenance",
    source="maintenance",
    date_field="date",
    search_mode=SearchMode.ALL_FIELDS,
    columns=(
        ExportColumn("date", "Date", "date"),
        ExportColumn("van_no", "Van No"),
        ExportColumn("driver_name", "Driver Name"),
        ExportColumn("description", "Description"),
        ExportColumn("cost", "Cost", "money"),
        ExportColumn("paid_by_driver", "Paid by Driver", "bool"),
    ),
    form_fields=(
        FormField("date", "Date", "date", "YYYY-MM-DD"),
        FormField("van_no", "Van number"),
        FormField("driver_name", "Driver name"),
        FormField("description", "Description"),
        FormField("cost", "Cost", "money"),
        FormField("paid_by_driver", "Paid by driver", "bool"),
    ),
    export_prefix="maintenance",
)

FUEL = ViewSpec(
    key="fuel",
    label="Fuel",
    source="fuel",
    date_field="date",
    search_mode=SearchMode.ALL_FIELDS,
    columns=(
        ExportColumn("date", "Date", "date"),
        ExportColumn("driver_name", "Driver Name"),
        ExportColumn("description", "Description"),
        ExportColumn("cost", "Cost", "money"),
        ExportColumn("paid_by_driver", "Paid by Driver", "bool"),
    ),
    form_fields=(
        FormField("date", "Date", "date", "YYYY-MM-DD"),
        FormField("driver_name", "Driver name (optional)"),
        FormField("description", "Description"),
        FormField("cost", "Cost", "money"),
        FormField("paid_by_driver", "Paid by driver", "bool"),
    ),
    export_prefix="fuel",
)

ADVANCE = ViewSpec(
    key="advance",
    label="Advance",
    source="advances",
    date_field="date",
    search_mode=SearchMode.DRIVER_NAME,
    columns=(
        ExportColumn("date", "Date", "date"),
        ExportColumn("driver_name", "Driver Name"),
        ExportColumn("amount", "Amount", "money"),
    ),
    form_fields=(
        FormField("date", "Date", "date", "YYYY-MM-DD"),
        FormField("driver_name", "Driver name"),
        FormField("amount", "Amount", "money"),
    ),
    export_prefix="advances",
)

DRIVER_PAYMENT = ViewSpec(
    key="driver_payment",
    label="Driver Payment",
    source="trips",
    date_field="date",
    search_mode=SearchMode.DRIVER_NAME,
    columns=(
        ExportColumn("date", "Date", "date"),
        ExportColumn("from_location", "From"),
        ExportColumn("to_location", "To"),
        ExportColumn("number_of_bags", "Number of Bags", "number"),
        ExportColumn("driver_name", "Driver Name"),
        ExportColumn("driver_rent", "Driver Rent", "money"),
        ExportColumn("misc_spends", "Misc Spends", "money"),
    ),
    export_prefix="driver-payments",
)

VENDOR_PAYMENT = ViewSpec(
    key="vendor_payment",
    label="Vendor Payment",
    source="trips",
    date_field="date",
    search_mode=SearchMode.ALL_FIELDS,
    columns=(
        ExportColumn("date", "Date", "date"),
        ExportColumn("from_location", "From"),
        ExportColumn("to_location", "To"),
        ExportColumn("number_of_bags", "Number of Bags", "number"),
        ExportColumn("wayment", "Wayment", "number"),
        ExportColumn("rent", "Rent", "money"),
        ExportColumn("misc_spends", "Misc Spends", "money"),
        ExportColumn("advance", "Advance", "money"),
    ),
    export_prefix="vendor-payments",
)

VIEWS: dict[str, ViewSpec] = {
    spec.key: spec
    for spec in (DELIVERY, MAINTENANCE, FUEL, ADVANCE, DRIVER_PAYMENT, VENDOR_PAYMENT)
}


def get_view(key: str) -> ViewSpec:
    try:
        return VIEWS[key]
    except KeyError:
        raise ValueError(f"Unknown view: {key}") from None
