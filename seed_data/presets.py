"""Ready-made table definitions for common seed data.

Examples
--------
>>> from seed_data.presets import USERS_TABLE
>>> from seed_data.tables import build_table
>>> from seed_data.config import SeedConfig
>>>
>>> users = build_table(USERS_TABLE, config=SeedConfig(seed=42), rows=100)
"""

from seed_data.config import ColumnSpec, TableSpec
from seed_data.generators.strings import DIGITS, LOWERCASE

COUNTRIES = ["US", "GB", "DE", "FR", "IN", "BR", "JP", "AU"]
ORDER_STATUSES = ["pending", "paid", "shipped", "delivered", "cancelled"]

# Users: mostly active, all under 18 (e.g. a youth-sports signup app)
USERS_TABLE = TableSpec(
    name="users",
    rows=100,
    columns=[
        ColumnSpec(name="id", kind="sequence"),
        ColumnSpec(name="username", kind="string", length=8, alphabet=LOWERCASE),
        ColumnSpec(
            name="email_local_part",
            kind="string",
            length=10,
            alphabet=LOWERCASE + DIGITS,
        ),
        ColumnSpec(name="country", kind="choice", choices=COUNTRIES),
        ColumnSpec(name="is_active", kind="boolean", weight=0.75),
        ColumnSpec(name="date_of_birth", kind="date_of_birth", max_age_years=18),
        ColumnSpec(name="signed_up_on", kind="date_before", min_days=1, max_days=365),
    ],
)

# Orders placed by the users above, shipping sometime in the next year
ORDERS_TABLE = TableSpec(
    name="orders",
    rows=500,
    columns=[
        ColumnSpec(name="id", kind="sequence"),
        ColumnSpec(name="user_id", kind="int_range", low=1, high=100),
        ColumnSpec(name="amount", kind="float_range", low=5.0, high=250.0, precision=2),
        ColumnSpec(name="status", kind="choice", choices=ORDER_STATUSES),
        ColumnSpec(name="reference", kind="string", length=6, prefix="ORD-"),
        ColumnSpec(name="ships_on", kind="date_after", min_days=1, max_days=365),
    ],
)

PRESETS = {
    USERS_TABLE.name: USERS_TABLE,
    ORDERS_TABLE.name: ORDERS_TABLE,
}

__all__ = [
    "COUNTRIES",
    "ORDER_STATUSES",
    "USERS_TABLE",
    "ORDERS_TABLE",
    "PRESETS",
]
