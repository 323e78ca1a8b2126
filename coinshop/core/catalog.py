"""Merch Catalog - the fixed item price list seeded into catalog_items.

Invariants:
    - Item names are unique; prices are positive integers
    - The API never edits the catalog; migrations and fixtures seed it from here
"""

DEFAULT_CATALOG: dict[str, int] = {
    "t-shirt": 80,
    "cup": 20,
    "book": 50,
    "pen": 10,
    "powerbank": 200,
    "hoody": 300,
    "umbrella": 200,
    "socks": 10,
    "wallet": 50,
    "pink-hoody": 500,
}


def catalog_rows(catalog: dict[str, int] | None = None) -> list[dict]:
    """Rows for bulk insert into catalog_items."""
    items = DEFAULT_CATALOG if catalog is None else catalog
    return [
        {"item_name": name, "price": price}
        for name, price in items.items()
    ]
