#!/usr/bin/env python
from sdk.products import ProductClient, ProductClientError


def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")

    # -----------------------------
    # Browse the seeded catalog
    # -----------------------------
    print("Listing products...")
    print(c.list_products())

    print("\nElectronics, one per page, page 2...")
    print(c.list_products(category="electronics", page=2, limit=1))

    print("\nSearching for 'laptop'...")
    print(c.search_products("laptop"))

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("  Kettle ", "Electric kettle, 1.7L", 35, "kitchen", True)
    print(kettle)

    print("\nMarking it out of stock...")
    print(c.update_product(kettle["id"], "Kettle", "Electric kettle, 1.7L", 35, "kitchen", False))

    print("\nStatistics...")
    print(c.get_stats())

    print("\nDeleting it...")
    print(c.delete_product(kettle["id"]))

    print("\nDeleting it again...")
    try:
        c.delete_product(kettle["id"])
    except ProductClientError as e:
        print(e)


if __name__ == "__main__":
    main()
