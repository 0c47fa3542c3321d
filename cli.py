# cli.py - interactive console for the product API
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.products import ProductClient, ProductClientError

console = Console()
c = ProductClient(
    base_url=os.environ.get("PRODUCT_API_URL", "http://127.0.0.1:3000"),
    api_key=os.environ.get("PRODUCT_API_KEY"),
)

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12, overflow="fold")
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("Stock", justify="center", width=7)

    for p in products:
        stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"${p.get('price', 0):,.2f}",
            p.get("category", "N/A"),
            stock,
        )
    console.print(table)


def show_pagination(pagination: Dict[str, Any]):
    if not pagination:
        return
    console.print(
        f"[dim]Page {pagination.get('currentPage', 1)} of {pagination.get('totalPages', 0)}"
        f" · {pagination.get('totalItems', 0)} items"
        f" · {pagination.get('itemsPerPage', 0)} per page[/dim]"
    )


def show_stats(stats: Dict[str, Any]):
    if not stats:
        console.print("[italic yellow]No statistics available[/italic yellow]")
        return

    summary = Table(show_header=False, box=box.SIMPLE)
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right")
    summary.add_row("Total products", str(stats.get("totalProducts", 0)))
    summary.add_row("In stock", f"[green]{stats.get('inStock', 0)}[/green]")
    summary.add_row("Out of stock", f"[red]{stats.get('outOfStock', 0)}[/red]")
    summary.add_row("Average price", f"${stats.get('averagePrice', 0):,.2f}")
    price_range = stats.get("priceRange", {})
    summary.add_row("Price range", f"${price_range.get('min', 0):,.2f} - ${price_range.get('max', 0):,.2f}")

    categories = Table(box=box.ROUNDED, header_style="bold yellow")
    categories.add_column("Category")
    categories.add_column("Products", justify="right")
    for name, count in stats.get("categories", {}).items():
        categories.add_row(name, str(count))

    console.print(Panel(summary, title="📊 Catalog Statistics", border_style="magenta"))
    if stats.get("categories"):
        console.print(categories)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. API errors and connection
    failures are reported in the status panel and yield None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except ProductClientError as e:
        status_message = f"Error: {e.name}: {e.message}"
        console.print(show_status(status_message, False))
        return None
    except OSError as e:
        status_message = f"Error: cannot reach {c.base_url} ({e})"
        console.print(show_status(status_message, False))
        return None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000)
    product_cache = page["products"] if page else []
    return product_cache


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    ids = [p.get("id", "") for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    return WordCompleter(sorted({p.get("category", "") for p in product_cache} - {""}), ignore_case=True)


# ---------------------------
# Input helpers
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Catalog console with autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Name", default=current.get("name", "")),
        "description": prompt_with_autocomplete("Description", default=current.get("description", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
        "category": prompt_with_autocomplete(
            "🏷️ Category", completer=get_category_completer(), default=current.get("category", "")
        ),
        "in_stock": Confirm.ask("In stock?", default=current.get("inStock", True)),
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_product_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "📊 Statistics", "7", "🗑️ Delete product"),
            ("4", "ℹ️ Get product by ID", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer())
            search = prompt_with_autocomplete("Search text (blank for none)")
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=10)
            resp = try_api(c.list_products, category or None, search or None, page, limit,
                           success_msg="Products loaded successfully")
            if resp is not None:
                show_products(resp["products"])
                show_pagination(resp["pagination"])

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            resp = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if resp is not None:
                show_products(resp["results"], title=f"🔍 {resp['count']} match(es) for '{resp['query']}'")

        elif choice == "3":
            resp = try_api(c.get_stats, success_msg="Statistics loaded")
            if resp is not None:
                show_stats(resp)

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                show_products([resp], title="➕ Created")
                refresh_product_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp], title="✏️ Updated")
                    refresh_product_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products([resp["product"]], title="🗑️ Deleted")
                    refresh_product_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
